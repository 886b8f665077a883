"""Shared constants."""

# Rating service names
RATING_SERVICE_TMDB = "TMDB"
RATING_SERVICE_ROTTEN_TOMATOES = "Rotten Tomatoes"
RATING_SERVICE_IMDB = "IMDB"

# Rating service types
RATING_TYPE_CRITIC = "critic"
RATING_TYPE_AUDIENCE = "audience"

# Media types
MEDIA_TYPE_MOVIE = "movie"
MEDIA_TYPE_SHOW = "show"
