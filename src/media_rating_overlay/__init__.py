"""Media Rating Overlay.

Fetches normalized ratings for movies and shows from external rating
providers, ready to be rendered as poster overlays.
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("media-rating-overlay")
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = "0.1.0-dev"
