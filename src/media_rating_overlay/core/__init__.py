"""Rating-service core: interfaces, models and provider services."""
