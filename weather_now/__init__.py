"""Current weather for a city, backed by WeatherAPI.com."""
