"""geoinfo - IP address geolocation service."""

__version__ = "1.0.0"
