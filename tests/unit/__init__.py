"""Unit tests."""

from configuration import configuration  # noqa: F401

config_dict = {
    "name": "test",
    "service": {
        "host": "localhost",
        "port": 8080,
        "workers": 1,
        "color_log": True,
        "access_log": True,
    },
    "gemini": {
        "url": "http://gemini.test:1234/v1beta",
        "api_key": "test-key",
        "primary_model": "primary-model",
        "secondary_model": "secondary-model",
        "timeout": 5,
    },
    "insights_cache": {
        "type": "memory",
    },
}

# NOTE: Configuration must be initialized before importing app.main, since
# CORS middleware is configured during import time
configuration.init_from_dict(config_dict)
