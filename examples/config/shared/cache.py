"""Cache settings built at load time."""

import os


def config() -> dict:
    return {
        "driver": os.environ.get("APP_CACHE_DRIVER", "memory"),
        "ttl": 300,
    }
