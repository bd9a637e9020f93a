from .base import *

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Use MongoDB only for tests
# The tests will use testcontainers to spin up their own MongoDB instance
MONGODB_URI = "mongodb://localhost:27017/?directConnection=true"
DB_NAME = "testdb"

COOKIE_SETTINGS.update({"COOKIE_DOMAIN": None, "COOKIE_SECURE": False})

LOGGING["root"]["level"] = "WARNING"
