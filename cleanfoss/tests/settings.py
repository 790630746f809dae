"""Django settings for the CleanFoss test suite."""

SECRET_KEY = "cleanfoss-tests"

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "simple_history",
    "cleanfoss",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
TIME_ZONE = "Europe/Copenhagen"
LANGUAGE_CODE = "da"

CLEANFOSS = {
    "CATALOG_BACKEND": "cleanfoss.adapters.static.StaticCatalogBackend",
}
