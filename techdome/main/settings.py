import os
from pathlib import Path
from dotenv import load_dotenv
import logging.config


# Load environment variables from project .env explicitly
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "core",
    "database",
]

# MongoDB is accessed through pymongo directly; no Django ORM backend is used.
DATABASES = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# MongoDB env. DB is the variable the deployment sets; the others are accepted as aliases.
MONGODB_URI = os.getenv("DB") or os.getenv("MONGODB_URI") or os.getenv("MONGO_URI")
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME") or os.getenv("MONGO_DB_NAME") or None
if not MONGODB_URI:
    MONGODB_URI = "mongodb://localhost:27017/techdome"

# A malformed value raises here instead of silently using the default.
MONGODB_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "2000"))

# Configure logging without Django's DEFAULT_LOGGING (avoids mail_admins)
LOGGING_CONFIG = None
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "root": {"handlers": ["console"], "level": os.getenv("LOG_LEVEL", "INFO")},
}
logging.config.dictConfig(LOGGING)
