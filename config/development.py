import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{BASE_DIR / 'App_Data' / 'ems.db'}",
)
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = True

# Create tables and seed the default departments on startup.
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_DIR = os.getenv("LOG_DIR", str(BASE_DIR / "Logs"))

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
