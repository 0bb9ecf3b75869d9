SECRET_KEY = "test-secret"

SQLALCHEMY_DATABASE_URI = "sqlite://"
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
TESTING = True

AUTO_INIT_DB = True

LOG_LEVEL = "WARNING"
LOG_DIR = None

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
