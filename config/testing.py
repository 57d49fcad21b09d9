SECRET_KEY = "test-secret"

SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

EMPLOYEES_PER_PAGE = 2

AUTO_INIT_DB = True
AUTO_SEED_DB = False
