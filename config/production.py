import os
from pathlib import Path

INSTANCE_DIR = Path(__file__).resolve().parents[1] / "instance"

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{INSTANCE_DIR / 'database.db'}")
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

EMPLOYEES_PER_PAGE = int(os.getenv("EMPLOYEES_PER_PAGE", "2"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
