import os
from pathlib import Path

INSTANCE_DIR = Path(__file__).resolve().parents[1] / "instance"

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Local file-based database
SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{INSTANCE_DIR / 'database.db'}")
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

EMPLOYEES_PER_PAGE = int(os.getenv("EMPLOYEES_PER_PAGE", "2"))

# Create tables on startup (idempotent: create_all skips existing tables)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also truncate + seed the nine demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
