import os

def get_settings_module() -> str:
    # FLASK_ENV selects the run mode; APP_ENV is accepted as an alias
    env = (os.getenv("FLASK_ENV") or os.getenv("APP_ENV") or "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
