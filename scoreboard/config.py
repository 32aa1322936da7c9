import os


def _env_bool(name, default=False):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name, default):
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


DEFAULT_ROUTES = ["Route 1", "Route 2", "Route 3", "Route 4", "Route 5", "Route 6"]


class Config:
    raw_db_url = os.getenv("DATABASE_URL")

    if raw_db_url:
        if raw_db_url.startswith("postgres://"):
            raw_db_url = raw_db_url.replace("postgres://", "postgresql://", 1)
        SQLALCHEMY_DATABASE_URI = raw_db_url
    else:
        SQLALCHEMY_DATABASE_URI = "sqlite:///scoreboard.db"

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me-dev-secret")

    DATA_DIR = os.getenv("DATA_DIR", os.getcwd())
    RESULTS_PATH = os.getenv("RESULTS_PATH", os.path.join(DATA_DIR, "result.csv"))
    CLIMBERS_PATH = os.getenv("CLIMBERS_PATH", os.path.join(DATA_DIR, "climbers.csv"))

    # "csv" | "sql" | "memory"
    RESULT_STORE = os.getenv("RESULT_STORE", "csv").strip().lower()

    ROUTES = _env_list("ROUTES", DEFAULT_ROUTES)

    # "Bonus" or "Zone" depending on the competition's terminology
    MILESTONE_LABEL = os.getenv("MILESTONE_LABEL", "Bonus").strip().capitalize() or "Bonus"
    SAME_ATTEMPT_MILESTONE_COUNTS = _env_bool("SAME_ATTEMPT_MILESTONE_COUNTS", False)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = int(os.getenv("PORT", "3000"))
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    RESULT_STORE = "memory"
    ROUTES = list(DEFAULT_ROUTES)
    MILESTONE_LABEL = "Bonus"
    SAME_ATTEMPT_MILESTONE_COUNTS = False
