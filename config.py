import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    DATABASE = os.environ.get("REGISTRY_DATABASE", os.path.join(BASE_DIR, "registry.db"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PER_PAGE = 10
    MAX_PER_PAGE = 100

    # Defaults pre-filled on registration forms
    DEFAULT_CITY = "Jimma"
    DEFAULT_KEBELE = "Hermata Merkato"
    DEFAULT_NATIONALITY = "Ethiopian"

    # Dashboard activity feed
    RECENT_DAYS = 30
    RECENT_LIMIT = 10

    STATUS_COLORS = {
        "Pending": "warning",
        "Approved": "success",
        "Rejected": "danger",
    }
