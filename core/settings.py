import os


def _flag(name: str, default: str = "0") -> bool:
    v = os.getenv(name, default).strip().lower()
    return v in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./trees.db")
        self.auth_enabled: bool = _flag("AUTH_ENABLED")
        self.auth_token: str = os.getenv("AUTH_TOKEN", "").strip()
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.image_path: str = os.getenv("IMAGE_PATH", "/static/images")


def get_settings() -> Settings:
    return Settings()
