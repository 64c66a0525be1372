import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    RECORD_SERVICE_URL: str = "http://localhost:8000/api/v1"
    RECORD_SERVICE_TIMEOUT: float = 10.0

    NOTIFICATION_TTL_SECONDS: float = 3.0
    NAVIGATION_DELAY_SECONDS: float = 1.0

    EXPORT_FILENAME: str = "employees.csv"

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
