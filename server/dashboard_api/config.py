"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Storage
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    storage_key: str = "caregiver_activities"
    storage_max_bytes: int = 5 * 1024 * 1024

    @property
    def activity_db_path(self) -> str:
        return os.path.join(self.data_path, "activities.db")

    # Activity log
    max_activities: int = 500
    quota_trim_size: int = 100
    default_patient_id: str = "default"
    demo_patient_id: str = "patient_001"

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    class Config:
        env_prefix = "ACTIVITY_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
