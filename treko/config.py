from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    API_BASE_URL: str = "http://localhost:8080/api"
    API_TIMEOUT_SECONDS: float = 5.0
    LOG_LEVEL: str = "INFO"
    STORE_DATABASE_URL: str = "sqlite:///./treko_store.db"
    STORE_HOST: str = "127.0.0.1"
    STORE_PORT: int = 8080
    STORE_SEED_DEMO: bool = True
    FRONTEND_ORIGINS: List[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
