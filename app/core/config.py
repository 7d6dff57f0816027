from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Learning Console"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # Database Configuration
    DATABASE_HOST: Optional[str] = None
    DATABASE_PORT: str = "5432"
    DATABASE_USER: Optional[str] = None
    DATABASE_PASSWORD: Optional[str] = None
    DATABASE_NAME: Optional[str] = None

    DATABASE_URL: str = "sqlite:///./learning_console.db"
    TEST_DATABASE_URL: Optional[str] = None

    def __init__(self, **data):
        super().__init__(**data)
        if self.DATABASE_HOST:
            self.DATABASE_URL = (
                f'postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}'
                f'@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}'
            )

    # Test taking
    PASS_BLOCKS_RETAKE: bool = False
    SESSION_SWEEP_INTERVAL_SECONDS: int = 30
    COMPLETED_SESSION_TTL_MINUTES: int = 60

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    SLOW_REQUEST_THRESHOLD_MS: int = 1000

    class Config:
        env_file = ".env"

settings = Settings()
