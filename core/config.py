"""
Application configuration using Pydantic Settings
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""
    
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./chamber.db"
    DATABASE_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Import Configuration
    IMPORT_FOLDER: str = "./data/grt"
    IMPORT_SOURCE_NAME: str = "GRT"
    IMPORT_PROGRESS_INTERVAL: int = 100
    IMPORT_CONTINUE_ON_ERROR: bool = False
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
