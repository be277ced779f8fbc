from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables before everything else
load_dotenv()

class Settings(BaseSettings):
    """Application settings."""
    
    # App Settings
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: List[str] = Field(default=["*"])

    # Limits mirrored from the upstream API. Keep in sync when upstream changes.
    FILE_SEARCH_MAX_NUM_RESULTS: int = Field(default=50)
    FILE_ID_MIN_SUFFIX: int = Field(default=1)
    PROMPT_ID_MIN_SUFFIX: int = Field(default=1)
    EXPIRES_AFTER_MIN_SECONDS: int = Field(default=3600)
    EXPIRES_AFTER_MAX_SECONDS: int = Field(default=2592000)
    METADATA_MAX_KEYS: int = Field(default=16)
    METADATA_MAX_KEY_LENGTH: int = Field(default=64)
    METADATA_MAX_VALUE_LENGTH: int = Field(default=512)
    LIST_FILES_MAX_LIMIT: int = Field(default=10000)

    class Config:
        env_file = ".env"
        case_sensitive = True


# Initialize settings
settings = Settings()
