"""
zimu - Configuration Module
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "zimu"

    # Logging (loguru level name: TRACE, DEBUG, INFO, WARNING, ERROR)
    LOG_LEVEL: str = "WARNING"

    # Encodings
    # Input bytes are decoded with this codec before parsing
    INPUT_ENCODING: str = "utf-8"
    # Only used when writing to a file; stdout uses the terminal encoding
    OUTPUT_ENCODING: str = "utf-8"

    class Config:
        env_prefix = "ZIMU_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
