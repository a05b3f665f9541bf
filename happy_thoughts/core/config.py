# Standard library imports
import os
from typing import Final, List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8080"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "happythoughts")
        
        # Seeding: wipe and reload the thoughts collection on startup
        self.reset_db: Final[bool] = _env_flag("RESET_DB")
        self.seed_file: Final[str] = os.getenv("SEED_FILE", "data.json")
        
        # Thought rules
        self.thoughts_page_size: Final[int] = int(os.getenv("THOUGHTS_PAGE_SIZE", "20"))
        self.message_min_length: Final[int] = int(os.getenv("MESSAGE_MIN_LENGTH", "5"))
        self.message_max_length: Final[int] = int(os.getenv("MESSAGE_MAX_LENGTH", "140"))
        
        # Credentials
        self.access_token_bytes: Final[int] = int(os.getenv("ACCESS_TOKEN_BYTES", "128"))
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
