from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "Via Alias"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "0.0.0.0"
    port: int = 6789
    
    # Database
    # VIA_ALIAS_DB may hold a bare SQLite file path
    database_url: str = Field(
        default="sqlite:///./via-alias.db",
        validation_alias=AliasChoices("DATABASE_URL", "VIA_ALIAS_DB"),
    )
    db_pool_size: int = 5  # Ignored by SQLite
    db_max_overflow: int = 10
    db_echo: bool = False
    
    # Logging
    log_level: str = "INFO"
    
    @field_validator("database_url")
    @classmethod
    def file_path_to_sqlite_url(cls, value: str) -> str:
        if "://" not in value:
            return f"sqlite:///{value}"
        return value
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
