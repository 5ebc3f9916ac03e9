from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Library settings, read from JGF_* environment variables or .env."""
    
    # Logging Configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None
    
    # Serialization Configuration
    pretty_print_spaces: int = 4
    file_encoding: str = "utf-8"
    
    # Graph Policies
    cascade_node_removal: bool = False
    legacy_force_directed: bool = False
    
    @field_validator('pretty_print_spaces')
    @classmethod
    def ensure_non_negative_indent(cls, v):
        if v < 0:
            raise ValueError("pretty_print_spaces must be >= 0")
        return v
    
    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()
    
    class Config:
        env_prefix = "JGF_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
