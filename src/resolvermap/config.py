"""
Configuration management for resolvermap
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Resource store
    store_backend: Literal["memory", "file"] = "memory"
    store_path: str | None = None
    namespace: str = "default"

    # Resource names served by a RegistryHolder
    schema_name: str | None = None
    resolver_map_name: str | None = None

    # Registry build policy
    strict_handlers: bool = False  # reject handler keys that match no declared field
    union_policy: Literal["skip", "reject"] = "skip"

    # Logging
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "RESOLVERMAP_"
        case_sensitive = False


def get_settings(**overrides) -> Settings:
    """Build a settings object, letting explicit values win over the environment."""
    return Settings(**overrides)
