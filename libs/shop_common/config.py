"""Shared configuration base classes."""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_LOCALES_DIR = str(Path(__file__).parent / "locales")


class BaseServiceConfig(BaseSettings):
    """Base configuration class for services to extend."""

    port: int = Field(8000, env="PORT")
    log_level: str = Field("INFO", env="LOG_LEVEL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


class ResponseConfig(BaseSettings):
    """Settings for response envelopes and message translation."""

    locales_dir: str = Field(
        DEFAULT_LOCALES_DIR,
        env="LOCALES_DIR",
        description="Directory holding <lang>/<namespace>.json translation files",
    )
    fallback_language: str = Field("en", env="FALLBACK_LANGUAGE")
    supported_languages: List[str] = Field(
        default=["en", "vi"], env="SUPPORTED_LANGUAGES"
    )

    # Message keys are common.<resource>.<prefix>.<action>.<statusKey>
    message_action_prefix: str = Field("action", env="MESSAGE_ACTION_PREFIX")
    fallback_message: str = Field("Operation completed", env="FALLBACK_MESSAGE")
    graphql_fallback_message: str = Field(
        "Operation completed successfully", env="GRAPHQL_FALLBACK_MESSAGE"
    )

    # Used when resource/action cannot be derived from the handler
    resource_name_fallback: str = Field("resource", env="RESOURCE_NAME_FALLBACK")
    resource_action_fallback: str = Field("action", env="RESOURCE_ACTION_FALLBACK")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }
