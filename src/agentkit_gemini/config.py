"""Configuration module for agentkit-gemini using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AgentKitGeminiSettings(BaseSettings):
    """Main configuration settings for agentkit-gemini.

    All settings can be overridden via environment variables with the
    AGENTKIT_GEMINI_ prefix. For example, AGENTKIT_GEMINI_CATALOG will
    override the catalog setting.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Action catalog, as a "module:attribute" import string
    catalog: str | None = None

    # Execution
    run_sync_actions_in_thread: bool = True

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="AGENTKIT_GEMINI_")
