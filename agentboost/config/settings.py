"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from agentboost.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.openai_api_key: str | None = os.getenv("OPENAI_API_KEY") or None
        self.openai_model: str = self._get_env("OPENAI_MODEL", "gpt-4o")
        self.openai_api_base: str = self._get_env(
            "OPENAI_API_BASE", "https://api.openai.com/v1"
        )
        self.max_steps: int = self._get_int_env("AGENTBOOST_MAX_STEPS", 10)
        self.log_level: str = self._get_env("AGENTBOOST_LOG_LEVEL", "INFO").upper()
        self.output_file: str = self._get_env("AGENTBOOST_OUTPUT", "AGENTS.md")

    def require_openai_api_key(self) -> str:
        """Get the OpenAI API key, raise error if missing."""
        if not self.openai_api_key:
            raise ConfigurationError(
                "Required environment variable OPENAI_API_KEY is not set"
            )
        return self.openai_api_key

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")


# Global settings instance
settings = Settings()
