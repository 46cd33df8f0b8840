# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-01
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=True)


@dataclass(frozen=True)
class Config:
    # OpenAI (embeddings + chat)
    openai_api_key: str
    openai_base_url: str = ""
    openai_embed_model: str = "text-embedding-3-small"
    openai_chat_model: str = "gpt-4o-mini"

    # Azure OpenAI: when an endpoint is set the same key is used against Azure
    openai_azure_endpoint: str = ""
    openai_azure_api_version: str = "2024-10-21"

    # Chroma: empty path means an in-process ephemeral client
    chroma_path: str = ""

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_embed_model": "OPENAI_EMBED_MODEL",
        "openai_chat_model": "OPENAI_CHAT_MODEL",

        "openai_azure_endpoint": "AZURE_OPENAI_ENDPOINT",
        "openai_azure_api_version": "AZURE_OPENAI_API_VERSION",

        "chroma_path": "DOCCHAT_CHROMA_PATH",
    }

    REQUIRED_FIELDS = (
        "openai_api_key",
        "openai_embed_model",
        "openai_chat_model",
    )

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables; unset optional vars keep their defaults."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = os.getenv(env_name)
            if value is not None and value.strip():
                kwargs[field_name] = value.strip()
        kwargs.setdefault("openai_api_key", "")
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast if any required config is missing."""
        missing_fields = [f for f in self.REQUIRED_FIELDS if not getattr(self, f)]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

    @property
    def uses_azure(self) -> bool:
        return bool(self.openai_azure_endpoint)

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_base_url": self.openai_base_url or None,
            "openai_embed_model": self.openai_embed_model,
            "openai_chat_model": self.openai_chat_model,
            "openai_azure_endpoint": self.openai_azure_endpoint or None,
            "chroma_path": self.chroma_path or "<ephemeral>",
        }
