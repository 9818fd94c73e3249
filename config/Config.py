# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-14
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class Config:
    # Azure OpenAI (embedding-similarity search mode, optional)
    openai_azure_api_key: str = ""
    openai_azure_endpoint: str = ""
    openai_azure_embed_deployment: str = ""
    openai_api_version: str = "2024-10-21"

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "openai_azure_api_key": "AZURE_OPENAI_API_KEY",
        "openai_azure_endpoint": "AZURE_OPENAI_ENDPOINT",
        "openai_azure_embed_deployment": "AZURE_OPENAI_EMBED_DEPLOYMENT",
        "openai_api_version": "AZURE_OPENAI_API_VERSION",
    }

    # Variables that must all be set before the embedding mode can be used
    AZURE_OPENAI_ENV_VARS = (
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_ENDPOINT",
        "AZURE_OPENAI_EMBED_DEPLOYMENT",
    )

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = (os.getenv(env_name) or "").strip()
            if value:
                kwargs[field_name] = value
        return Config(**kwargs)

    def missing_embedding_env_vars(self) -> list[str]:
        fields = ("openai_azure_api_key", "openai_azure_endpoint", "openai_azure_embed_deployment")
        return [self.ENV_VARS[f] for f in fields if not getattr(self, f)]

    def embedding_configured(self) -> bool:
        return not self.missing_embedding_env_vars()

    def validate_embedding(self) -> None:
        """
        Fail fast if the embedding provider is requested but not configured.

        Term-overlap search needs no configuration at all, so this is an
        explicit check rather than a __post_init__ hook.
        """
        missing = self.missing_embedding_env_vars()
        if missing:
            raise ValueError(f"Missing required environment variables: {missing}")

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_azure_endpoint": self.openai_azure_endpoint,
            "openai_azure_embed_deployment": self.openai_azure_embed_deployment,
            "openai_api_version": self.openai_api_version,
            "embedding_configured": self.embedding_configured(),
        }
