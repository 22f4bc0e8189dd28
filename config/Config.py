# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

import settings


@dataclass(frozen=True)
class Config:
    # Azure AI Search
    search_endpoint: str
    search_key: str

    # OpenAI (direct). Used when no Azure OpenAI key is set.
    openai_api_key: str = ""

    # Azure OpenAI. Endpoint only required if the key is set.
    azure_openai_api_key: str = ""
    azure_openai_endpoint: str = ""

    # Embedding model (OpenAI model id or Azure OpenAI deployment name)
    embedding_model_id: str = settings.EMBEDDING_MODEL_DEFAULT

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Azure AI Search
        "search_endpoint": "AZURE_AISEARCH_ENDPOINT",
        "search_key": "AZURE_AISEARCH_KEY",

        # OpenAI direct
        "openai_api_key": "OPENAI_API_KEY",

        # Azure OpenAI
        "azure_openai_api_key": "AZURE_OPENAI_API_KEY",
        "azure_openai_endpoint": "AZURE_OPENAI_ENDPOINT",

        # Embeddings
        "embedding_model_id": "EMBEDDING_MODEL_ID",
    }

    # Convenient *groups* for use in tests / health checks
    SEARCH_ENV_VARS = (
        "AZURE_AISEARCH_ENDPOINT",
        "AZURE_AISEARCH_KEY",
    )

    AZURE_OPENAI_ENV_VARS = (
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_ENDPOINT",
    )

    OPENAI_DIRECT_ENV_VARS = (
        "OPENAI_API_KEY",
    )

    @staticmethod
    def from_env(load_env_file: bool = True) -> "Config":
        """Build Config object from environment variables (and .env if present)."""
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        kwargs = {
            field_name: os.getenv(env_name, "").strip()
            for field_name, env_name in Config.ENV_VARS.items()
        }
        if not kwargs["embedding_model_id"]:
            kwargs["embedding_model_id"] = settings.EMBEDDING_MODEL_DEFAULT
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast if required config is missing."""
        missing_fields = [f for f in ("search_endpoint", "search_key") if not getattr(self, f)]

        if self.azure_openai_api_key:
            if not self.azure_openai_endpoint:
                missing_fields.append("azure_openai_endpoint")
        elif not self.openai_api_key:
            missing_fields.append("openai_api_key")

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

    @property
    def uses_azure_openai(self) -> bool:
        return bool(self.azure_openai_api_key)

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "search_endpoint": self.search_endpoint,
            "embedding_provider": "azure_openai" if self.uses_azure_openai else "openai",
            "azure_openai_endpoint": self.azure_openai_endpoint or None,
            "embedding_model_id": self.embedding_model_id,
        }
