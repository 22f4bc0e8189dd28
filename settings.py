# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Memory collection (Azure AI Search index name)
# -----------------------------------------------------------------------------
MEMORY_COLLECTION_DEFAULT = _env("SM_MEMORY_COLLECTION", "skgithub")


# -----------------------------------------------------------------------------
# Embeddings
# -----------------------------------------------------------------------------
EMBEDDING_MODEL_DEFAULT = _env("SM_EMBEDDING_MODEL_DEFAULT", "text-embedding-ada-002")

# text-embedding-ada-002 -> 1536
EMBEDDING_DIMENSIONS_DEFAULT = _env_int("SM_EMBEDDING_DIMENSIONS", 1536)

AZURE_OPENAI_API_VERSION = _env("AZURE_OPENAI_API_VERSION", "2024-10-21")


# -----------------------------------------------------------------------------
# Records / search
# -----------------------------------------------------------------------------
SOURCE_NAME_DEFAULT = _env("SM_SOURCE_NAME", "GitHub")

SEARCH_LIMIT_DEFAULT = _env_int("SM_SEARCH_LIMIT", 5)

# Sent as the user agent application id on Azure SDK requests
APPLICATION_ID = _env("SM_APPLICATION_ID", "Semantic-Kernel")

# Create the index from the record definition on startup if it is missing
CREATE_COLLECTION_ON_START = _env_bool("SM_CREATE_COLLECTION", False)


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if not MEMORY_COLLECTION_DEFAULT:
    raise RuntimeError("MEMORY_COLLECTION_DEFAULT resolved to empty value")

if EMBEDDING_DIMENSIONS_DEFAULT <= 0:
    raise RuntimeError("EMBEDDING_DIMENSIONS_DEFAULT must be positive")
