# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import List
from unittest.mock import MagicMock

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.Config import Config  # noqa: E402


@pytest.fixture
def openai_cfg() -> Config:
    """Config using the OpenAI API directly."""
    return Config(
        search_endpoint="https://unit-test.search.windows.net",
        search_key="search-key",
        openai_api_key="sk-test-key",
        embedding_model_id="text-embedding-ada-002",
    )


@pytest.fixture
def azure_cfg() -> Config:
    """Config using Azure OpenAI."""
    return Config(
        search_endpoint="https://unit-test.search.windows.net",
        search_key="search-key",
        azure_openai_api_key="azure-key",
        azure_openai_endpoint="https://unit-test.openai.azure.com/",
        embedding_model_id="ada-deployment",
    )


def _embeddings_response(vectors: List[List[float]], reverse: bool = False) -> SimpleNamespace:
    """Shape of openai's CreateEmbeddingResponse, optionally out of order."""
    data = [SimpleNamespace(index=i, embedding=v) for i, v in enumerate(vectors)]
    if reverse:
        data = list(reversed(data))
    return SimpleNamespace(data=data)


@pytest.fixture
def embeddings_response():
    return _embeddings_response


@pytest.fixture
def fake_openai_client() -> MagicMock:
    """OpenAI client stub returning one 3-dim vector per input text."""
    client = MagicMock()

    def _create(model, input):
        return _embeddings_response([[float(i), 0.5, 1.0] for i in range(len(input))])

    client.embeddings.create.side_effect = _create
    return client
