# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: test_health.py
# -----------------------------------------------------------------------------
from unittest.mock import MagicMock

import numpy as np
from azure.core.exceptions import HttpResponseError

from embedding.Embedding import Embedding
from health.EmbeddingHealth import EmbeddingHealth
from health.SearchHealth import SearchHealth
from health.TestRunner import TestRunner
from memory.exceptions import ServiceError
from services.HealthService import HealthService


def _embedding_service(dim: int) -> MagicMock:
    svc = MagicMock()
    svc.model = "text-embedding-ada-002"
    svc.generate_embedding.return_value = Embedding(text="probe", vector=np.zeros(dim, dtype=np.float32))
    return svc


def test_embedding_health_passes_on_expected_dimension():
    assert EmbeddingHealth(_embedding_service(1536), expected_dim=1536).run() is True


def test_embedding_health_fails_on_dimension_mismatch():
    assert EmbeddingHealth(_embedding_service(3072), expected_dim=1536).run() is False


def test_embedding_health_fails_on_service_error():
    svc = _embedding_service(1536)
    svc.generate_embedding.side_effect = ServiceError("unauthorized", service="embedding")
    assert EmbeddingHealth(svc).run() is False


def test_search_health(openai_cfg):
    index_client = MagicMock()
    index_client.list_index_names.return_value = iter(["skgithub"])
    assert SearchHealth(openai_cfg, index_client=index_client).run() is True

    index_client.list_index_names.side_effect = HttpResponseError(message="unauthorized")
    assert SearchHealth(openai_cfg, index_client=index_client).run() is False


def test_health_service_summarises_runner():
    search = MagicMock()
    search.run.return_value = True
    embedding = MagicMock()
    embedding.run.return_value = False

    resp = HealthService(test_runner=TestRunner(search, embedding)).deep_health()

    assert resp.status == "error"
    assert resp.results == {"search_health": True, "embedding_health": False}
    assert (resp.summary.total, resp.summary.passed, resp.summary.failed) == (2, 1, 1)
