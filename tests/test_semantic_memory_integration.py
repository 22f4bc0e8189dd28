# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: test_semantic_memory_integration.py
# -----------------------------------------------------------------------------
import os
import uuid

import pytest

from config.Config import Config


def _skip_if_missing_env():
    missing = [name for name in Config.SEARCH_ENV_VARS if not os.getenv(name)]
    has_openai = os.getenv("OPENAI_API_KEY") or all(os.getenv(n) for n in Config.AZURE_OPENAI_ENV_VARS)
    if missing or not has_openai:
        pytest.skip(f"Integration env not configured (missing: {missing or 'embedding credentials'})")


@pytest.mark.integration
def test_store_get_delete_round_trip():
    _skip_if_missing_env()

    from api.AppContainer import AppContainer

    container = AppContainer()
    container.store.create_collection_if_not_exists()
    memory = container.memory_service

    record_id = f"https://example.com/integration/{uuid.uuid4().hex}"
    keys = memory.store_data({record_id: "Integration test record"})
    assert len(keys) == 1

    record = memory.get(keys[0], include_vectors=True)
    assert record is not None
    assert record.id == record_id
    assert record.external_source_name == "GitHub"
    assert len(record.embedding) > 0

    memory.remove(keys[0])
