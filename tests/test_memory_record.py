# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: test_memory_record.py
# -----------------------------------------------------------------------------
import dataclasses

import numpy as np
import pytest

from memory.MemoryRecord import MemoryRecord


def test_embedding_defaults_to_empty_list():
    record = MemoryRecord(id="id_1")
    assert record.embedding == []
    assert record.embedding is not None


def test_none_embedding_is_normalised():
    record = MemoryRecord(id="id_1", text="t", embedding=None)
    assert record.embedding == []


def test_default_instances_do_not_share_embedding():
    assert MemoryRecord(id="a").embedding is not MemoryRecord(id="b").embedding


def test_optional_fields_default():
    record = MemoryRecord(id="id_1")
    assert record.text is None
    assert record.description is None
    assert record.additional_metadata is None
    assert record.external_source_name is None
    assert record.is_reference is False


def test_record_is_immutable():
    record = MemoryRecord(id="id_1", text="t")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.id = "other"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.embedding = [1.0]  # type: ignore[misc]


def test_id_is_stored_unencoded():
    url = "https://github.com/microsoft/semantic-kernel/blob/main/README.md"
    assert MemoryRecord(id=url).id == url


def test_short_preview_truncates():
    record = MemoryRecord(id="id_1", text="word " * 50, external_source_name="GitHub")
    preview = record.short_preview(n=20)
    assert preview.startswith("[GitHub | id_1] ")
    assert preview.endswith("...")


def test_embedding_is_copied_from_caller_list():
    vector = [0.1, 0.2]
    record = MemoryRecord(id="id_1", embedding=vector)

    vector.append(0.3)

    assert record.embedding == [0.1, 0.2]
    assert record.embedding is not vector


def test_numpy_embedding_becomes_list():
    record = MemoryRecord(id="id_1", embedding=np.array([0.5, 0.25], dtype=np.float32))
    assert isinstance(record.embedding, list)
    assert record.embedding == [0.5, 0.25]
