# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: test_record_definition.py
# -----------------------------------------------------------------------------
import pytest

from memory.RecordDefinition import (
    FieldRole,
    FieldType,
    MEMORY_RECORD_DEFINITION,
    RecordDefinition,
    RecordField,
)


def test_storage_names_in_order():
    assert MEMORY_RECORD_DEFINITION.storage_names() == [
        "Id",
        "Text",
        "Description",
        "AdditionalMetadata",
        "Embedding",
        "ExternalSourceName",
        "Reference",
    ]


def test_storage_names_without_vectors():
    assert "Embedding" not in MEMORY_RECORD_DEFINITION.storage_names(include_vectors=False)
    assert len(MEMORY_RECORD_DEFINITION.storage_names(include_vectors=False)) == 6


def test_roles():
    d = MEMORY_RECORD_DEFINITION
    assert d.key_field.storage_name == "Id"
    assert d.key_field.name == "id"
    assert [f.storage_name for f in d.vector_fields] == ["Embedding"]
    assert len(d.data_fields) == 5


def test_description_is_embedding_source():
    description = MEMORY_RECORD_DEFINITION.field_for_storage_name("Description")
    assert description.has_embedding is True
    assert description.embedding_field_name == "Embedding"
    assert not any(
        f.has_embedding for f in MEMORY_RECORD_DEFINITION.fields if f.storage_name != "Description"
    )


def test_reference_is_boolean():
    assert MEMORY_RECORD_DEFINITION.field_for_storage_name("Reference").field_type is FieldType.BOOLEAN


def test_unknown_storage_name():
    with pytest.raises(KeyError):
        MEMORY_RECORD_DEFINITION.field_for_storage_name("Nope")


def test_definition_requires_one_key():
    with pytest.raises(ValueError):
        RecordDefinition(fields=(RecordField("text", "Text"),))

    with pytest.raises(ValueError):
        RecordDefinition(
            fields=(
                RecordField("id", "Id", FieldRole.KEY),
                RecordField("other", "Other", FieldRole.KEY),
            )
        )


def test_definition_rejects_duplicate_storage_names():
    with pytest.raises(ValueError):
        RecordDefinition(
            fields=(
                RecordField("id", "Id", FieldRole.KEY),
                RecordField("text", "Text"),
                RecordField("description", "Text"),
            )
        )
