# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: RecordDefinition
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class FieldRole(str, Enum):
    KEY = "key"
    DATA = "data"
    VECTOR = "vector"


class FieldType(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    VECTOR = "vector"


@dataclass(frozen=True)
class RecordField:
    """Binds a MemoryRecord attribute to an index field."""
    name: str
    storage_name: str
    role: FieldRole = FieldRole.DATA
    has_embedding: bool = False
    embedding_field_name: Optional[str] = None
    field_type: FieldType = FieldType.STRING
    is_full_text_searchable: bool = False


@dataclass(frozen=True)
class RecordDefinition:
    """
    Ordered schema descriptor consulted by RecordMapper and by the store when
    creating a collection. Exactly one KEY field is required.
    """
    fields: Tuple[RecordField, ...]

    def __post_init__(self) -> None:
        keys = [f for f in self.fields if f.role is FieldRole.KEY]
        if len(keys) != 1:
            raise ValueError(f"Record definition needs exactly one key field, got {len(keys)}")

        names = [f.storage_name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate storage field names in record definition: {names}")

    @property
    def key_field(self) -> RecordField:
        return next(f for f in self.fields if f.role is FieldRole.KEY)

    @property
    def data_fields(self) -> List[RecordField]:
        return [f for f in self.fields if f.role is FieldRole.DATA]

    @property
    def vector_fields(self) -> List[RecordField]:
        return [f for f in self.fields if f.role is FieldRole.VECTOR]

    def storage_names(self, include_vectors: bool = True) -> List[str]:
        return [
            f.storage_name
            for f in self.fields
            if include_vectors or f.role is not FieldRole.VECTOR
        ]

    def field_for_storage_name(self, storage_name: str) -> RecordField:
        for f in self.fields:
            if f.storage_name == storage_name:
                return f
        raise KeyError(f"No field with storage name {storage_name!r}")


# ---- Storage field names (index schema) ----
ID = "Id"
TEXT = "Text"
DESCRIPTION = "Description"
ADDITIONAL_METADATA = "AdditionalMetadata"
EMBEDDING = "Embedding"
EXTERNAL_SOURCE_NAME = "ExternalSourceName"
IS_REFERENCE = "Reference"


MEMORY_RECORD_DEFINITION = RecordDefinition(
    fields=(
        RecordField("id", ID, FieldRole.KEY),
        RecordField("text", TEXT, is_full_text_searchable=True),
        RecordField(
            "description",
            DESCRIPTION,
            has_embedding=True,
            embedding_field_name=EMBEDDING,
            is_full_text_searchable=True,
        ),
        RecordField("additional_metadata", ADDITIONAL_METADATA),
        RecordField("embedding", EMBEDDING, FieldRole.VECTOR, field_type=FieldType.VECTOR),
        RecordField("external_source_name", EXTERNAL_SOURCE_NAME),
        RecordField("is_reference", IS_REFERENCE, field_type=FieldType.BOOLEAN),
    )
)
