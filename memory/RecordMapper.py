# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: RecordMapper
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from memory.MemoryRecord import MemoryRecord
from memory.RecordDefinition import FieldRole, MEMORY_RECORD_DEFINITION, RecordDefinition
from memory.RecordIdCodec import decode_id, encode_id

# Name/value shape sent to and read from the search index.
FlatDocument = Dict[str, Any]


@dataclass(frozen=True)
class RecordMapper:
    """
    Pure MemoryRecord <-> FlatDocument translation.

    The key field is encoded on the way in and decoded on the way out;
    every other field is copied as-is.
    """
    definition: RecordDefinition = MEMORY_RECORD_DEFINITION

    def to_storage(self, record: MemoryRecord) -> FlatDocument:
        document: FlatDocument = {}
        for f in self.definition.fields:
            value = getattr(record, f.name)
            if f.role is FieldRole.KEY:
                value = encode_id(value)
            elif f.role is FieldRole.VECTOR:
                value = list(value)
            document[f.storage_name] = value
        return document

    def from_storage(self, document: Mapping[str, Any]) -> MemoryRecord:
        kwargs: Dict[str, Any] = {}
        for f in self.definition.fields:
            if f.storage_name not in document:
                continue
            value = document[f.storage_name]
            if f.role is FieldRole.KEY:
                value = decode_id(value)
            elif f.role is FieldRole.VECTOR and value is not None:
                value = [float(v) for v in value]
            kwargs[f.name] = value

        # Non-nullable bool in the index, but absent when not selected
        if kwargs.get("is_reference") is None:
            kwargs["is_reference"] = False

        return MemoryRecord(**kwargs)
