# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: memory.py
# -----------------------------------------------------------------------------
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from memory.MemoryRecord import MemoryRecord


class SaveInformationRequest(BaseModel):
    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    description: Optional[str] = None
    additional_metadata: Optional[str] = None


class SaveInformationResponse(BaseModel):
    key: str


class StoreDataRequest(BaseModel):
    data: Dict[str, str] = Field(..., min_length=1)


class StoreDataResponse(BaseModel):
    requested: int
    keys: List[str]


class MemoryRecordOut(BaseModel):
    id: str
    text: Optional[str] = None
    description: Optional[str] = None
    additional_metadata: Optional[str] = None
    embedding: List[float] = Field(default_factory=list)
    external_source_name: Optional[str] = None
    is_reference: bool = False

    @classmethod
    def from_record(cls, record: MemoryRecord) -> "MemoryRecordOut":
        return cls(
            id=record.id,
            text=record.text,
            description=record.description,
            additional_metadata=record.additional_metadata,
            embedding=list(record.embedding),
            external_source_name=record.external_source_name,
            is_reference=record.is_reference,
        )


class GetRecordResponse(BaseModel):
    key: str
    record: MemoryRecordOut


class DeleteRecordResponse(BaseModel):
    key: str
    deleted: bool


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    limit: int = Field(5, ge=1, le=50)
    include_vectors: bool = False


class SearchHit(BaseModel):
    record: MemoryRecordOut
    relevance: Optional[float] = None


class SearchResponse(BaseModel):
    query: str
    limit: int
    results: List[SearchHit]
