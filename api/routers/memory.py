# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: memory.py
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_memory_service
from api.schemas.memory import (
    DeleteRecordResponse,
    GetRecordResponse,
    MemoryRecordOut,
    SaveInformationRequest,
    SaveInformationResponse,
    SearchHit,
    SearchRequest,
    SearchResponse,
    StoreDataRequest,
    StoreDataResponse,
)
from memory.RecordIdCodec import encode_id
from memory.exceptions import DecodingError, ServiceError
from services.SemanticMemoryService import SemanticMemoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/memory", tags=["memory"])


@router.post("/records", response_model=SaveInformationResponse)
def save_information(
    req: SaveInformationRequest,
    svc: SemanticMemoryService = Depends(get_memory_service),
) -> SaveInformationResponse:
    logger.info("POST /memory/records (start) id='%s'", req.id)
    try:
        key = svc.save_information(
            req.id,
            req.text,
            description=req.description,
            additional_metadata=req.additional_metadata,
        )
    except ServiceError as e:
        logger.exception("POST /memory/records -> 502 id='%s': %s", req.id, e)
        raise HTTPException(status_code=502, detail=f"save failed: {e}")

    logger.info("POST /memory/records (done) id='%s' key='%s'", req.id, key)
    return SaveInformationResponse(key=key)


@router.post("/batch", response_model=StoreDataResponse)
def store_data(
    req: StoreDataRequest,
    svc: SemanticMemoryService = Depends(get_memory_service),
) -> StoreDataResponse:
    logger.info("POST /memory/batch (start) requested=%d", len(req.data))
    try:
        keys = svc.store_data(req.data)
    except ServiceError as e:
        # Fail-fast: records saved before the failure are not rolled back
        logger.exception("POST /memory/batch -> 502: %s", e)
        raise HTTPException(status_code=502, detail=f"store failed: {e}")

    return StoreDataResponse(requested=len(req.data), keys=keys)


@router.get("/records/{key}", response_model=GetRecordResponse)
def get_record(
    key: str,
    include_vectors: bool = Query(False, description="Return the embedding vector"),
    svc: SemanticMemoryService = Depends(get_memory_service),
) -> GetRecordResponse:
    key = (key or "").strip()
    if not key:
        raise HTTPException(status_code=400, detail="key must not be empty")

    try:
        record = svc.get(key, include_vectors=include_vectors)
    except DecodingError as e:
        # Corrupt key stored in the index, not a bad request
        logger.exception("GET /memory/records/%s -> 502 (stored key): %s", key, e)
        raise HTTPException(status_code=502, detail=f"stored record key is invalid: {e}")
    except ServiceError as e:
        logger.exception("GET /memory/records/%s -> 502: %s", key, e)
        raise HTTPException(status_code=502, detail=f"get failed: {e}")

    if record is None:
        raise HTTPException(status_code=404, detail="not found")

    return GetRecordResponse(key=key, record=MemoryRecordOut.from_record(record))


@router.get("/lookup", response_model=GetRecordResponse)
def lookup_record(
    record_id: str = Query(..., alias="id", min_length=1, description="Natural (unencoded) record id"),
    include_vectors: bool = Query(False),
    svc: SemanticMemoryService = Depends(get_memory_service),
) -> GetRecordResponse:
    try:
        record = svc.get_by_id(record_id, include_vectors=include_vectors)
    except ServiceError as e:
        logger.exception("GET /memory/lookup -> 502 id='%s': %s", record_id, e)
        raise HTTPException(status_code=502, detail=f"get failed: {e}")

    if record is None:
        raise HTTPException(status_code=404, detail="not found")

    return GetRecordResponse(key=encode_id(record_id), record=MemoryRecordOut.from_record(record))


@router.delete("/records/{key}", response_model=DeleteRecordResponse)
def delete_record(
    key: str,
    svc: SemanticMemoryService = Depends(get_memory_service),
) -> DeleteRecordResponse:
    try:
        svc.remove(key)
    except ServiceError as e:
        logger.exception("DELETE /memory/records/%s -> 502: %s", key, e)
        raise HTTPException(status_code=502, detail=f"delete failed: {e}")

    return DeleteRecordResponse(key=key, deleted=True)


@router.post("/search", response_model=SearchResponse)
def search(
    req: SearchRequest,
    svc: SemanticMemoryService = Depends(get_memory_service),
) -> SearchResponse:
    query_text = (req.query or "").strip()
    if not query_text:
        raise HTTPException(status_code=400, detail="query must not be empty")

    try:
        results = svc.search(query_text, limit=req.limit, include_vectors=req.include_vectors)
    except ServiceError as e:
        logger.exception("POST /memory/search -> 502: %s", e)
        raise HTTPException(status_code=502, detail=f"search failed: {e}")

    hits = [
        SearchHit(record=MemoryRecordOut.from_record(r.record), relevance=r.relevance)
        for r in results
    ]
    return SearchResponse(query=query_text, limit=req.limit, results=hits)
