# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: SemanticMemoryService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import List, Mapping, Optional

import settings
from embedding.TextEmbeddingService import TextEmbeddingService
from memory.MemoryQueryResult import MemoryQueryResult
from memory.MemoryRecord import MemoryRecord
from memory.RecordIdCodec import encode_id
from utility.logging_utils import get_class_logger
from vectorstore.RecordOptions import (
    DeleteRecordOptions,
    GetRecordOptions,
    SearchOptions,
    UpsertRecordOptions,
)
from vectorstore.VectorRecordStore import VectorRecordStore


class SemanticMemoryService:
    """
    Owns the save/recall flow:
      - embed text (via TextEmbeddingService)
      - build MemoryRecord
      - upsert into / get from / delete from the vector store

    Items are processed one at a time. A ServiceError from either service
    aborts the remaining items; records already saved are left in place.
    """

    def __init__(
        self,
        *,
        store: VectorRecordStore,
        embedding_service: TextEmbeddingService,
        collection_name: Optional[str] = None,
        source_name: str = settings.SOURCE_NAME_DEFAULT,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.embedding_service = embedding_service
        self.collection_name = collection_name
        self.source_name = source_name
        self.logger = logger or get_class_logger(self.__class__)

    def store_data(self, data: Mapping[str, str]) -> List[str]:
        """Embed and save each id -> text entry. Returns the storage keys in order."""
        keys: List[str] = []

        for record_id, text in data.items():
            self.logger.info("Save '%s' to memory.", record_id)

            embedding = self.embedding_service.generate_embedding(text)
            record = MemoryRecord(
                id=record_id,
                text=text,
                description=text,
                additional_metadata=None,
                embedding=embedding.to_list(),
                external_source_name=self.source_name,
                is_reference=False,
            )
            keys.append(self._upsert(record))

        self.logger.info("Stored %d records in memory", len(keys))
        return keys

    def save_information(
        self,
        record_id: str,
        text: str,
        *,
        description: Optional[str] = None,
        additional_metadata: Optional[str] = None,
    ) -> str:
        # The index binds the embedding to the description field
        embedding = self.embedding_service.generate_embedding(description or text)
        record = MemoryRecord(
            id=record_id,
            text=text,
            description=description,
            additional_metadata=additional_metadata,
            embedding=embedding.to_list(),
            external_source_name=self.source_name,
            is_reference=False,
        )
        return self._upsert(record)

    def save_reference(
        self,
        external_id: str,
        external_source_name: str,
        text: str,
        *,
        description: Optional[str] = None,
        additional_metadata: Optional[str] = None,
    ) -> str:
        """Save a pointer to external content; text is only used for the embedding."""
        embedding = self.embedding_service.generate_embedding(description or text)
        record = MemoryRecord(
            id=external_id,
            text=None,
            description=description,
            additional_metadata=additional_metadata,
            embedding=embedding.to_list(),
            external_source_name=external_source_name,
            is_reference=True,
        )
        return self._upsert(record)

    def get(self, key: str, *, include_vectors: bool = False) -> Optional[MemoryRecord]:
        """Look up a record by its storage (encoded) key."""
        return self.store.get(
            key,
            GetRecordOptions(collection_name=self.collection_name, include_vectors=include_vectors),
        )

    def get_by_id(self, record_id: str, *, include_vectors: bool = False) -> Optional[MemoryRecord]:
        """Look up a record by its natural id."""
        return self.get(encode_id(record_id), include_vectors=include_vectors)

    def remove(self, key: str) -> None:
        self.store.delete(key, DeleteRecordOptions(collection_name=self.collection_name))

    def search(
        self,
        query: str,
        *,
        limit: int = settings.SEARCH_LIMIT_DEFAULT,
        include_vectors: bool = False,
    ) -> List[MemoryQueryResult]:
        query = (query or "").strip()
        if not query:
            raise ValueError("query must not be empty")

        self.logger.info("Searching memory for %r (limit=%d)", query, limit)
        embedding = self.embedding_service.generate_embedding(query)
        return self.store.vector_search(
            embedding.to_list(),
            SearchOptions(
                collection_name=self.collection_name,
                limit=limit,
                include_vectors=include_vectors,
            ),
        )

    def _upsert(self, record: MemoryRecord) -> str:
        key = self.store.upsert(record, UpsertRecordOptions(collection_name=self.collection_name))
        self.logger.debug("Saved %s as key '%s'", record.short_preview(), key)
        return key
