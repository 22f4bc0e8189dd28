# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: AzureAISearchVectorRecordStore
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional, Sequence

from azure.core.credentials import AzureKeyCredential
from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.search.documents import SearchClient
from azure.search.documents.indexes import SearchIndexClient
from azure.search.documents.indexes.models import (
    HnswAlgorithmConfiguration,
    SearchableField,
    SearchField,
    SearchFieldDataType,
    SearchIndex,
    SimpleField,
    VectorSearch,
    VectorSearchProfile,
)
from azure.search.documents.models import VectorizedQuery

import settings
from config.Config import Config
from memory.MemoryQueryResult import MemoryQueryResult
from memory.MemoryRecord import MemoryRecord
from memory.RecordDefinition import FieldRole, FieldType, RecordField
from memory.RecordMapper import FlatDocument
from memory.exceptions import ServiceError
from utility.logging_utils import get_class_logger
from vectorstore.RecordOptions import (
    AzureAISearchVectorStoreOptions,
    DeleteRecordOptions,
    GetRecordOptions,
    SearchOptions,
    UpsertRecordOptions,
)
from vectorstore.VectorRecordStore import VectorRecordStore

HNSW_ALGORITHM_NAME = "memory-hnsw"
VECTOR_PROFILE_NAME = "memory-vector-profile"
SCORE_FIELD = "@search.score"


def build_index_client(cfg: Config) -> SearchIndexClient:
    return SearchIndexClient(
        endpoint=cfg.search_endpoint,
        credential=AzureKeyCredential(cfg.search_key),
        user_agent=settings.APPLICATION_ID,
    )


class AzureAISearchVectorRecordStore(VectorRecordStore):
    """
    MemoryRecord storage on Azure AI Search.

    Each collection is an index. Records are converted with the mapper from
    the store options, so keys sent to and returned from the index are the
    encoded ids. Azure errors surface as ServiceError, except a missing
    document on get, which returns None.
    """

    def __init__(
            self,
            index_client: SearchIndexClient,
            options: Optional[AzureAISearchVectorStoreOptions] = None,
            logger: Any = None,
    ) -> None:
        self.index_client = index_client
        self.options = options or AzureAISearchVectorStoreOptions()
        self.definition = self.options.record_definition
        self.mapper = self.options.mapper
        self.logger = logger or get_class_logger(self.__class__)
        self._search_clients: Dict[str, SearchClient] = {}

        self.logger.info(
            "AzureAISearchVectorRecordStore ready (default collection='%s')",
            self.options.default_collection_name,
        )

    # -------------------------------------------------------------------------
    # Clients
    # -------------------------------------------------------------------------
    def _collection(self, options: Any) -> str:
        name = getattr(options, "collection_name", None)
        return name or self.options.default_collection_name

    def _search_client(self, collection_name: str) -> SearchClient:
        client = self._search_clients.get(collection_name)
        if client is None:
            client = self.index_client.get_search_client(collection_name)
            self._search_clients[collection_name] = client
        return client

    def test_connection(self) -> bool:
        try:
            _ = self.list_collections()
            return True
        except ServiceError as e:
            self.logger.error("Azure AI Search connection failed: %s", e)
            return False

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------
    def upsert_document(
            self,
            document: FlatDocument,
            options: Optional[UpsertRecordOptions] = None,
    ) -> str:
        return self._upsert_documents([document], options)[0]

    def upsert(
            self,
            record: MemoryRecord,
            options: Optional[UpsertRecordOptions] = None,
    ) -> str:
        return self.upsert_document(self.mapper.to_storage(record), options)

    def upsert_batch(
            self,
            records: Sequence[MemoryRecord],
            options: Optional[UpsertRecordOptions] = None,
    ) -> List[str]:
        if not records:
            return []
        return self._upsert_documents([self.mapper.to_storage(r) for r in records], options)

    def _upsert_documents(
            self,
            documents: List[FlatDocument],
            options: Optional[UpsertRecordOptions],
    ) -> List[str]:
        collection = self._collection(options)
        self.logger.debug("Upserting %d documents into '%s'", len(documents), collection)

        try:
            results = self._search_client(collection).merge_or_upload_documents(documents=documents)
        except AzureError as e:
            self.logger.error("Upsert into '%s' failed: %s", collection, e)
            raise ServiceError(f"Upsert into '{collection}' failed: {e}", service="search") from e

        failed = [r for r in results if not r.succeeded]
        if failed:
            details = "; ".join(f"{r.key}: {r.error_message}" for r in failed)
            raise ServiceError(
                f"Upsert into '{collection}' failed for {len(failed)} document(s): {details}",
                service="search",
            )

        keys = [r.key for r in results]
        self.logger.info("Upserted %d documents into '%s'", len(keys), collection)
        return keys

    def get_document(
            self,
            key: str,
            options: Optional[GetRecordOptions] = None,
    ) -> Optional[FlatDocument]:
        options = options or GetRecordOptions()
        collection = self._collection(options)
        selected = self.definition.storage_names(include_vectors=options.include_vectors)

        try:
            doc = self._search_client(collection).get_document(key=key, selected_fields=selected)
        except ResourceNotFoundError:
            self.logger.info("No document with key '%s' in '%s'", key, collection)
            return None
        except AzureError as e:
            self.logger.error("Get '%s' from '%s' failed: %s", key, collection, e)
            raise ServiceError(f"Get '{key}' from '{collection}' failed: {e}", service="search") from e

        return dict(doc)

    def get(
            self,
            key: str,
            options: Optional[GetRecordOptions] = None,
    ) -> Optional[MemoryRecord]:
        doc = self.get_document(key, options)
        if doc is None:
            return None
        return self.mapper.from_storage(doc)

    def delete(self, key: str, options: Optional[DeleteRecordOptions] = None) -> None:
        collection = self._collection(options)
        key_name = self.definition.key_field.storage_name

        try:
            self._search_client(collection).delete_documents(documents=[{key_name: key}])
        except AzureError as e:
            self.logger.error("Delete '%s' from '%s' failed: %s", key, collection, e)
            raise ServiceError(f"Delete '{key}' from '{collection}' failed: {e}", service="search") from e

        self.logger.info("Deleted key '%s' from '%s'", key, collection)

    def vector_search(
            self,
            vector: Sequence[float],
            options: Optional[SearchOptions] = None,
    ) -> List[MemoryQueryResult]:
        options = options or SearchOptions()
        collection = self._collection(options)
        vector_field = self.definition.vector_fields[0].storage_name

        query = VectorizedQuery(
            vector=[float(v) for v in vector],
            k_nearest_neighbors=options.limit,
            fields=vector_field,
        )

        try:
            hits = list(
                self._search_client(collection).search(
                    search_text=None,
                    vector_queries=[query],
                    select=self.definition.storage_names(include_vectors=options.include_vectors),
                    top=options.limit,
                )
            )
        except AzureError as e:
            self.logger.error("Vector search on '%s' failed: %s", collection, e)
            raise ServiceError(f"Vector search on '{collection}' failed: {e}", service="search") from e

        results = [
            MemoryQueryResult(record=self.mapper.from_storage(hit), relevance=hit.get(SCORE_FIELD))
            for hit in hits
        ]
        self.logger.info(
            "Vector search on '%s' returned %d results (limit %d)",
            collection,
            len(results),
            options.limit,
        )
        return results

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------
    def list_collections(self) -> List[str]:
        try:
            return list(self.index_client.list_index_names())
        except AzureError as e:
            raise ServiceError(f"Listing indexes failed: {e}", service="search") from e

    def collection_exists(self, collection_name: Optional[str] = None) -> bool:
        name = collection_name or self.options.default_collection_name
        try:
            self.index_client.get_index(name)
            return True
        except ResourceNotFoundError:
            return False
        except AzureError as e:
            raise ServiceError(f"Checking index '{name}' failed: {e}", service="search") from e

    def create_collection(
            self,
            dimensions: int = settings.EMBEDDING_DIMENSIONS_DEFAULT,
            collection_name: Optional[str] = None,
    ) -> None:
        name = collection_name or self.options.default_collection_name
        index = SearchIndex(
            name=name,
            fields=[self._build_index_field(f, dimensions) for f in self.definition.fields],
            vector_search=VectorSearch(
                algorithms=[HnswAlgorithmConfiguration(name=HNSW_ALGORITHM_NAME)],
                profiles=[
                    VectorSearchProfile(
                        name=VECTOR_PROFILE_NAME,
                        algorithm_configuration_name=HNSW_ALGORITHM_NAME,
                    )
                ],
            ),
        )

        self.logger.info("Creating index '%s' (dimensions=%d)", name, dimensions)
        try:
            self.index_client.create_index(index)
        except AzureError as e:
            raise ServiceError(f"Creating index '{name}' failed: {e}", service="search") from e

    def create_collection_if_not_exists(
            self,
            dimensions: int = settings.EMBEDDING_DIMENSIONS_DEFAULT,
            collection_name: Optional[str] = None,
    ) -> bool:
        """Returns True if the index was created."""
        if self.collection_exists(collection_name):
            return False
        self.create_collection(dimensions=dimensions, collection_name=collection_name)
        return True

    def delete_collection(self, collection_name: Optional[str] = None) -> None:
        name = collection_name or self.options.default_collection_name
        try:
            self.index_client.delete_index(name)
        except AzureError as e:
            raise ServiceError(f"Deleting index '{name}' failed: {e}", service="search") from e
        self._search_clients.pop(name, None)
        self.logger.info("Deleted index '%s'", name)

    @staticmethod
    def _build_index_field(f: RecordField, dimensions: int) -> SearchField:
        if f.role is FieldRole.KEY:
            # Not filterable to save quota; lookups go by key
            return SimpleField(name=f.storage_name, type=SearchFieldDataType.String, key=True)

        if f.role is FieldRole.VECTOR:
            return SearchField(
                name=f.storage_name,
                type=SearchFieldDataType.Collection(SearchFieldDataType.Single),
                searchable=True,
                vector_search_dimensions=dimensions,
                vector_search_profile_name=VECTOR_PROFILE_NAME,
            )

        if f.field_type is FieldType.BOOLEAN:
            return SimpleField(name=f.storage_name, type=SearchFieldDataType.Boolean, filterable=True)

        if f.is_full_text_searchable:
            return SearchableField(name=f.storage_name, type=SearchFieldDataType.String)

        return SimpleField(name=f.storage_name, type=SearchFieldDataType.String, filterable=True)
