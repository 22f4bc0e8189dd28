# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from functools import lru_cache

import settings
from config.Config import Config
from embedding.TextEmbeddingService import TextEmbeddingService
from health.EmbeddingHealth import EmbeddingHealth
from health.SearchHealth import SearchHealth
from health.TestRunner import TestRunner
from services.HealthService import HealthService
from services.SemanticMemoryService import SemanticMemoryService
from utility.logging_utils import get_logger
from vectorstore.AzureAISearchVectorRecordStore import (
    AzureAISearchVectorRecordStore,
    build_index_client,
)
from vectorstore.RecordOptions import AzureAISearchVectorStoreOptions

logger = get_logger(__name__)


class AppContainer:
    """
    Owns client construction and application wiring.
    Built once per process; FastAPI dependencies and the demo script share it.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        # Configuration
        self.cfg = cfg or Config.from_env()
        logger.info("Config loaded: %s", self.cfg.summary())

        # Core infrastructure
        self.embedding_service = TextEmbeddingService(cfg=self.cfg)
        self.index_client = build_index_client(self.cfg)
        self.store = AzureAISearchVectorRecordStore(
            index_client=self.index_client,
            options=AzureAISearchVectorStoreOptions(
                default_collection_name=settings.MEMORY_COLLECTION_DEFAULT,
            ),
        )

        if settings.CREATE_COLLECTION_ON_START:
            self.store.create_collection_if_not_exists(
                dimensions=settings.EMBEDDING_DIMENSIONS_DEFAULT
            )

        # Smoke tests / health
        self.test_runner = TestRunner(
            search_health=SearchHealth(self.cfg, index_client=self.index_client),
            embedding_health=EmbeddingHealth(
                self.embedding_service,
                expected_dim=settings.EMBEDDING_DIMENSIONS_DEFAULT,
            ),
        )
        self.health_service = HealthService(test_runner=self.test_runner)

        self.memory_service = SemanticMemoryService(
            store=self.store,
            embedding_service=self.embedding_service,
            source_name=settings.SOURCE_NAME_DEFAULT,
        )


@lru_cache
def get_app_container() -> AppContainer:
    return AppContainer()
