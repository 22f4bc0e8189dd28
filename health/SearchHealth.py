# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: SearchHealth
# -----------------------------------------------------------------------------
import logging
from typing import List, Optional

from azure.core.exceptions import AzureError
from azure.search.documents.indexes import SearchIndexClient

import settings
from config.Config import Config
from utility.logging_utils import get_class_logger
from vectorstore.AzureAISearchVectorRecordStore import build_index_client


class SearchHealth:
    """Checks the search service is reachable and reports whether the memory index exists."""

    def __init__(
        self,
        cfg: Config,
        index_client: Optional[SearchIndexClient] = None,
        collection_name: str = settings.MEMORY_COLLECTION_DEFAULT,
        logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.collection_name = collection_name
        self.logger = logger or get_class_logger(self.__class__)
        self.index_client = index_client or build_index_client(cfg)

    def list_indexes(self) -> List[str]:
        return list(self.index_client.list_index_names())

    def run(self) -> bool:
        try:
            indexes = self.list_indexes()
        except AzureError as e:
            self.logger.exception("Search healthcheck FAILED: %s", e)
            return False

        self.logger.info("Search service reachable, %d indexes returned", len(indexes))
        if self.collection_name not in indexes:
            self.logger.warning("Memory index '%s' is not defined yet", self.collection_name)
        return True


if __name__ == "__main__":
    cfg = Config.from_env()
    sh = SearchHealth(cfg)
    try:
        indexes = sh.list_indexes()
        print("Search indexes:", indexes)
        if indexes:
            print("SearchHealth: service reachable, indexes returned.")
        else:
            print("SearchHealth: service reachable, but no indexes defined yet.")
    except AzureError as e:
        print("SearchHealth: failed to list indexes:", e)
