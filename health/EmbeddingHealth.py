# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

import settings
from config.Config import Config
from embedding.TextEmbeddingService import TextEmbeddingService
from memory.exceptions import ServiceError
from utility.logging_utils import get_class_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding service.

    Verifies:
      - The embedding API call completes successfully
      - The response contains a valid vector
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedding_service: TextEmbeddingService,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedding_service = embedding_service
        self.expected_dim = expected_dim
        self.logger = logger or get_class_logger(self.__class__)

    def run(self) -> bool:
        """
        Run the embedding smoke test.

        Returns:
            True if the embedding call succeeds and (optionally) the dimension matches.
        """
        test_text = "Semantic memory embedding healthcheck"
        self.logger.info("Running embedding healthcheck using model: %s", self.embedding_service.model)

        try:
            start = time.time()
            embedding = self.embedding_service.generate_embedding(test_text)
            elapsed_ms = (time.time() - start) * 1000.0
        except ServiceError as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False

        dim = embedding.dimensions
        if dim == 0:
            self.logger.error("No embedding data returned in response.")
            return False

        self.logger.info("Embedding call succeeded in %.1f ms. Returned dimension: %d", elapsed_ms, dim)

        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning("Dimension mismatch: expected %d, got %d.", self.expected_dim, dim)
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True


if __name__ == "__main__":
    cfg = Config.from_env()

    # Expected dimensions for models:
    # - text-embedding-ada-002 -> 1536
    # - text-embedding-3-small -> 1536
    # - text-embedding-3-large -> 3072
    eh = EmbeddingHealth(TextEmbeddingService(cfg), expected_dim=settings.EMBEDDING_DIMENSIONS_DEFAULT)
    ok = eh.run()

    eh.logger.info("EmbeddingHealth result: %s", "PASS" if ok else "FAIL")
