# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from health.EmbeddingHealth import EmbeddingHealth
from health.SearchHealth import SearchHealth
from utility.logging_utils import get_class_logger


class TestRunner:
    """
    Orchestrates the smoke tests and reports a consolidated result.

    Tests included:
      - SearchHealth    (Azure AI Search reachable)
      - EmbeddingHealth (OpenAI / Azure OpenAI embeddings)
    """

    # Not a pytest test class
    __test__ = False

    def __init__(
        self,
        search_health: SearchHealth,
        embedding_health: EmbeddingHealth,
        logger: Optional[logging.Logger] = None,
    ):
        self.search_health = search_health
        self.embedding_health = embedding_health
        self.logger = logger or get_class_logger(self.__class__)

    # -------------------------------------------------------------------------
    def run_all(self) -> Dict[str, bool]:
        self.logger.info("Starting smoke test suite")

        results: Dict[str, bool] = {}

        self.logger.info("Running SearchHealth.run()")
        results["search_health"] = self.search_health.run()
        self._log_result("SearchHealth", results["search_health"])

        self.logger.info("Running EmbeddingHealth.run()")
        results["embedding_health"] = self.embedding_health.run()
        self._log_result("EmbeddingHealth", results["embedding_health"])

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            status = "PASS" if ok else "FAIL"
            self.logger.info("  %s: %s", name, status)
