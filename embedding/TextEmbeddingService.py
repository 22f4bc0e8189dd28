# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: TextEmbeddingService
# -----------------------------------------------------------------------------
import logging
from typing import Any, List, Optional

import numpy as np
from openai import AzureOpenAI, OpenAI, OpenAIError

import settings
from config.Config import Config
from embedding.Embedding import Embedding
from memory.exceptions import ServiceError
from utility.logging_utils import get_class_logger


class TextEmbeddingService:
    """
    Text embedding generation over OpenAI or Azure OpenAI.

    Azure OpenAI is used when an Azure OpenAI key is configured, otherwise
    the OpenAI API directly. Failures are not retried here; they surface as
    ServiceError.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            model_id: Optional[str] = None,
            client: Any = None,
            logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.logger = logger or get_class_logger(self.__class__)
        self.model = model_id or cfg.embedding_model_id or settings.EMBEDDING_MODEL_DEFAULT
        self.client = client or self._init_client()

        self.logger.info(
            "TextEmbeddingService initialised (provider=%s, model=%s)",
            "azure_openai" if cfg.uses_azure_openai else "openai",
            self.model,
        )

    def _init_client(self) -> Any:
        if self.cfg.uses_azure_openai:
            return AzureOpenAI(
                api_key=self.cfg.azure_openai_api_key,
                azure_endpoint=self.cfg.azure_openai_endpoint.rstrip("/"),
                api_version=settings.AZURE_OPENAI_API_VERSION,
            )
        return OpenAI(api_key=self.cfg.openai_api_key)

    def generate_embeddings(self, texts: List[str]) -> List[Embedding]:
        """
        Embed texts in a single request.
        Returns one Embedding per input text, in input order.
        """
        if not texts:
            return []

        self.logger.debug("Requesting %d embeddings from model '%s'", len(texts), self.model)
        try:
            resp = self.client.embeddings.create(model=self.model, input=list(texts))
        except OpenAIError as e:
            self.logger.error("Embedding request failed: %s", e)
            raise ServiceError(f"Embedding generation failed: {e}", service="embedding") from e

        data = sorted(resp.data, key=lambda d: d.index)
        if len(data) != len(texts):
            raise ServiceError(
                f"Embedding count mismatch: {len(data)} != {len(texts)}",
                service="embedding",
            )

        out = [
            Embedding(text=text, vector=np.asarray(d.embedding, dtype=np.float32))
            for text, d in zip(texts, data)
        ]
        self.logger.debug(
            "Generated %d embeddings (dim=%d)", len(out), out[0].dimensions if out else -1
        )
        return out

    def generate_embedding(self, text: str) -> Embedding:
        return self.generate_embeddings([text])[0]
