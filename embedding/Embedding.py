# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: Embedding
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass
class Embedding:
    """Embedding vector (float32) + the text it was generated from."""
    text: str
    vector: np.ndarray

    @property
    def dimensions(self) -> int:
        return int(self.vector.shape[0])

    def to_list(self) -> List[float]:
        return [float(v) for v in self.vector]
