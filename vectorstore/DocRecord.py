# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Description: DocRecord
# -----------------------------------------------------------------------------
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence

import numpy as np


@dataclass(frozen=True, eq=False)
class DocRecord:
    """Embedding vector + original segment text + source, as held by a vector store."""
    id: str
    source_id: str
    text: str
    embedding: np.ndarray
    created_at: datetime

    def __post_init__(self) -> None:
        vec = np.array(self.embedding, dtype=np.float32)
        if vec.ndim != 1 or vec.size == 0:
            raise ValueError(f"embedding must be a non-empty 1-d vector, got shape {vec.shape}")
        vec.setflags(write=False)
        object.__setattr__(self, "embedding", vec)

    @classmethod
    def create(
        cls,
        source_id: str,
        text: str,
        embedding: Sequence[float],
        *,
        created_at: Optional[datetime] = None,
    ) -> "DocRecord":
        return cls(
            id=uuid.uuid4().hex,
            source_id=source_id,
            text=text,
            embedding=np.asarray(embedding, dtype=np.float32),
            created_at=created_at or datetime.now(timezone.utc),
        )

    @property
    def dimension(self) -> int:
        return int(self.embedding.shape[0])

    def to_metadata(self) -> Dict[str, Any]:
        """Metadata dict for storage backends; the vector and text are stored separately."""
        return {
            "source_id": self.source_id,
            "created_at": self.created_at.isoformat(),
        }
