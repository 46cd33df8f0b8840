# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-06
# Description: ContextAssembler
# -----------------------------------------------------------------------------
import logging
from typing import List, Optional, Sequence

from ranking.ScoredRecord import ScoredRecord
from utility.logging_utils import get_class_logger


class ContextAssembler:
    """
    Formats ranked records into the context block handed to the answer model:
    one "source_id: text" line per record, in ranking order.
    """

    def __init__(self, *, max_chars: Optional[int] = None, logger: logging.Logger | None = None):
        if max_chars is not None and max_chars <= 0:
            raise ValueError(f"max_chars ({max_chars}) must be > 0")
        self.max_chars = max_chars
        self.logger = logger or get_class_logger(self.__class__)

    @staticmethod
    def format_line(scored: ScoredRecord) -> str:
        return f"{scored.record.source_id}: {scored.record.text}"

    def assemble(self, scored: Sequence[ScoredRecord]) -> str:
        lines: List[str] = []
        total = 0

        for item in scored:
            line = self.format_line(item)
            added = len(line) + (1 if lines else 0)

            # the first line is always kept so a long top hit is never dropped
            if self.max_chars is not None and lines and total + added > self.max_chars:
                self.logger.warning(
                    "assemble: truncating context at %d/%d records (%d chars, limit=%d)",
                    len(lines),
                    len(scored),
                    total,
                    self.max_chars,
                )
                break

            lines.append(line)
            total += added

        return "\n".join(lines)
