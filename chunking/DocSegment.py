# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-02
# Description: DocSegment
# -----------------------------------------------------------------------------
from dataclasses import dataclass


@dataclass(frozen=True)
class DocSegment:
    """
    A bounded slice of one source document, produced by DocChunker before embedding.
    char_start/char_end locate the window in the original text (before whitespace trimming).
    """

    source_id: str
    text: str
    ordinal: int
    char_start: int
    char_end: int
