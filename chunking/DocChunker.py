# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-02
# Description: DocChunker
# -----------------------------------------------------------------------------
import logging
import re
from typing import List

from chunking.DocSegment import DocSegment
from utility.logging_utils import get_class_logger

PARAGRAPH_BREAK = "\n\n"
SENTENCE_END = re.compile(r"[.!?][\"')\]]*\s+")


class DocChunker:
    """
    Splits raw document text into bounded, overlapping DocSegment objects.

    Windows hold at most `max_len` characters. A window that stops short of the
    end of the text is cut at the last paragraph break, else the last sentence
    end, else the last whitespace, else exactly at `max_len`. The next window
    starts `overlap` characters before the end of the previous one.
    """

    def __init__(
        self,
        *,
        max_len: int = 1000,
        overlap: int = 200,
        logger: logging.Logger | None = None,
    ):
        if max_len <= 0:
            raise ValueError(f"max_len ({max_len}) must be > 0")

        # guard against bad config that can cause infinite loops
        if overlap < 0 or overlap >= max_len:
            raise ValueError(f"overlap ({overlap}) must be >= 0 and < max_len ({max_len})")

        self.max_len = max_len
        self.overlap = overlap
        self.logger = logger or get_class_logger(self.__class__)

    def split(self, text: str, source_id: str = "") -> List[DocSegment]:
        if not text or not text.strip():
            self.logger.warning("No text to chunk for source_id=%r", source_id)
            return []

        n = len(text)
        segments: List[DocSegment] = []
        start = 0

        while start < n:
            end = min(start + self.max_len, n)
            if end < n:
                end = self._find_break(text, start, end)

            piece = text[start:end].strip()
            if piece:
                segments.append(
                    DocSegment(
                        source_id=source_id,
                        text=piece,
                        ordinal=len(segments),
                        char_start=start,
                        char_end=end,
                    )
                )

            if end >= n:
                break

            start = end - self.overlap

        if segments:
            avg_len = sum(len(s.text) for s in segments) / len(segments)
            self.logger.info(
                "Chunked source_id=%r: chars=%d segments=%d avg_len=%.1f (max_len=%d overlap=%d)",
                source_id,
                n,
                len(segments),
                avg_len,
                self.max_len,
                self.overlap,
            )
        else:
            self.logger.warning("No segments produced for source_id=%r", source_id)

        return segments

    def _find_break(self, text: str, start: int, end: int) -> int:
        """
        Pick the end of the window [start, end). The returned cut is always
        > start + overlap so the following window starts after `start`.
        """
        floor = start + self.overlap + 1

        idx = text.rfind(PARAGRAPH_BREAK, start, end)
        if idx != -1 and idx + len(PARAGRAPH_BREAK) >= floor:
            return idx + len(PARAGRAPH_BREAK)

        sentence_cut = -1
        for m in SENTENCE_END.finditer(text, start, end):
            sentence_cut = m.end()
        if sentence_cut >= floor:
            return sentence_cut

        for i in range(end - 1, floor - 2, -1):
            if text[i].isspace():
                return i + 1

        return end
