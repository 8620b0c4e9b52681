# wordy/engine.py
from __future__ import annotations

import logging
import time
from typing import BinaryIO, Iterable, List, Optional

from . import config as CFG
from .accumulator import NGramAccumulator
from .models import Grouping
from .report import groupings_report, top_groupings
from .tokenizer import Scanner, iter_words_from_text

log = logging.getLogger(__name__)


def count_groupings(words: Iterable[str], group_size: int,
                    acc: Optional[NGramAccumulator] = None) -> NGramAccumulator:
    """Lowercase each word, drop empty ones and feed them to an accumulator."""
    acc = acc if acc is not None else NGramAccumulator(group_size)
    for w in words:
        word = w.lower()
        if word:
            acc.add(word)
    return acc


class Engine:
    """
    Thin orchestration layer that glues together:
      - the word Scanner (bytes -> words),
      - the NGramAccumulator (words -> grouping counts),
      - the report step (sort + truncate to `top`).

    Public API (used by CLI/Flask):
      * feed_stream(stream): scan a binary stream to exhaustion
      * feed_text(text):     scan an in-memory string
      * report():            every grouping, count descending
      * top():               report() truncated to `top` rows
    """

    def __init__(self, group_size: int = CFG.GROUPING, top: int = CFG.TOP, *,
                 chunk_size: int = CFG.CHUNK_SIZE, verbose: bool = False) -> None:
        if group_size < 1:
            raise ValueError(f"group size must be >= 1 (got {group_size})")
        if top < 0:
            raise ValueError(f"top must be >= 0 (got {top})")
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

        self.group_size = group_size
        self.top_k = top
        self.chunk_size = chunk_size
        self.acc = NGramAccumulator(group_size)
        self.words = 0

    # /* ~~~ Scan a byte stream to exhaustion and count its groupings ~~~ */
    def feed_stream(self, stream: BinaryIO) -> int:
        t0 = time.perf_counter()
        scanner = Scanner(stream, chunk_size=self.chunk_size)
        before = self.acc.completed
        count_groupings(self._counted(scanner), self.group_size, self.acc)
        log.info("scanned %d bytes, %d words, %d groupings in %.2fs",
                 scanner.bytes_read, scanner.words, self.acc.completed - before,
                 time.perf_counter() - t0)
        return scanner.words

    def feed_text(self, text: str) -> int:
        before = self.words
        count_groupings(self._counted(iter_words_from_text(text)), self.group_size, self.acc)
        return self.words - before

    # ------------- query -------------

    def report(self) -> List[Grouping]:
        return groupings_report(self.acc)

    def top(self, k: Optional[int] = None) -> List[Grouping]:
        return top_groupings(self.report(), self.top_k if k is None else k)

    # ------------- internals -------------

    def _counted(self, words: Iterable[str]) -> Iterable[str]:
        for w in words:
            self.words += 1
            yield w
