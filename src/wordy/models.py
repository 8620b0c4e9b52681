from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

class ScanState(Enum):
    NEED_MORE = "need_more"     # buffer ended mid-word, supply more bytes
    WORD = "word"               # whitespace-terminated word
    FINAL_WORD = "final_word"   # unterminated word at end of input
    SKIP = "skip"               # bytes consumed, nothing to emit

@dataclass(frozen=True)
class ScanResult:
    advance: int                # bytes consumed from the start of the buffer
    token: Optional[bytes]      # letter bytes only, never empty
    state: ScanState

@dataclass(frozen=True)
class Grouping:
    grouping: str               # space-joined words
    count: int

    def format(self) -> str:
        return f"{self.count} - {self.grouping}"
