# wordy/tokenizer.py
from __future__ import annotations

import io
import logging
import unicodedata
from typing import BinaryIO, Callable, Iterator, Tuple

from .config import CHUNK_SIZE, MAX_TOKEN_SIZE
from .models import ScanResult, ScanState

log = logging.getLogger(__name__)

RUNE_ERROR = "\ufffd"

# Latin-1 white space; above U+00FF the Z* categories decide
_LATIN1_SPACE = frozenset("\t\n\v\f\r \x85\xa0")

SplitFunc = Callable[[bytes, bool], ScanResult]


def _decode_rune(data: bytes, i: int) -> Tuple[str, int]:
    """Decode one UTF-8 code point at data[i]; invalid or truncated input is (U+FFFD, 1)."""
    b0 = data[i]
    if b0 < 0x80:
        return chr(b0), 1
    if 0xC2 <= b0 <= 0xDF:
        n = 2
    elif 0xE0 <= b0 <= 0xEF:
        n = 3
    elif 0xF0 <= b0 <= 0xF4:
        n = 4
    else:
        return RUNE_ERROR, 1
    if i + n > len(data):
        return RUNE_ERROR, 1
    try:
        return bytes(data[i:i + n]).decode("utf-8"), n
    except UnicodeDecodeError:
        return RUNE_ERROR, 1


def is_space(ch: str) -> bool:
    if ch in _LATIN1_SPACE:
        return True
    return ord(ch) > 0xFF and unicodedata.category(ch) in ("Zs", "Zl", "Zp")


def is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def scan_words(data: bytes, at_eof: bool) -> ScanResult:
    """
    Split function for Scanner: returns the next space-separated word of `data`
    with everything but letters removed. Never returns an empty token.

    Results:
      * WORD:       word ended by white space; advance covers the space too
      * SKIP:       a run without letters was consumed (or trailing bytes at EOF)
      * FINAL_WORD: unterminated word at EOF; the whole buffer is consumed
      * NEED_MORE:  buffer ended mid-word; advance covers only leading spaces
    """
    n = len(data)

    # Skip leading spaces.
    start = 0
    while start < n:
        ch, width = _decode_rune(data, start)
        if not is_space(ch):
            break
        start += width

    # Scan until space, marking end of word.
    word = bytearray()
    i = start
    while i < n:
        ch, width = _decode_rune(data, i)
        if is_space(ch):
            if word:
                return ScanResult(i + width, bytes(word), ScanState.WORD)
            return ScanResult(i + width, None, ScanState.SKIP)

        # Letters win over punctuation; digits, symbols and punctuation are consumed but dropped.
        if is_letter(ch):
            word += data[i:i + width]
        i += width

    if at_eof:
        if word:
            return ScanResult(n, bytes(word), ScanState.FINAL_WORD)
        return ScanResult(n, None, ScanState.SKIP)

    # Request more data.
    return ScanResult(start, None, ScanState.NEED_MORE)


class Scanner:
    """
    Pulls bytes from a binary stream and feeds a growing buffer to a split
    function (scan_words by default), yielding decoded words lazily.
    """

    def __init__(self,
                 stream: BinaryIO,
                 *,
                 split: SplitFunc = scan_words,
                 chunk_size: int = CHUNK_SIZE,
                 max_token_size: int = MAX_TOKEN_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._stream = stream
        self._split = split
        self.chunk_size = chunk_size
        self.max_token_size = max_token_size
        self.bytes_read = 0
        self.words = 0

    def __iter__(self) -> Iterator[str]:
        buf = b""
        pos = 0
        eof = False
        while True:
            if eof and pos >= len(buf):
                log.debug("scanner done: bytes=%d words=%d", self.bytes_read, self.words)
                return

            if pos < len(buf):
                res = self._split(memoryview(buf)[pos:], eof)
                pos += res.advance
                if res.token is not None:
                    self.words += 1
                    yield res.token.decode("utf-8")
                    continue
                if res.state is not ScanState.NEED_MORE:
                    continue

            if len(buf) - pos >= self.max_token_size:
                raise ValueError(f"token too long (> {self.max_token_size} bytes)")

            chunk = self._stream.read(self.chunk_size)
            if not chunk:
                eof = True
                continue
            self.bytes_read += len(chunk)
            buf = buf[pos:] + chunk
            pos = 0


def iter_words(stream: BinaryIO, *, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    """Yield raw (not yet lowercased) words from a binary stream."""
    return iter(Scanner(stream, chunk_size=chunk_size))


def iter_words_from_text(text: str) -> Iterator[str]:
    """Convenience: scan an in-memory string."""
    return iter_words(io.BytesIO(text.encode("utf-8")))
