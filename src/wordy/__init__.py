"""
wordy: most frequent word groupings (n-grams) in a text stream.

Words are letters-only runs between white space (punctuation, digits and
symbols are dropped), lowercased, then counted in overlapping groups of
`group_size` consecutive words.

Example Usage:
    from wordy import Engine

    eng = Engine(group_size=3, top=10)
    with open("book.txt", "rb") as f:
        eng.feed_stream(f)
    for row in eng.top():
        print(row.format())     # "<count> - <grouping>"
"""

# src/wordy/__init__.py
from .accumulator import NGramAccumulator
from .engine import Engine, count_groupings
from .models import Grouping, ScanResult, ScanState
from .tokenizer import Scanner, scan_words, iter_words

__version__ = "1.0.0"
__all__ = [
    "Engine", "NGramAccumulator", "Grouping", "ScanResult", "ScanState",
    "Scanner", "count_groupings", "iter_words", "scan_words",
]
