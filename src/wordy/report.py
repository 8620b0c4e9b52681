from __future__ import annotations
from typing import Iterable, Iterator, List
from .accumulator import NGramAccumulator
from .models import Grouping

def groupings_report(acc: NGramAccumulator) -> List[Grouping]:
    """Sorted list of every grouping (count descending)."""
    return acc.report()

def top_groupings(report: List[Grouping], top: int) -> List[Grouping]:
    """First `top` rows, or all of them if the report is shorter."""
    fetch = min(max(top, 0), len(report))
    return report[:fetch]

def format_report(rows: Iterable[Grouping]) -> Iterator[str]:
    for r in rows:
        yield r.format()
