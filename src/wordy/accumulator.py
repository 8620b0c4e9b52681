# wordy/accumulator.py
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping

from .models import Grouping

log = logging.getLogger(__name__)


class NGramAccumulator:
    """
    Counts every contiguous run of `group_size` words in a token stream.

    Keeps `group_size` windows, each started one token after the previous
    one (slot `next_slot` rotates). Every started window receives each new
    token; a window that reaches `group_size` tokens is joined into a
    grouping, counted and emptied so its slot can be restarted.

    group_size is not validated here: 0 makes every window complete as ""
    (callers such as Engine reject it).
    """

    def __init__(self, group_size: int) -> None:
        self.group_size = group_size
        self.next_slot = 0
        self.completed = 0
        self._windows: List[List[str]] = [[] for _ in range(group_size)]
        self._groupings: Dict[str, int] = {}

    # /* ~~~ add one (already lowercased, non-empty) word ~~~ */
    def add(self, token: str) -> None:
        for i, window in enumerate(self._windows):
            # Started windows take every token until they complete.
            if window:
                window.append(token)

            if len(window) == self.group_size:
                self._complete(i)

        # Start a fresh window; only a single-word window can complete right away.
        if self._windows:
            self._windows[self.next_slot].append(token)
            if len(self._windows[self.next_slot]) == self.group_size:
                self._complete(self.next_slot)

        if log.isEnabledFor(logging.DEBUG):
            log.debug("adding word %r on token group: %d >> %r", token, self.next_slot, self._windows)

        self.next_slot += 1
        if self.next_slot >= self.group_size:
            self.next_slot = 0

    def _complete(self, slot: int) -> None:
        grouping = " ".join(self._windows[slot])
        self._groupings[grouping] = self._groupings.get(grouping, 0) + 1
        self.completed += 1
        self._windows[slot] = []

    @property
    def groupings(self) -> Mapping[str, int]:
        """Read-only view of grouping -> count."""
        return MappingProxyType(self._groupings)

    @property
    def windows(self) -> List[List[str]]:
        """Copy of the in-progress windows, by slot."""
        return [list(w) for w in self._windows]

    def report(self) -> List[Grouping]:
        """All groupings, highest count first; ties keep first-seen order."""
        rows = [Grouping(g, c) for g, c in self._groupings.items()]
        rows.sort(key=lambda r: r.count, reverse=True)
        return rows

    def __len__(self) -> int:
        return len(self._groupings)
