# catalog/expansion.py
"""
Expansion State Tracker: which group headers are drawn open.

Keys are group labels, plus "unit|size" composite keys for size subgroups
(see grouping.group_keys). Whenever the grouping mode or the set of keys
changes, every key is reseeded to open and stale keys are dropped; unknown
keys read as open.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional

log = logging.getLogger(__name__)


class ExpansionState:
    def __init__(self) -> None:
        self._expanded: Dict[str, bool] = {}
        self._mode: Optional[str] = None

    # --- Seeding ---

    def reset(self, keys: Iterable[str]) -> None:
        """Open every key in `keys` and forget everything else."""
        self._expanded = {key: True for key in keys}

    def sync(self, mode: str, keys: Iterable[str]) -> bool:
        """
        Reseed when the mode or the key set differs from the last sync.

        Returns True if a reset happened. A reset discards any per-key
        collapse the user made, even for labels that survived the change.
        A product edit that leaves the key set unchanged keeps collapses.
        """
        keys = list(keys)
        if mode == self._mode and set(keys) == set(self._expanded):
            return False
        self._mode = mode
        self.reset(keys)
        log.debug("expansion reset for mode %s (%d keys)", mode, len(keys))
        return True

    # --- Queries ---

    @property
    def mode(self) -> Optional[str]:
        return self._mode

    @property
    def keys(self):
        return list(self._expanded)

    def is_expanded(self, key: str) -> bool:
        return self._expanded.get(key, True)

    @property
    def all_expanded(self) -> bool:
        return bool(self._expanded) and all(self._expanded.values())

    # --- Mutations ---

    def toggle(self, key: str) -> bool:
        """Flip one key; returns its new state."""
        self._expanded[key] = not self.is_expanded(key)
        return self._expanded[key]

    def set_all(self, expanded: bool) -> None:
        for key in self._expanded:
            self._expanded[key] = expanded

    def expand_all(self) -> None:
        self.set_all(True)

    def collapse_all(self) -> None:
        self.set_all(False)

    def toggle_all(self) -> bool:
        """Collapse everything if all keys are open, otherwise open everything."""
        target = not self.all_expanded
        self.set_all(target)
        return target

    # --- Serialization ---

    def to_dict(self) -> Dict[str, bool]:
        return dict(self._expanded)

    @classmethod
    def from_dict(cls, mapping: Mapping[str, bool], mode: Optional[str] = None) -> "ExpansionState":
        state = cls()
        state._expanded = {str(k): bool(v) for k, v in mapping.items()}
        state._mode = mode
        return state
