"""Favorite runs, persisted as a set of compact storage forms."""

import logging

from runulator.errors import RunulatorError
from runulator.factory.storage import from_storage_form, to_storage_form
from runulator.models import Run
from .base import KeyValueStore

logger = logging.getLogger(__name__)

KEY_RUNS = "runs"


class FavoriteRuns:
    """
    The user's favorite runs.

    Each run is stored with only the two parameters it was entered with, so a loaded
    favorite knows which input pair to reselect (`Run.parameters`). Membership uses
    run equality (distance and duration).
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _records(self) -> set[str]:
        return set(self.store.get(KEY_RUNS) or set())

    def _entries(self) -> list[tuple[str, Run]]:
        entries = []
        for record in self._records():
            try:
                entries.append((record, from_storage_form(record)))
            except RunulatorError as e:
                logger.warning(f"Skipping unreadable favorite {record!r}: {e.message}")
        entries.sort(key=lambda entry: (entry[1].distance, entry[1].duration))
        return entries

    def runs(self) -> list[Run]:
        """All readable favorites, ordered by distance and duration."""
        return [run for _, run in self._entries()]

    def load(self, index: int) -> Run:
        """The favorite at `index` of `runs()`."""
        return self.runs()[index]

    def contains(self, run: Run) -> bool:
        return run in self.runs()

    def __contains__(self, run: Run) -> bool:
        return self.contains(run)

    def __len__(self) -> int:
        return len(self._entries())

    def add(self, run: Run) -> None:
        if self.contains(run):
            logger.debug(f"Run is already a favorite: {run!r}")
            return
        records = self._records()
        records.add(to_storage_form(run, compact=True))
        self.store.set(KEY_RUNS, records)
        logger.info(f"Added favorite run {run.get_distance()} km in {run.get_duration()}")

    def remove(self, run: Run) -> None:
        """Remove the run. Unreadable records are left alone."""
        matching = {record for record, favorite in self._entries() if favorite == run}
        if not matching:
            return
        self.store.set(KEY_RUNS, self._records() - matching)
        logger.info(
            f"Removed favorite run {run.get_distance()} km in {run.get_duration()}"
        )

    def toggle(self, run: Run) -> bool:
        """Add the run if it's not a favorite, remove it otherwise. True if added."""
        if self.contains(run):
            self.remove(run)
            return False
        self.add(run)
        return True
