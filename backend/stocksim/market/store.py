"""Holder for the currently published MarketDataset."""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock

from .models import MarketDataset

logger = logging.getLogger(__name__)


class DatasetStore:
    """Publishes immutable MarketDataset snapshots by swapping one reference.

    Writers: regenerate() / publish(), serialized by a lock.
    Readers: QueryService and the HTTP layer. They read ``snapshot`` without
    locking and always get either the old or the new dataset in full.
    """

    def __init__(self, builder: Callable[[], MarketDataset]) -> None:
        self._builder = builder
        self._lock = Lock()
        self._version: int = 0  # Bumped on every publish
        self._snapshot: MarketDataset | None = None

    @property
    def snapshot(self) -> MarketDataset:
        """Current dataset. Builds the first one lazily."""
        snapshot = self._snapshot
        if snapshot is None:
            with self._lock:
                if self._snapshot is None:
                    self._publish_locked(self._builder())
                snapshot = self._snapshot
        return snapshot

    def regenerate(self) -> MarketDataset:
        """Build a fresh dataset and publish it.

        If the build raises, the previously published snapshot stays in place.
        """
        with self._lock:
            # The builder owns the random source; only one thread draws from it
            dataset = self._builder()
            self._publish_locked(dataset)
            return dataset

    def publish(self, dataset: MarketDataset) -> None:
        """Replace the current snapshot with an already built one."""
        with self._lock:
            self._publish_locked(dataset)

    def _publish_locked(self, dataset: MarketDataset) -> None:
        self._snapshot = dataset
        self._version += 1
        logger.info(
            "Published dataset v%d: %d instruments, %d rate tables",
            self._version,
            len(dataset),
            len(dataset.exchange_rates_by_kind),
        )

    @property
    def version(self) -> int:
        """Number of snapshots published so far. 0 before the first build."""
        return self._version

    @property
    def is_built(self) -> bool:
        return self._snapshot is not None
