"""Holder of the current dataset snapshot and its load lifecycle."""

from __future__ import annotations

import logging
import threading
from enum import Enum

from moto_specs.domain.errors import DataSourceUnavailableError, DatasetNotLoadedError
from moto_specs.domain.motorcycle import Dataset
from moto_specs.ports.motorcycle_source import FetchResult, MotorcycleSource

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class DatasetStore:
    """
    Keeps the dataset the query engine reads from.

    Lifecycle: IDLE -> LOADING -> LOADED | ERROR, restarting at LOADING on
    every refresh. Each load gets a ticket; only the newest ticket may
    complete, so a slow fetch that finishes after a newer one was issued
    is discarded instead of overwriting fresher data.

    Access is lock-protected because FastAPI serves sync routes from a
    threadpool. The dataset itself is an immutable tuple, so readers can
    use a snapshot without holding the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._dataset: Dataset | None = None
        self._error: str | None = None
        self._state = LoadState.IDLE
        self._latest_ticket = 0

    @property
    def state(self) -> LoadState:
        with self._lock:
            return self._state

    def begin_load(self) -> int:
        with self._lock:
            self._latest_ticket += 1
            self._state = LoadState.LOADING
            return self._latest_ticket

    def complete_load(self, ticket: int, result: FetchResult) -> bool:
        """
        Apply a fetch result if it belongs to the newest load.

        Args:
            ticket: Value returned by begin_load() for this fetch
            result: Outcome of the fetch

        Returns:
            True if applied, False if the load was superseded
        """
        with self._lock:
            if ticket != self._latest_ticket:
                logger.info(
                    "Discarding superseded load",
                    extra={"ticket": ticket, "latest_ticket": self._latest_ticket},
                )
                return False

            if result.ok:
                self._dataset = result.dataset
                self._error = None
                self._state = LoadState.LOADED
            else:
                self._error = result.error
                self._state = LoadState.ERROR
            return True

    def refresh(self, source: MotorcycleSource) -> tuple[FetchResult, bool]:
        """
        Run one fetch as a new load.

        Returns:
            The fetch result and whether the store applied it (False when a
            newer load started while this one was fetching)
        """
        ticket = self.begin_load()
        result = source.fetch()
        applied = self.complete_load(ticket, result)
        return result, applied

    def snapshot(self) -> Dataset:
        """
        Current dataset for the query engine.

        While a refresh is in flight the previous dataset keeps being served.

        Raises:
            DataSourceUnavailableError: If the latest load failed
            DatasetNotLoadedError: If no dataset has been loaded yet
        """
        with self._lock:
            if self._state is LoadState.ERROR:
                raise DataSourceUnavailableError(self._error or "Failed to fetch motorcycles")
            if self._dataset is None:
                raise DatasetNotLoadedError(state=self._state.value)
            return self._dataset
