from __future__ import annotations

from typing import Iterable

from moto_specs.domain.motorcycle import Motorcycle
from moto_specs.ports.motorcycle_source import FetchResult, MotorcycleSource


class InMemoryMotorcycleSource(MotorcycleSource):
    """
    Canonical source implementation for tests and local development.

    - Serves motorcycles in insertion order
    - Can be told to fail with a fixed message
    - Counts fetches so callers can assert on re-fetch behavior
    """

    def __init__(self, motorcycles: Iterable[Motorcycle], fail_with: str | None = None) -> None:
        self._motorcycles = tuple(motorcycles)
        self._fail_with = fail_with
        self.fetch_count = 0

    def fetch(self) -> FetchResult:
        self.fetch_count += 1
        if self._fail_with is not None:
            return FetchResult.failure(self._fail_with)
        return FetchResult.success(self._motorcycles)
