from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from moto_specs.domain.motorcycle import Dataset


@dataclass(frozen=True, slots=True)
class FetchResult:
    """
    Outcome of one fetch: either a dataset or a user-facing failure message.

    Transport details (status codes, headers) never cross this boundary.
    """

    dataset: Dataset | None = None
    error: str | None = None

    @classmethod
    def success(cls, dataset: Dataset) -> FetchResult:
        return cls(dataset=tuple(dataset))

    @classmethod
    def failure(cls, message: str) -> FetchResult:
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.dataset is not None


class MotorcycleSource(ABC):
    """
    Port for retrieving the motorcycle dataset.

    Contract:
        - fetch() resolves exactly once per call
        - fetch() reports problems through FetchResult.failure, never by raising
        - the returned dataset preserves the source's order
    """

    @abstractmethod
    def fetch(self) -> FetchResult:
        """
        Retrieve the full dataset.

        Returns:
            FetchResult with either the dataset or an error message
        """
        ...
