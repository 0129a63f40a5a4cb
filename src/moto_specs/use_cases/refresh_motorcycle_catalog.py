"""Refresh motorcycle catalog use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from moto_specs.infra.dataset_store import DatasetStore
from moto_specs.ports.motorcycle_source import MotorcycleSource

logger = logging.getLogger(__name__)

SUPERSEDED_MESSAGE = "Refresh superseded by a newer load"


@dataclass(frozen=True, slots=True)
class RefreshMotorcycleCatalogResponse:
    loaded: bool
    count: int = 0
    error: str | None = None


class RefreshMotorcycleCatalog:
    """
    Re-fetch the dataset from its source.

    Responsibilities:
    - Run one fetch through the dataset store (which owns the load lifecycle)
    - Report the outcome; a fetch failure is an outcome, not an exception
    - Report loaded=False when the store discarded the fetch as superseded
    """

    def __init__(self, dataset_store: DatasetStore, source: MotorcycleSource) -> None:
        """
        Initialize use case with dependencies.

        Args:
            dataset_store: Store that receives the fetched dataset
            source: Where motorcycles are fetched from
        """
        self._dataset_store = dataset_store
        self._source = source

    def execute(self) -> RefreshMotorcycleCatalogResponse:
        result, applied = self._dataset_store.refresh(self._source)

        if not applied:
            logger.info("Catalog refresh superseded by a newer load")
            return RefreshMotorcycleCatalogResponse(loaded=False, error=SUPERSEDED_MESSAGE)

        if not result.ok:
            logger.warning("Catalog refresh failed", extra={"error": result.error})
            return RefreshMotorcycleCatalogResponse(loaded=False, error=result.error)

        count = len(result.dataset or ())
        logger.info("Catalog refreshed", extra={"count": count})
        return RefreshMotorcycleCatalogResponse(loaded=True, count=count)
