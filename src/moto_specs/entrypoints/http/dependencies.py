"""
Dependency injection for FastAPI routes.

Key principle: the dataset store is the one process-wide stateful object
(it holds the loaded snapshot). Sources and use cases are cheap and are
built per request.
"""

from __future__ import annotations

from fastapi import Depends

from moto_specs.adapters.http_motorcycle_source import HttpMotorcycleSource
from moto_specs.infra.config import motorcycles_source_timeout, motorcycles_source_url
from moto_specs.infra.dataset_store import DatasetStore
from moto_specs.ports.motorcycle_source import MotorcycleSource
from moto_specs.use_cases.browse_motorcycle_catalog import BrowseMotorcycleCatalog
from moto_specs.use_cases.refresh_motorcycle_catalog import RefreshMotorcycleCatalog

# Lazy initialization - created on first use
_dataset_store: DatasetStore | None = None


def get_dataset_store() -> DatasetStore:
    """Get or create the process-wide dataset store."""
    global _dataset_store
    if _dataset_store is None:
        _dataset_store = DatasetStore()
    return _dataset_store


def get_motorcycle_source() -> MotorcycleSource:
    """
    Build the HTTP source from environment configuration.

    Returns:
        MotorcycleSource: Source pointed at MOTORCYCLES_SOURCE_URL
    """
    return HttpMotorcycleSource(
        url=motorcycles_source_url(),
        timeout=motorcycles_source_timeout(),
    )


def get_browse_catalog_use_case(
    store: DatasetStore = Depends(get_dataset_store),
) -> BrowseMotorcycleCatalog:
    return BrowseMotorcycleCatalog(dataset_store=store)


def get_refresh_catalog_use_case(
    store: DatasetStore = Depends(get_dataset_store),
    source: MotorcycleSource = Depends(get_motorcycle_source),
) -> RefreshMotorcycleCatalog:
    """
    Factory function that returns a configured RefreshMotorcycleCatalog use case.

    Args:
        store: Shared dataset store (injected by FastAPI)
        source: Source to fetch from (injected by FastAPI)

    Returns:
        RefreshMotorcycleCatalog: Configured use case instance
    """
    return RefreshMotorcycleCatalog(dataset_store=store, source=source)
