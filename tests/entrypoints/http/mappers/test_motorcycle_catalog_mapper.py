from __future__ import annotations

from moto_specs.domain.motorcycle import (
    FilterSelection,
    Motorcycle,
    QueryState,
    SortOrder,
    SortSpec,
)
from moto_specs.entrypoints.http.dtos.motorcycle_catalog import (
    FacetsResponseDTO,
    MotorcycleResponseDTO,
    MotorcyclesQueryDTO,
)
from moto_specs.entrypoints.http.mappers.motorcycle_catalog_mapper import MotorcycleCatalogMapper
from moto_specs.use_cases.browse_motorcycle_catalog import BrowseMotorcycleCatalogResponse
from moto_specs.use_cases.refresh_motorcycle_catalog import RefreshMotorcycleCatalogResponse


# ==============================================================================
# DTO -> domain
# ==============================================================================


def test_to_domain_query_with_all_params() -> None:
    dto = MotorcyclesQueryDTO(
        search="cbr", brand="Honda", type="Sport", sort_key="year", sort_order=SortOrder.DESC
    )

    query = MotorcycleCatalogMapper.to_domain_query(dto)

    assert query == QueryState(
        search="cbr",
        filters=FilterSelection(brand="Honda", type="Sport"),
        sort=SortSpec(key="year", order=SortOrder.DESC),
    )


def test_to_domain_query_defaults() -> None:
    assert MotorcycleCatalogMapper.to_domain_query(MotorcyclesQueryDTO()) == QueryState()


def test_to_domain_query_empty_filters_become_none() -> None:
    query = MotorcycleCatalogMapper.to_domain_query(MotorcyclesQueryDTO(brand="", type=""))

    assert query.filters == FilterSelection()


def test_to_domain_request_wraps_query() -> None:
    request = MotorcycleCatalogMapper.to_domain_request(MotorcyclesQueryDTO(search="mt"))

    assert request.query.search == "mt"


# ==============================================================================
# domain -> DTO
# ==============================================================================


def test_to_motorcycle_response_copies_fields() -> None:
    motorcycle = Motorcycle(
        name="MT07",
        brand="Yamaha",
        type="Naked",
        year=2019,
        engine="689cc",
        extras={"weight_kg": 184},
    )

    dto = MotorcycleCatalogMapper.to_motorcycle_response(motorcycle)

    assert dto == MotorcycleResponseDTO(
        name="MT07", brand="Yamaha", type="Naked", year=2019, engine="689cc", image=None
    )


def test_to_facets_response_converts_tuples_to_lists() -> None:
    dto = MotorcycleCatalogMapper.to_facets_response(
        {"brand": ("Honda", "Yamaha"), "type": ("Sport",)}
    )

    assert dto == FacetsResponseDTO(brand=["Honda", "Yamaha"], type=["Sport"])


def test_to_response_echoes_query() -> None:
    result = BrowseMotorcycleCatalogResponse(
        motorcycles=(Motorcycle(name="CBR500", brand="Honda"),),
        facets={"brand": ("Honda",), "type": ()},
        total_count=1,
    )
    query = QueryState(search="cbr", sort=SortSpec(key="year", order=SortOrder.DESC))

    dto = MotorcycleCatalogMapper.to_response(result=result, query=query)

    assert dto.total == 1
    assert [m.name for m in dto.motorcycles] == ["CBR500"]
    assert dto.facets.brand == ["Honda"]
    assert dto.query.search == "cbr"
    assert dto.query.sort_key == "year"
    assert dto.query.sort_order is SortOrder.DESC


def test_to_refresh_response() -> None:
    dto = MotorcycleCatalogMapper.to_refresh_response(
        RefreshMotorcycleCatalogResponse(loaded=False, error="Failed to fetch motorcycles")
    )

    assert dto.loaded is False
    assert dto.count == 0
    assert dto.error == "Failed to fetch motorcycles"
