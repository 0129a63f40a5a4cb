from fastapi import APIRouter, Depends

from moto_specs.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_refresh_catalog_use_case,
)
from moto_specs.entrypoints.http.dtos.motorcycle_catalog import (
    FacetsResponseDTO,
    MotorcycleCatalogResponseDTO,
    MotorcyclesQueryDTO,
    RefreshResponseDTO,
)
from moto_specs.entrypoints.http.error_responses import ErrorResponse
from moto_specs.entrypoints.http.mappers.motorcycle_catalog_mapper import MotorcycleCatalogMapper
from moto_specs.use_cases.browse_motorcycle_catalog import (
    BrowseMotorcycleCatalog,
    BrowseMotorcycleCatalogRequest,
)
from moto_specs.use_cases.refresh_motorcycle_catalog import RefreshMotorcycleCatalog


router = APIRouter(tags=["Motorcycles"])

_UNAVAILABLE = {
    503: {
        "description": "Dataset not loaded or data source failed",
        "model": ErrorResponse,
    },
}


@router.get(
    "/motorcycles",
    response_model=MotorcycleCatalogResponseDTO,
    summary="Browse motorcycle catalog",
    description="""
    Search, filter and sort the loaded motorcycle catalog.

    ## Search
    - Case-insensitive substring match on name OR brand
    - Empty search matches everything

    ## Filters
    - brand/type: exact, case-sensitive match; empty means no constraint
    - Filters and search use AND semantics

    ## Sorting
    - Text compares case-insensitively, numbers numerically
    - Ties keep source order in both directions
    - Motorcycles without the sort field are listed last

    ## Example
    ```
    GET /v1/motorcycles?brand=Honda&sort_key=year&sort_order=desc
    ```
    """,
    responses={
        422: {"description": "Validation error", "model": ErrorResponse},
        **_UNAVAILABLE,
    },
)
def get_motorcycles(
    query: MotorcyclesQueryDTO = Depends(),
    use_case: BrowseMotorcycleCatalog = Depends(get_browse_catalog_use_case),
) -> MotorcycleCatalogResponseDTO:
    """Browse endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = MotorcycleCatalogMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return MotorcycleCatalogMapper.to_response(result=result, query=request.query)


@router.get(
    "/motorcycles/facets",
    response_model=FacetsResponseDTO,
    summary="List filter options",
    description="Distinct brands and types across the whole catalog, in first-seen order.",
    responses=_UNAVAILABLE,
)
def get_motorcycle_facets(
    use_case: BrowseMotorcycleCatalog = Depends(get_browse_catalog_use_case),
) -> FacetsResponseDTO:
    return MotorcycleCatalogMapper.to_facets_response(use_case.facets())


@router.post(
    "/motorcycles/refresh",
    response_model=RefreshResponseDTO,
    summary="Re-fetch the catalog",
    description="""
    Fetch the dataset again from the configured source.

    A failed fetch is reported in the body (`loaded: false`) and puts the
    catalog in the error state until the next successful refresh.
    """,
)
def refresh_motorcycles(
    use_case: RefreshMotorcycleCatalog = Depends(get_refresh_catalog_use_case),
) -> RefreshResponseDTO:
    result = use_case.execute()
    return MotorcycleCatalogMapper.to_refresh_response(result)
