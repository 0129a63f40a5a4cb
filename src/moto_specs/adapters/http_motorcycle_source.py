"""HTTP implementation of MotorcycleSource."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from moto_specs.domain.motorcycle import Dataset, Motorcycle
from moto_specs.ports.motorcycle_source import FetchResult, MotorcycleSource

logger = logging.getLogger(__name__)

# The only failure text users ever see; details go to the log
FETCH_FAILURE_MESSAGE = "Failed to fetch motorcycles"


class MotorcycleRecordDTO(BaseModel):
    """
    One motorcycle as sent by the remote source.

    Every field is optional: a record with gaps or badly typed fields is
    kept (those fields become None) and unknown keys are carried along as
    extras.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    name: str | None = None
    brand: str | None = None
    type: str | None = None
    year: int | None = None
    engine: str | None = None
    image: str | None = None


class HttpMotorcycleSource(MotorcycleSource):
    """
    Fetches the dataset from a fixed JSON endpoint.

    - GET <url>, expecting a JSON array of motorcycle objects
    - Any transport, status or decoding problem becomes FetchResult.failure
    - Records are validated one by one; invalid fields become None and are
      logged, entries that are not objects are skipped
    """

    def __init__(
        self,
        url: str,
        timeout: float,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize source.

        Args:
            url: Endpoint returning the motorcycle collection
            timeout: Seconds to wait for connect/read
            session: Optional requests session (a new one is created if omitted)
        """
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch(self) -> FetchResult:
        try:
            response = self._session.get(
                self._url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning(
                "Motorcycle fetch failed",
                extra={
                    "url": self._url,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return FetchResult.failure(FETCH_FAILURE_MESSAGE)

        if not isinstance(payload, list):
            logger.warning(
                "Motorcycle source returned unexpected payload",
                extra={"url": self._url, "payload_type": type(payload).__name__},
            )
            return FetchResult.failure(FETCH_FAILURE_MESSAGE)

        dataset = self._to_dataset(payload)
        logger.info(
            "Motorcycles fetched",
            extra={"url": self._url, "received": len(payload), "kept": len(dataset)},
        )
        return FetchResult.success(dataset)

    def _to_dataset(self, payload: list[Any]) -> Dataset:
        motorcycles: list[Motorcycle] = []

        for position, entry in enumerate(payload):
            if not isinstance(entry, dict):
                logger.warning(
                    "Skipping non-object motorcycle record",
                    extra={"position": position, "entry_type": type(entry).__name__},
                )
                continue

            motorcycles.append(self._to_domain(self._validate_record(position, entry)))

        return tuple(motorcycles)

    def _validate_record(self, position: int, entry: dict[str, Any]) -> MotorcycleRecordDTO:
        """
        Validate one record, defaulting fields that fail validation to None.

        A bad field (e.g. year="2020 model") must not hide the rest of the
        record from search, filters and facets.
        """
        try:
            return MotorcycleRecordDTO.model_validate(entry)
        except PydanticValidationError as exc:
            invalid_fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
            logger.warning(
                "Defaulting invalid motorcycle fields",
                extra={"position": position, "fields": invalid_fields, "errors": exc.errors()},
            )

        # Only declared fields can fail; extras are accepted as-is
        return MotorcycleRecordDTO.model_validate(
            {**entry, **{name: None for name in invalid_fields}}
        )

    def _to_domain(self, record: MotorcycleRecordDTO) -> Motorcycle:
        """
        Convert a validated wire record to the domain entity.

        Args:
            record: Validated record from the source payload

        Returns:
            Motorcycle domain entity
        """
        return Motorcycle(
            name=record.name,
            brand=record.brand,
            type=record.type,
            year=record.year,
            engine=record.engine,
            image=record.image,
            extras=dict(record.model_extra or {}),
        )
