"""Load catalog use case."""

from __future__ import annotations

import logging

from vehicle_mart.domain.errors import CatalogLoadError
from vehicle_mart.ports.vehicle_source import VehicleSource
from vehicle_mart.use_cases.catalog_pipeline import (
    CatalogContext,
    CatalogDispatcher,
    CommandResult,
)

logger = logging.getLogger(__name__)


class LoadCatalog:
    """
    One-shot retrieval of the vehicle collection.

    Responsibilities:
    - Pull the collection from the data source exactly once (no retry)
    - Report a load failure once to the operator log
    - Move the pipeline to Ready or Failed through the dispatcher
    """

    def __init__(
        self,
        vehicle_source: VehicleSource,
        dispatcher: CatalogDispatcher | None = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_source: Where the collection comes from
            dispatcher: Pipeline dispatcher receiving the load outcome
        """
        self._source = vehicle_source
        self._dispatcher = dispatcher or CatalogDispatcher()

    def execute(self, context: CatalogContext | None = None) -> CommandResult:
        """
        Load the collection and apply it to the pipeline.

        Args:
            context: Current pipeline context (a fresh one if omitted)

        Returns:
            CommandResult with the Ready or Failed context and its render instruction
        """
        context = context or CatalogContext()

        try:
            vehicles = self._source.load()
        except CatalogLoadError as exc:
            logger.error(
                "Failed to load vehicle data",
                extra={
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                    "context": exc.context,
                },
            )
            return self._dispatcher.on_load_failed(context, exc)

        logger.info("Vehicle catalog loaded", extra={"vehicle_count": len(vehicles)})
        return self._dispatcher.on_load_complete(context, vehicles)
