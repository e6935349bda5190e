from __future__ import annotations

from dataclasses import dataclass

from vehicle_mart.domain.vehicle import SearchQuery, SortKey
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext, CatalogDispatcher
from vehicle_mart.use_cases.present_vehicles import CatalogView


@dataclass(frozen=True, slots=True)
class BrowseCatalogRequest:
    query: SearchQuery | None = None
    sort_key: SortKey | None = None


class BrowseCatalog:
    """
    One stateless catalog render: pick the sort, then submit the search.

    Replays the two user commands against the loaded context in that order,
    so a search with no matches renders the "No vehicles found." notice
    instead of falling back to the full collection.
    """

    def __init__(self, dispatcher: CatalogDispatcher | None = None) -> None:
        self._dispatcher = dispatcher or CatalogDispatcher()

    def execute(self, context: CatalogContext, request: BrowseCatalogRequest) -> CatalogView:
        sorted_result = self._dispatcher.on_sort_change(context, request.sort_key)
        result = self._dispatcher.on_search_submit(sorted_result.context, request.query)

        return self._dispatcher.render(result.instruction)
