"""Catalog pipeline context and command dispatcher.

The pipeline state lives in an immutable CatalogContext that every command
receives and replaces. Commands run to completion one at a time:

    Unset --on_load_complete--> Ready (working subset = full collection)
    Unset --on_load_failed----> Failed (terminal until a full reload)
    Ready --on_search_submit--> Ready (working subset replaced)
    Ready --on_sort_change----> Ready (active sort key replaced)

Each command returns the new context plus a RenderInstruction naming the
ordered records to display; render() turns an instruction into a CatalogView.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from vehicle_mart.domain.errors import CatalogLoadError
from vehicle_mart.domain.vehicle import SearchQuery, SortKey, VehicleRecord
from vehicle_mart.use_cases.filter_vehicles import FilterVehicles, FilterVehiclesRequest
from vehicle_mart.use_cases.present_vehicles import CatalogView, PresentVehicles
from vehicle_mart.use_cases.sort_vehicles import SortVehicles, SortVehiclesRequest


class CatalogState(str, Enum):
    UNSET = "unset"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CatalogContext:
    source: tuple[VehicleRecord, ...] = ()
    working_subset: tuple[VehicleRecord, ...] = ()
    active_sort_key: SortKey | None = None
    state: CatalogState = CatalogState.UNSET
    load_error: CatalogLoadError | None = None


@dataclass(frozen=True, slots=True)
class RenderInstruction:
    vehicles: list[VehicleRecord] = field(default_factory=list)
    load_failed: bool = False


@dataclass(frozen=True, slots=True)
class CommandResult:
    context: CatalogContext
    instruction: RenderInstruction


class CatalogDispatcher:
    """
    Routes user actions through filter → sort → present.

    The source collection is never reordered; filtering and sorting always
    produce new sequences.
    """

    def __init__(
        self,
        filter_vehicles: FilterVehicles | None = None,
        sort_vehicles: SortVehicles | None = None,
        present_vehicles: PresentVehicles | None = None,
    ) -> None:
        self._filter = filter_vehicles or FilterVehicles()
        self._sort = sort_vehicles or SortVehicles()
        self._present = present_vehicles or PresentVehicles()

    def on_load_complete(
        self, context: CatalogContext, vehicles: list[VehicleRecord]
    ) -> CommandResult:
        source = tuple(vehicles)
        new_context = replace(
            context,
            source=source,
            working_subset=source,
            state=CatalogState.READY,
            load_error=None,
        )
        return CommandResult(
            context=new_context,
            instruction=RenderInstruction(vehicles=self._sorted(source, new_context.active_sort_key)),
        )

    def on_load_failed(self, context: CatalogContext, error: CatalogLoadError) -> CommandResult:
        new_context = replace(
            context,
            source=(),
            working_subset=(),
            state=CatalogState.FAILED,
            load_error=error,
        )
        return CommandResult(context=new_context, instruction=RenderInstruction(load_failed=True))

    def on_search_submit(
        self, context: CatalogContext, query: SearchQuery | None
    ) -> CommandResult:
        """Replace the working subset with the records matching query (None: no search form)."""
        if context.state is not CatalogState.READY:
            return CommandResult(context=context, instruction=self._current(context))

        response = self._filter.execute(
            FilterVehiclesRequest(vehicles=list(context.source), query=query)
        )
        subset = tuple(response.vehicles)
        new_context = replace(context, working_subset=subset)
        return CommandResult(
            context=new_context,
            instruction=RenderInstruction(vehicles=self._sorted(subset, context.active_sort_key)),
        )

    def on_sort_change(self, context: CatalogContext, sort_key: SortKey | None) -> CommandResult:
        """Reorder the working subset, or the full collection when the subset is empty."""
        if context.state is not CatalogState.READY:
            return CommandResult(context=context, instruction=self._current(context))

        new_context = replace(context, active_sort_key=sort_key)
        subset = context.working_subset or context.source
        return CommandResult(
            context=new_context,
            instruction=RenderInstruction(vehicles=self._sorted(subset, sort_key)),
        )

    def render(self, instruction: RenderInstruction) -> CatalogView:
        if instruction.load_failed:
            return self._present.load_failed()
        return self._present.execute(instruction.vehicles)

    def _current(self, context: CatalogContext) -> RenderInstruction:
        if context.state is CatalogState.FAILED:
            return RenderInstruction(load_failed=True)
        return RenderInstruction(vehicles=self._sorted(context.working_subset, context.active_sort_key))

    def _sorted(
        self, vehicles: tuple[VehicleRecord, ...], sort_key: SortKey | None
    ) -> list[VehicleRecord]:
        response = self._sort.execute(SortVehiclesRequest(vehicles=list(vehicles), sort_key=sort_key))
        return response.vehicles
