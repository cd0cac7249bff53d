from datetime import datetime
import logging
from typing import List, Optional
from app.spacex.assemblers import LaunchDetailAssembler, LaunchListAssembler
from app.spacex.exceptions import FetchError
from app.spacex.schema import Launch, LaunchFilter, LaunchListItem
from app.spacex.state import (
    DetailLoaded,
    DetailEvent,
    FilterChanged,
    LaunchDetailState,
    LaunchListState,
    ListEvent,
    ListLoaded,
    LoadFailed,
    LoadStarted,
    reduce_detail_state,
    reduce_list_state,
)
from app.spacex.utils import to_list_item

logger = logging.getLogger(__name__)


class LaunchListScreen:
    """
    Holds the list screen's current state snapshot. `enter()` is the explicit load trigger.
    """
    def __init__(self, assembler: LaunchListAssembler, mode: LaunchFilter = LaunchFilter.ALL):
        self.assembler = assembler
        self.state = LaunchListState(filter=mode)

    def dispatch(self, event: ListEvent) -> LaunchListState:
        self.state = reduce_list_state(self.state, event)
        return self.state

    async def enter(self) -> LaunchListState:
        self.dispatch(LoadStarted())
        try:
            catalog = await self.assembler.load()
        except FetchError as e:
            logger.exception(f"Error fetching launches: {str(e)}")
            return self.dispatch(LoadFailed(error=str(e)))
        return self.dispatch(ListLoaded(catalog=catalog))

    def change_filter(self, mode: LaunchFilter) -> LaunchListState:
        return self.dispatch(FilterChanged(mode=mode))

    def items(self, now: Optional[datetime] = None) -> List[LaunchListItem]:
        return [to_list_item(i, self.state.rocket_index) for i in self.state.visible_launches(now)]


class LaunchDetailScreen:
    """Detail screen for a launch handed over from the list."""
    def __init__(self, assembler: LaunchDetailAssembler, launch: Launch):
        self.assembler = assembler
        self.state = LaunchDetailState(launch=launch)

    def dispatch(self, event: DetailEvent) -> LaunchDetailState:
        self.state = reduce_detail_state(self.state, event)
        return self.state

    async def enter(self) -> LaunchDetailState:
        self.dispatch(LoadStarted())
        try:
            detail = await self.assembler.load(self.state.launch)
        except FetchError as e:
            logger.exception(f"Error fetching launch details for {self.state.launch.id}: {str(e)}")
            return self.dispatch(LoadFailed(error=str(e)))
        return self.dispatch(DetailLoaded(detail=detail))
