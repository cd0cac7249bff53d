"""
Screen view-state as immutable snapshots.

Each screen moves through idle -> loading -> (loaded | failed). A reducer takes the
current snapshot and one event and returns the next snapshot; the input snapshot
is never modified. Events that make no sense in the current status raise
StateTransitionError.
"""
from datetime import datetime
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict
from app.spacex.exceptions import StateTransitionError
from app.spacex.schema import Launch, LaunchCatalog, LaunchDetail, LaunchFilter, ScreenStatus
from app.spacex.utils import filter_launches


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

class LoadStarted(Event):
    pass

class ListLoaded(Event):
    catalog: LaunchCatalog

class DetailLoaded(Event):
    detail: LaunchDetail

class LoadFailed(Event):
    error: str

class FilterChanged(Event):
    mode: LaunchFilter


ListEvent = Union[LoadStarted, ListLoaded, LoadFailed, FilterChanged]
DetailEvent = Union[LoadStarted, DetailLoaded, LoadFailed]


class LaunchListState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: ScreenStatus = ScreenStatus.IDLE
    launches: List[Launch] = []
    rocket_index: Dict[str, str] = {}
    filter: LaunchFilter = LaunchFilter.ALL
    error: Optional[str] = None

    def visible_launches(self, now: Optional[datetime] = None) -> List[Launch]:
        return filter_launches(self.launches, self.filter, now)


class LaunchDetailState(BaseModel):
    model_config = ConfigDict(frozen=True)

    launch: Launch
    status: ScreenStatus = ScreenStatus.IDLE
    detail: Optional[LaunchDetail] = None
    error: Optional[str] = None


def _require_loading(status: ScreenStatus, event: Event) -> None:
    if status is not ScreenStatus.LOADING:
        raise StateTransitionError(f"{type(event).__name__} is not allowed while {status.value}")


def reduce_list_state(state: LaunchListState, event: ListEvent) -> LaunchListState:
    if isinstance(event, LoadStarted):
        return state.model_copy(update={
            "status": ScreenStatus.LOADING,
            "launches": [],
            "rocket_index": {},
            "error": None,
        })
    if isinstance(event, ListLoaded):
        _require_loading(state.status, event)
        return state.model_copy(update={
            "status": ScreenStatus.LOADED,
            "launches": list(event.catalog.launches),
            "rocket_index": dict(event.catalog.rocket_index),
        })
    if isinstance(event, LoadFailed):
        _require_loading(state.status, event)
        return state.model_copy(update={"status": ScreenStatus.FAILED, "error": event.error})
    if isinstance(event, FilterChanged):
        return state.model_copy(update={"filter": event.mode})
    raise StateTransitionError(f"Launch list does not handle {type(event).__name__}")


def reduce_detail_state(state: LaunchDetailState, event: DetailEvent) -> LaunchDetailState:
    if isinstance(event, LoadStarted):
        return state.model_copy(update={"status": ScreenStatus.LOADING, "detail": None, "error": None})
    if isinstance(event, DetailLoaded):
        _require_loading(state.status, event)
        return state.model_copy(update={"status": ScreenStatus.LOADED, "detail": event.detail})
    if isinstance(event, LoadFailed):
        _require_loading(state.status, event)
        return state.model_copy(update={"status": ScreenStatus.FAILED, "error": event.error})
    raise StateTransitionError(f"Launch detail does not handle {type(event).__name__}")
