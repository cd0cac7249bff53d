from datetime import datetime, timezone
import logging
from typing import Dict, Iterable, List, Optional
from app.spacex.formatting import format_launch_date, rocket_name, success_label
from app.spacex.schema import Launch, LaunchFilter, LaunchListItem, Rocket

logger = logging.getLogger(__name__)


def sort_launches(launches: Iterable[Launch]) -> List[Launch]:
    # sorted() is stable with reverse=True, launches on the same date keep their order
    return sorted(launches, key=lambda i: i.date_utc, reverse=True)


def build_rocket_index(rockets: Iterable[Rocket]) -> Dict[str, str]:
    return {i.id: i.name for i in rockets}


def filter_launches(
        launches: Iterable[Launch],
        mode: LaunchFilter,
        now: Optional[datetime] = None,
    ) -> List[Launch]:
    """
    Project launches onto the All / Past / Upcoming views.

    Past means strictly before `now`, Upcoming means at or after it, so the two
    views partition the input for a fixed `now`. When `now` is omitted the current
    UTC time is read on every call, so a launch can move from Upcoming to Past
    between two calls.
    """
    mode = LaunchFilter(mode)
    if mode is LaunchFilter.ALL:
        return list(launches)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    logger.debug(f"Filtering launches for {mode.value} relative to {now.isoformat()}")
    if mode is LaunchFilter.PAST:
        return [i for i in launches if i.date_utc < now]
    return [i for i in launches if i.date_utc >= now]


def to_list_item(launch: Launch, rocket_index: Dict[str, str]) -> LaunchListItem:
    return LaunchListItem(
        id=launch.id,
        name=launch.name,
        date_utc=launch.date_utc,
        date=format_launch_date(launch.date_utc),
        rocket_name=rocket_name(rocket_index, launch.rocket),
        status=success_label(launch.success),
    )
