from datetime import datetime, timezone
from typing import Dict, Optional

UNKNOWN_ROCKET = "Unknown Rocket"
NO_MISSION_PATCH = "No Mission Patch"

SUCCESS_LABELS = {
    None: "N/A",
    True: "Success",
    False: "Failed",
}


def success_label(success: Optional[bool]) -> str:
    return SUCCESS_LABELS[success]


def rocket_name(rocket_index: Dict[str, str], rocket_id: Optional[str]) -> str:
    """Look a rocket id up in the index, falling back to a sentinel name for dangling ids."""
    if rocket_id is None:
        return UNKNOWN_ROCKET
    return rocket_index.get(rocket_id, UNKNOWN_ROCKET)


def format_launch_date(value: datetime) -> str:
    # e.g. "Jan 01, 2020"
    return value.astimezone(timezone.utc).strftime("%b %d, %Y")


def format_launch_datetime(value: datetime) -> str:
    # e.g. "Jan 01, 2020 14:30 UTC"
    return value.astimezone(timezone.utc).strftime("%b %d, %Y %H:%M UTC")
