from enum import Enum
from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from typing import Dict, List, Optional
from datetime import datetime, timezone
from app.spacex.formatting import format_launch_datetime, success_label

class LaunchFilter(str, Enum):
    ALL = "All"
    PAST = "Past"
    UPCOMING = "Upcoming"

class ScreenStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"

class Rocket(BaseModel):
    id: str
    name: str

class Launchpad(BaseModel):
    id: str
    name: str

class Payload(BaseModel):
    id: str
    name: Optional[str] = None
    type: Optional[str] = None

class Patch(BaseModel):
    small: Optional[str] = None
    large: Optional[str] = None

class LaunchLinks(BaseModel):
    patch: Optional[Patch] = None

class Launch(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    date_utc: datetime
    success: Optional[bool] = None
    rocket: Optional[str] = None
    launchpad: Optional[str] = None
    payloads: List[str] = []
    links: Optional[LaunchLinks] = None

    @field_validator("date_utc")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Bare dates and naive timestamps from the API are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

class LaunchCatalog(BaseModel):
    """Launches sorted newest first, together with the rocket id -> name index built from the same load."""
    launches: List[Launch]
    rocket_index: Dict[str, str]

class LaunchListItem(BaseModel):
    id: str
    name: str
    date_utc: datetime
    date: str
    rocket_name: str
    status: str

class LaunchDetail(BaseModel):
    launch: Launch
    rocket: Optional[Rocket] = None
    payloads: List[Payload]
    launchpad: Optional[Launchpad] = None

    @computed_field
    @property
    def date(self) -> str:
        return format_launch_datetime(self.launch.date_utc)

    @computed_field
    @property
    def status(self) -> str:
        return success_label(self.launch.success)

    @computed_field
    @property
    def mission_patch(self) -> Optional[str]:
        links = self.launch.links
        if links is None or links.patch is None:
            return None
        return links.patch.small

class LaunchListResponse(BaseModel):
    status: ScreenStatus
    filter: LaunchFilter
    total: int
    data: List[LaunchListItem]
    error: Optional[str] = None

class LaunchDetailResponse(BaseModel):
    status: ScreenStatus
    detail: Optional[LaunchDetail] = None
    error: Optional[str] = None
