import asyncio
from datetime import datetime
import logging
from typing import List, Optional
from app.config import settings
from app.spacex.client import SpaceXClient
from app.spacex.schema import Launch, LaunchCatalog, LaunchDetail, LaunchFilter, Launchpad, Payload, Rocket
from app.spacex.utils import build_rocket_index, filter_launches, sort_launches

logger = logging.getLogger(__name__)


class LaunchListAssembler:
    """
    Builds the launch list: all launches newest first plus the rocket id -> name index used to label them.
    """
    def __init__(self, client: SpaceXClient):
        self.client = client

    async def load(self) -> LaunchCatalog:
        # Launches and rockets are independent, a failure in either raises FetchError
        launch_response, rockets_response = await asyncio.gather(
            self.client.get_launches(),
            self.client.get_rockets(),
        )
        logger.info(f"Fetched {len(launch_response)} launches, {len(rockets_response)} rockets")
        return LaunchCatalog(
            launches=sort_launches(launch_response),
            rocket_index=build_rocket_index(rockets_response),
        )

    @staticmethod
    def filter(launches: List[Launch], mode: LaunchFilter, now: Optional[datetime] = None) -> List[Launch]:
        return filter_launches(launches, mode, now)


class LaunchDetailAssembler:
    """
    Composes the detail view of one launch from its rocket, launchpad and payloads.

    The launch itself is never re-fetched. Payloads are fetched concurrently, at most
    `payload_concurrency` at a time, and returned in the order of `launch.payloads`.
    If any request fails the whole load fails.
    """
    def __init__(self, client: SpaceXClient, payload_concurrency: int = settings.PAYLOAD_FETCH_CONCURRENCY):
        if payload_concurrency < 1:
            raise ValueError("payload_concurrency must be at least 1")
        self.client = client
        self.payload_concurrency = payload_concurrency

    async def _get_payloads(self, payload_ids: List[str]) -> List[Payload]:
        semaphore = asyncio.Semaphore(self.payload_concurrency)

        async def get_payload(payload_id: str) -> Payload:
            async with semaphore:
                return await self.client.get_payload(payload_id)

        # gather keeps input order regardless of completion order
        return list(await asyncio.gather(*(get_payload(i) for i in payload_ids)))

    async def _get_rocket(self, rocket_id: Optional[str]) -> Optional[Rocket]:
        if rocket_id is None:
            return None
        return await self.client.get_rocket(rocket_id)

    async def _get_launchpad(self, launchpad_id: Optional[str]) -> Optional[Launchpad]:
        if launchpad_id is None:
            return None
        return await self.client.get_launchpad(launchpad_id)

    async def load(self, launch: Launch) -> LaunchDetail:
        logger.info(f"Loading details for launch {launch.id} ({len(launch.payloads)} payloads)")
        rocket, payloads, launchpad = await asyncio.gather(
            self._get_rocket(launch.rocket),
            self._get_payloads(launch.payloads),
            self._get_launchpad(launch.launchpad),
        )
        return LaunchDetail(
            launch=launch,
            rocket=rocket,
            payloads=payloads,
            launchpad=launchpad,
        )
