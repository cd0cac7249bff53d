from typing import Any, List, Type, TypeVar
import httpx
import logging
from pydantic import BaseModel, TypeAdapter, ValidationError
from app.config import settings
from app.spacex.exceptions import FetchError
from app.spacex.schema import Launch, Launchpad, Payload, Rocket

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SpaceXClient:
    """
    SpaceXClient fetches data from the SpaceX REST API. Every call goes to the network, nothing is cached.
    """
    def __init__(
        self,
        base_url: str = settings.BASE_URL,
        timeout: float = settings.REQUEST_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def fetch(self, endpoint: str) -> Any:
        url = f"{self.base_url}/{endpoint}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                logger.info(f"Calling external API {url}")
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"External API returned {e.response.status_code} for {url}")
            raise FetchError(f"Unexpected status {e.response.status_code}", url) from e
        except httpx.HTTPError as e:
            logger.error(f"Network error while fetching {url}: {str(e)}")
            raise FetchError(f"Network error: {str(e)}", url) from e
        except ValueError as e:
            logger.error(f"Malformed JSON body from {url}: {str(e)}")
            raise FetchError("Malformed JSON body", url) from e

    async def _fetch_model(self, endpoint: str, model: Type[ModelT]) -> ModelT:
        data = await self.fetch(endpoint)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise FetchError(f"Unexpected {model.__name__} payload: {str(e)}", f"{self.base_url}/{endpoint}") from e

    async def _fetch_list(self, endpoint: str, model: Type[ModelT]) -> List[ModelT]:
        data = await self.fetch(endpoint)
        try:
            return TypeAdapter(List[model]).validate_python(data)
        except ValidationError as e:
            raise FetchError(f"Unexpected {model.__name__} collection: {str(e)}", f"{self.base_url}/{endpoint}") from e

    async def get_launches(self) -> List[Launch]:
        return await self._fetch_list("launches", Launch)

    async def get_rockets(self) -> List[Rocket]:
        return await self._fetch_list("rockets", Rocket)

    async def get_rocket(self, rocket_id: str) -> Rocket:
        return await self._fetch_model(f"rockets/{rocket_id}", Rocket)

    async def get_payload(self, payload_id: str) -> Payload:
        return await self._fetch_model(f"payloads/{payload_id}", Payload)

    async def get_launchpad(self, launchpad_id: str) -> Launchpad:
        return await self._fetch_model(f"launchpads/{launchpad_id}", Launchpad)
