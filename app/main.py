from fastapi import FastAPI
from app.config import settings
from app.spacex.routers.launches import router as launches_router
import logging

version = "v1"

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(levelname)s:     %(name)s - %(message)s",
)

app = FastAPI(
    title="SpaceX Launch Viewer",
    version=version,
)

app.include_router(launches_router, prefix=f"/api/{version}/launches")
