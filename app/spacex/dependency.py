from fastapi import Depends
from app.spacex.assemblers import LaunchDetailAssembler, LaunchListAssembler
from app.spacex.client import SpaceXClient
from app.config import settings

spacex_client = SpaceXClient(settings.BASE_URL, settings.REQUEST_TIMEOUT_SECONDS)

def get_spacex_client():
    return spacex_client

def get_list_assembler(client: SpaceXClient = Depends(get_spacex_client)):
    return LaunchListAssembler(client)

def get_detail_assembler(client: SpaceXClient = Depends(get_spacex_client)):
    return LaunchDetailAssembler(client, settings.PAYLOAD_FETCH_CONCURRENCY)
