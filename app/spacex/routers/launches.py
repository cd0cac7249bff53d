from fastapi import APIRouter, Depends, Response, status
from app.spacex.assemblers import LaunchDetailAssembler, LaunchListAssembler
from app.spacex.dependency import get_detail_assembler, get_list_assembler
from app.spacex.schema import Launch, LaunchDetailResponse, LaunchFilter, LaunchListResponse, ScreenStatus
from app.spacex.screens import LaunchDetailScreen, LaunchListScreen

router = APIRouter(
    tags=["Launches"],
)


@router.get("/", response_model=LaunchListResponse)
async def launch_list(
        response: Response,
        filter: LaunchFilter = LaunchFilter.ALL,
        assembler: LaunchListAssembler = Depends(get_list_assembler),
    ):
    screen = LaunchListScreen(assembler, filter)
    state = await screen.enter()
    if state.status is ScreenStatus.FAILED:
        response.status_code = status.HTTP_502_BAD_GATEWAY
    items = screen.items()
    return LaunchListResponse(
        status=state.status,
        filter=state.filter,
        total=len(items),
        data=items,
        error=state.error,
    )


# POST only carries the launch record picked from the list, nothing is written
@router.post("/detail", response_model=LaunchDetailResponse)
async def launch_detail(
        launch: Launch,
        response: Response,
        assembler: LaunchDetailAssembler = Depends(get_detail_assembler),
    ):
    screen = LaunchDetailScreen(assembler, launch)
    state = await screen.enter()
    if state.status is ScreenStatus.FAILED:
        response.status_code = status.HTTP_502_BAD_GATEWAY
    return LaunchDetailResponse(
        status=state.status,
        detail=state.detail,
        error=state.error,
    )
