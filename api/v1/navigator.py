from typing import List, Optional

import anyio
from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_site
from schemas.navigator import KeyPress, NavigationResult, NavigatorState, SettleResult, SwipeGesture
from schemas.response_schema import APIResponse
from services.navigator_service import parse_section
from services.site import PortfolioSite

router = APIRouter(prefix="/navigators", tags=["Navigators"])

MAX_SETTLE_WAIT_SECONDS = 10


def _result(navigator, accepted: bool, action: str) -> APIResponse[NavigationResult]:
    detail = f"{action} accepted" if accepted else f"{action} ignored"
    return APIResponse(
        status_code=200,
        data=NavigationResult(accepted=accepted, state=navigator.state()),
        detail=detail,
    )


# ------------------------------
# Mount / unmount
# ------------------------------
@router.post(
    "/{section}",
    response_model=APIResponse[NavigatorState],
    status_code=status.HTTP_201_CREATED,
)
async def mount_navigator(
    section: str = Path(..., description="certifications, experience, projects or skills"),
    site: PortfolioSite = Depends(get_site),
):
    """
    Mounts a navigator for a section and fetches its collection.
    A failed fetch leaves the navigator empty.
    """
    navigator = await site.navigators.mount(section)
    return APIResponse(status_code=201, data=navigator.state(), detail="navigator mounted")


@router.get("", response_model=APIResponse[List[str]])
async def list_navigators(
    section: Optional[str] = Query(None),
    site: PortfolioSite = Depends(get_site),
):
    parsed = parse_section(section) if section else None
    return APIResponse(status_code=200, data=site.navigators.list_ids(parsed), detail="navigators listed")


@router.get("/{navigator_id}", response_model=APIResponse[NavigatorState])
async def get_navigator(navigator_id: str, site: PortfolioSite = Depends(get_site)):
    navigator = site.navigators.get(navigator_id)
    return APIResponse(status_code=200, data=navigator.state(), detail="navigator fetched")


@router.delete("/{navigator_id}", response_model=APIResponse[None])
async def unmount_navigator(navigator_id: str, site: PortfolioSite = Depends(get_site)):
    site.navigators.unmount(navigator_id)
    return APIResponse(status_code=200, data=None, detail="navigator unmounted")


# ------------------------------
# Navigation commands
# ------------------------------
@router.post("/{navigator_id}/next", response_model=APIResponse[NavigationResult])
async def navigate_next(navigator_id: str, site: PortfolioSite = Depends(get_site)):
    navigator = site.navigators.get(navigator_id)
    return _result(navigator, navigator.next(), "next")


@router.post("/{navigator_id}/prev", response_model=APIResponse[NavigationResult])
async def navigate_prev(navigator_id: str, site: PortfolioSite = Depends(get_site)):
    navigator = site.navigators.get(navigator_id)
    return _result(navigator, navigator.prev(), "prev")


@router.post("/{navigator_id}/jump/{index}", response_model=APIResponse[NavigationResult])
async def navigate_jump(navigator_id: str, index: int, site: PortfolioSite = Depends(get_site)):
    navigator = site.navigators.get(navigator_id)
    return _result(navigator, navigator.jump_to(index), "jump")


@router.post("/{navigator_id}/key", response_model=APIResponse[NavigationResult])
async def navigate_key(navigator_id: str, payload: KeyPress, site: PortfolioSite = Depends(get_site)):
    navigator = site.navigators.get(navigator_id)
    return _result(navigator, navigator.handle_key(payload.key), f"key {payload.key}")


@router.post("/{navigator_id}/swipe", response_model=APIResponse[NavigationResult])
async def navigate_swipe(navigator_id: str, payload: SwipeGesture, site: PortfolioSite = Depends(get_site)):
    """
    Horizontal touch gesture: leftward past the threshold goes next,
    rightward goes prev, shorter travel is ignored.
    """
    navigator = site.navigators.get(navigator_id)
    return _result(navigator, navigator.handle_swipe(payload.startX, payload.endX), "swipe")


@router.post("/{navigator_id}/complete", response_model=APIResponse[NavigationResult])
async def complete_transition(navigator_id: str, site: PortfolioSite = Depends(get_site)):
    """
    Animation completion callback; releases the transition lock.
    """
    navigator = site.navigators.get(navigator_id)
    return _result(navigator, navigator.on_animation_complete(), "complete")


@router.post("/{navigator_id}/settle", response_model=APIResponse[SettleResult])
async def settle_transition(navigator_id: str, site: PortfolioSite = Depends(get_site)):
    """
    Waits for the in-flight transition. Without a transition timeout the wait
    is capped and the lock is left as is.
    """
    navigator = site.navigators.get(navigator_id)
    completed = False
    with anyio.move_on_after(MAX_SETTLE_WAIT_SECONDS):
        completed = await navigator.settle()
    return APIResponse(
        status_code=200,
        data=SettleResult(completed=completed, state=navigator.state()),
        detail="transition settled" if completed else "transition not completed",
    )
