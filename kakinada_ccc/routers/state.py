"""
Kakinada CCC — View State Router
JSON twin of the UI actions; every mutation returns the new snapshot
"""
from fastapi import APIRouter, Depends

from kakinada_ccc.controller import CommandCenter
from kakinada_ccc.models import (
    NavigateRequest, PlaceholderAction, PlaceholderResponse, ViewStateSnapshot,
)
from kakinada_ccc.routers.deps import get_center, not_found

router = APIRouter()


@router.get("", response_model=ViewStateSnapshot)
async def get_state(center: CommandCenter = Depends(get_center)):
    return center.snapshot()


@router.post("/navigate", response_model=ViewStateSnapshot)
async def navigate(req: NavigateRequest, center: CommandCenter = Depends(get_center)):
    center.navigate(req.page)
    return center.snapshot()


@router.post("/feeds/{feed_id}/select", response_model=ViewStateSnapshot)
async def select_feed(feed_id: str, center: CommandCenter = Depends(get_center)):
    try:
        center.select_feed(feed_id)
    except LookupError as e:
        raise not_found(e)
    return center.snapshot()


@router.post("/detections/run", response_model=ViewStateSnapshot)
async def run_detection(center: CommandCenter = Depends(get_center)):
    center.run_detection()
    return center.snapshot()


@router.post("/detections/stop", response_model=ViewStateSnapshot)
async def stop_detection(center: CommandCenter = Depends(get_center)):
    center.stop_detection()
    return center.snapshot()


@router.post("/datasets/{dataset_id}/run", response_model=ViewStateSnapshot)
async def run_dataset(dataset_id: str, center: CommandCenter = Depends(get_center)):
    try:
        center.run_dataset(dataset_id)
    except LookupError as e:
        raise not_found(e)
    return center.snapshot()


@router.post("/training/next", response_model=ViewStateSnapshot)
async def next_card(center: CommandCenter = Depends(get_center)):
    center.next_card()
    return center.snapshot()


@router.post("/training/prev", response_model=ViewStateSnapshot)
async def prev_card(center: CommandCenter = Depends(get_center)):
    center.prev_card()
    return center.snapshot()


@router.post("/placeholders/{action}", response_model=PlaceholderResponse)
async def placeholder(action: PlaceholderAction, center: CommandCenter = Depends(get_center)):
    """Stub actions: return the notice the UI shows, change nothing."""
    return PlaceholderResponse(action=action, message=center.placeholder(action))


@router.post("/reset", response_model=ViewStateSnapshot)
async def reset(center: CommandCenter = Depends(get_center)):
    center.reset()
    return center.snapshot()
