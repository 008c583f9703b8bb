"""
Kakinada CCC — Server-rendered UI Router

GET /ui renders the whole app into the shell. Every interactive control
posts to one of the /ui/* actions below, which update the CommandCenter
and redirect back to /ui (post/redirect/get).
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from kakinada_ccc.config import Settings
from kakinada_ccc.controller import CommandCenter
from kakinada_ccc.models import Page
from kakinada_ccc.pages import render_app
from kakinada_ccc.routers.deps import get_app_settings, get_center, not_found
from kakinada_ccc.shell import APP_SHELL, mount

router = APIRouter()


def _back_to_ui() -> RedirectResponse:
    return RedirectResponse(url="/ui", status_code=303)


@router.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/ui")


@router.get("/ui", response_class=HTMLResponse, include_in_schema=False)
async def command_center_ui(
    center: CommandCenter = Depends(get_center),
    settings: Settings = Depends(get_app_settings),
):
    """Serve the command center UI for the current view state."""
    return mount(APP_SHELL, lambda: render_app(center), settings.MOUNT_ID)


@router.post("/ui/navigate/{page}", include_in_schema=False)
async def navigate(page: Page, center: CommandCenter = Depends(get_center)):
    center.navigate(page)
    return _back_to_ui()


@router.post("/ui/feeds/{feed_id}/select", include_in_schema=False)
async def select_feed(feed_id: str, center: CommandCenter = Depends(get_center)):
    try:
        center.select_feed(feed_id)
    except LookupError as e:
        raise not_found(e)
    return _back_to_ui()


@router.post("/ui/detections/run", include_in_schema=False)
async def run_detection(center: CommandCenter = Depends(get_center)):
    center.run_detection()
    return _back_to_ui()


@router.post("/ui/detections/stop", include_in_schema=False)
async def stop_detection(center: CommandCenter = Depends(get_center)):
    center.stop_detection()
    return _back_to_ui()


@router.post("/ui/datasets/{dataset_id}/run", include_in_schema=False)
async def run_dataset(dataset_id: str, center: CommandCenter = Depends(get_center)):
    try:
        center.run_dataset(dataset_id)
    except LookupError as e:
        raise not_found(e)
    return _back_to_ui()


@router.post("/ui/training/next", include_in_schema=False)
async def next_card(center: CommandCenter = Depends(get_center)):
    center.next_card()
    return _back_to_ui()


@router.post("/ui/training/prev", include_in_schema=False)
async def prev_card(center: CommandCenter = Depends(get_center)):
    center.prev_card()
    return _back_to_ui()
