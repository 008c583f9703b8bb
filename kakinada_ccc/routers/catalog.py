"""
Kakinada CCC — Catalog Router
Read-only access to the mock catalogs behind each page
"""
from fastapi import APIRouter

from kakinada_ccc.mock_data import CHAINS, DATASETS, FEEDS, FLASHCARDS, LOGS, STAT_TILES
from kakinada_ccc.models import Chain, Dataset, Feed, Flashcard, StatTile

router = APIRouter()


@router.get("/feeds", response_model=list[Feed])
async def list_feeds():
    return list(FEEDS)


@router.get("/datasets", response_model=list[Dataset])
async def list_datasets():
    return list(DATASETS)


@router.get("/flashcards", response_model=list[Flashcard])
async def list_flashcards():
    return list(FLASHCARDS)


@router.get("/chains", response_model=list[Chain])
async def list_chains():
    return list(CHAINS)


@router.get("/logs")
async def list_logs():
    """Recent activity lines shown on the dashboard."""
    return {"logs": list(LOGS), "total": len(LOGS)}


@router.get("/stats", response_model=list[StatTile])
async def dashboard_stats():
    return list(STAT_TILES)
