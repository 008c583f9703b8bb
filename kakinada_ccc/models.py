"""
Kakinada CCC — Pydantic Models

Catalog records (feeds, datasets, flashcards, chains) are immutable mock
data. SimulationResult is the only record built at runtime and is always
replaced wholesale, never patched.
"""
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


# ═══════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════

class Page(str, Enum):
    DASHBOARD = "dashboard"
    FEEDS = "feeds"
    CHAINS = "chains"
    SIMULATIONS = "simulations"
    TRAINING = "training"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        return _PAGE_LABELS[self]

    @property
    def heading(self) -> str:
        return _PAGE_HEADINGS[self]


_PAGE_LABELS = {
    Page.DASHBOARD: "Dashboard",
    Page.FEEDS: "Live Feeds",
    Page.CHAINS: "Tracking Chains",
    Page.SIMULATIONS: "Simulations",
    Page.TRAINING: "Training",
    Page.SETTINGS: "Settings",
}

_PAGE_HEADINGS = {
    Page.DASHBOARD: "City Command Dashboard",
    Page.FEEDS: "Live & Demo Feeds",
    Page.CHAINS: "Tracking Chains",
    Page.SIMULATIONS: "Simulation Center",
    Page.TRAINING: "Operator Training",
    Page.SETTINGS: "Settings",
}


class FeedType(str, Enum):
    BODYCAM = "Bodycam"
    CCTV = "CCTV"


class TileColor(str, Enum):
    PRIMARY = "primary"
    ACCENT = "accent"
    WARNING = "warning"
    INFO = "info"


class PlaceholderAction(str, Enum):
    """Buttons that only mark a future integration point."""
    TAG_FRAME = "tag_frame"
    DATASET_DETAILS = "dataset_details"
    TOGGLE_MODE = "toggle_mode"
    CONFIGURE_STORAGE = "configure_storage"
    START_QUIZ = "start_quiz"


# ═══════════════════════════════════════════════════════════
# CATALOG RECORDS (immutable)
# ═══════════════════════════════════════════════════════════

class Feed(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    location: str
    type: FeedType
    demo_src: str


class Dataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str
    count: int = Field(..., ge=0)


class Flashcard(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    hint: str


class ChainStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    camera: str
    time: str


class Chain(BaseModel):
    """Ordered camera sightings attributed to one tracked event."""
    model_config = ConfigDict(frozen=True)

    event: str
    start_time: str
    steps: tuple[ChainStep, ...]


class StatTile(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    color: TileColor


# ═══════════════════════════════════════════════════════════
# DETECTIONS
# ═══════════════════════════════════════════════════════════

class Detection(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    confidence: float = Field(..., ge=0.0, le=1.0)

    @property
    def percent(self) -> int:
        # half-up
        return int(self.confidence * 100 + 0.5)


class SimulationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    feed_id: Optional[str] = None
    dataset_id: Optional[str] = None
    detections: tuple[Detection, ...]
    timestamp: datetime

    @model_validator(mode="after")
    def _single_source(self):
        if self.feed_id is not None and self.dataset_id is not None:
            raise ValueError("a simulation result is attributed to a feed or a dataset, not both")
        return self


# ═══════════════════════════════════════════════════════════
# API PAYLOADS
# ═══════════════════════════════════════════════════════════

class NavigateRequest(BaseModel):
    page: Page


class ViewStateSnapshot(BaseModel):
    page: Page
    selected_feed: Feed
    active_simulation: Optional[SimulationResult] = None
    flash_index: int
    current_card: Flashcard


class PlaceholderResponse(BaseModel):
    action: PlaceholderAction
    message: str
