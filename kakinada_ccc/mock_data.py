"""
Kakinada CCC — Mock Data

Hard-coded catalogs backing every page. Replace with real sources
(camera registry, dataset store, training content) when they exist.
"""
from typing import Optional, Sequence

from kakinada_ccc.models import (
    Chain, ChainStep, Dataset, Feed, FeedType, Flashcard,
    PlaceholderAction, StatTile, TileColor,
)


# ─── Palette & button styles ────────────────────────────────

COLORS = {
    "primary": "#4F46E5",
    "primaryDark": "#3730A3",
    "accent": "#10B981",
    "danger": "#EF4444",
    "warning": "#F59E0B",
    "info": "#0EA5E9",
    "bg": "#F3F4F6",
    "card": "#FFFFFF",
    "text": "#1F2937",
}

_BASE_BTN = "px-3 py-1.5 text-sm rounded-lg font-medium transition-all duration-150"
BUTTON_STYLES = {
    "btn": f"{_BASE_BTN} bg-indigo-600 text-white hover:bg-indigo-700 shadow",
    "btn-outline": f"{_BASE_BTN} border border-indigo-600 text-indigo-600 hover:bg-indigo-50",
    "btn-ghost": f"{_BASE_BTN} text-slate-600 hover:bg-slate-100",
    "btn-sm": "px-2 py-1 text-xs rounded border border-slate-300 hover:bg-slate-50",
}


def cls(name: Optional[str]) -> str:
    """Resolve a named button style, passing raw class strings through."""
    return BUTTON_STYLES.get(name or "", name or "")


# ─── Catalogs ───────────────────────────────────────────────

FEEDS: tuple[Feed, ...] = (
    Feed(id="bodycam-01", location="Patrol Vehicle 12", type=FeedType.BODYCAM,
         demo_src="/mnt/data/sample_bodycam_night.mp4"),
    Feed(id="cctv-01", location="Market Rd Junction", type=FeedType.CCTV,
         demo_src="/mnt/data/sample_street_day.mp4"),
    Feed(id="cctv-02", location="Harbour Entry", type=FeedType.CCTV,
         demo_src="/mnt/data/sample_harbour.mp4"),
    Feed(id="cctv-03", location="Main Bridge", type=FeedType.CCTV,
         demo_src="/mnt/data/sample_bridge.mp4"),
)

DATASETS: tuple[Dataset, ...] = (
    Dataset(id="ds-anpr-night", name="ANPR - Low Light (demo)", type="Video", count=12),
    Dataset(id="ds-highbeam", name="High-Beam Violation Clips", type="Video", count=8),
    Dataset(id="ds-tracking", name="Multi-Camera Tracking (sample)", type="Video", count=6),
)

FLASHCARDS: tuple[Flashcard, ...] = (
    Flashcard(question="Officer bodycam feed shows a suspicious motorcycle at 02:12",
              hint="Pause, capture plate, check chain visualization"),
    Flashcard(question="High-beam detected at night on highway",
              hint="Flag violation, check timestamp and nearby cams"),
    Flashcard(question="Cross-camera tracking lost at camera 3",
              hint="Trigger manual track continuation"),
)

PLACEHOLDER_CARD = Flashcard(question="No cards available", hint="")

LOGS: tuple[str, ...] = (
    "2025-10-21 21:12 — ANPR model updated (v1.0.3)",
    "2025-10-25 02:00 — Low-light dataset ingested (12 clips)",
    "2025-10-28 19:40 — Pilot: Bandwidth drop reported in Zone 4",
)

CHAINS: tuple[Chain, ...] = (
    Chain(
        event="Suspicious Vehicle 1",
        start_time="2025-11-01 21:12",
        steps=(
            ChainStep(camera="CCTV-Market", time="21:12"),
            ChainStep(camera="Bridge-Cam", time="21:15"),
            ChainStep(camera="Harbour-Entry", time="21:18"),
        ),
    ),
)

STAT_TILES: tuple[StatTile, ...] = (
    StatTile(value="312", label="Total Cameras", color=TileColor.INFO),
    StatTile(value="28", label="Bodycams Active", color=TileColor.PRIMARY),
    StatTile(value="92%", label="ANPR Accuracy", color=TileColor.ACCENT),
    StatTile(value="14", label="Alerts Today", color=TileColor.WARNING),
)

PLACEHOLDER_MESSAGES = {
    PlaceholderAction.TAG_FRAME: "Tag frame (placeholder)",
    PlaceholderAction.DATASET_DETAILS: "Open dataset details (placeholder)",
    PlaceholderAction.TOGGLE_MODE: "Toggle demo/prod (placeholder)",
    PlaceholderAction.CONFIGURE_STORAGE: "Open storage settings (placeholder)",
    PlaceholderAction.START_QUIZ: "Open training quiz (placeholder)",
}

SIMULATION_NEXT_STEPS: tuple[str, ...] = (
    "Attach real videos (bodycam / CCTV) to each dataset",
    "Annotate frames with bounding boxes & plate text",
    'Hook model inference endpoint to the "Run" button',
)


# ─── Lookups ────────────────────────────────────────────────

def find_feed(feed_id: str, feeds: Sequence[Feed] = FEEDS) -> Optional[Feed]:
    return next((f for f in feeds if f.id == feed_id), None)


def find_dataset(dataset_id: str, datasets: Sequence[Dataset] = DATASETS) -> Optional[Dataset]:
    return next((d for d in datasets if d.id == dataset_id), None)
