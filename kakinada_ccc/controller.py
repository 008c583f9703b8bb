"""
Kakinada CCC — Command Center Controller

Single owner of the view state: active page, selected feed, the last
simulation result and the flashcard index. Views and routers receive the
controller explicitly; nothing else holds mutable state.
"""
from typing import Optional, Sequence

from kakinada_ccc.detection import DetectionBackend
from kakinada_ccc.log import get_logger
from kakinada_ccc.metrics import operator_actions
from kakinada_ccc.mock_data import (
    DATASETS, FEEDS, FLASHCARDS, PLACEHOLDER_CARD, PLACEHOLDER_MESSAGES,
    find_dataset, find_feed,
)
from kakinada_ccc.models import (
    Dataset, Feed, Flashcard, Page, PlaceholderAction, SimulationResult, ViewStateSnapshot,
)

logger = get_logger()


class CommandCenter:
    def __init__(
        self,
        backend: DetectionBackend,
        feeds: Sequence[Feed] = FEEDS,
        datasets: Sequence[Dataset] = DATASETS,
        cards: Sequence[Flashcard] = FLASHCARDS,
    ):
        if not feeds:
            raise ValueError("CommandCenter needs at least one feed to select by default")
        self.backend = backend
        self.feeds = tuple(feeds)
        self.datasets = tuple(datasets)
        self.cards = tuple(cards)
        self.reset()

    def reset(self) -> None:
        """Return to the state of a fresh page load."""
        self.page: Page = Page.DASHBOARD
        self.selected_feed: Feed = self.feeds[0]
        self.active_simulation: Optional[SimulationResult] = None
        self.flash_index: int = 0

    # ─── Navigation ─────────────────────────────────────────

    def navigate(self, page: Page) -> None:
        self.page = Page(page)
        operator_actions.labels(action="navigate").inc()
        logger.info(f"page.changed page={self.page.value}")

    # ─── Feeds & detection ──────────────────────────────────

    def select_feed(self, feed_id: str) -> Feed:
        feed = find_feed(feed_id, self.feeds)
        if feed is None:
            raise LookupError(f"Feed not found: {feed_id}")
        self.selected_feed = feed
        operator_actions.labels(action="select_feed").inc()
        logger.info(f"feed.selected feed_id={feed.id}")
        return feed

    def run_detection(self) -> SimulationResult:
        self.active_simulation = self.backend.detect_feed(self.selected_feed)
        operator_actions.labels(action="run_detection").inc()
        return self.active_simulation

    def stop_detection(self) -> None:
        self.active_simulation = None
        operator_actions.labels(action="stop_detection").inc()
        logger.info("detection.stopped")

    def run_dataset(self, dataset_id: str) -> SimulationResult:
        dataset = find_dataset(dataset_id, self.datasets)
        if dataset is None:
            raise LookupError(f"Dataset not found: {dataset_id}")
        self.active_simulation = self.backend.run_dataset(dataset)
        operator_actions.labels(action="run_dataset").inc()
        return self.active_simulation

    # ─── Training flashcards ────────────────────────────────

    def next_card(self) -> int:
        if self.cards:
            self.flash_index = (self.flash_index + 1) % len(self.cards)
        operator_actions.labels(action="next_card").inc()
        return self.flash_index

    def prev_card(self) -> int:
        if self.cards:
            n = len(self.cards)
            self.flash_index = (self.flash_index - 1 + n) % n
        operator_actions.labels(action="prev_card").inc()
        return self.flash_index

    @property
    def current_card(self) -> Flashcard:
        if 0 <= self.flash_index < len(self.cards):
            return self.cards[self.flash_index]
        return PLACEHOLDER_CARD

    # ─── Placeholders ───────────────────────────────────────

    def placeholder(self, action: PlaceholderAction) -> str:
        action = PlaceholderAction(action)
        message = PLACEHOLDER_MESSAGES[action]
        logger.info(f"placeholder.invoked action={action.value}")
        return message

    def snapshot(self) -> ViewStateSnapshot:
        return ViewStateSnapshot(
            page=self.page,
            selected_feed=self.selected_feed,
            active_simulation=self.active_simulation,
            flash_index=self.flash_index,
            current_card=self.current_card,
        )
