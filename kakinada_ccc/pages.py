"""
Kakinada CCC — Page Components

Each component is a plain function of its arguments returning an HTML
fragment. State comes in from the CommandCenter; actions go out as small
POST forms handled by routers/ui.py.
"""
import json
from html import escape
from typing import Optional, Sequence

from kakinada_ccc.controller import CommandCenter
from kakinada_ccc.metrics import page_renders
from kakinada_ccc.mock_data import (
    CHAINS, DATASETS, FEEDS, FLASHCARDS, LOGS, PLACEHOLDER_CARD,
    PLACEHOLDER_MESSAGES, SIMULATION_NEXT_STEPS, STAT_TILES, cls,
)
from kakinada_ccc.models import (
    Chain, Dataset, Feed, Flashcard, Page, PlaceholderAction,
    SimulationResult, StatTile, TileColor,
)


def _form_button(action: str, label: str, style: str, extra: str = "") -> str:
    return (
        f'<form method="post" action="{escape(action)}" class="inline">'
        f'<button type="submit" class="{cls(style)}"{extra}>{escape(label)}</button>'
        f"</form>"
    )


def _placeholder_button(action: PlaceholderAction, label: str, style: str) -> str:
    message = json.dumps(PLACEHOLDER_MESSAGES[action])
    return (
        f'<button type="button" class="{cls(style)}" data-placeholder="{action.value}" '
        f'onclick="alert({escape(message)})">{escape(label)}</button>'
    )


def _heading(page: Page, size: str = "text-xl", margin: str = "mb-4") -> str:
    return f'<h1 class="{size} font-semibold {margin}">{escape(page.heading)}</h1>'


# ═══════════════════════════════════════════════════════════
# SIDEBAR
# ═══════════════════════════════════════════════════════════

def sidebar(page: Page) -> str:
    items = []
    for item in Page:
        state = (
            "bg-indigo-100 text-indigo-700 font-medium"
            if item is page else "hover:bg-slate-100"
        )
        current = ' aria-current="page"' if item is page else ""
        items.append(
            f'<li class="rounded transition {state}" data-page="{item.value}"{current}>'
            f'<form method="post" action="/ui/navigate/{item.value}">'
            f'<button type="submit" class="p-2 w-full cursor-pointer">{escape(item.label)}</button>'
            f"</form></li>"
        )
    return (
        '<nav class="w-64 bg-white border-r p-4 flex flex-col">'
        '<div class="mb-6">'
        '<div class="text-lg font-semibold text-indigo-600">Mobius — CCC</div>'
        '<div class="text-sm text-slate-500">Kakinada Smart Policing</div>'
        "</div>"
        f'<ul class="space-y-1 text-sm flex-1">{"".join(items)}</ul>'
        '<div class="text-xs text-slate-400 mt-4">Prototype • Demo Mode</div>'
        "</nav>"
    )


# ═══════════════════════════════════════════════════════════
# DASHBOARD
# ═══════════════════════════════════════════════════════════

_TILE_CLASSES = {
    TileColor.PRIMARY: "bg-indigo-100 text-indigo-700",
    TileColor.ACCENT: "bg-emerald-100 text-emerald-700",
    TileColor.WARNING: "bg-amber-100 text-amber-700",
    TileColor.INFO: "bg-sky-100 text-sky-700",
}


def stat(tile: StatTile) -> str:
    color = _TILE_CLASSES.get(tile.color, "bg-white")
    return (
        f'<div class="p-4 rounded-xl shadow {color}">'
        f'<div class="text-2xl font-bold">{escape(tile.value)}</div>'
        f'<div class="text-sm">{escape(tile.label)}</div>'
        f"</div>"
    )


def dashboard_page(tiles: Sequence[StatTile] = STAT_TILES, logs: Sequence[str] = LOGS) -> str:
    log_items = "".join(f"<li>{escape(line)}</li>" for line in logs)
    return (
        '<div class="space-y-4">'
        f'{_heading(Page.DASHBOARD, size="text-2xl")}'
        f'<div class="grid grid-cols-4 gap-4">{"".join(stat(t) for t in tiles)}</div>'
        '<div class="bg-white rounded-xl p-4 shadow mt-4">'
        '<h2 class="font-semibold mb-2">Recent Activity</h2>'
        f'<ul class="text-sm space-y-1">{log_items}</ul>'
        "</div></div>"
    )


# ═══════════════════════════════════════════════════════════
# LIVE FEEDS
# ═══════════════════════════════════════════════════════════

# Restart playback for the bound source; play() rejections (autoplay
# policy, missing media) are dropped.
_RESTART_PLAYBACK = """<script>
(function(){
  var v = document.getElementById('live-video');
  if (!v) return;
  try { v.pause(); v.load(); var p = v.play(); if (p && p.catch) p.catch(function(){}); }
  catch (e) {}
})();
</script>"""


def detections_panel(simulation: Optional[SimulationResult]) -> str:
    if simulation is None:
        body = '<p class="text-sm text-slate-500">Run simulation to view detections.</p>'
    else:
        body = "".join(
            f'<p class="text-sm border p-1 rounded mb-1" data-label="{escape(d.label)}">'
            f"{escape(d.label)} — {d.percent}%</p>"
            for d in simulation.detections
        )
    return (
        '<div class="bg-white p-4 rounded-xl shadow" id="detections">'
        '<h2 class="font-medium mb-2">Detections</h2>'
        f"{body}</div>"
    )


def feed_thumbnail(feed: Feed, selected: bool) -> str:
    ring = " ring-2 ring-indigo-500" if selected else ""
    return (
        f'<form method="post" action="/ui/feeds/{escape(feed.id)}/select" '
        f'class="cursor-pointer border rounded-md overflow-hidden{ring}" '
        f'data-feed-id="{escape(feed.id)}" data-selected="{str(selected).lower()}">'
        '<button type="submit" class="w-full text-left">'
        '<video class="w-full h-24 bg-black object-cover" muted preload="metadata">'
        f'<source src="{escape(feed.demo_src)}" type="video/mp4"></video>'
        f'<span class="block p-2 text-xs font-medium">{escape(feed.location)}</span>'
        "</button></form>"
    )


def live_feeds_page(
    selected_feed: Feed,
    active_simulation: Optional[SimulationResult],
    feeds: Sequence[Feed] = FEEDS,
) -> str:
    thumbs = "".join(feed_thumbnail(f, f.id == selected_feed.id) for f in feeds)
    return (
        '<div class="space-y-4">'
        f'{_heading(Page.FEEDS, margin="")}'
        '<div class="grid grid-cols-3 gap-4">'
        '<div class="col-span-2 bg-white p-4 rounded-xl shadow">'
        '<h2 class="font-medium mb-2">Live Video</h2>'
        f'<video id="live-video" controls autoplay muted class="w-full h-96 bg-black rounded-lg" '
        f'data-feed-id="{escape(selected_feed.id)}">'
        f'<source src="{escape(selected_feed.demo_src)}" type="video/mp4">'
        "Your browser does not support the video tag.</video>"
        '<div class="mt-3 flex gap-2">'
        f'{_form_button("/ui/detections/run", "Run Detection", "btn")}'
        f'{_form_button("/ui/detections/stop", "Stop", "btn-outline")}'
        f'{_placeholder_button(PlaceholderAction.TAG_FRAME, "Tag Frame", "btn-ghost")}'
        "</div></div>"
        f"{detections_panel(active_simulation)}"
        "</div>"
        f'<div class="grid grid-cols-4 gap-3 mt-4">{thumbs}</div>'
        f"{_RESTART_PLAYBACK}"
        "</div>"
    )


# ═══════════════════════════════════════════════════════════
# TRACKING CHAINS
# ═══════════════════════════════════════════════════════════

def movement_chain_visualization(chains: Sequence[Chain]) -> str:
    rows = []
    for chain in chains:
        steps = "".join(
            f'<div class="flex-1 p-2 bg-slate-50 rounded text-xs text-center">'
            f'{escape(step.camera)}<br><span class="text-slate-400">{escape(step.time)}</span></div>'
            for step in chain.steps
        )
        rows.append(
            '<div class="p-2 border rounded">'
            '<div class="flex justify-between text-xs">'
            f"<div><b>Event:</b> {escape(chain.event)}</div>"
            f'<div class="text-slate-400">Start: {escape(chain.start_time)}</div>'
            "</div>"
            f'<div class="mt-2 flex gap-2 items-center">{steps}</div>'
            "</div>"
        )
    return (
        '<div class="bg-white rounded-2xl shadow p-3">'
        '<div class="font-medium mb-2">Movement Chain Visualization</div>'
        '<div class="text-sm text-slate-500 mb-3">Chain timeline across cameras during an event</div>'
        f'<div class="space-y-3">{"".join(rows)}</div>'
        "</div>"
    )


def tracking_chains_page(chains: Sequence[Chain] = CHAINS) -> str:
    return f"<div>{_heading(Page.CHAINS)}{movement_chain_visualization(chains)}</div>"


# ═══════════════════════════════════════════════════════════
# SIMULATIONS
# ═══════════════════════════════════════════════════════════

def simulation_panel(datasets: Sequence[Dataset]) -> str:
    rows = "".join(
        f'<div class="p-2 border rounded flex justify-between items-center" data-dataset-id="{escape(ds.id)}">'
        '<div class="text-sm">'
        f'<div class="font-medium">{escape(ds.name)}</div>'
        f'<div class="text-xs text-slate-500">{escape(ds.type)} • {ds.count} items</div>'
        "</div>"
        '<div class="flex gap-2">'
        f'{_form_button(f"/ui/datasets/{ds.id}/run", "Run", "btn-sm")}'
        f'{_placeholder_button(PlaceholderAction.DATASET_DETAILS, "Details", "btn-ghost")}'
        "</div></div>"
        for ds in datasets
    )
    steps = "".join(f"<li>{escape(s)}</li>" for s in SIMULATION_NEXT_STEPS)
    return (
        '<div class="bg-white rounded-xl p-4 shadow">'
        '<div class="text-xs text-slate-500 mb-2">Datasets &amp; Videos available for simulation</div>'
        f'<div class="space-y-2 max-h-60 overflow-auto">{rows}</div>'
        '<div class="mt-3"><small class="text-slate-400">Suggested next steps:</small>'
        f'<ul class="text-xs list-disc ml-5 mt-1 text-slate-600">{steps}</ul></div>'
        "</div>"
    )


def simulations_page(datasets: Sequence[Dataset] = DATASETS) -> str:
    return f"<div>{_heading(Page.SIMULATIONS)}{simulation_panel(datasets)}</div>"


# ═══════════════════════════════════════════════════════════
# TRAINING
# ═══════════════════════════════════════════════════════════

def flashcards(cards: Sequence[Flashcard], index: int) -> str:
    card = cards[index] if 0 <= index < len(cards) else PLACEHOLDER_CARD
    return (
        '<div class="space-y-2">'
        f'<div class="bg-slate-50 p-3 rounded min-h-[120px] flex flex-col justify-between" data-index="{index}">'
        '<div><div class="text-sm text-slate-500">Scenario</div>'
        f'<div class="font-semibold mt-1" id="card-question">{escape(card.question)}</div></div>'
        f'<div class="text-xs text-slate-600 mt-2" id="card-hint">{escape(card.hint)}</div>'
        "</div>"
        '<div class="flex gap-2">'
        f'{_form_button("/ui/training/prev", "Prev", "btn")}'
        f'{_form_button("/ui/training/next", "Next", "btn")}'
        f'{_placeholder_button(PlaceholderAction.START_QUIZ, "Start Quiz", "btn-ghost")}'
        "</div></div>"
    )


def training_page(flash_index: int, cards: Sequence[Flashcard] = FLASHCARDS) -> str:
    return (
        f"<div>{_heading(Page.TRAINING)}"
        '<div class="grid grid-cols-2 gap-4">'
        '<div class="bg-white rounded-xl p-4 shadow">'
        '<h2 class="font-medium mb-2">Flashcards</h2>'
        f"{flashcards(cards, flash_index)}"
        "</div>"
        '<div class="bg-white rounded-xl p-4 shadow">'
        '<h2 class="font-medium mb-2">Training Progress</h2>'
        '<p class="text-sm text-slate-500">Quizzes, scores and certification progress will appear here.</p>'
        "</div></div></div>"
    )


# ═══════════════════════════════════════════════════════════
# SETTINGS
# ═══════════════════════════════════════════════════════════

def _settings_row(title: str, subtitle: str, button: str) -> str:
    return (
        '<div class="flex items-center justify-between">'
        f'<div><div class="font-medium">{escape(title)}</div>'
        f'<div class="text-sm text-slate-500">{escape(subtitle)}</div></div>'
        f"{button}</div>"
    )


def settings_page() -> str:
    return (
        f"<div>{_heading(Page.SETTINGS)}"
        '<div class="bg-white rounded-xl p-4 shadow space-y-3">'
        + _settings_row(
            "Operator Mode", "Demo / Production toggles and auth",
            _placeholder_button(PlaceholderAction.TOGGLE_MODE, "Toggle", "btn-outline"),
        )
        + _settings_row(
            "Dataset Storage", "S3 / Minio connection",
            _placeholder_button(PlaceholderAction.CONFIGURE_STORAGE, "Configure", "btn-ghost"),
        )
        + "</div></div>"
    )


# ═══════════════════════════════════════════════════════════
# ROOT
# ═══════════════════════════════════════════════════════════

def render_page(center: CommandCenter) -> str:
    """Render exactly one page, chosen by the controller's active page."""
    renderers = {
        Page.DASHBOARD: lambda: dashboard_page(),
        Page.FEEDS: lambda: live_feeds_page(center.selected_feed, center.active_simulation, center.feeds),
        Page.CHAINS: lambda: tracking_chains_page(),
        Page.SIMULATIONS: lambda: simulations_page(center.datasets),
        Page.TRAINING: lambda: training_page(center.flash_index, center.cards),
        Page.SETTINGS: lambda: settings_page(),
    }
    page_renders.labels(page=center.page.value).inc()
    return renderers[center.page]()


def render_app(center: CommandCenter) -> str:
    return (
        '<div class="h-screen flex bg-gray-100 text-slate-900 overflow-hidden">'
        f"{sidebar(center.page)}"
        f'<main class="flex-1 p-4 overflow-auto">{render_page(center)}</main>'
        "</div>"
    )
