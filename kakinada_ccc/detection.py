"""
Kakinada CCC — Detection Backends

A backend turns a feed or a dataset into a SimulationResult. The mock
backend ignores its input and returns fixed detections; a real inference
service plugs in behind the same protocol.
"""
from datetime import datetime, timezone
from typing import Callable, Protocol

from kakinada_ccc.log import get_logger
from kakinada_ccc.metrics import simulations_run
from kakinada_ccc.models import Dataset, Detection, Feed, SimulationResult

logger = get_logger()

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DetectionBackend(Protocol):
    name: str

    def detect_feed(self, feed: Feed) -> SimulationResult: ...

    def run_dataset(self, dataset: Dataset) -> SimulationResult: ...


FEED_DETECTIONS: tuple[Detection, ...] = (
    Detection(label="vehicle", confidence=0.94),
    Detection(label="license_plate", confidence=0.87),
)

DATASET_DETECTIONS: tuple[Detection, ...] = (
    Detection(label="vehicle", confidence=0.92),
    Detection(label="person", confidence=0.78),
    Detection(label="license_plate", confidence=0.86),
)


class MockDetectionBackend:
    """Fixed-output backend used in demo mode."""

    name = "mock"

    def __init__(self, clock: Clock = utc_now):
        self._clock = clock

    def detect_feed(self, feed: Feed) -> SimulationResult:
        result = SimulationResult(
            feed_id=feed.id,
            detections=FEED_DETECTIONS,
            timestamp=self._clock(),
        )
        simulations_run.labels(source="feed", backend=self.name).inc()
        logger.info(f"detection.run feed_id={feed.id} detections={len(result.detections)}")
        return result

    def run_dataset(self, dataset: Dataset) -> SimulationResult:
        # a real backend would stream per-clip inference here
        result = SimulationResult(
            dataset_id=dataset.id,
            detections=DATASET_DETECTIONS,
            timestamp=self._clock(),
        )
        simulations_run.labels(source="dataset", backend=self.name).inc()
        logger.info(f"simulation.run dataset_id={dataset.id} detections={len(result.detections)}")
        return result


_BACKENDS: dict[str, Callable[[], DetectionBackend]] = {
    "mock": MockDetectionBackend,
}


def get_backend(name: str) -> DetectionBackend:
    """Build the detection backend configured by DETECTION_BACKEND."""
    try:
        factory = _BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown detection backend {name!r}; available: {sorted(_BACKENDS)}"
        ) from None
    return factory()
