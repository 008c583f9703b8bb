"""
Kakinada CCC — API Tests: UI actions, JSON state API, health, metrics
"""
import pytest
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from kakinada_ccc.config import Settings
from kakinada_ccc.main import create_app
from kakinada_ccc.metrics import api_requests
from kakinada_ccc.mock_data import FEEDS
from kakinada_ccc.models import Page, PlaceholderAction
from kakinada_ccc.shell import MountError


# ═══════════════════════════════════════════════════════════
# 1. Startup
# ═══════════════════════════════════════════════════════════

class TestStartup:

    def test_missing_mount_target_aborts(self):
        with pytest.raises(MountError):
            create_app(Settings(_env_file=None, MOUNT_ID="app-root"))

    def test_unknown_backend_aborts(self):
        with pytest.raises(ValueError):
            create_app(Settings(_env_file=None, DETECTION_BACKEND="remote"))

    def test_each_app_owns_its_state(self, settings):
        a, b = create_app(settings), create_app(settings)
        assert a.state.center is not b.state.center

    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "healthy"
        assert body["detection_backend"] == "mock"
        assert body["env"] == "test"


# ═══════════════════════════════════════════════════════════
# 2. Server-rendered UI
# ═══════════════════════════════════════════════════════════

class TestUI:

    def test_root_redirects_to_ui(self, client):
        r = client.get("/", follow_redirects=False)
        assert r.status_code == 307
        assert r.headers["location"] == "/ui"

    def test_ui_renders_dashboard(self, client):
        r = client.get("/ui")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert '<div id="root">' in r.text
        assert "City Command Dashboard" in r.text

    @pytest.mark.parametrize("page", list(Page))
    def test_navigate_form(self, client, page):
        r = client.post(f"/ui/navigate/{page.value}", follow_redirects=False)
        assert r.status_code == 303
        assert r.headers["location"] == "/ui"
        assert client.get("/api/v1/state").json()["page"] == page.value

    def test_navigate_unknown_page(self, client):
        assert client.post("/ui/navigate/reports").status_code == 422

    def test_select_feed_and_detect(self, client):
        client.post("/ui/navigate/feeds")
        client.post("/ui/feeds/cctv-02/select")
        html = client.post("/ui/detections/run").text
        assert 'data-feed-id="cctv-02" data-selected="true"' in html
        assert "vehicle — 94%" in html
        html = client.post("/ui/detections/stop").text
        assert "Run simulation to view detections." in html

    def test_select_unknown_feed(self, client):
        assert client.post("/ui/feeds/nope/select").status_code == 404

    def test_run_unknown_dataset(self, client):
        assert client.post("/ui/datasets/nope/run").status_code == 404

    def test_training_forms(self, client):
        client.post("/ui/navigate/training")
        client.post("/ui/training/prev")
        assert client.get("/api/v1/state").json()["flash_index"] == 2
        client.post("/ui/training/next")
        assert client.get("/api/v1/state").json()["flash_index"] == 0


# ═══════════════════════════════════════════════════════════
# 3. JSON API
# ═══════════════════════════════════════════════════════════

class TestStateAPI:

    def test_initial_state(self, client):
        state = client.get("/api/v1/state").json()
        assert state["page"] == "dashboard"
        assert state["selected_feed"]["id"] == FEEDS[0].id
        assert state["active_simulation"] is None
        assert state["flash_index"] == 0

    def test_navigate(self, client):
        r = client.post("/api/v1/state/navigate", json={"page": "chains"})
        assert r.json()["page"] == "chains"
        assert client.post("/api/v1/state/navigate", json={"page": "x"}).status_code == 422

    @pytest.mark.parametrize("feed", FEEDS, ids=lambda f: f.id)
    def test_detection_ignores_feed(self, client, feed):
        client.post(f"/api/v1/state/feeds/{feed.id}/select")
        sim = client.post("/api/v1/state/detections/run").json()["active_simulation"]
        assert sim["feed_id"] == feed.id
        assert [(d["label"], d["confidence"]) for d in sim["detections"]] == [
            ("vehicle", 0.94), ("license_plate", 0.87),
        ]
        assert client.post("/api/v1/state/detections/stop").json()["active_simulation"] is None

    @pytest.mark.parametrize("dataset_id", ["ds-anpr-night", "ds-highbeam", "ds-tracking"])
    def test_dataset_run_ignores_dataset(self, client, dataset_id):
        sim = client.post(f"/api/v1/state/datasets/{dataset_id}/run").json()["active_simulation"]
        assert sim["dataset_id"] == dataset_id
        assert [(d["label"], d["confidence"]) for d in sim["detections"]] == [
            ("vehicle", 0.92), ("person", 0.78), ("license_plate", 0.86),
        ]

    def test_flashcards_wrap(self, client):
        for _ in range(3):
            state = client.post("/api/v1/state/training/next").json()
        assert state["flash_index"] == 0
        state = client.post("/api/v1/state/training/prev").json()
        assert state["flash_index"] == 2
        assert state["current_card"]["question"] == "Cross-camera tracking lost at camera 3"

    @pytest.mark.parametrize("action", list(PlaceholderAction))
    def test_placeholders(self, client, action):
        before = client.get("/api/v1/state").json()
        r = client.post(f"/api/v1/state/placeholders/{action.value}")
        assert r.status_code == 200
        assert r.json()["message"].endswith("(placeholder)")
        assert client.get("/api/v1/state").json() == before

    def test_reset(self, client):
        client.post("/api/v1/state/navigate", json={"page": "settings"})
        client.post("/api/v1/state/detections/run")
        state = client.post("/api/v1/state/reset").json()
        assert state["page"] == "dashboard"
        assert state["active_simulation"] is None


class TestCatalogAPI:

    def test_feeds(self, client):
        feeds = client.get("/api/v1/catalog/feeds").json()
        assert [f["id"] for f in feeds] == ["bodycam-01", "cctv-01", "cctv-02", "cctv-03"]
        assert feeds[0]["type"] == "Bodycam"

    def test_datasets(self, client):
        assert [d["count"] for d in client.get("/api/v1/catalog/datasets").json()] == [12, 8, 6]

    def test_chains(self, client):
        chain = client.get("/api/v1/catalog/chains").json()[0]
        assert [s["camera"] for s in chain["steps"]] == ["CCTV-Market", "Bridge-Cam", "Harbour-Entry"]

    def test_logs_and_stats(self, client):
        assert client.get("/api/v1/catalog/logs").json()["total"] == 3
        assert len(client.get("/api/v1/catalog/stats").json()) == 4
        assert len(client.get("/api/v1/catalog/flashcards").json()) == 3


class TestMetrics:

    def test_metrics_exposed(self, client):
        client.post("/api/v1/state/detections/run")
        r = client.get("/metrics")
        assert r.status_code == 200
        assert "ccc_actions_total" in r.text
        assert "ccc_simulations_total" in r.text

    def test_request_series_use_route_template(self, client):
        def series():
            return {
                tuple(sorted(s.labels.items()))
                for m in api_requests.collect() for s in m.samples
                if s.name == "ccc_api_requests_total"
            }

        before = series()
        for i in range(20):
            client.post(f"/ui/feeds/bogus-{i}/select")
            client.get(f"/no-such-page-{i}")
        added = series() - before
        assert len(added) <= 2
        paths = {dict(labels)["path"] for labels in series()}
        assert "/ui/feeds/{feed_id}/select" in paths
        assert "unmatched" in paths
        assert not any("bogus" in p or "no-such-page" in p for p in paths)

    def test_page_renders_counted(self, client):
        def renders():
            return REGISTRY.get_sample_value("ccc_page_renders_total", {"page": "training"}) or 0.0

        client.post("/api/v1/state/navigate", json={"page": "training"})
        before = renders()
        client.get("/ui")
        client.get("/ui")
        assert renders() == before + 2


class TestMedia:

    def test_media_dir_served(self, tmp_path):
        (tmp_path / "sample_bridge.mp4").write_bytes(b"\x00\x00\x00\x18ftypmp42")
        app = create_app(Settings(_env_file=None, MEDIA_DIR=str(tmp_path)))
        with TestClient(app) as c:
            r = c.get("/mnt/data/sample_bridge.mp4")
        assert r.status_code == 200
        assert r.content == b"\x00\x00\x00\x18ftypmp42"

    def test_missing_media_dir_not_mounted(self, tmp_path):
        app = create_app(Settings(_env_file=None, MEDIA_DIR=str(tmp_path / "missing")))
        assert not any(getattr(r, "path", None) == "/mnt/data" for r in app.routes)
        with TestClient(app) as c:
            assert c.get("/health").status_code == 200
            assert c.get("/mnt/data/sample_bridge.mp4").status_code == 404

    def test_media_dir_unset_not_mounted(self, app):
        assert not any(getattr(r, "path", None) == "/mnt/data" for r in app.routes)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
