"""
API Integration Tests for Snapshot Endpoints
"""

import base64

from PIL import Image


class TestSnapshotAPI:
    """Integration tests for snapshot API endpoints"""

    def test_latest_snapshot(self, client, snapshot_dir):
        response = client.get("/api/snapshot/latest")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "vlcsnap-0001.png"
        assert data["path"] == str(snapshot_dir / "vlcsnap-0001.png")

    def test_latest_snapshot_explicit_dir(self, client, tmp_path_factory):
        other = tmp_path_factory.mktemp("other")
        Image.new("RGB", (4, 4), (200, 200, 200)).save(other / "vlcsnap-0042.png")

        response = client.get("/api/snapshot/latest", params={"snapshot_dir": str(other)})

        assert response.status_code == 200
        assert response.json()["name"] == "vlcsnap-0042.png"

    def test_latest_snapshot_empty_dir(self, client, tmp_path_factory):
        empty = tmp_path_factory.mktemp("empty")

        response = client.get("/api/snapshot/latest", params={"snapshot_dir": str(empty)})

        assert response.status_code == 404
        assert response.json()["stage"] == "find"

    def test_process_snapshot(self, client, snapshot_dir):
        response = client.post("/api/snapshot/process", json={"luma_offset": 51})

        assert response.status_code == 200
        data = response.json()
        assert data["bounding_rect"] == {"left": 4, "top": 4, "width": 32, "height": 22}
        assert data["original_size"] == {"width": 40, "height": 30}
        assert data["output_size"] == {"width": 32, "height": 22}
        assert data["printed"] is False
        assert data["output_path"] == str(snapshot_dir / "vlcsnap-0001-vlc-print-out.png")
        assert base64.b64decode(data["thumbnail_base64"])[:2] == b"\xff\xd8"

        written = Image.open(data["output_path"])
        assert written.size == (32, 22)

    def test_process_black_snapshot(self, client, tmp_path_factory):
        black = tmp_path_factory.mktemp("black")
        Image.new("RGB", (10, 10), (0, 0, 0)).save(black / "vlcsnap-0001.png")

        response = client.post(
            "/api/snapshot/process", json={"snapshot_dir": str(black), "luma_offset": 0}
        )

        assert response.status_code == 422
        data = response.json()
        assert data["stage"] == "crop"
        assert "entirely background" in data["caused_by"][0]

    def test_process_with_unsupported_printer(self, client):
        response = client.post(
            "/api/snapshot/process", json={"luma_offset": 0, "send_to_printer": True}
        )

        assert response.status_code == 501
        assert response.json()["stage"] == "print"

    def test_process_printing_disabled(self, client, api_config):
        api_config["printing"]["enabled"] = False

        response = client.post(
            "/api/snapshot/process", json={"luma_offset": 0, "send_to_printer": True}
        )

        assert response.status_code == 409

    def test_process_invalid_offset(self, client):
        response = client.post("/api/snapshot/process", json={"luma_offset": 300})
        assert response.status_code == 422

    def test_process_without_directory(self, client, api_config):
        api_config["snapshot"]["directory"] = None

        response = client.post("/api/snapshot/process", json={"luma_offset": 0})

        assert response.status_code == 400


class TestSystemAPI:
    """Integration tests for system endpoints"""

    def test_status(self, client, snapshot_dir):
        response = client.get("/api/system/status")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["platform"] == "linux"
        assert data["printing_supported"] is False
        assert data["snapshot_dir"] == str(snapshot_dir)

    def test_root_and_health(self, client):
        assert client.get("/").json()["name"] == "Snapshot Print Flow"

        health = client.get("/health").json()
        assert health["services"]["snapshot_store"] is True
        assert health["services"]["print_dispatcher"] is True
