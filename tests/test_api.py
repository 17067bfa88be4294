"""HTTP API: previews, downloads and the gallery."""

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import services.raster_service as raster_module
from services.export_service import XML_DECLARATION
from services.figure_service import get_figure_service
from services.raster_service import RasterService
from services.storage_service import get_storage_service


SCENARIO = {
    "body_color": "vanilla",
    "num_layers": 3,
    "num_eyes": 2,
    "eye_color": "blue",
    "has_arms": False,
    "has_legs": False,
    "mouth_style": "smile",
}


class FailingRaster(RasterService):

    def is_available(self):
        return True

    def rasterize(self, svg, scale=None):
        raise RuntimeError("cairo exploded")


@pytest.fixture
def no_rasterizer(monkeypatch):
    monkeypatch.setattr(raster_module, "cairosvg", None)


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["service"] == "Crochet Poop Generator"


def test_health(client):
    body = client.get("/health").json()

    assert body["api"] == "healthy"
    assert body["database"] == "healthy"
    assert body["rasterizer"] in ("available", "not installed")


def test_options(client):
    body = client.get("/generate/options").json()

    assert [option["name"] for option in body["body_colors"]] == ["chocolate", "vanilla", "blue"]
    assert body["body_colors"][1]["colors"]["main"] == "#F5DEB3"
    assert body["eye_colors"]["blue"] == "#1E90FF"
    assert body["mouth_styles"] == ["smile", "frown", "tongue", "shark", "none"]
    assert body["layers"] == {"min": 2, "max": 5}
    assert body["eyes"] == {"min": 1, "max": 6}
    assert body["defaults"]["body_color"] == "chocolate"
    assert body["defaults"]["num_layers"] == 3


class TestPreview:

    def test_scenario(self, client):
        response = client.post("/generate/figure", json=SCENARIO)

        assert response.status_code == 200
        body = response.json()
        assert body["settings"] == SCENARIO
        assert body["width"] == 230
        assert body["height"] == 223
        assert body["svg"].startswith("<svg")
        assert body["filename"] == "crochet_poop_vanilla_3layers_2blueeyes.svg"
        assert body["description"].startswith("A beautiful vanilla log")
        assert body["sound_url"] is None or body["sound_url"].endswith(".mp3")

    def test_defaults_for_empty_body(self, client):
        body = client.post("/generate/figure", json={}).json()

        assert body["settings"]["body_color"] == "chocolate"
        assert body["settings"]["mouth_style"] == "smile"

    def test_out_of_range_values_are_normalized(self, client):
        request = dict(SCENARIO, num_layers=10, num_eyes=0, mouth_style="kiss", body_color="mint")
        settings = client.post("/generate/figure", json=request).json()["settings"]

        assert settings["num_layers"] == 5
        assert settings["num_eyes"] == 1
        assert settings["mouth_style"] == "smile"
        assert settings["body_color"] == "chocolate"

    def test_legs_grow_the_viewport(self, client):
        body = client.post("/generate/figure", json=dict(SCENARIO, has_legs=True)).json()
        assert body["height"] == 283

    def test_wrong_type_is_rejected(self, client):
        response = client.post("/generate/figure", json=dict(SCENARIO, num_layers="many"))
        assert response.status_code == 422


def test_svg_download(client):
    response = client.post("/generate/figure.svg", json=SCENARIO)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.headers["content-disposition"] == (
        'attachment; filename="crochet_poop_vanilla_3layers_2blueeyes.svg"'
    )
    assert response.headers["x-sound-url"].startswith("/fartAudio/fart")
    assert response.text.startswith(XML_DECLARATION)


def test_png_download_without_rasterizer(client, no_rasterizer):
    response = client.post("/generate/figure.png", json=SCENARIO)

    assert response.status_code == 503
    assert "SVG" in response.json()["detail"]


class TestGallery:

    def test_save_get_and_delete(self, client, no_rasterizer):
        response = client.post("/gallery/save", json=SCENARIO)
        assert response.status_code == 201

        item = response.json()
        assert item["name"] == "A beautiful vanilla log with 3 stinky stacks, 2 blue stink eyes, smile mouth"
        assert item["body_color"] == "vanilla"
        assert item["height"] == 223
        assert item["png_path"] is None
        assert item["png_url"] is None
        assert item["svg_url"].endswith(f"/storage/figures/{item['svg_path']}")

        fetched = client.get(f"/gallery/{item['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["svg_path"] == item["svg_path"]

        stored = client.get(f"/storage/figures/{item['svg_path']}")
        assert stored.status_code == 200

        deleted = client.delete(f"/gallery/{item['id']}")
        assert deleted.status_code == 200
        assert deleted.json()["success"] is True

        assert client.get(f"/gallery/{item['id']}").status_code == 404
        assert client.delete(f"/gallery/{item['id']}").status_code == 404

    def test_custom_name_and_normalized_settings(self, client, no_rasterizer):
        request = dict(SCENARIO, name="Sir Swirl", num_eyes=12)
        item = client.post("/gallery/save", json=request).json()

        assert item["name"] == "Sir Swirl"
        assert item["num_eyes"] == 6

        client.delete(f"/gallery/{item['id']}")

    def test_list_filters_by_body_color(self, client, no_rasterizer):
        blue = client.post("/gallery/save", json=dict(SCENARIO, body_color="blue")).json()
        vanilla = client.post("/gallery/save", json=SCENARIO).json()

        listing = client.get("/gallery", params={"body_color": "blue"}).json()
        ids = [entry["id"] for entry in listing["items"]]
        assert blue["id"] in ids
        assert vanilla["id"] not in ids
        assert all(entry["body_color"] == "blue" for entry in listing["items"])
        assert listing["total"] == len(listing["items"])

        everything = client.get("/gallery").json()
        assert {blue["id"], vanilla["id"]} <= {entry["id"] for entry in everything["items"]}

        for item in (blue, vanilla):
            client.delete(f"/gallery/{item['id']}")

    def test_pagination(self, client, no_rasterizer):
        saved = [client.post("/gallery/save", json=SCENARIO).json() for _ in range(3)]

        page = client.get("/gallery", params={"skip": 0, "limit": 2}).json()
        assert len(page["items"]) == 2
        assert page["limit"] == 2
        assert page["total"] >= 3

        for item in saved:
            client.delete(f"/gallery/{item['id']}")

    def test_stats(self, client, no_rasterizer):
        item = client.post("/gallery/save", json=dict(SCENARIO, has_arms=True)).json()

        stats = client.get("/gallery/stats").json()
        assert stats["total_items"] >= 1
        assert stats["by_body_color"]["vanilla"] >= 1
        assert stats["with_arms"] >= 1
        assert stats["stored_files"] >= 1

        client.delete(f"/gallery/{item['id']}")

    def test_raster_failure_leaves_no_files(self, client, monkeypatch):
        monkeypatch.setattr(get_figure_service(), "raster", FailingRaster())
        before = set(get_storage_service().list_figures())

        response = client.post("/gallery/save", json=SCENARIO)

        assert response.status_code == 500
        assert set(get_storage_service().list_figures()) == before

    def test_failed_commit_removes_files(self, client, no_rasterizer, monkeypatch):
        def broken_commit(session):
            raise SQLAlchemyError("database is locked")

        monkeypatch.setattr(Session, "commit", broken_commit)
        before = set(get_storage_service().list_figures())
        total = client.get("/gallery").json()["total"]

        response = client.post("/gallery/save", json=SCENARIO)

        assert response.status_code == 500
        assert set(get_storage_service().list_figures()) == before
        assert client.get("/gallery").json()["total"] == total

    def test_missing_item(self, client):
        assert client.get("/gallery/999999").status_code == 404
