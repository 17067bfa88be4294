"""Export, raster, sound and figure services."""

import io
import random
from dataclasses import replace

import pytest

import services.raster_service as raster_module
from engine import Configuration, compose
from services.export_service import XML_DECLARATION, ExportService
from services.figure_service import FigureService
from services.raster_service import RasterService
from services.sound_service import SOUND_FILES, SoundService


@pytest.fixture
def export_service():
    return ExportService(prefix="crochet_poop")


@pytest.fixture
def no_rasterizer(monkeypatch):
    monkeypatch.setattr(raster_module, "cairosvg", None)


class TestFilenames:

    def test_scenario_svg(self, export_service, scenario_config):
        assert (
            export_service.build_filename(scenario_config, "svg")
            == "crochet_poop_vanilla_3layers_2blueeyes.svg"
        )

    def test_single_eye_is_singular(self, export_service):
        config = Configuration(num_eyes=1)
        assert (
            export_service.build_filename(config, "png")
            == "crochet_poop_chocolate_3layers_1blackeye.png"
        )

    def test_mouth_and_limbs_are_appended(self, export_service, scenario_config):
        config = replace(scenario_config, mouth_style="shark", has_arms=True, has_legs=True)
        assert (
            export_service.build_filename(config, "svg")
            == "crochet_poop_vanilla_3layers_2blueeyes_shark_arms_legs.svg"
        )

    def test_no_mouth_is_named(self, export_service):
        name = export_service.build_filename(Configuration(mouth_style="none"), "svg")
        assert name.endswith("_none.svg")

    def test_uses_normalized_values(self, export_service):
        config = Configuration(body_color="mint", num_layers=9, num_eyes=0, mouth_style="kiss")
        assert (
            export_service.build_filename(config, "svg")
            == "crochet_poop_chocolate_5layers_1blackeye.svg"
        )

    def test_custom_prefix(self):
        assert ExportService(prefix="figure").build_filename(Configuration(), "svg").startswith("figure_")


class TestDescription:

    def test_scenario(self, export_service, scenario_config):
        assert export_service.describe(scenario_config) == (
            "A beautiful vanilla log with 3 stinky stacks, 2 blue stink eyes, smile mouth"
        )

    def test_limbs_and_no_mouth(self, export_service):
        config = Configuration(num_eyes=1, mouth_style="none", has_arms=True, has_legs=True)
        assert export_service.describe(config) == (
            "A beautiful chocolate log with 3 stinky stacks, 1 black stink eye, "
            "no mouth, fudge fingers, turd trotters"
        )


def test_svg_document_has_xml_declaration(export_service, scenario_config):
    content = export_service.to_svg_document(compose(scenario_config))

    assert content.startswith(XML_DECLARATION)
    assert content[len(XML_DECLARATION):].startswith("<svg")


class TestSoundService:

    def test_always_cues_when_certain(self):
        sounds = SoundService(probability=1.0, base_url="/audio", rng=random.Random(3))

        for _ in range(20):
            url = sounds.cue_for_change()
            assert url.startswith("/audio/")
            assert url[len("/audio/"):] in SOUND_FILES

    def test_never_cues_when_disabled(self):
        sounds = SoundService(probability=0.0, rng=random.Random(3))
        assert all(sounds.cue_for_change() is None for _ in range(100))

    def test_download_always_cues(self):
        sounds = SoundService(probability=0.0, base_url="/fartAudio/", rng=random.Random(3))
        assert sounds.cue_for_download().startswith("/fartAudio/fart")

    def test_seeded_sequence_is_reproducible(self):
        first = SoundService(probability=0.25, rng=random.Random(42))
        second = SoundService(probability=0.25, rng=random.Random(42))

        assert [first.cue_for_change() for _ in range(30)] == [
            second.cue_for_change() for _ in range(30)
        ]

    def test_ten_clips(self):
        assert SOUND_FILES == [f"fart{i}.mp3" for i in range(1, 11)]


class TestRasterService:

    def test_unavailable_rasterizer_raises(self, no_rasterizer):
        service = RasterService()

        assert not service.is_available()
        with pytest.raises(RuntimeError):
            service.rasterize(compose(Configuration()).to_svg())

    def test_png_is_supersampled(self, scenario_config):
        service = RasterService(scale=2.0)
        if not service.is_available():
            pytest.skip("cairosvg is not installed")

        from PIL import Image

        png = service.rasterize(compose(scenario_config).to_svg())
        image = Image.open(io.BytesIO(png))
        assert image.format == "PNG"
        assert image.size == (460, 446)


class TestFigureService:

    def test_render_svg_matches_compose(self, scenario_config):
        document, content = FigureService().render_svg(scenario_config)

        assert document.to_svg() == compose(scenario_config).to_svg()
        assert content == XML_DECLARATION + document.to_svg()

    def test_save_without_rasterizer(self, no_rasterizer, scenario_config):
        service = FigureService(raster_service=RasterService())
        document, svg_filename, png_filename = service.save_figure(scenario_config)

        assert png_filename is None
        assert svg_filename.startswith("crochet_poop_vanilla_3layers_2blueeyes_")
        assert svg_filename.endswith(".svg")

        saved = service.storage.figures_dir / svg_filename
        assert saved.read_text(encoding="utf-8").startswith(XML_DECLARATION)
        assert svg_filename in service.storage.list_figures()

        assert service.storage.delete_figure(svg_filename)
        assert not saved.exists()

    def test_repeated_saves_do_not_collide(self, no_rasterizer, scenario_config):
        service = FigureService(raster_service=RasterService())
        _, first, _ = service.save_figure(scenario_config)
        _, second, _ = service.save_figure(scenario_config)

        assert first != second
        service.storage.delete_figure(first)
        service.storage.delete_figure(second)


class FailingRaster(RasterService):

    def is_available(self):
        return True

    def rasterize(self, svg, scale=None):
        raise RuntimeError("cairo exploded")


class TestFigureServiceFailures:

    def test_raster_failure_writes_nothing(self, scenario_config):
        service = FigureService(raster_service=FailingRaster())
        before = set(service.storage.list_figures())

        with pytest.raises(RuntimeError):
            service.save_figure(scenario_config)

        assert set(service.storage.list_figures()) == before

    def test_failed_png_write_removes_svg(self, monkeypatch, scenario_config):
        service = FigureService(raster_service=RasterService())
        monkeypatch.setattr(service.raster, "is_available", lambda: True)
        monkeypatch.setattr(service.raster, "rasterize", lambda svg, scale=None: b"png")
        before = set(service.storage.list_figures())

        write = service.storage.save_figure

        def save_svg_only(filename, content):
            if filename.endswith(".png"):
                raise OSError("disk full")
            return write(filename, content)

        monkeypatch.setattr(service.storage, "save_figure", save_svg_only)

        with pytest.raises(OSError):
            service.save_figure(scenario_config)

        assert set(service.storage.list_figures()) == before

    def test_discard_files_ignores_missing_png(self, no_rasterizer, scenario_config):
        service = FigureService(raster_service=RasterService())
        _, svg_filename, png_filename = service.save_figure(scenario_config)

        service.discard_files(svg_filename, png_filename)

        assert svg_filename not in service.storage.list_figures()
