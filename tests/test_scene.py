"""Tests for Scene construction, object management and draw order."""
import pytest

from planar_cli_renderer.errors import InvalidDrawSurface
from planar_cli_renderer.planar_object import PlanarObject
from planar_cli_renderer.scene import Scene, CAPTION_OFFSET
from planar_cli_renderer.style import Style

from conftest import RecordingSurface, transform_point


def make_objects(style_settings, n):
    return [PlanarObject([[i, 0, 1], [i, 1, 1]], [[0, 1]], style_settings) for i in range(n)]


class TestConstruction:
    @pytest.mark.parametrize("bad", [None, object(), "canvas", 42])
    def test_invalid_surface(self, bad):
        with pytest.raises(InvalidDrawSurface):
            Scene(bad)

    def test_partial_surface_rejected(self):
        class HalfSurface:
            width = 10
            height = 10

            def clear(self, width, height):
                pass

        with pytest.raises(InvalidDrawSurface):
            Scene(HalfSurface())

    @pytest.mark.parametrize("scale", [0, None, "big"])
    def test_invalid_scale(self, surface, scale):
        with pytest.raises(ValueError):
            Scene(surface, scale=scale)

    def test_defaults(self, surface):
        scene = Scene(surface)
        assert tuple(scene.center) == (0.0, 0.0)
        assert scene.scale == 1.0
        assert len(scene) == 0

    def test_view_transform(self, surface):
        scene = Scene(surface, center={"x": 100, "y": 50}, scale=10)
        view = scene.view_transform
        assert transform_point(view, 0, 0) == pytest.approx((100, 50))
        assert transform_point(view, 1, 2) == pytest.approx((110, 30))
        assert transform_point(view, -1, -1) == pytest.approx((90, 60))

    def test_view_transform_is_a_copy(self, surface):
        scene = Scene(surface, center=(10, 10), scale=2)
        scene.view_transform.move("x", 1000)
        assert transform_point(scene.view_transform, 0, 0) == pytest.approx((10, 10))


class TestObjects:
    def test_add_keeps_order(self, surface, style_settings):
        scene = Scene(surface)
        objs = make_objects(style_settings, 3)
        for o in objs:
            scene.add_object(o)
        assert scene.objects == tuple(objs)

    def test_add_rejects_non_objects(self, surface):
        with pytest.raises(TypeError):
            Scene(surface).add_object({"vertices": []})

    def test_clear_all(self, surface, style_settings):
        scene = Scene(surface)
        for o in make_objects(style_settings, 3):
            scene.add_object(o)
        scene.clear_objects()
        assert scene.objects == ()

    @pytest.mark.parametrize("idx", [0, "0", 0.9, "0.5"])
    def test_clear_one(self, surface, style_settings, idx):
        scene = Scene(surface)
        objs = make_objects(style_settings, 3)
        for o in objs:
            scene.add_object(o)
        scene.clear_objects(idx)
        assert scene.objects == (objs[1], objs[2])

    @pytest.mark.parametrize("idx", ["1abc", " 1 ", "1.9", "+1"])
    def test_clear_reads_leading_integer(self, surface, style_settings, idx):
        scene = Scene(surface)
        objs = make_objects(style_settings, 3)
        for o in objs:
            scene.add_object(o)
        scene.clear_objects(idx)
        assert scene.objects == (objs[0], objs[2])

    def test_clear_unparsable_clears_all(self, surface, style_settings):
        scene = Scene(surface)
        for o in make_objects(style_settings, 2):
            scene.add_object(o)
        scene.clear_objects("first")
        assert len(scene) == 0

    def test_clear_negative_counts_from_end(self, surface, style_settings):
        scene = Scene(surface)
        objs = make_objects(style_settings, 3)
        for o in objs:
            scene.add_object(o)
        scene.clear_objects(-1)
        assert scene.objects == (objs[0], objs[1])

    @pytest.mark.parametrize("idx", [3, 99, -4])
    def test_clear_out_of_range_is_noop(self, surface, style_settings, idx):
        scene = Scene(surface)
        for o in make_objects(style_settings, 3):
            scene.add_object(o)
        scene.clear_objects(idx)
        assert len(scene) == 3


class TestDraw:
    def test_clears_surface_first(self, surface, triangle):
        scene = Scene(surface)
        scene.add_object(triangle)
        scene.draw()
        assert surface.calls[0] == ("clear", 200, 100)

    def test_order_per_object(self, surface, triangle, segment_object):
        scene = Scene(surface)
        scene.add_object(triangle)
        scene.add_object(segment_object)
        scene.draw()

        expected = (["clear"]
                    + ["begin_path"] + ["move_to", "line_to"] * 3 + ["stroke"]
                    + ["fill_circle"] * 3
                    + ["fill_text"] * 2
                    + ["begin_path"] + ["move_to", "line_to"] + ["stroke"]
                    + ["fill_circle"] * 2
                    + ["fill_text"] * 2)
        assert surface.kinds() == expected

    def test_segments_in_screen_space(self, surface, segment_object):
        scene = Scene(surface, center=(100, 50), scale=10)
        scene.add_object(segment_object)
        scene.draw()
        assert surface.of_kind("move_to")[0][1:] == pytest.approx((110, 40))
        assert surface.of_kind("line_to")[0][1:] == pytest.approx((120, 30))
        assert surface.of_kind("stroke") == [("stroke", "#00FF00", 2)]

    def test_points_radius_is_half_width(self, surface, segment_object):
        scene = Scene(surface)
        scene.add_object(segment_object)
        scene.draw()
        for call in surface.of_kind("fill_circle"):
            assert call[3] == 2
            assert call[4] == "red"

    def test_captions_offset_and_pairing(self, surface, triangle):
        scene = Scene(surface, center=(0, 0), scale=1)
        scene.add_object(triangle)
        scene.draw()
        texts = surface.of_kind("fill_text")
        assert len(texts) == 2
        dx, dy = CAPTION_OFFSET
        _, text, x, y, font, color, baseline = texts[1]
        assert text == "B"
        assert (x, y) == pytest.approx((4 + dx, 0 + dy))
        assert (font, color, baseline) == ("10px serif", "white", "top")

    def test_draw_does_not_mutate_objects(self, surface, triangle):
        before = triangle.elements()
        scene = Scene(surface, center=(30, 30), scale=5)
        scene.add_object(triangle)
        scene.draw()
        scene.draw()
        assert triangle.elements() == before

    def test_repeated_draws_are_identical(self, triangle):
        surf = RecordingSurface()
        scene = Scene(surf, center=(30, 30), scale=5)
        scene.add_object(triangle)
        scene.draw()
        scene.draw()
        half = len(surf.calls) // 2
        assert surf.calls[:half] == surf.calls[half:]

    def test_empty_scene_only_clears(self, surface):
        Scene(surface).draw()
        assert surface.kinds() == ["clear"]

    def test_object_without_edges_strokes_empty_path(self, surface):
        scene = Scene(surface)
        scene.add_object(PlanarObject([[0, 0, 1]], [], Style()))
        scene.draw()
        assert surface.kinds() == ["clear", "begin_path", "stroke", "fill_circle"]
