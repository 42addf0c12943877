"""Tests for PlanarObject construction and primitive derivation."""
import pytest

from planar_cli_renderer.errors import (InvalidVertexShape, InvalidEdgeShape,
                                        InvalidEdgeIndex, IncompleteStyle,
                                        InvalidTransformArgument, PlanarRenderError)
from planar_cli_renderer.math_utils import Matrix, Vec2
from planar_cli_renderer.planar_object import PlanarObject, Segment
from planar_cli_renderer.style import Style, SegmentStyle, CaptionStyle
from planar_cli_renderer.transform import Transform


class TestConstruction:
    def test_counts(self, triangle):
        assert len(triangle.get_points().coords) == 3
        assert len(triangle.get_segments().coords) == 3
        assert triangle.vertex_count == 3

    def test_accepts_matrix_and_style(self):
        obj = PlanarObject(Matrix([[0, 0, 1], [1, 1, 1]]), [(0, 1)], Style())
        assert obj.edges == ((0, 1),)

    @pytest.mark.parametrize("vertices", [
        [[0, 0], [1, 1]],
        [[0, 0, 1, 1]],
        [],
        [[0, 0, 1], [1, 1]],
        [["a", "b", "c"]],
    ])
    def test_vertex_shape(self, vertices, style_settings):
        with pytest.raises(InvalidVertexShape):
            PlanarObject(vertices, [], style_settings)

    @pytest.mark.parametrize("edges", [
        [[0, 1, 2]],
        [[0]],
        [5],
    ])
    def test_edge_shape(self, edges, style_settings):
        with pytest.raises(InvalidEdgeShape):
            PlanarObject([[0, 0, 1], [1, 1, 1], [2, 2, 1]], edges, style_settings)

    @pytest.mark.parametrize("edges", [[[0, 3]], [[-1, 0]], [[0, 1.5]], [["a", 0]]])
    def test_edge_index(self, edges, style_settings):
        with pytest.raises(InvalidEdgeIndex):
            PlanarObject([[0, 0, 1], [1, 1, 1], [2, 2, 1]], edges, style_settings)

    def test_edge_index_is_an_edge_shape_error(self):
        assert issubclass(InvalidEdgeIndex, InvalidEdgeShape)

    def test_empty_edges_allowed(self, style_settings):
        obj = PlanarObject([[0, 0, 1]], [], style_settings)
        assert obj.get_segments().coords == []
        assert len(obj.get_points().coords) == 1

    @pytest.mark.parametrize("missing", ["segments", "points", "captions"])
    def test_incomplete_style(self, missing, style_settings):
        del style_settings[missing]
        with pytest.raises(IncompleteStyle):
            PlanarObject([[0, 0, 1]], [], style_settings)

    def test_style_must_be_mapping(self):
        with pytest.raises(IncompleteStyle):
            PlanarObject([[0, 0, 1]], [], None)

    def test_errors_carry_codes(self, style_settings):
        with pytest.raises(PlanarRenderError) as info:
            PlanarObject([[0, 0]], [], style_settings)
        assert info.value.code == "cg-ob-001"
        assert "cg-ob-001" in str(info.value)


class TestPrimitives:
    def test_segments(self, triangle):
        segs = triangle.get_segments()
        assert segs.coords[0] == Segment(Vec2(0, 0), Vec2(4, 0))
        assert segs.coords[2] == Segment(Vec2(0, 3), Vec2(0, 0))
        assert segs.width == 2
        assert segs.color == "#00FF00"

    def test_points(self, triangle):
        pts = triangle.get_points()
        assert pts.coords == [Vec2(0, 0), Vec2(4, 0), Vec2(0, 3)]
        assert pts.width == 4
        assert pts.color == "red"

    def test_captions_pair_up_to_shorter_list(self, triangle):
        caps = triangle.get_captions()
        assert len(caps.coords) == 3
        assert caps.texts == ("A", "B")
        assert list(caps.labels()) == [(Vec2(0, 0), "A"), (Vec2(4, 0), "B")]
        assert caps.font == "10px serif"
        assert caps.color == "white"

    def test_extra_texts_ignored(self, style_settings):
        style_settings["captions"]["texts"] = ["A", "B", "C"]
        obj = PlanarObject([[0, 0, 1]], [], style_settings)
        assert len(list(obj.get_captions().labels())) == 1

    def test_captions_without_texts(self):
        obj = PlanarObject([[0, 0, 1]], [], Style())
        assert list(obj.get_captions().labels()) == []


class TestTransformation:
    def test_identity_leaves_vertices(self, triangle):
        before = triangle.elements()
        triangle.apply_transformation(Transform())
        assert triangle.elements() == before

    def test_copy_then_transform_leaves_original(self, triangle):
        before = triangle.elements()
        copy = triangle.get_copy()
        copy.apply_transformation(Transform().move("x", 10).rotate(30))
        assert triangle.elements() == before
        assert copy.elements() != before

    def test_copy_shares_edges_and_style(self, triangle):
        copy = triangle.get_copy()
        assert copy.edges is triangle.edges
        assert copy.style is triangle.style

    def test_rotate_free_on_object(self, style_settings):
        obj = PlanarObject([[2, 1, 1]], [], style_settings)
        obj.apply_transformation(Transform().rotate_free({"x": 1, "y": 1}, 180))
        x, y, w = obj.elements()[0]
        assert (x, y, w) == pytest.approx((0, 1, 1), abs=1e-9)

    def test_result_is_normalized(self, style_settings):
        obj = PlanarObject([[2, 4, 1]], [], style_settings)
        obj.apply_transformation(Transform().scale("s", 0.5))
        assert obj.elements() == [[4.0, 8.0, 1.0]]

    @pytest.mark.parametrize("arg", [None, "move", Matrix.identity(), [[1, 0, 0]]])
    def test_non_transform_rejected(self, triangle, arg):
        before = triangle.elements()
        with pytest.raises(InvalidTransformArgument):
            triangle.apply_transformation(arg)
        assert triangle.elements() == before

    def test_transform_reusable_across_objects(self, triangle, segment_object):
        t = Transform().move("y", 1)
        triangle.apply_transformation(t)
        segment_object.apply_transformation(t)
        assert triangle.elements()[0][1] == 1.0
        assert segment_object.elements()[0][1] == 2.0


class TestStyle:
    def test_group_defaults(self):
        style = Style.from_mapping({"segments": {"color": "blue"},
                                    "points": {"width": 6},
                                    "captions": {"texts": ["x"]}})
        assert style.segments == SegmentStyle(1.0, "blue")
        assert style.points.width == 6
        assert style.captions.texts == ("x",)

    def test_empty_group_is_missing(self):
        with pytest.raises(IncompleteStyle):
            Style.from_mapping({"segments": {}, "points": {"width": 1},
                                "captions": {"font": "a"}})

    def test_texts_frozen(self):
        texts = ["a", "b"]
        cap = CaptionStyle(texts=texts)
        texts.append("c")
        assert cap.texts == ("a", "b")

    def test_with_texts(self):
        style = Style().with_texts(["P", "Q"])
        assert style.captions.texts == ("P", "Q")
        assert Style().captions.texts == ()

    @pytest.mark.parametrize("group", ["segments", "points", "captions"])
    def test_direct_style_needs_every_group(self, group):
        with pytest.raises(IncompleteStyle):
            Style(**{group: None})

    def test_mapping_group_in_direct_style_is_rejected(self):
        with pytest.raises(IncompleteStyle):
            Style(segments={"width": 1, "color": "red"})
