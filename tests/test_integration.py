"""End-to-end checks through the top-level package API."""

import geom_primitives as gp


class TestPublicApi:
    def test_all_exports_resolve(self):
        for name in gp.__all__:
            assert hasattr(gp, name), name

    def test_version(self):
        assert isinstance(gp.__version__, str)


class TestLetterboxWorkflow:
    """Fit a video frame into a window, then clip a selection against it."""

    def test_fit_then_clip(self):
        window = gp.recti(0, 0, 800, 600)
        frame = gp.fit_rect(gp.sizei(1920, 1080), window)
        assert frame == gp.recti(0, 75, 800, 525)

        selection = gp.recti(700, 500, 900, 700)
        visible = gp.intersect(frame, selection)
        assert visible == gp.recti(700, 500, 800, 525)

        cursor = gp.clamp(gp.pointi(950, -20), frame)
        assert cursor == gp.pointi(800, 75)

    def test_texture_lod_for_thumbnail(self):
        base = gp.sizeu(1024, 1024)
        level = gp.nearest_mip_level(base, gp.sizeu(200, 150))
        assert level == 2
        assert gp.mip_size(base, level) == gp.sizeu(256, 256)
        assert level < gp.mip_levels(base)

    def test_normalized_rect_from_float_layout(self):
        layout = gp.rectf(-10.4, -20.6, 30.5, 40.5)
        snapped = gp.Rectangle(
            *[gp.Point(v, 0.0, gp.FLOAT).round().x for v in layout.to_tuple()],
            dtype=gp.INT,
            size_dtype=gp.UINT,
        )
        assert snapped == gp.rectn(-10, -21, 31, 41)
        assert snapped.size == gp.sizeu(41, 62)
