import pygame

from matrixrain.config import RainSettings
from matrixrain.gui.draw import DrawGlyph, FillRect
from matrixrain.gui.widgets.matrix_rain import MatrixCanvas


def make_canvas(metrics, rng, clock, size=(260, 400), **kw):
    return MatrixCanvas(size, metrics=metrics, rng=rng, clock=clock, **kw)


def test_end_to_end_layout_and_resize(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock)
    assert len(canvas.columns) == 10
    assert [m.x for m in canvas.models] == [6.5 + 26 * i for i in range(10)]
    old_ids = {m.id for m in canvas.models}
    old_columns = list(canvas.columns)

    assert canvas.resize((130, 400))
    assert len(canvas.columns) == 5
    assert [m.x for m in canvas.models] == [6.5 + 26 * i for i in range(5)]
    assert not old_ids & {m.id for m in canvas.models}
    assert all(c.measured_height == 0.0 for c in canvas.columns)
    # timers das colunas antigas foram cancelados
    assert len(canvas.timers) == sum(len(m.characters) for m in canvas.models)
    assert all(not c._timers for c in old_columns)


def test_same_size_keeps_layout(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock)
    ids = [m.id for m in canvas.models]
    assert not canvas.resize((260, 400))
    assert [m.id for m in canvas.models] == ids


def test_height_change_relayouts(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock)
    ids = {m.id for m in canvas.models}
    assert canvas.resize((260, 500))
    assert not ids & {m.id for m in canvas.models}
    assert all(c.full_height == 500 for c in canvas.columns)


def test_narrow_canvas_has_no_columns(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock, size=(20, 400))
    assert canvas.columns == []
    assert canvas.render() == [FillRect((0, 0, 20, 400), (0, 0, 0))]


def test_render_background_then_glyphs_inside_canvas(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock)
    for _ in range(50):
        cmds = canvas.render()
        assert cmds[0] == FillRect((0, 0, 260, 400), (0, 0, 0))
        for c in cmds[1:]:
            assert isinstance(c, DrawGlyph)
            assert c.y + 20 > 0 and c.y < 400
            assert c.color == (3, 160, 98)
        clock.advance(0.37)


def test_update_advances_glyph_timers_only_when_active(metrics, rng, clock):
    settings = RainSettings(substitution_percent=100)
    canvas = make_canvas(metrics, rng, clock, settings=settings)
    n = len(canvas.timers)
    assert canvas.update() == 0  # arma
    clock.advance(0.5)
    assert canvas.update() == n

    canvas.pause()
    clock.advance(1.0)
    assert canvas.update() == 0
    canvas.resume()
    assert canvas.update() == n


def test_dispose_clears_everything(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock)
    canvas.dispose()
    assert canvas.columns == []
    assert len(canvas.timers) == 0


def test_draw_paints_black_background(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock, size=(60, 40))
    screen = pygame.Surface((60, 40))
    screen.fill((255, 255, 255))
    canvas.draw(screen)
    # canto direito fica fora das duas colunas
    assert tuple(screen.get_at((59, 39)))[:3] == (0, 0, 0)
    assert screen.get_clip() == pygame.Rect(0, 0, 60, 40)


def test_glyphs_keep_ticking_after_clock_steps_back(metrics, rng, clock):
    canvas = make_canvas(metrics, rng, clock, settings=RainSettings(substitution_percent=100))
    canvas.update()
    clock.advance(0.5)
    assert canvas.update() > 0

    clock.advance(-3600.0)
    fired = 0
    for _ in range(600):
        clock.advance(0.1)
        fired += canvas.update()
    assert fired > 0
