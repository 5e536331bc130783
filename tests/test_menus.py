from arcadebox.engine import Canvas, Frame
from arcadebox.geometry import Vector2
from arcadebox.menus import (
    Background,
    BackgroundConfig,
    BackButton,
    BackButtonConfig,
    SelectConfig,
    SelectGrid,
)


def make_grid():
    cfg = SelectConfig(col=2, row=2, img_size=Vector2(200, 200),
                       select_ofst=Vector2(100, 100), select_text="SELECT")
    return SelectGrid(cfg)


def frame_at(x, y):
    frame = Frame(width=1000, height=1000)
    frame.input.move_mouse(x, y)
    return frame


def test_init_clears_mouseover():
    grid = make_grid()
    grid.mouseover = 2
    grid.init()
    assert grid.mouseover is None


def test_mouse_over_first_tile():
    grid = make_grid()
    grid.update(frame_at(150, 150))
    assert grid.mouseover == 0


def test_mouse_over_last_tile():
    grid = make_grid()
    grid.update(frame_at(550, 600))
    assert grid.mouseover == 3


def test_mouse_outside_tiles():
    grid = make_grid()
    grid.mouseover = 1
    grid.update(frame_at(5, 5))
    assert grid.mouseover is None


def test_tile_edge_is_outside():
    grid = make_grid()
    grid.update(frame_at(100, 150))
    assert grid.mouseover is None


def test_draw_one_rect_per_tile_and_highlight():
    grid = make_grid()
    frame = frame_at(150, 150)
    grid.update(frame)
    grid.draw(frame)
    cmds = frame.canvas.commands
    assert frame.canvas.names().count("rect") == 4
    assert cmds.count(("fill", (180,))) == 1
    assert frame.canvas.texts().count("SELECT") == 5


def test_back_button_hit_box():
    button = BackButton(BackButtonConfig(pos=Vector2(100, 100), colli_ofst=Vector2(10, 0),
                                         colli_size=Vector2(20, 20)))
    assert button.collision_mouse(110, 100)
    assert button.collision_mouse(129.9, 100)
    assert not button.collision_mouse(130, 100)
    assert not button.collision_mouse(110, 125)


def test_back_button_draws_image():
    button = BackButton(BackButtonConfig(img="back", pos=Vector2(1, 2), img_size=0.5))
    canvas = Canvas()
    button.proc(canvas)
    assert ("image", ("back", 1, 2, 0, 0.5)) in canvas.commands


def test_background_draws_image():
    background = Background(BackgroundConfig(img="bg", pos=Vector2(3, 4), img_size=2.0))
    canvas = Canvas()
    background.proc(canvas)
    assert canvas.commands == [("rectMode", ("CORNER",)), ("image", ("bg", 3, 4, 0, 2.0))]