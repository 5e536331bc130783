import pytest

from arcadebox.coin import CoinConfig
from arcadebox.engine import Canvas
from arcadebox.geometry import Vector2
from arcadebox.physics import PhysicsConfig, PhysicsEngine, load_holes, load_walls


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_walls(tmp_path):
    path = write(tmp_path, "walls.csv", "0,1,2,3\n4.5,5,6,7\n")
    walls = load_walls(path)
    assert [(w.sp, w.ep) for w in walls] == [
        (Vector2(0, 1), Vector2(2, 3)),
        (Vector2(4.5, 5), Vector2(6, 7)),
    ]


def test_load_walls_repeats_last_field(tmp_path):
    path = write(tmp_path, "walls.csv", "1,2,3\n")
    (wall,) = load_walls(path)
    assert wall.sp == Vector2(1, 2)
    assert wall.ep == Vector2(3, 3)


def test_load_walls_ignores_extra_fields(tmp_path):
    path = write(tmp_path, "walls.csv", "1,2,3,4,99\n")
    (wall,) = load_walls(path)
    assert wall.ep == Vector2(3, 4)


def test_load_walls_rejects_blank_field(tmp_path):
    path = write(tmp_path, "walls.csv", "1,,3,4\n")
    with pytest.raises(ValueError):
        load_walls(path)


def test_load_holes(tmp_path):
    path = write(tmp_path, "holes.csv", "10,20\n30,40\n")
    assert [h.pos for h in load_holes(path)] == [Vector2(10, 20), Vector2(30, 40)]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_holes(str(tmp_path / "absent.csv"))


def make_engine(tmp_path, holes="", win=Vector2(900, 900), start=Vector2(100, 100), **kwargs):
    cfg = PhysicsConfig(
        wall_data_file_name=write(tmp_path, "walls.csv", ""),
        hole_data_file_name=write(tmp_path, "holes.csv", holes),
        win_hole_pos=win,
        **kwargs,
    )
    coin_cfg = CoinConfig(start_pos=start, radius=10.0)
    return PhysicsEngine(cfg, coin_cfg)


def test_default_gravity_before_init(tmp_path):
    engine = make_engine(tmp_path, gravity=Vector2(0, 5))
    assert engine.gravity == Vector2(0, 1000)
    engine.init()
    assert engine.gravity == Vector2(0, 5)


def test_coin_in_losing_hole_counts_lose(tmp_path):
    engine = make_engine(tmp_path, holes="100,100\n")
    engine.init()
    engine.update(1 / 60, 1080)
    assert (engine.win, engine.lose) == (0, 1)


def test_coin_in_winning_hole_counts_win(tmp_path):
    engine = make_engine(tmp_path, holes="500,500\n", win=Vector2(100, 100))
    engine.init()
    engine.update(1 / 60, 1080)
    assert (engine.win, engine.lose) == (1, 0)
    engine.init()
    assert engine.win == 0


def test_push_from_right_side(tmp_path):
    engine = make_engine(tmp_path, start=Vector2(900, 100), distance_wall=300,
                         coin_size=20, tolerance=10, power_diameter=2)
    engine.add_force_to_coin(5, 1000)
    assert engine.coin.v.x == pytest.approx(-5 * 2)


def test_push_from_left_side(tmp_path):
    engine = make_engine(tmp_path, start=Vector2(100, 100), distance_wall=300,
                         coin_size=20, tolerance=10, power_diameter=2)
    engine.add_force_to_coin(5, 1000)
    assert engine.coin.v.x == pytest.approx(5 * 2)


def test_no_push_in_middle(tmp_path):
    engine = make_engine(tmp_path, start=Vector2(500, 100), distance_wall=300,
                         coin_size=20, tolerance=10, power_diameter=2)
    engine.add_force_to_coin(5, 1000)
    assert engine.coin.v == engine.coin.config.start_v


def test_draw_draws_coin(tmp_path):
    engine = make_engine(tmp_path)
    canvas = Canvas()
    engine.draw(canvas)
    assert "circle" in canvas.names()