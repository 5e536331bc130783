import pytest

from arcadebox.coin import Coin, CoinConfig
from arcadebox.engine import Canvas
from arcadebox.geometry import Hole, Line, Vector2


def make_coin(**kwargs):
    params = dict(start_pos=Vector2(0.0, -5.0), start_v=Vector2(0.0, 50.0), radius=10.0,
                  friction=0.0, limit_v=100.0)
    params.update(kwargs)
    return Coin(CoinConfig(**params))


def test_init_restores_start_state():
    coin = make_coin()
    coin.pos = Vector2(300, 300)
    coin.v = Vector2(1, 1)
    coin.omega = 4.0
    coin.active = False
    coin.init()
    assert coin.pos == coin.config.start_pos
    assert coin.v == coin.config.start_v
    assert coin.omega == 0.0
    assert coin.active is True


def test_inertia_is_half_m_r_squared():
    coin = make_coin(radius=4.0)
    assert coin.inertia == pytest.approx(0.5 * coin.mass * 4.0 * 4.0)


def test_update_is_linear_in_delta():
    a = make_coin()
    b = make_coin()
    a.update(0.1, 1e9)
    a.update(0.1, 1e9)
    b.update(0.2, 1e9)
    assert a.pos.x == pytest.approx(b.pos.x)
    assert a.pos.y == pytest.approx(b.pos.y)


def test_update_below_screen_resets():
    coin = make_coin(start_v=Vector2(0.0, 1000.0))
    coin.update(1.0, 100.0)
    assert coin.pos == coin.config.start_pos


def test_apply_force_adds_to_velocity():
    coin = make_coin()
    force = Vector2(3.0, -2.0)
    coin.apply_force(force)
    assert coin.v == coin.config.start_v + force


def test_impulse_at_centre_gives_no_spin():
    coin = make_coin()
    coin.add_impulse(Vector2(5.0, 0.0), coin.pos)
    assert coin.omega == 0.0
    assert coin.v == coin.config.start_v + Vector2(5.0, 0.0)


def test_impulse_off_centre_spins():
    coin = make_coin()
    coin.add_impulse_local(Vector2(0.0, 5.0), Vector2(1.0, 0.0))
    assert coin.omega > 0
    coin.add_impulse_local(Vector2(0.0, -10.0), Vector2(1.0, 0.0))
    assert coin.omega < 0


def test_wall_pushes_coin_out():
    coin = make_coin()
    floor = Line(Vector2(-100, 0), Vector2(100, 0))
    coin.collision_walls([floor])
    assert coin.pos.y == pytest.approx(-coin.radius)
    assert coin.pos.x == pytest.approx(0.0)


def test_wall_bounce_limited_by_limit_v():
    coin = make_coin(limit_v=20.0)
    floor = Line(Vector2(-100, 0), Vector2(100, 0))
    coin.collision_walls([floor])
    assert coin.v.y == pytest.approx(coin.config.start_v.y - 20.0)


def test_wall_stops_head_on_approach():
    coin = make_coin()
    floor = Line(Vector2(-100, 0), Vector2(100, 0))
    coin.collision_walls([floor])
    assert coin.v.y == pytest.approx(0.0)
    assert coin.omega == pytest.approx(0.0)


def test_far_wall_is_ignored():
    coin = make_coin()
    wall = Line(Vector2(-100, 500), Vector2(100, 500))
    coin.collision_walls([wall])
    assert coin.pos == coin.config.start_pos
    assert coin.v == coin.config.start_v


def test_losing_hole():
    coin = make_coin()
    coin.pos = Vector2(50, 50)
    result = coin.collision_holes([Hole(Vector2(52, 50))], Hole(Vector2(900, 900)))
    assert result == -1
    assert coin.pos == coin.config.start_pos


def test_winning_hole():
    coin = make_coin()
    coin.pos = Vector2(50, 50)
    result = coin.collision_holes([Hole(Vector2(400, 400))], Hole(Vector2(51, 51)))
    assert result == 1
    assert coin.pos == coin.config.start_pos


def test_no_hole():
    coin = make_coin()
    coin.pos = Vector2(50, 50)
    assert coin.collision_holes([Hole(Vector2(400, 400))], Hole(Vector2(900, 900))) == 0
    assert coin.pos == Vector2(50, 50)


def test_draw_only_when_active():
    coin = make_coin()
    canvas = Canvas()
    coin.draw(canvas)
    assert "circle" in canvas.names()
    assert "image" in canvas.names()
    canvas.reset()
    coin.active = False
    coin.draw(canvas)
    assert canvas.names() == []