import pytest

from arcadebox.aroundjapan import (
    SELECT_SCENE,
    TITLE_SCENE,
    AroundJapan,
    AroundJapanConfig,
    Bingo,
)
from arcadebox.coin import CoinConfig
from arcadebox.engine import Frame, Key
from arcadebox.gauge import GaugeConfig
from arcadebox.geometry import Vector2
from arcadebox.menus import BackButton, BackButtonConfig
from arcadebox.physics import PhysicsConfig


class FakeFade:
    def __init__(self, ended=False):
        self.out_starts = 0
        self.ended = ended

    def out_start(self):
        self.out_starts += 1

    def out_end_flag(self):
        return self.ended


class Host:
    def __init__(self, ended=False):
        self.button = BackButton(BackButtonConfig(pos=Vector2(50, 50), colli_size=Vector2(20, 20)))
        self.fade = FakeFade(ended)
        self.scenes = []

    def change_scene(self, scene_id):
        self.scenes.append(scene_id)


@pytest.fixture
def scene_factory(tmp_path):
    walls = tmp_path / "walls.csv"
    walls.write_text("0,1000,1920,1000\n", encoding="utf-8")
    holes = tmp_path / "holes.csv"
    holes.write_text("100,100\n", encoding="utf-8")

    def build(host):
        physics = PhysicsConfig(wall_data_file_name=str(walls), hole_data_file_name=str(holes),
                                win_hole_pos=Vector2(1500, 900))
        coin = CoinConfig(start_pos=Vector2(100, 100), radius=10.0)
        gauge = GaugeConfig(button_pos=Vector2(800, 800), button_radius=40, power_max=10)
        return AroundJapan(host, AroundJapanConfig(), physics, coin, gauge)

    return build


def test_update_counts_losses_and_init_resets(scene_factory):
    scene = scene_factory(Host())
    scene.init()
    scene.update(Frame())
    assert scene.physics.lose == 1
    scene.init()
    assert scene.physics.lose == 0


def test_draw_shows_counters(scene_factory):
    scene = scene_factory(Host())
    scene.init()
    frame = Frame()
    scene.draw(frame)
    texts = frame.canvas.texts()
    assert "成功回数：0" in texts
    assert "失敗回数：0" in texts


def test_click_on_back_starts_fade(scene_factory):
    host = Host()
    scene = scene_factory(host)
    frame = Frame()
    frame.input.move_mouse(50, 50)
    frame.input.press(Key.LBUTTON)
    scene.next_scene(frame)
    assert host.fade.out_starts == 1
    assert host.scenes == []


def test_click_elsewhere_keeps_scene(scene_factory):
    host = Host()
    scene = scene_factory(host)
    frame = Frame()
    frame.input.move_mouse(500, 500)
    frame.input.press(Key.LBUTTON)
    scene.next_scene(frame)
    assert host.fade.out_starts == 0


def test_fade_end_returns_to_title(scene_factory):
    host = Host(ended=True)
    scene = scene_factory(host)
    scene.next_scene(Frame())
    assert host.scenes == [TITLE_SCENE]


def test_bingo_draws_title():
    bingo = Bingo(Host())
    frame = Frame()
    bingo.draw(frame)
    assert frame.canvas.texts() == ["スマートビンゴ"]


def test_bingo_returns_to_select():
    host = Host(ended=True)
    bingo = Bingo(host)
    frame = Frame()
    frame.input.move_mouse(50, 50)
    frame.input.press(Key.LBUTTON)
    bingo.next_scene(frame)
    assert host.fade.out_starts == 1
    assert host.scenes == [SELECT_SCENE]