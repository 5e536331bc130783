"""Shooting duel: the player at the bottom trades shots with an NPC at the top."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

from arcadebox.engine import Canvas, Frame, GameBase, Key


@dataclass
class Chara:
    normal_img: str = ""
    damage_img: str = ""
    lose_img: str = ""
    win_img: str = ""
    img: str = ""
    px: float = 0.0
    py: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    bullet_ofs_y: float = 0.0
    hp: int = 0
    hp_gauge_ofs_y: float = 0.0
    half_w: float = 0.0
    half_h: float = 0.0


@dataclass
class Bullet:
    img: str = ""
    px: float = 0.0
    py: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    hp: int = 0
    half_w: float = 0.0
    half_h: float = 0.0

    @property
    def flying(self) -> bool:
        return self.hp > 0


def _player() -> Chara:
    return Chara("player1", "player2", "player4", "player3")


def _npc() -> Chara:
    return Chara("NPC1", "NPC2", "NPC4", "NPC3")


@dataclass
class DuelData:
    frame_restrict_input: int = 0
    frame_cnt: int = 0
    player: Chara = field(default_factory=_player)
    npc: Chara = field(default_factory=_npc)
    p_bullet: Bullet = field(default_factory=lambda: Bullet("PBullet"))
    n_bullet: Bullet = field(default_factory=lambda: Bullet("NBullet"))
    title_img: str = "title"
    back_img: str = "back"


def collision(chara: Chara, bullet: Bullet) -> bool:
    """True when a flying bullet's box touches the character's box."""
    if not bullet.flying:
        return False
    return not (
        chara.px + chara.half_w < bullet.px - bullet.half_w
        or bullet.px + bullet.half_w < chara.px - chara.half_w
        or bullet.py + bullet.half_h < chara.py - chara.half_h
        or chara.py + chara.half_h < bullet.py - bullet.half_h
    )


class _Scene(Enum):
    TITLE = auto()
    PLAY = auto()
    RESULT = auto()


class DuelGame(GameBase):
    """Move with A and D, shoot with SPACE."""

    def __init__(self, on_back_to_menu: Optional[Callable[[], None]] = None) -> None:
        super().__init__(on_back_to_menu)
        self.state = _Scene.TITLE
        self.data = DuelData()

    def init(self) -> None:
        d = self.data
        player, npc = d.player, d.npc
        player.img = player.normal_img
        player.px, player.py = 960.0, 970.0
        player.vx = 15.0
        player.hp = 25
        player.bullet_ofs_y = -70
        player.hp_gauge_ofs_y = -60

        npc.img = npc.normal_img
        npc.px, npc.py = 960.0, 150.0
        npc.vx = 25.0
        npc.bullet_ofs_y = 55
        npc.hp = 35
        npc.hp_gauge_ofs_y = -62

        d.n_bullet.px, d.n_bullet.py = 0.0, 0.0
        d.n_bullet.vy = 35.0
        d.n_bullet.hp = 0
        d.p_bullet.px, d.p_bullet.py = 0.0, 0.0
        d.p_bullet.vy = -20.0
        d.p_bullet.hp = 0

        player.half_w, player.half_h = 60, 80
        npc.half_w, npc.half_h = 60, 80
        d.n_bullet.half_w, d.n_bullet.half_h = 25, 26
        d.p_bullet.half_w, d.p_bullet.half_h = 25, 26

        d.frame_restrict_input = 90

    def proc(self, frame: Frame) -> None:
        if self.state is _Scene.TITLE:
            self._title(frame)
        elif self.state is _Scene.PLAY:
            self._play(frame)
        elif self.state is _Scene.RESULT:
            self._result(frame)

    def _title(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.draw("playSound", "bgm")
        canvas.draw("rectMode", "CORNER")
        canvas.draw("clear")
        canvas.draw("imageColor", 255, 255, 255)
        canvas.draw("image", self.data.title_img, 0, 0)
        if frame.input.is_trigger(Key.SPACE):
            self.init()
            canvas.draw("clear", 0, 180, 0)
            self.state = _Scene.PLAY
            return
        canvas.draw("fill", 0)
        canvas.draw("textSize", 100)
        canvas.draw("text", "Enterでメニューに戻る", 0, frame.height)
        canvas.draw("print", 4)
        if frame.input.is_trigger(Key.ENTER):
            self.back_to_menu()

    @staticmethod
    def _move_player_bullet(bullet: Bullet) -> None:
        if bullet.flying:
            bullet.py += bullet.vy
            if bullet.py < -bullet.half_h:
                bullet.hp = 0

    @staticmethod
    def _move_npc_bullet(bullet: Bullet, height: float) -> None:
        if bullet.flying:
            bullet.py += bullet.vy
            if bullet.py > height + bullet.half_h:
                bullet.hp = 0

    def _play(self, frame: Frame) -> None:
        d = self.data
        inp = frame.input
        canvas = frame.canvas
        player, npc = d.player, d.npc

        if inp.is_press(Key.A):
            player.px -= player.vx
        if inp.is_press(Key.D):
            player.px += player.vx
        player.px = max(player.px, player.half_w)
        player.px = min(player.px, frame.width - player.half_w)

        if not d.p_bullet.flying and inp.is_trigger(Key.SPACE):
            canvas.draw("playSound", "fire_p")
            d.p_bullet.px = player.px
            d.p_bullet.py = player.py + player.bullet_ofs_y
            d.p_bullet.hp = 1
        self._move_player_bullet(d.p_bullet)

        npc.px += npc.vx
        if npc.px < npc.half_w or npc.px > frame.width - npc.half_w:
            npc.vx = -npc.vx
        if not d.n_bullet.flying:
            canvas.draw("playSound", "fire_n")
            d.n_bullet.px = npc.px
            d.n_bullet.py = npc.py + npc.bullet_ofs_y
            d.n_bullet.hp = 1
        self._move_npc_bullet(d.n_bullet, frame.height)

        if collision(player, d.n_bullet):
            canvas.draw("playSound", "damage_p")
            player.img = player.damage_img
            player.hp -= 1
        else:
            player.img = player.normal_img
        if collision(npc, d.p_bullet):
            canvas.draw("playSound", "damage_n")
            npc.img = npc.damage_img
            npc.hp -= 1
        else:
            npc.img = npc.normal_img

        if player.hp <= 0 or npc.hp <= 0:
            if npc.hp > 0:
                npc.img = npc.win_img
                player.img = player.lose_img
                canvas.draw("playSound", "game_over")
            else:
                player.img = player.win_img
                npc.img = npc.lose_img
                canvas.draw("playSound", "game_clear")
            canvas.draw("stopSound", "bgm")
            d.frame_cnt = d.frame_restrict_input
            self.state = _Scene.RESULT
        self._draw(frame)

    def _result(self, frame: Frame) -> None:
        d = self.data
        canvas = frame.canvas
        self._move_player_bullet(d.p_bullet)
        self._move_npc_bullet(d.n_bullet, frame.height)
        self._draw(frame)

        if d.frame_cnt > 0:
            d.frame_cnt -= 1
            return
        if d.player.hp > 0:
            canvas.draw("fill", 255, 255, 0)
            headline = "GameClear!"
        else:
            canvas.draw("fill", 255, 0, 0)
            headline = "GameOver"
        canvas.draw("printSize", 150)
        canvas.draw("print", headline)
        canvas.draw("fill", 0)
        canvas.draw("text", "SPACEでタイトルに戻る", 25, frame.height)
        if frame.input.is_trigger(Key.SPACE):
            self.state = _Scene.TITLE

    def _draw(self, frame: Frame) -> None:
        d = self.data
        canvas = frame.canvas
        canvas.draw("clear")
        canvas.draw("rectMode", "CORNER")
        canvas.draw("image", d.back_img, 0, 0)
        canvas.draw("rectMode", "CENTER")
        canvas.draw("image", d.player.img, d.player.px, d.player.py)
        canvas.draw("image", d.npc.img, d.npc.px, d.npc.py)
        for bullet in (d.p_bullet, d.n_bullet):
            if bullet.flying:
                canvas.draw("image", bullet.img, bullet.px, bullet.py)
        self._hp_gauge(canvas, d.npc)
        self._hp_gauge(canvas, d.player)

    @staticmethod
    def _hp_gauge(canvas: Canvas, chara: Chara) -> None:
        canvas.draw("strokeWeight", 0)
        if chara.hp > 15:
            canvas.draw("fill", 0, 255, 0)
        else:
            canvas.draw("fill", 255, 0, 0)
        canvas.draw(
            "rect", chara.px, chara.py + chara.hp_gauge_ofs_y, chara.hp_gauge_ofs_y, 5
        )