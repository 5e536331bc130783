"""Ogre hunt: a gunman at the bottom fights an ogre at the top, with missiles and a healing drop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Protocol

from arcadebox.engine import Canvas, Frame, GameBase, Key

RESTRICT_INPUT_FRAMES = 90
MISSILE_USES = 3
RETURN_TEXT = "Spaceでタイトルに戻ります"


class Difficulty(Enum):
    EASY = auto()
    HARD = auto()


class OniScene(Enum):
    TITLE = auto()
    EASY = auto()
    HARD = auto()
    OPERATION = auto()
    OPERATION2 = auto()
    EXPLAIN = auto()
    EXPLAIN2 = auto()
    PLAY = auto()
    PLAY2 = auto()
    RESULT = auto()


@dataclass
class Fighter:
    normal_img: str = ""
    damage_img: str = ""
    lose_img: str = ""
    win_img: str = ""
    pwin_img: str = ""
    heal_img: str = ""
    img: str = ""
    px: float = 0.0
    py: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    bullet_ofs_y: float = 0.0
    hp: float = 0.0
    max_hp: float = 0.0
    hp_gauge_ofs_y: float = 0.0
    half_w: float = 0.0
    half_h: float = 0.0
    invincible_rest_time: float = 0.0
    invincible_time: float = 0.0


@dataclass
class Projectile:
    img: str = ""
    px: float = 0.0
    py: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    hp: int = 0
    use: int = 0
    half_w: float = 0.0
    half_h: float = 0.0


@dataclass
class Item:
    img: str = ""
    px: float = 0.0
    py: float = 0.0
    vy: float = 0.0
    hp: float = 0.0
    half_w: float = 0.0
    half_h: float = 0.0


class _Body(Protocol):
    px: float
    py: float
    half_w: float
    half_h: float

    @property
    def hp(self) -> float: ...


def _hitman() -> Fighter:
    return Fighter("hitman0", "hitman1", "hitman2", "hitman3", "hitman4", "hitman5")


def _oni() -> Fighter:
    return Fighter("oni0", "oni1", "oni2", "oni3")


@dataclass
class OniData:
    frame_restrict_input: int = 0
    frame_cnt: int = 0
    hitman: Fighter = field(default_factory=_hitman)
    oni: Fighter = field(default_factory=_oni)
    tama: Projectile = field(default_factory=lambda: Projectile("tama"))
    fire: Projectile = field(default_factory=lambda: Projectile("fire"))
    misairu: Projectile = field(default_factory=lambda: Projectile("misairu"))
    kaihukuyaku: Item = field(default_factory=lambda: Item("kaihukuyaku"))


def collision(fighter: Fighter, body: _Body) -> bool:
    """True when an active projectile or item touches the fighter's box."""
    if body.hp <= 0:
        return False
    return not (
        fighter.px + fighter.half_w < body.px - body.half_w
        or body.px + body.half_w < fighter.px - fighter.half_w
        or body.py + body.half_h < fighter.py - fighter.half_h
        or fighter.py + fighter.half_h < body.py - body.half_h
    )


@dataclass(frozen=True)
class _Settings:
    hitman_vx: float
    hitman_hp: float
    hitman_invincible: float
    oni_vx: float
    oni_hp: float
    oni_invincible: float
    tama_vy: float
    item_vy: float
    missile_vy: float
    hitman_half_w: float
    oni_half_h: float
    perfect_hp: int


_SETTINGS = {
    Difficulty.EASY: _Settings(6.0, 150.0, 0.5, 16.0, 200.0, 0.5, -12.0, 15.0, -12.0, 80, 90, 130),
    Difficulty.HARD: _Settings(4.0, 100.0, 0.2, 20.0, 250.0, 0.3, -10.0, 7.0, -10.0, 70, 100, 80),
}

_OPERATION_LINES = (
    "〜操作説明〜",
    "・Aキー:左移動",
    "・Dキー:右移動",
    "・Spaceキー:弾発射",
    "・Bキーでタイトルに戻る",
)

_EXPLAIN_EASY = (
    "〜説明〜",
    "・敵のHP:200",
    "・自分のHP:150",
    "・自分または鬼のHPの色が黄色になったら",
    "　Hキーでミサイル発射可能(3回まで)",
    "・自分のHPの色が黄色になったら",
    "　回復薬が落ちてくる",
    "・Sキーで戦闘開始",
)

_EXPLAIN_HARD = (
    "〜説明〜",
    "・敵のHPが+50された状態でスタート",
    "・自分のHPが-50された状態でスタート",
    "・敵のスピードがアップ",
    "・自分のスピードがダウン",
    "・自分の弾の速度がダウン",
    "・自分または鬼のHPの色が黄色になったら",
    "　Hキーでミサイル発射可能(3回まで)",
    "・自分のHPの色が黄色になったら",
    "　回復薬が落ちてくる",
    "・回復薬が落ちてくる速度がダウン",
    "・Sキーで戦闘開始",
)


class OniGame(GameBase):
    """Pick a difficulty with the mouse, read the rules, then fight."""

    def __init__(self, on_back_to_menu: Optional[Callable[[], None]] = None) -> None:
        super().__init__(on_back_to_menu)
        self.state = OniScene.TITLE
        self.data = OniData()
        self.use_cnt = 0
        self.count = 0
        self.maxhp = 0
        self.hp_warning = 0.0
        self.hp_danger = 0.0

    def setup(self, difficulty: Difficulty, width: float) -> None:
        """Reset every fighter, shot and item for a new battle."""
        s = _SETTINGS[difficulty]
        d = self.data
        hitman, oni = d.hitman, d.oni

        hitman.img = hitman.normal_img
        hitman.px, hitman.py = width / 2, 960.0
        hitman.vx = s.hitman_vx
        hitman.hp = s.hitman_hp
        hitman.max_hp = hitman.hp
        hitman.hp_gauge_ofs_y = -130
        hitman.bullet_ofs_y = -100
        hitman.invincible_rest_time = 0.0
        hitman.invincible_time = s.hitman_invincible

        oni.img = oni.normal_img
        oni.px, oni.py = hitman.px, 200.0
        oni.vx = s.oni_vx
        oni.hp = s.oni_hp
        oni.max_hp = oni.hp
        oni.hp_gauge_ofs_y = -150
        oni.bullet_ofs_y = 150
        oni.invincible_rest_time = 0.0
        oni.invincible_time = s.oni_invincible

        for shot, vy in ((d.tama, s.tama_vy), (d.fire, 25.0), (d.misairu, s.missile_vy)):
            shot.px = shot.py = 0.0
            shot.vy = vy
            shot.hp = 0
        d.misairu.use = 0
        d.kaihukuyaku.px = d.kaihukuyaku.py = 0.0
        d.kaihukuyaku.vy = s.item_vy
        d.kaihukuyaku.hp = 0

        hitman.half_w, hitman.half_h = s.hitman_half_w, 80
        oni.half_w, oni.half_h = 150, s.oni_half_h
        d.tama.half_w = d.tama.half_h = 25
        d.fire.half_w = d.fire.half_h = 60
        d.misairu.half_w = d.misairu.half_h = 5
        d.kaihukuyaku.half_w = d.kaihukuyaku.half_h = 25

        self.use_cnt = MISSILE_USES
        self.count = 0
        self.maxhp = s.perfect_hp
        self.hp_warning = hitman.hp * 0.3
        self.hp_danger = hitman.hp * 0.1
        d.frame_restrict_input = RESTRICT_INPUT_FRAMES

    def proc(self, frame: Frame) -> None:
        handlers = {
            OniScene.TITLE: self._title,
            OniScene.EASY: self._easy,
            OniScene.HARD: self._hard,
            OniScene.OPERATION: self._operation,
            OniScene.OPERATION2: self._operation2,
            OniScene.EXPLAIN: self._explain,
            OniScene.EXPLAIN2: self._explain2,
            OniScene.PLAY: self._play,
            OniScene.RESULT: self._result,
        }
        handler = handlers.get(self.state)
        if handler is not None:
            handler(frame)

    # menus

    def _title(self, frame: Frame) -> None:
        canvas = frame.canvas
        canvas.draw("clear")
        canvas.draw("fill", 255)
        canvas.draw("textSize", 300)
        canvas.draw("fill", 255, 0, 0)
        canvas.draw("text", "鬼退治", 530, 400)
        canvas.draw("fill", 255)
        canvas.draw("textSize", 100)
        canvas.draw("text", "左クリックでイージーモード", 300, 600)
        canvas.draw("text", "右クリックでハードモード", 300, 800)
        canvas.draw("printSize", 100)
        if frame.input.is_trigger(Key.LBUTTON):
            self.state = OniScene.EASY
            return
        if frame.input.is_trigger(Key.RBUTTON):
            self.state = OniScene.HARD
            return
        if frame.input.is_trigger(Key.ENTER):
            self.back_to_menu()

    def _step(
        self, frame: Frame, lines: tuple[str, ...], size: int,
        forward: Key, target: OniScene, cancel: Key,
    ) -> bool:
        canvas = frame.canvas
        canvas.draw("printSize", size)
        for line in lines:
            canvas.draw("print", line)
        if frame.input.is_trigger(forward):
            canvas.draw("playSound", "click")
            self.state = target
            return True
        if frame.input.is_trigger(cancel):
            canvas.draw("playSound", "cancel")
            self.state = OniScene.TITLE
        return False

    def _easy(self, frame: Frame) -> None:
        frame.canvas.draw("clear")
        frame.canvas.draw("showCursor", 0)
        self._step(frame, ("イージーモード", "Push W"), 100, Key.W, OniScene.OPERATION, Key.T)

    def _hard(self, frame: Frame) -> None:
        frame.canvas.draw("clear")
        frame.canvas.draw("showCursor", 0)
        self._step(frame, ("ハードモード", "Push Z"), 100, Key.Z, OniScene.OPERATION2, Key.T)

    def _operation(self, frame: Frame) -> None:
        frame.canvas.draw("clear")
        frame.canvas.draw("fill", 255)
        lines = _OPERATION_LINES + ("・PUSH E",)
        self._step(frame, lines, 80, Key.E, OniScene.EXPLAIN, Key.T)

    def _operation2(self, frame: Frame) -> None:
        frame.canvas.draw("clear")
        frame.canvas.draw("fill", 255)
        lines = _OPERATION_LINES + ("・PUSH H",)
        self._step(frame, lines, 80, Key.H, OniScene.EXPLAIN2, Key.T)

    def _start_battle(self, frame: Frame, difficulty: Difficulty) -> None:
        self.setup(difficulty, frame.width)
        canvas = frame.canvas
        canvas.draw("playSound", "finalfight")
        canvas.draw("playLoopSound", "finalfight")

    def _explain(self, frame: Frame) -> None:
        frame.canvas.draw("clear")
        frame.canvas.draw("fill", 255)
        if self._step(frame, _EXPLAIN_EASY, 80, Key.S, OniScene.PLAY, Key.B):
            self._start_battle(frame, Difficulty.EASY)

    def _explain2(self, frame: Frame) -> None:
        frame.canvas.draw("clear")
        frame.canvas.draw("fill", 255)
        if self._step(frame, _EXPLAIN_HARD, 80, Key.S, OniScene.PLAY, Key.B):
            self._start_battle(frame, Difficulty.HARD)

    # battle

    def _play(self, frame: Frame) -> None:
        d = self.data
        inp = frame.input
        canvas = frame.canvas
        hitman, oni = d.hitman, d.oni
        tama, fire, misairu, item = d.tama, d.fire, d.misairu, d.kaihukuyaku

        if inp.is_press(Key.D):
            hitman.px += hitman.vx
        if inp.is_press(Key.A):
            hitman.px -= hitman.vx
        hitman.px = max(hitman.px, hitman.half_w)
        hitman.px = min(hitman.px, frame.width - hitman.half_w)

        if tama.hp == 0 and inp.is_press(Key.SPACE):
            canvas.draw("playSound", "shoot")
            tama.px = hitman.px
            tama.py = hitman.py + hitman.bullet_ofs_y
            tama.hp = 1
        if tama.hp > 0:
            tama.py += tama.vy
            if tama.py < -tama.half_h:
                tama.hp = 0

        missile_ready = (
            misairu.hp == 0
            and (hitman.hp <= self.hp_warning or oni.hp <= self.hp_warning)
            and inp.is_trigger(Key.H)
            and misairu.use < self.use_cnt
        )
        if missile_ready:
            canvas.draw("playSound", "shoot2")
            misairu.px = hitman.px
            misairu.py = hitman.py + hitman.bullet_ofs_y
            misairu.hp = 1
            misairu.use += 1
        elif misairu.use > self.use_cnt:
            misairu.hp = 0
            tama.hp = 1
        if misairu.hp > 0:
            misairu.py += misairu.vy
            if misairu.py < -misairu.half_h:
                misairu.hp = 0

        if item.hp == 0:
            item.py = 0.0
            item.hp = 1
        if item.hp > 0 and hitman.hp < self.hp_warning:
            item.py += item.vy
            if item.py > frame.height + item.half_h:
                item.px = float(frame.rng.randrange(1000))
                item.py = 0.0

        oni.px += oni.vx
        if oni.px < oni.half_w or oni.px > frame.width - oni.half_w:
            oni.vx = -oni.vx

        if fire.hp == 0:
            canvas.draw("playSound", "shoot")
            fire.px = oni.px
            fire.py = oni.py + oni.bullet_ofs_y
            fire.hp = 1
        if fire.hp > 0:
            fire.py += fire.vy
            if fire.py > frame.height + fire.half_h:
                fire.hp = 0

        if collision(hitman, fire) and hitman.invincible_rest_time <= 0:
            canvas.draw("playSound", "explosion")
            hitman.img = hitman.damage_img
            hitman.hp -= 3
            hitman.invincible_rest_time = hitman.invincible_time
        elif hitman.invincible_rest_time > 0:
            hitman.invincible_rest_time -= frame.delta
        else:
            hitman.img = hitman.normal_img

        if collision(oni, tama) and oni.invincible_rest_time <= 0:
            canvas.draw("playSound", "explosion")
            oni.img = oni.damage_img
            oni.hp -= 2
            oni.invincible_rest_time = oni.invincible_time
        elif collision(oni, misairu):
            canvas.draw("playSound", "explosion")
            oni.img = oni.damage_img
            oni.hp -= 5
            oni.invincible_rest_time = oni.invincible_time
        elif oni.invincible_rest_time > 0:
            oni.invincible_rest_time -= frame.delta
        else:
            oni.img = oni.normal_img

        if collision(hitman, item) and hitman.hp < self.hp_warning:
            canvas.draw("playSound", "kaihuku")
            hitman.img = hitman.heal_img
            hitman.hp = hitman.max_hp
            item.hp = 0

        if hitman.hp <= 0 or oni.hp <= 0:
            self._finish(canvas)
        if inp.is_trigger(Key.ENTER):
            self.back_to_menu()
        self._draw(frame)

    def _finish(self, canvas: Canvas) -> None:
        d = self.data
        hitman, oni = d.hitman, d.oni
        if hitman.hp <= 0:
            oni.img = oni.win_img
            hitman.img = hitman.lose_img
            canvas.draw("playSound", "lose")
            canvas.draw("playSound", "voice")
        elif hitman.hp < self.maxhp:
            hitman.img = hitman.win_img
            oni.img = oni.lose_img
            canvas.draw("playSound", "win")
            canvas.draw("playSound", "youwin")
        else:
            hitman.img = hitman.pwin_img
            oni.img = oni.lose_img
            canvas.draw("playSound", "pclear")
        canvas.draw("stopSound", "finalfight")
        canvas.draw("stopSound", "explosion")
        d.frame_cnt = d.frame_restrict_input
        self.state = OniScene.RESULT

    def _draw(self, frame: Frame) -> None:
        d = self.data
        canvas = frame.canvas
        canvas.draw("clear")
        canvas.draw("rectMode", "CORNER")
        canvas.draw("image", "onigasima", 0, 0)
        canvas.draw("rectMode", "CENTER")
        canvas.draw("image", d.hitman.img, d.hitman.px, d.hitman.py)
        canvas.draw("image", d.oni.img, d.oni.px, d.oni.py)
        for body in (d.tama, d.fire, d.misairu, d.kaihukuyaku):
            if body.hp > 0:
                canvas.draw("image", body.img, body.px, body.py)
        self._hp_gauge(canvas, d.hitman)
        self._hp_gauge(canvas, d.oni)

    def _hp_gauge(self, canvas: Canvas, fighter: Fighter) -> None:
        y = fighter.py + fighter.hp_gauge_ofs_y
        canvas.draw("strokeWeight", 0)
        canvas.draw("fill", 128)
        canvas.draw("rect", fighter.px, y, fighter.max_hp, 15)
        if fighter.hp > self.hp_warning:
            canvas.draw("fill", 0, 255, 0)
        elif fighter.hp > self.hp_danger:
            canvas.draw("fill", 255, 255, 0)
        else:
            canvas.draw("fill", 255, 0, 50)
        canvas.draw("rect", fighter.px, y, fighter.hp, 15)

    def _result(self, frame: Frame) -> None:
        d = self.data
        canvas = frame.canvas
        tama, fire, misairu = d.tama, d.fire, d.misairu
        if tama.hp > 0:
            tama.py += tama.vy
            if tama.py < -tama.half_h:
                tama.hp = 0
        if fire.hp > 0:
            fire.py += fire.vy
            if fire.py < -fire.half_h:
                fire.hp = 0
        if misairu.hp > 0:
            misairu.py += misairu.vy
            if misairu.py > frame.height + misairu.half_h:
                misairu.hp = 0
        self._draw(frame)

        hitman, oni = d.hitman, d.oni
        hitman.px, hitman.py = frame.width / 2, frame.height / 2
        if hitman.hp < self.maxhp and oni.hp <= 0:
            canvas.draw("clear", 255, 0, 50)
            canvas.draw("image", hitman.img, hitman.px, hitman.py)
            canvas.draw("fill", 255)
            canvas.draw("textSize", 180)
            canvas.draw("text", "Game Clear!!!", 450, 200)
            canvas.draw("textSize", 100)
            canvas.draw("text", RETURN_TEXT, 20, frame.height)
            stop = "win"
        elif hitman.hp >= self.maxhp and oni.hp <= 0:
            canvas.draw("clear", 180, 190, 0)
            canvas.draw("image", hitman.pwin_img, hitman.px, hitman.py)
            canvas.draw("fill", 255, 0, 0)
            canvas.draw("textSize", 150)
            canvas.draw("text", "Perfect Game!!!!!", 400, 200)
            canvas.draw("textSize", 100)
            canvas.draw("text", RETURN_TEXT, 20, frame.height)
            stop = "pclear"
        else:
            canvas.draw("clear", 0)
            canvas.draw("image", hitman.img, hitman.px, hitman.py)
            canvas.draw("fill", 0, 0, 255)
            canvas.draw("textSize", 180)
            canvas.draw("text", "Game Over...", 450, 200)
            canvas.draw("fill", 255)
            canvas.draw("textSize", 100)
            canvas.draw("text", RETURN_TEXT, 25, frame.height)
            stop = "lose"
        if frame.input.is_trigger(Key.SPACE):
            canvas.draw("stopSound", stop)
            canvas.draw("playSound", "click")
            self.state = OniScene.TITLE