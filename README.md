# arcadebox

A collection of small arcade games, each driven one frame at a time. The games
do not open a window or play sound themselves. Each frame receives the
current input state and a canvas that records drawing calls, sound calls
included, as plain `(name, args)` tuples. A host can render the recorded
calls, and tests can inspect them directly.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## How a frame works

`arcadebox.engine` holds the pieces the games share:

- `Key` names the keys `A` to `Z`, `ENTER` and `SPACE`, and the mouse buttons
  `LBUTTON` and `RBUTTON`.
- `Input` tracks what is held down. `press(*keys)` and `release(*keys)`
  change that state, and `move_mouse(x, y)` sets the pointer (`mouse_x`,
  `mouse_y`). `is_press(key)` reports a held key. `is_trigger(key)` reports
  a key that is held now but was not held at the last `next_frame()` call.
  Call `next_frame()` once after each frame.
- `Canvas` records calls. `draw(name, *args)` appends one, `names()` lists
  the names in order, `texts()` lists the first argument of every `text` and
  `print` call, and `reset()` clears the record.
- `Frame` bundles an `Input`, a `Canvas`, the time step `delta` (default
  1/60), the screen `width` and `height` (default 1920×1080), and a
  `random.Random` as `rng`.
- `GameBase` is the base of every game. `back_to_menu()` increments
  `menu_requests` and calls the `on_back_to_menu` callback if one was given.
- `Scene` is the base of scene objects. `proc(frame)` runs `update`, `draw`
  and `next_scene` in that order.

## The games

Each game is a `GameBase` with a `proc(frame)` method.

- `arcadebox.tuna.TunaGame`: move the swordsman with W and S to cut the
  tuna swimming in from the right. Every tuna that gets past costs stamina.
  `collision()` checks the swordsman against the fish.
- `arcadebox.circles.HueCircleGame` and `RedCircleGame`: a single circle,
  the first one with a hue that changes over time.
- `arcadebox.slot.SlotMachine`: a three-reel slot machine. R spins, and G, H
  and J stop the reels. `reel_check()` pays out for five paylines and for
  cherries, and `payout(symbol, peka)` gives the medals for three of a
  `Symbol`.
- `arcadebox.blackjack.BlackjackGame`: a title screen, then a table showing
  the first four cards of a deck built by `build_deck()` and shuffled by
  `shuffle_deck(deck, rng)`. It deals these opening cards and nothing more.
- `arcadebox.duel.DuelGame`: a shooting duel against a computer opponent.
  `collision(chara, bullet)` is the hit test.
- `arcadebox.oni.OniGame`: a boss fight in easy or hard `Difficulty`, with
  missiles and a healing item. `setup(difficulty, width)` resets the battle.

## Building blocks of the coin-drop game

- `arcadebox.geometry`: `Vector2`, the wall segment `Line` (with
  `closest(p)`) and `Hole`.
- `arcadebox.coin.Coin`: a rolling disc with impulses, wall contacts with
  friction, and holes.
- `arcadebox.gauge.Gauge`: hold the left button on the gauge button to make
  the power swing between its limits. `released_power` holds the power on the
  frame the button is let go.
- `arcadebox.physics.PhysicsEngine`: gravity, walls and holes, and counts of
  `win` and `lose`. `load_walls(path)` reads lines of `x1,y1,x2,y2` and
  `load_holes(path)` reads lines of `x,y`. The engine loads both files when it
  is constructed.
- `arcadebox.aroundjapan.AroundJapan`: the coin-drop scene. `Bingo` is a
  title card for a second game.
- `arcadebox.menus`: the game selection grid `SelectGrid`, `BackButton` and
  `Background`.
- `arcadebox.message.MessageBoard`: centred messages that show for a while,
  fade out and are then removed.

## What the package does not do

- It has no window, renderer or audio output. Drawing and sounds exist only
  as calls recorded on the `Canvas`.
- It has no command to run and no menu that launches the games. A host
  program has to build the `Frame`s and call `proc` on a game each frame.
- It has no screen-fade transition and no hub that switches scenes. The
  `AroundJapan` and `Bingo` scenes expect their host to provide `button` (a
  `BackButton`), `fade` (an object with `out_start()` and `out_end_flag()`)
  and `change_scene(scene_id)`.

## Example

```python
from arcadebox.engine import Canvas, Frame, Input, Key
from arcadebox.tuna import TunaGame

game = TunaGame()
keys = Input()
canvas = Canvas()

keys.press(Key.LBUTTON)
game.proc(Frame(keys, canvas))
keys.next_frame()

print(canvas.texts())   # the title screen lines
print(game.state)       # TunaScene.PLAY
```