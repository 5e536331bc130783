from arcadebox.engine import Canvas, Frame, GameBase, Input, Key, Scene


def test_trigger_fires_only_on_first_frame():
    inp = Input()
    inp.press(Key.A)
    assert inp.is_trigger(Key.A)
    inp.next_frame()
    assert not inp.is_trigger(Key.A)
    assert inp.is_press(Key.A)


def test_release_clears_key():
    inp = Input()
    inp.press(Key.A, Key.ENTER)
    inp.release(Key.A)
    assert not inp.is_press(Key.A)
    assert inp.is_press(Key.ENTER)


def test_trigger_again_after_release():
    inp = Input()
    inp.press(Key.SPACE)
    inp.next_frame()
    inp.release(Key.SPACE)
    inp.next_frame()
    inp.press(Key.SPACE)
    assert inp.is_trigger(Key.SPACE)


def test_move_mouse():
    inp = Input()
    inp.move_mouse(12, 34)
    assert (inp.mouse_x, inp.mouse_y) == (12.0, 34.0)


def test_canvas_records_and_resets():
    canvas = Canvas()
    canvas.draw("clear", 0)
    canvas.draw("text", "hello", 1, 2)
    canvas.draw("print", 6)
    assert canvas.names() == ["clear", "text", "print"]
    assert canvas.texts() == ["hello", "6"]
    canvas.reset()
    assert canvas.names() == []


def test_scene_proc_order():
    class Recording(Scene):
        def update(self, frame):
            frame.canvas.draw("update")

        def draw(self, frame):
            frame.canvas.draw("draw")

        def next_scene(self, frame):
            frame.canvas.draw("next")

    frame = Frame()
    Recording().proc(frame)
    assert frame.canvas.names() == ["update", "draw", "next"]


def test_scene_default_name():
    assert Scene().game_name() == "???"


def test_back_to_menu_calls_callback():
    seen = []
    game = GameBase(lambda: seen.append(True))
    game.back_to_menu()
    assert seen == [True]
    assert game.menu_requests == 1