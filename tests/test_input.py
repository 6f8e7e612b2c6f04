from celestegame.input import InputState, input_state


def test_default_state_is_zero_sized():
    state = InputState()
    assert (state.screen_size_x, state.screen_size_y) == (0, 0)


def test_resize_updates_both_dimensions():
    state = InputState()
    state.resize(1200, 720)
    assert (state.screen_size_x, state.screen_size_y) == (1200, 720)


def test_resize_replaces_previous_size():
    state = InputState(10, 20)
    state.resize(30, 40)
    assert state == InputState(30, 40)


def test_shared_state_is_resizable():
    original = (input_state.screen_size_x, input_state.screen_size_y)
    try:
        input_state.resize(640, 480)
        assert input_state == InputState(640, 480)
    finally:
        input_state.resize(*original)