import pytest

from celestegame.application import (
    TRANSIENT_STORAGE_SIZE,
    Application,
    main,
    update_game,
)
from celestegame.input import InputState
from celestegame.render_interface import MAX_TRANSFORMS, RenderData
from celestegame.utils import mb
from celestegame.vectors import IVec2, Vec2


@pytest.fixture
def app():
    return Application(input_state=InputState(), render_data=RenderData(), transient_size=64)


def test_update_game_queues_grid():
    data = RenderData()
    update_game(data)
    assert data.transform_count == 100
    assert data.transforms[0].pos == Vec2(0.0, 0.0)
    assert data.transforms[-1].pos == Vec2(900.0, 900.0)
    assert all(t.size == Vec2(100.0, 100.0) for t in data.transforms)
    assert all(t.atlas_offset == IVec2(16, 0) for t in data.transforms)


def test_update_game_positions_are_unique():
    data = RenderData()
    update_game(data)
    positions = {(t.pos.x, t.pos.y) for t in data.transforms}
    assert len(positions) == 100


def test_update_game_overflows_at_capacity():
    data = RenderData()
    for _ in range(MAX_TRANSFORMS // 100):
        update_game(data)
    assert data.transform_count == MAX_TRANSFORMS
    with pytest.raises(IndexError):
        update_game(data)


def test_get_returns_singleton():
    first = Application.get()
    second = Application.get()
    assert first is second
    assert second.transient_storage.capacity == mb(50)


def test_default_transient_storage_size():
    assert TRANSIENT_STORAGE_SIZE == mb(50)
    application = Application(input_state=InputState(), render_data=RenderData())
    assert application.transient_storage.capacity == mb(50)


def test_on_resize_updates_input_state(app):
    app.on_resize(640, 480)
    assert app.input_state.screen_size_x == 640
    assert app.input_state.screen_size_y == 480


def test_on_close_stops_running(app):
    app.running = True
    assert app.on_close() is True
    assert app.running is False


def test_run_without_init_raises(app):
    with pytest.raises(RuntimeError):
        app.run()


def test_shutdown_resets_state(app):
    app.running = True
    app.transient_storage.alloc(10)
    assert app.transient_storage.used == 16
    app.shutdown()
    assert app.running is False
    assert app.window is None
    assert app.transient_storage.used == 0


def test_constructor_traces_working_directory(capsys):
    Application(input_state=InputState(), render_data=RenderData(), transient_size=8)
    out = capsys.readouterr().out
    assert "Current working directory" in out


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2