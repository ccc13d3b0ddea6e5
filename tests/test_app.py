import math

import pytest

from cylinview.app import App, angle_to_xpos
from cylinview.image import MonoImage
from cylinview.rand import PseudoRand
from cylinview.screen import CV_FRAME_BYTES, CV_HEIGHT, CV_V_WIDTH, Color


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def white_image():
    return MonoImage(8, 8, bytes([0xFF] * 8))


def black_image():
    return MonoImage(8, 8, bytes(8))


def test_angle_to_xpos_zero():
    assert angle_to_xpos(0.0) == 0


def test_angle_to_xpos_half_turn():
    assert angle_to_xpos(math.pi) == CV_V_WIDTH // 2


def test_angle_to_xpos_is_monotonic():
    values = [angle_to_xpos(a * 0.1) for a in range(60)]
    assert values == sorted(values)
    assert all(0 <= v < CV_V_WIDTH for v in values)


def test_auto_mode_change_advances_mode():
    clock = FakeClock()
    app = App(clock=clock)
    app.set_auto_mode_change(True, 100)
    clock.now = 100
    app.loop(0, 0.0)
    assert app.mode == 1


def test_auto_mode_change_waits_for_interval():
    clock = FakeClock()
    app = App(clock=clock)
    app.set_auto_mode_change(True, 100)
    clock.now = 50
    app.loop(0, 0.0)
    assert app.mode == 0


def test_auto_mode_change_wraps_after_max():
    clock = FakeClock()
    app = App(clock=clock)
    app.set_auto_mode_change(True, 10)
    app.set_mode(app.max_render_mode)
    clock.now = 10
    app.loop(0, 0.0)
    assert app.mode == 0


def test_init_disables_auto_mode_change():
    clock = FakeClock()
    app = App(clock=clock)
    app.init()
    clock.now = 1_000_000
    app.loop(0, 1.0)
    assert app.mode == 0
    assert app.auto_mode_change is False


def test_loop_records_angle():
    app = App(clock=FakeClock())
    app.loop(0, 1.5)
    assert app.angle == 1.5


def test_render_mode_0_draws_frame():
    app = App(frames=[white_image()], clock=FakeClock())
    buffer = bytearray(CV_FRAME_BYTES)
    app.set_angle(0.0)
    app.render(buffer)
    assert app.drawer.get_dot(0, CV_HEIGHT // 2) == Color.WHITE
    assert any(buffer)


def test_render_mode_0_cycles_frames():
    app = App(frames=[white_image(), black_image()], clock=FakeClock())
    buffer = bytearray(CV_FRAME_BYTES)
    app.render(buffer)
    assert app.drawer.get_dot(0, CV_HEIGHT // 2) == Color.WHITE
    app.render(buffer)
    assert app.drawer.get_dot(0, CV_HEIGHT // 2) == Color.BLACK
    app.render(buffer)
    assert app.drawer.get_dot(0, CV_HEIGHT // 2) == Color.WHITE


def test_render_without_frames_leaves_buffer():
    app = App(clock=FakeClock())
    buffer = bytearray(CV_FRAME_BYTES)
    app.render(buffer)
    assert buffer == bytearray(CV_FRAME_BYTES)


def test_render_other_mode_leaves_buffer():
    app = App(frames=[white_image()], clock=FakeClock())
    app.set_mode(1)
    buffer = bytearray(CV_FRAME_BYTES)
    app.render(buffer)
    assert buffer == bytearray(CV_FRAME_BYTES)


def test_render_rejects_small_buffer():
    app = App(frames=[white_image()], clock=FakeClock())
    with pytest.raises(ValueError):
        app.render(bytearray(CV_FRAME_BYTES - 1))


def test_get_rand_follows_generator():
    app = App(clock=FakeClock())
    app.rand.set_seed(1, 2, 3, 4)
    reference = PseudoRand()
    reference.set_seed(1, 2, 3, 4)
    assert [app.get_rand() for _ in range(5)] == [reference.rand() for _ in range(5)]


def test_get_rand_is_32_bit():
    app = App(clock=FakeClock())
    assert all(0 <= app.get_rand() <= 0xFFFFFFFF for _ in range(50))


def test_snow_uses_app_grains():
    app = App(clock=FakeClock())
    app.snow.step()
    assert len(app.snow) == 100
    assert all(grain.y <= 0 for grain in app.snow)