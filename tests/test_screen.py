import pytest

from cylinview.screen import (
    CV_DISPLAYS,
    CV_FRAME_BYTES,
    CV_HEIGHT,
    CV_ONE_FRAME_BYTES,
    CV_V_WIDTH,
    CV_WIDTH,
    Color,
    MonoScreen,
)


def test_geometry_matches_screen_buffer():
    screen = MonoScreen()
    assert len(screen.buffer) == CV_ONE_FRAME_BYTES
    assert CV_FRAME_BYTES == len(screen.buffer) * CV_DISPLAYS
    assert CV_V_WIDTH == (32 + 39) * 16
    screen.set_dot(CV_WIDTH - 1, CV_HEIGHT - 1, Color.WHITE)
    assert screen.buffer[CV_ONE_FRAME_BYTES - 1] == 0x80


def test_new_screen_is_black():
    screen = MonoScreen()
    assert screen.get_dot(0, 0) == Color.BLACK
    assert bytes(screen.buffer) == bytes(CV_ONE_FRAME_BYTES)


@pytest.mark.parametrize("x,y", [(0, 0), (7, 0), (8, 1), (31, 127), (13, 64)])
def test_set_get_round_trip(x, y):
    screen = MonoScreen()
    screen.set_dot(x, y, Color.WHITE)
    assert screen.get_dot(x, y) == Color.WHITE
    assert sum(bin(b).count("1") for b in screen.buffer) == 1
    screen.set_dot(x, y, Color.BLACK)
    assert screen.get_dot(x, y) == Color.BLACK
    assert not any(screen.buffer)


def test_packing_layout():
    screen = MonoScreen()
    screen.set_dot(0, 5, Color.WHITE)
    assert screen.buffer[5] == 0x01
    screen.set_dot(8, 0, Color.WHITE)
    assert screen.buffer[128] == 0x01


def test_clear_white_and_black():
    screen = MonoScreen()
    screen.clear(Color.WHITE)
    assert bytes(screen.buffer) == b"\xff" * CV_ONE_FRAME_BYTES
    assert screen.get_dot(17, 90) == Color.WHITE
    screen.clear()
    assert bytes(screen.buffer) == bytes(CV_ONE_FRAME_BYTES)


def test_shared_buffer_is_written():
    frame = bytearray(CV_ONE_FRAME_BYTES)
    screen = MonoScreen(frame)
    screen.set_dot(3, 10, Color.WHITE)
    assert frame[10] == 1 << 3


def test_short_buffer_rejected():
    with pytest.raises(ValueError):
        MonoScreen(bytearray(10))


@pytest.mark.parametrize("x,y", [(-1, 0), (CV_WIDTH, 0), (0, -1), (0, CV_HEIGHT)])
def test_out_of_range_dot(x, y):
    screen = MonoScreen()
    with pytest.raises(IndexError):
        screen.set_dot(x, y, Color.WHITE)
    with pytest.raises(IndexError):
        screen.get_dot(x, y)