import pytest

from termgrid.frame_info import FrameInfo, FrameInfoBuffer


def test_new_buffer_frames_are_unset():
    buffer = FrameInfoBuffer(5)
    assert len(buffer) == 5
    assert all(frame == FrameInfo(-1, -1) for frame in buffer.frames)
    assert buffer.current is buffer.frames[0]


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        FrameInfoBuffer(0)


def test_advance_wraps_around():
    buffer = FrameInfoBuffer(3)
    seen = [buffer.advance() for _ in range(3)]
    assert seen[0] is buffer.frames[1]
    assert seen[1] is buffer.frames[2]
    assert seen[2] is buffer.frames[0]
    assert buffer.current_index == 0


def test_average_active_time_empty_is_zero():
    assert FrameInfoBuffer(4).average_active_time() == 0


def test_average_active_time_skips_current_and_incomplete():
    buffer = FrameInfoBuffer(4)
    buffer.frames[0].start, buffer.frames[0].end = 100, 500
    buffer.frames[1].start, buffer.frames[1].end = 100, 110
    buffer.frames[2].start, buffer.frames[2].end = 200, 230
    buffer.frames[3].start = 300
    assert buffer.current_index == 0
    assert buffer.average_active_time() == (10 + 30) // 2


def test_average_active_time_includes_first_after_advance():
    buffer = FrameInfoBuffer(2)
    buffer.frames[0].start, buffer.frames[0].end = 0, 20
    buffer.advance()
    assert buffer.average_active_time() == 20


def test_average_fps_fresh_buffer():
    buffer = FrameInfoBuffer(30)
    assert buffer.average_fps() == -970


def test_average_fps_zero_duration_raises():
    buffer = FrameInfoBuffer(3)
    for frame in buffer.frames:
        frame.start = 0
    with pytest.raises(ZeroDivisionError):
        buffer.average_fps()


def test_average_fps_grows_with_buffer_length():
    small = FrameInfoBuffer(10)
    large = FrameInfoBuffer(20)
    for buffer in (small, large):
        buffer.frames[0].start = 2000
    assert large.average_fps() - small.average_fps() == 10