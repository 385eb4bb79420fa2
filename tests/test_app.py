from termgrid.app import (
    CTRL_R,
    ESC,
    handle_input,
    render_frame_info,
    render_input_info,
)
from termgrid.frame_info import FrameInfoBuffer
from termgrid.game import Game, Vector, move_cursor


def test_move_keys():
    game = Game()
    start = game.player.position
    outcome = handle_input(game, b"l")
    assert game.player.position == start + Vector(1, 0)
    assert outcome.exit is False and outcome.resize is False
    handle_input(game, b"hjk")
    assert game.player.position == start


def test_escape_alone_exits():
    outcome = handle_input(Game(), bytes([ESC]))
    assert outcome.exit is True


def test_escape_sequence_does_not_exit():
    game = Game()
    start = game.player.position
    outcome = handle_input(game, bytes([ESC]) + b"[A")
    assert outcome.exit is False
    assert game.player.position == start


def test_ctrl_r_requests_resize():
    outcome = handle_input(Game(), bytes([CTRL_R]))
    assert outcome.resize is True
    assert outcome.exit is False


def test_move_blocked_at_edge():
    game = Game()
    game.player.position = Vector(0, 0)
    handle_input(game, b"hk")
    assert game.player.position == Vector(0, 0)


def test_render_input_info_printable_and_control():
    out = render_input_info(b"a\x01")
    assert out == move_cursor(1, 1) + f"Last Input: {ord('a')} (a) {0x01} "


def test_render_input_info_stops_at_nul_and_signs_high_bytes():
    assert render_input_info(b"a\x00b") == move_cursor(1, 1) + f"Last Input: {ord('a')} (a) "
    assert render_input_info(b"\xe2").endswith("Last Input: -30 ")


def test_render_input_info_empty():
    assert render_input_info(b"") == move_cursor(1, 1) + "Last Input: "


def test_render_frame_info_layout():
    frames = FrameInfoBuffer(30)
    frames.frames[1].start, frames.frames[1].end = 0, 33
    out = render_frame_info(frames, 100, 33)
    expected_fps = f"FPS :{frames.average_fps():4d}"
    assert out == (
        move_cursor(92, 1) + expected_fps + move_cursor(92, 2) + "Load:100%"
    )