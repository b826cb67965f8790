from hirestext.config import ScreenInit
from hirestext.screen import HiResTextScreen
from hirestext.vt52 import Vt52Interpreter, Vt52State

import pytest


def _make(**kwargs):
    screen = HiResTextScreen.open(ScreenInit(**kwargs))
    return screen, Vt52Interpreter(screen)


def test_plain_text_advances_cursor():
    screen, vt = _make()
    vt.write("AB")
    assert (screen.cursor_column, screen.cursor_row) == (2, 0)
    assert vt.state is Vt52State.TEXT


def test_direct_cursor_addressing():
    screen, vt = _make()
    vt.write("\x1bY\x2B\x25")
    assert screen.cursor_row == 11
    assert screen.cursor_column == 5
    assert vt.state is Vt52State.TEXT


def test_direct_addressing_out_of_range_is_ignored():
    screen, vt = _make()
    vt.write("XY")
    vt.write("\x1bY" + chr(32 + 40) + chr(32 + 3))
    assert (screen.cursor_column, screen.cursor_row) == (2, 0)


def test_home():
    screen, vt = _make()
    vt.write("hello\nworld")
    vt.write("\x1bH")
    assert (screen.cursor_column, screen.cursor_row) == (0, 0)


def test_cursor_movement_and_clamping():
    screen, vt = _make()
    vt.write("\x1bD\x1bA")
    assert (screen.cursor_column, screen.cursor_row) == (0, 0)
    vt.write("\x1bC\x1bC\x1bB")
    assert (screen.cursor_column, screen.cursor_row) == (2, 1)
    vt.write("\x1bD\x1bA")
    assert (screen.cursor_column, screen.cursor_row) == (1, 0)


def test_cursor_down_stops_at_last_row():
    screen, vt = _make()
    vt.write("\x1bB" * 40)
    assert screen.cursor_row == 23


def test_cursor_right_stops_before_width():
    screen, vt = _make()
    vt.write("\x1bC" * 100)
    assert screen.cursor_column == screen.width - 1


def test_inverse_video_on_and_off():
    screen, vt = _make()
    vt.write("\x1bp")
    assert screen.inverse_video is True
    vt.write("\x1bq")
    assert screen.inverse_video is False


def test_escape_s_ignores_next_byte():
    screen, vt = _make()
    vt.write("\x1bS")
    assert vt.state is Vt52State.IGNORE_NEXT
    vt.write("OX")
    assert screen.cursor_column == 1
    assert vt.state is Vt52State.TEXT


def test_unknown_command_returns_to_text():
    screen, vt = _make()
    vt.write("\x1bZA")
    assert screen.cursor_column == 1
    assert vt.state is Vt52State.TEXT


def test_clear_screen_sequence():
    screen, vt = _make()
    vt.write("Some text\nmore")
    assert any(b != 0xFF for b in screen.state.buffer)
    vt.write("\x1bE")
    assert all(b == 0xFF for b in screen.state.buffer)
    assert (screen.cursor_column, screen.cursor_row) == (0, 0)


def test_erase_to_end_of_screen_matches_reference():
    screen, vt = _make()
    vt.write("AB\nCD\nEF")
    vt.write("\x1bY" + chr(32 + 1) + chr(32 + 0))
    vt.write("\x1bJ")
    reference, ref_vt = _make()
    ref_vt.write("AB")
    assert screen.state.buffer == reference.state.buffer
    assert (screen.cursor_column, screen.cursor_row) == (0, 1)


def test_erase_to_end_of_line_matches_reference():
    screen, vt = _make()
    vt.write("ABC")
    vt.write("\x1bD\x1bD")
    vt.write("\x1bK")
    reference, ref_vt = _make()
    ref_vt.write("A")
    assert screen.state.buffer == reference.state.buffer
    assert screen.cursor_column == 1


def test_write_turns_carriage_return_into_newline():
    screen, vt = _make()
    count = vt.write("A\r")
    assert count == 2
    assert (screen.cursor_column, screen.cursor_row) == (0, 1)


def test_process_char_accepts_int_and_str():
    screen, vt = _make()
    vt.process_char(ord("A"))
    vt.process_char("B")
    assert screen.cursor_column == 2


def test_process_char_rejects_bad_values():
    _, vt = _make()
    with pytest.raises(ValueError):
        vt.process_char(300)
    with pytest.raises(ValueError):
        vt.process_char("ab")


def test_reset_drops_partial_sequence():
    screen, vt = _make()
    vt.write("\x1bY")
    assert vt.state is Vt52State.WANT_LINE
    vt.reset()
    assert vt.state is Vt52State.TEXT
    vt.write("Q")
    assert screen.cursor_column == 1


def test_cursor_is_removed_before_drawing():
    screen, vt = _make(timer=lambda: 0)
    screen.animate_cursor()
    assert screen.state.cursor_present is True
    vt.write("A")
    assert screen.state.cursor_present is False
    reference, ref_vt = _make()
    ref_vt.write("A")
    assert screen.state.buffer == reference.state.buffer


def test_redirect_sends_print_to_screen(capsys):
    screen, vt = _make(redirect_printf=True)
    with vt.redirect():
        print("hi")
    assert (screen.cursor_column, screen.cursor_row) == (0, 1)
    assert capsys.readouterr().out == ""


def test_redirect_without_flag_leaves_stdout(capsys):
    screen, vt = _make()
    with vt.redirect():
        print("hi")
    assert capsys.readouterr().out == "hi\n"
    assert (screen.cursor_column, screen.cursor_row) == (0, 0)


def test_redirect_after_close_leaves_stdout(capsys):
    screen, vt = _make(redirect_printf=True)
    screen.close()
    with vt.redirect():
        print("x")
    assert capsys.readouterr().out == "x\n"


def test_flush_keeps_position():
    screen, vt = _make()
    vt.write("ABC")
    vt.flush()
    assert screen.cursor_column == 3