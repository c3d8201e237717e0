import io
import os
import sys

import pytest

from dryad.native_io import (
    binary_io_functions,
    console_io_functions,
    file_io_functions,
    terminal_ansi_functions,
)
from dryad.values import NativeError


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


# --- console ---------------------------------------------------------------

def test_print_writes_without_newline(capsys):
    fns = console_io_functions()
    assert fns["print"](["Hello, World!"]) is None
    fns["native_print"]([42.0])
    assert capsys.readouterr().out == "Hello, World!42"


def test_print_without_arguments_writes_nothing(capsys):
    console_io_functions()["print"]([])
    assert capsys.readouterr().out == ""


def test_println_adds_newline(capsys):
    fns = console_io_functions()
    fns["println"]([True])
    fns["native_println"]([])
    assert capsys.readouterr().out == "true\n\n"


def test_input_trims_line(monkeypatch):
    _stdin(monkeypatch, b"  hello  \nrest\n")
    assert console_io_functions()["native_input"]([]) == "hello"


def test_input_char_and_bytes(monkeypatch):
    _stdin(monkeypatch, b"abcdef")
    fns = console_io_functions()
    assert fns["native_input_char"]([]) == "a"
    assert fns["native_input_bytes"]([3.0]) == "bcd"


def test_input_bytes_past_end_fails(monkeypatch):
    _stdin(monkeypatch, b"ab")
    with pytest.raises(NativeError) as info:
        console_io_functions()["native_input_bytes"]([5.0])
    assert info.value.code == 5001


def test_input_bytes_checks_arguments():
    fns = console_io_functions()
    with pytest.raises(NativeError) as arity:
        fns["native_input_bytes"]([])
    assert arity.value.code == 3004
    with pytest.raises(NativeError) as kind:
        fns["native_input_bytes"](["3"])
    assert kind.value.code == 3002


# --- files -----------------------------------------------------------------

def test_write_read_append_delete_round_trip(tmp_path):
    fns = file_io_functions()
    path = str(tmp_path / "test.txt")
    assert fns["file_exists"]([path]) is False
    assert fns["native_write_file"]([path, "Hello"]) is True
    assert fns["native_append_file"]([path, 42.0]) is True
    assert fns["native_read_file"]([path]) == "Hello42"
    assert fns["native_file_exists"]([path]) is True
    assert fns["native_delete_file"]([path]) is True
    assert fns["file_exists"]([path]) is False


def test_append_creates_file(tmp_path):
    fns = file_io_functions()
    path = str(tmp_path / "new.txt")
    fns["native_append_file"]([path, "line\n"])
    assert fns["native_read_file"]([path]) == "line\n"


def test_read_missing_file_fails(tmp_path):
    path = str(tmp_path / "missing.txt")
    with pytest.raises(NativeError) as info:
        file_io_functions()["native_read_file"]([path])
    assert info.value.code == 5003
    assert path in info.value.message


def test_delete_missing_file_fails(tmp_path):
    with pytest.raises(NativeError) as info:
        file_io_functions()["native_delete_file"]([str(tmp_path / "nope")])
    assert info.value.code == 5005


def test_mkdir_and_is_dir(tmp_path):
    fns = file_io_functions()
    target = str(tmp_path / "a" / "b")
    assert fns["native_is_dir"]([target]) is False
    assert fns["native_mkdir"]([target]) is True
    assert fns["native_mkdir"]([target]) is True
    assert fns["native_is_dir"]([target]) is True


def test_getcwd_matches_process(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert file_io_functions()["native_getcwd"]([]) == os.getcwd()


def test_file_functions_check_arguments():
    fns = file_io_functions()
    with pytest.raises(NativeError) as arity:
        fns["native_write_file"](["only-path"])
    assert arity.value.code == 3004
    assert arity.value.message == "native_write_file espera 2 argumentos (path, data)"
    with pytest.raises(NativeError) as kind:
        fns["file_exists"]([1.0])
    assert kind.value.code == 3002
    assert kind.value.message == "Caminho deve ser uma string"


# --- terminal --------------------------------------------------------------

def test_ansi_red_wraps_text():
    assert terminal_ansi_functions()["ansi_red"](["Error message"]) == "\x1b[31mError message\x1b[0m"


@pytest.mark.parametrize(
    "name, code",
    [("ansi_green", "32"), ("ansi_yellow", "33"), ("ansi_blue", "34")],
)
def test_ansi_colours(name, code):
    result = terminal_ansi_functions()[name](["x"])
    assert result == f"\x1b[{code}mx\x1b[0m"


def test_ansi_colour_arity():
    with pytest.raises(NativeError) as info:
        terminal_ansi_functions()["ansi_red"]([])
    assert info.value.code == 3004


def test_move_cursor_puts_row_first(capsys):
    terminal_ansi_functions()["native_move_cursor"]([3.0, 7.0])
    assert capsys.readouterr().out == "\x1b[7;3H"


def test_screen_sequences(capsys):
    fns = terminal_ansi_functions()
    fns["native_clear_screen"]([])
    fns["native_hide_cursor"]([])
    fns["native_show_cursor"]([])
    fns["native_reset_style"]([])
    assert capsys.readouterr().out == "\x1b[2J\x1b[H\x1b[?25l\x1b[?25h\x1b[0m"


def test_move_cursor_requires_numbers():
    with pytest.raises(NativeError) as info:
        terminal_ansi_functions()["native_move_cursor"](["a", 1.0])
    assert info.value.code == 3002


# --- binary ----------------------------------------------------------------

def test_bytes_round_trip(tmp_path):
    fns = binary_io_functions()
    path = str(tmp_path / "data.bin")
    values = [0.0, 1.0, 127.0, 255.0]
    assert fns["native_write_bytes"]([path, values]) is True
    assert fns["native_read_bytes"]([path]) == values
    assert fns["native_file_size"]([path]) == float(len(values))


def test_write_bytes_saturates(tmp_path):
    fns = binary_io_functions()
    path = str(tmp_path / "sat.bin")
    fns["native_write_bytes"]([path, [-5.0, 300.0]])
    assert fns["native_read_bytes"]([path]) == [0.0, 255.0]


def test_write_bytes_rejects_bad_input(tmp_path):
    fns = binary_io_functions()
    path = str(tmp_path / "bad.bin")
    with pytest.raises(NativeError) as not_array:
        fns["native_write_bytes"]([path, "abc"])
    assert not_array.value.message == "Segundo argumento deve ser um array"
    with pytest.raises(NativeError) as bad_item:
        fns["native_write_bytes"]([path, [1.0, "x"]])
    assert bad_item.value.message == "Array deve conter apenas números"


def test_file_size_missing(tmp_path):
    with pytest.raises(NativeError) as info:
        binary_io_functions()["native_file_size"]([str(tmp_path / "none")])
    assert info.value.code == 5003


@pytest.mark.parametrize("number", [0.0, 10.0, 255.0, 65535.0, 123456789.0])
def test_hex_round_trip(number):
    fns = binary_io_functions()
    assert fns["from_hex"]([fns["to_hex"]([number])]) == number


def test_to_hex_is_lowercase():
    text = binary_io_functions()["to_hex"]([255.0])
    assert text == text.lower()
    assert int(text, 16) == 255


def test_from_hex_accepts_upper_case():
    fns = binary_io_functions()
    assert fns["from_hex"](["FF"]) == fns["from_hex"](["ff"])


@pytest.mark.parametrize("text", ["", "0x10", "zz", "-1", "1_0", "1" * 17])
def test_from_hex_rejects_invalid(text):
    with pytest.raises(NativeError) as info:
        binary_io_functions()["from_hex"]([text])
    assert info.value.code == 3002
    assert info.value.message == "String hexadecimal inválida"


def test_to_hex_requires_number():
    with pytest.raises(NativeError) as info:
        binary_io_functions()["to_hex"](["ff"])
    assert info.value.code == 3002