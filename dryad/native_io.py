"""Native functions for console, file, terminal and binary input/output."""

from __future__ import annotations

import math
import os
import re
import sys
from collections.abc import Callable, Sequence
from typing import Any

from .values import NativeError, display

NativeFunction = Callable[[Sequence[Any]], Any]

_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF
_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_HEX_PATTERN = re.compile(r"\+?[0-9a-fA-F]+")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _expect_arity(args: Sequence[Any], count: int, name: str, params: str) -> None:
    if len(args) != count:
        noun = "argumento" if count == 1 else "argumentos"
        raise NativeError(3004, f"{name} espera {count} {noun} ({params})")


def _string_arg(value: Any, message: str) -> str:
    if not isinstance(value, str):
        raise NativeError(3002, message)
    return value


def _number_arg(value: Any, message: str) -> float:
    if not _is_number(value):
        raise NativeError(3002, message)
    return value


def _saturate(number: float, maximum: int) -> int:
    """Convert to an unsigned integer the way a saturating cast does."""
    if math.isnan(number) or number <= 0:
        return 0
    if number >= maximum:
        return maximum
    return int(number)


def _write_out(text: str) -> None:
    sys.stdout.write(text)
    try:
        sys.stdout.flush()
    except OSError:
        pass


def _read_stdin_bytes(count: int, message: str) -> str:
    stream = sys.stdin
    try:
        raw = getattr(stream, "buffer", None)
        data = raw.read(count) if raw is not None else stream.read(count).encode("utf-8")
    except (OSError, ValueError) as exc:
        raise NativeError(5001, message) from exc
    if len(data) < count:
        raise NativeError(5001, message)
    return data.decode("utf-8", errors="replace")


# --- console ---------------------------------------------------------------

def _input(args: Sequence[Any]) -> str:
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError) as exc:
        raise NativeError(5001, "Erro ao ler entrada do console") from exc
    return line.strip()


def _input_char(args: Sequence[Any]) -> str:
    return _read_stdin_bytes(1, "Erro ao ler caractere do console")


def _input_bytes(args: Sequence[Any]) -> str:
    _expect_arity(args, 1, "native_input_bytes", "count")
    count = _saturate(_number_arg(args[0], "Argumento deve ser um número"), _U64_MAX)
    return _read_stdin_bytes(count, "Erro ao ler bytes do console")


def _print(args: Sequence[Any]) -> None:
    if args:
        _write_out(display(args[0]))
    return None


def _println(args: Sequence[Any]) -> None:
    sys.stdout.write((display(args[0]) if args else "") + "\n")
    return None


def _flush(args: Sequence[Any]) -> None:
    try:
        sys.stdout.flush()
    except OSError as exc:
        raise NativeError(5002, "Erro ao fazer flush do stdout") from exc
    return None


def console_io_functions() -> dict[str, NativeFunction]:
    """Functions of the console_io module, by name."""
    return {
        "native_input": _input,
        "native_input_char": _input_char,
        "native_input_bytes": _input_bytes,
        "native_print": _print,
        "print": _print,
        "native_println": _println,
        "println": _println,
        "native_flush": _flush,
    }


# --- files -----------------------------------------------------------------

_PATH_MESSAGE = "Caminho deve ser uma string"


def _read_file(args: Sequence[Any]) -> str:
    _expect_arity(args, 1, "native_read_file", "path")
    path = _string_arg(args[0], _PATH_MESSAGE)
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise NativeError(5003, f"Erro ao ler arquivo: {path}") from exc


def _write_file(args: Sequence[Any]) -> bool:
    _expect_arity(args, 2, "native_write_file", "path, data")
    path = _string_arg(args[0], _PATH_MESSAGE)
    data = display(args[1])
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(data)
    except OSError as exc:
        raise NativeError(5004, f"Erro ao escrever arquivo: {path}") from exc
    return True


def _append_file(args: Sequence[Any]) -> bool:
    _expect_arity(args, 2, "native_append_file", "path, data")
    path = _string_arg(args[0], _PATH_MESSAGE)
    data = display(args[1]).encode("utf-8")
    try:
        handle = open(path, "ab")
    except OSError as exc:
        raise NativeError(5004, f"Erro ao abrir arquivo: {path}") from exc
    with handle:
        try:
            handle.write(data)
        except OSError as exc:
            raise NativeError(5004, f"Erro ao adicionar ao arquivo: {path}") from exc
    return True


def _delete_file(args: Sequence[Any]) -> bool:
    _expect_arity(args, 1, "native_delete_file", "path")
    path = _string_arg(args[0], _PATH_MESSAGE)
    try:
        os.remove(path)
    except OSError as exc:
        raise NativeError(5005, f"Erro ao deletar arquivo: {path}") from exc
    return True


def _exists_function(name: str) -> NativeFunction:
    def exists(args: Sequence[Any]) -> bool:
        _expect_arity(args, 1, name, "path")
        return os.path.exists(_string_arg(args[0], _PATH_MESSAGE))

    return exists


def _is_dir(args: Sequence[Any]) -> bool:
    _expect_arity(args, 1, "native_is_dir", "path")
    return os.path.isdir(_string_arg(args[0], _PATH_MESSAGE))


def _mkdir(args: Sequence[Any]) -> bool:
    _expect_arity(args, 1, "native_mkdir", "path")
    path = _string_arg(args[0], _PATH_MESSAGE)
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise NativeError(5006, f"Erro ao criar diretório: {path}") from exc
    return True


def _getcwd(args: Sequence[Any]) -> str:
    try:
        return os.getcwd()
    except OSError as exc:
        raise NativeError(5007, "Erro ao obter diretório atual") from exc


def file_io_functions() -> dict[str, NativeFunction]:
    """Functions of the file_io module, by name."""
    return {
        "native_read_file": _read_file,
        "native_write_file": _write_file,
        "native_append_file": _append_file,
        "native_delete_file": _delete_file,
        "native_file_exists": _exists_function("native_file_exists"),
        "file_exists": _exists_function("file_exists"),
        "native_is_dir": _is_dir,
        "native_mkdir": _mkdir,
        "native_getcwd": _getcwd,
    }


# --- terminal --------------------------------------------------------------

def _emit(sequence: str) -> NativeFunction:
    def emit(args: Sequence[Any]) -> None:
        _write_out(sequence)
        return None

    return emit


def _move_cursor(args: Sequence[Any]) -> None:
    _expect_arity(args, 2, "native_move_cursor", "x, y")
    x = _saturate(_number_arg(args[0], "Coordenada X deve ser um número"), _U32_MAX)
    y = _saturate(_number_arg(args[1], "Coordenada Y deve ser um número"), _U32_MAX)
    _write_out(f"\x1b[{y};{x}H")
    return None


def _colour(name: str, code: int) -> NativeFunction:
    def colour(args: Sequence[Any]) -> str:
        _expect_arity(args, 1, name, "text")
        return f"\x1b[{code}m{display(args[0])}\x1b[0m"

    return colour


def terminal_ansi_functions() -> dict[str, NativeFunction]:
    """Functions of the terminal_ansi module, by name."""
    return {
        "native_clear_screen": _emit("\x1b[2J\x1b[H"),
        "native_move_cursor": _move_cursor,
        "native_hide_cursor": _emit("\x1b[?25l"),
        "native_show_cursor": _emit("\x1b[?25h"),
        "native_reset_style": _emit("\x1b[0m"),
        "ansi_red": _colour("ansi_red", 31),
        "ansi_green": _colour("ansi_green", 32),
        "ansi_yellow": _colour("ansi_yellow", 33),
        "ansi_blue": _colour("ansi_blue", 34),
    }


# --- binary ----------------------------------------------------------------

def _read_bytes(args: Sequence[Any]) -> list[float]:
    _expect_arity(args, 1, "native_read_bytes", "path")
    path = _string_arg(args[0], _PATH_MESSAGE)
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise NativeError(5003, f"Erro ao ler bytes do arquivo: {path}") from exc
    return [float(byte) for byte in data]


def _write_bytes(args: Sequence[Any]) -> bool:
    _expect_arity(args, 2, "native_write_bytes", "path, bytes")
    path = _string_arg(args[0], _PATH_MESSAGE)
    values = args[1]
    if not isinstance(values, list):
        raise NativeError(3002, "Segundo argumento deve ser um array")
    data = bytes(
        _saturate(_number_arg(item, "Array deve conter apenas números"), _U8_MAX)
        for item in values
    )
    try:
        with open(path, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise NativeError(5004, f"Erro ao escrever bytes no arquivo: {path}") from exc
    return True


def _file_size(args: Sequence[Any]) -> float:
    _expect_arity(args, 1, "native_file_size", "path")
    path = _string_arg(args[0], _PATH_MESSAGE)
    try:
        return float(os.stat(path).st_size)
    except OSError as exc:
        raise NativeError(5003, f"Erro ao obter tamanho do arquivo: {path}") from exc


def _to_hex(args: Sequence[Any]) -> str:
    _expect_arity(args, 1, "to_hex", "number")
    number = _saturate(_number_arg(args[0], "Argumento deve ser um número"), _U64_MAX)
    return format(number, "x")


def _from_hex(args: Sequence[Any]) -> float:
    _expect_arity(args, 1, "from_hex", "hex_string")
    text = _string_arg(args[0], "Argumento deve ser uma string")
    if not _HEX_PATTERN.fullmatch(text):
        raise NativeError(3002, "String hexadecimal inválida")
    number = int(text, 16)
    if number > _U64_MAX:
        raise NativeError(3002, "String hexadecimal inválida")
    return float(number)


def binary_io_functions() -> dict[str, NativeFunction]:
    """Functions of the binary_io module, by name."""
    return {
        "native_read_bytes": _read_bytes,
        "native_write_bytes": _write_bytes,
        "native_file_size": _file_size,
        "to_hex": _to_hex,
        "from_hex": _from_hex,
    }