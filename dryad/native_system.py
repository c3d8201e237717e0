"""Native functions for time, system environment, debugging and hashing."""

from __future__ import annotations

import math
import os
import platform
import struct
import subprocess
import sys
import threading
import time
from collections.abc import Callable, Sequence
from typing import Any

from .values import NativeError, display, type_name

NativeFunction = Callable[[Sequence[Any]], Any]

_MASK64 = 0xFFFF_FFFF_FFFF_FFFF
_U64_MAX = _MASK64
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


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


def _clamp_int(number: float, low: int, high: int) -> int:
    """Convert to an integer the way a saturating cast does."""
    if math.isnan(number):
        return 0
    if number <= low:
        return low
    if number >= high:
        return high
    return int(number)


# --- hashing ---------------------------------------------------------------

def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _siphash13(data: bytes) -> int:
    """SipHash-1-3 with zero keys."""
    v0 = 0x736F6D6570736575
    v1 = 0x646F72616E646F6D
    v2 = 0x6C7967656E657261
    v3 = 0x7465646279746573

    def sip_round() -> None:
        nonlocal v0, v1, v2, v3
        v0 = (v0 + v1) & _MASK64
        v1 = _rotl(v1, 13) ^ v0
        v0 = _rotl(v0, 32)
        v2 = (v2 + v3) & _MASK64
        v3 = _rotl(v3, 16) ^ v2
        v0 = (v0 + v3) & _MASK64
        v3 = _rotl(v3, 21) ^ v0
        v2 = (v2 + v1) & _MASK64
        v1 = _rotl(v1, 17) ^ v2
        v2 = _rotl(v2, 32)

    whole = len(data) - len(data) % 8
    for (word,) in struct.iter_unpack("<Q", data[:whole]):
        v3 ^= word
        sip_round()
        v0 ^= word

    tail = int.from_bytes(data[whole:], "little")
    last = ((len(data) & 0xFF) << 56) | tail
    v3 ^= last
    sip_round()
    v0 ^= last

    v2 ^= 0xFF
    for _ in range(3):
        sip_round()
    return v0 ^ v1 ^ v2 ^ v3


def _hash_text(text: str) -> int:
    return _siphash13(text.encode("utf-8") + b"\xff")


# --- date and time ---------------------------------------------------------

def _now(args: Sequence[Any]) -> float:
    return time.time_ns() / 1_000_000_000


def _timestamp(args: Sequence[Any]) -> float:
    return float(time.time_ns() // 1_000_000_000)


def _sleep(args: Sequence[Any]) -> None:
    _expect_arity(args, 1, "native_sleep", "ms")
    millis = _clamp_int(_number_arg(args[0], "Tempo deve ser um número"), 0, _U64_MAX)
    time.sleep(millis / 1000)
    return None


def _uptime(args: Sequence[Any]) -> float:
    return 0.0


def date_time_functions() -> dict[str, NativeFunction]:
    """Functions of the date_time module, by name."""
    return {
        "native_now": _now,
        "native_timestamp": _timestamp,
        "native_sleep": _sleep,
        "native_uptime": _uptime,
        "current_timestamp": _now,
    }


# --- system environment ----------------------------------------------------

def _platform(args: Sequence[Any]) -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform.startswith("linux"):
        return "linux"
    return "unknown"


_ARCHES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "x86": "x86",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
}


def _arch(args: Sequence[Any]) -> str:
    return _ARCHES.get(platform.machine().lower(), "unknown")


def _env(args: Sequence[Any]) -> str | None:
    _expect_arity(args, 1, "native_env", "key")
    key = _string_arg(args[0], "Chave deve ser uma string")
    return os.environ.get(key)


def _set_env(args: Sequence[Any]) -> bool:
    _expect_arity(args, 2, "native_set_env", "key, value")
    key = _string_arg(args[0], "Chave deve ser uma string")
    os.environ[key] = display(args[1])
    return True


def _shell(command: str) -> subprocess.CompletedProcess[bytes]:
    argv = ["cmd", "/C", command] if os.name == "nt" else ["sh", "-c", command]
    try:
        return subprocess.run(argv, capture_output=True, stdin=subprocess.DEVNULL)
    except OSError as exc:
        raise NativeError(5009, f"Erro ao executar comando: {command}") from exc


def _exec(args: Sequence[Any]) -> float:
    _expect_arity(args, 1, "native_exec", "cmd")
    command = _string_arg(args[0], "Comando deve ser uma string")
    code = _shell(command).returncode
    return float(code if code >= 0 else -1)


def _exec_output(args: Sequence[Any]) -> str:
    _expect_arity(args, 1, "native_exec_output", "cmd")
    command = _string_arg(args[0], "Comando deve ser uma string")
    return _shell(command).stdout.decode("utf-8", errors="replace")


def _pid(args: Sequence[Any]) -> float:
    return float(os.getpid())


def _exit(args: Sequence[Any]) -> None:
    code = 0
    if args and _is_number(args[0]):
        code = _clamp_int(args[0], _I32_MIN, _I32_MAX)
    raise SystemExit(code)


def _current_dir(args: Sequence[Any]) -> str:
    try:
        return os.getcwd()
    except OSError as exc:
        raise NativeError(5010, "Erro ao obter diretório atual") from exc


def system_env_functions() -> dict[str, NativeFunction]:
    """Functions of the system_env module, by name."""
    return {
        "native_platform": _platform,
        "native_arch": _arch,
        "native_env": _env,
        "native_set_env": _set_env,
        "native_exec": _exec,
        "native_exec_output": _exec_output,
        "native_pid": _pid,
        "native_exit": _exit,
        "get_current_dir": _current_dir,
        "native_current_dir": _current_dir,
    }


# --- debug -----------------------------------------------------------------

def _float_repr(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return repr(float(number))


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _debug_repr(value: Any) -> str:
    if value is None:
        return "Null"
    if isinstance(value, bool):
        return f"Bool({'true' if value else 'false'})"
    if _is_number(value):
        return f"Number({_float_repr(value)})"
    if isinstance(value, str):
        return f"String({_quote(value)})"
    if isinstance(value, list):
        return "Array([" + ", ".join(_debug_repr(item) for item in value) + "])"
    if isinstance(value, tuple):
        return "Tuple([" + ", ".join(_debug_repr(item) for item in value) + "])"
    return display(value)


def _debug(args: Sequence[Any]) -> None:
    if args:
        print(f"[DEBUG] {_debug_repr(args[0])}")
    else:
        print("[DEBUG]")
    return None


def _typeof(args: Sequence[Any]) -> str:
    if not args:
        return "undefined"
    return type_name(args[0])


def _memory_usage(args: Sequence[Any]) -> float:
    return 0.0


def debug_functions() -> dict[str, NativeFunction]:
    """Functions of the debug module, by name."""
    return {
        "debug": _debug,
        "native_log": _debug,
        "native_typeof": _typeof,
        "native_memory_usage": _memory_usage,
    }


# --- crypto ----------------------------------------------------------------

def _uuid(args: Sequence[Any]) -> str:
    nanos = time.time_ns()
    seed = struct.pack(
        "<qIQ",
        nanos // 1_000_000_000,
        nanos % 1_000_000_000,
        threading.get_ident() & _MASK64,
    )
    digest = _siphash13(seed)
    parts = ((digest >> shift) & 0xFFFF for shift in (0, 16, 32, 48))
    return "-".join(format(part, "x") for part in parts)


def _sha256(args: Sequence[Any]) -> str:
    _expect_arity(args, 1, "sha256", "data")
    return format(_hash_text(display(args[0])), "016x")


def crypto_functions() -> dict[str, NativeFunction]:
    """Functions of the crypto module, by name."""
    return {
        "native_uuid": _uuid,
        "sha256": _sha256,
    }