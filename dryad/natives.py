"""Registry of native modules that a program enables with directives."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from .native_io import (
    binary_io_functions,
    console_io_functions,
    file_io_functions,
    terminal_ansi_functions,
)
from .native_system import (
    crypto_functions,
    date_time_functions,
    debug_functions,
    system_env_functions,
)
from .values import NativeError

NativeFunction = Callable[[Sequence[Any]], Any]


class NativeModule(Enum):
    """A group of native functions that a directive can enable."""

    CONSOLE_IO = "console_io"
    FILE_IO = "file_io"
    TERMINAL_ANSI = "terminal_ansi"
    BINARY_IO = "binary_io"
    DATE_TIME = "date_time"
    SYSTEM_ENV = "system_env"
    CRYPTO = "crypto"
    DEBUG = "debug"
    DATA_STRUCTURES = "data_structures"
    HTTP = "http"
    WEB_SOCKET = "websocket"
    TCP = "tcp"
    UDP = "udp"
    WEB_SERVER = "web_server"

    @classmethod
    def from_name(cls, name: str) -> NativeModule | None:
        """Look up a module by its directive name, or return None."""
        if name == cls.DATA_STRUCTURES.value:
            return None
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


_PROVIDERS: dict[NativeModule, Callable[[], dict[str, NativeFunction]]] = {
    NativeModule.CONSOLE_IO: console_io_functions,
    NativeModule.FILE_IO: file_io_functions,
    NativeModule.TERMINAL_ANSI: terminal_ansi_functions,
    NativeModule.BINARY_IO: binary_io_functions,
    NativeModule.DATE_TIME: date_time_functions,
    NativeModule.SYSTEM_ENV: system_env_functions,
    NativeModule.CRYPTO: crypto_functions,
    NativeModule.DEBUG: debug_functions,
}


class NativeFunctionRegistry:
    """Native functions available to a program, by name."""

    def __init__(self) -> None:
        self._enabled: list[NativeModule] = []
        self._functions: dict[str, NativeFunction] = {}

    @property
    def enabled_modules(self) -> tuple[NativeModule, ...]:
        return tuple(self._enabled)

    def enable_module(self, module: NativeModule) -> None:
        """Register the functions of a module; enabling twice has no effect."""
        if module in self._enabled:
            return
        self._enabled.append(module)
        provider = _PROVIDERS.get(module)
        if provider is None:
            print(f"Módulo {module.label} ainda não implementado", file=sys.stderr)
            return
        self._functions.update(provider())

    def is_native_function(self, name: str) -> bool:
        return name in self._functions

    def call(self, name: str, args: Iterable[Any]) -> Any:
        """Call a registered native function with the given arguments."""
        function = self._functions.get(name)
        if function is None:
            raise NativeError(3005, f"Função nativa '{name}' não encontrada")
        return function(list(args))