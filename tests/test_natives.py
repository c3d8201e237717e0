import pytest

from dryad.natives import NativeFunctionRegistry, NativeModule
from dryad.values import NativeError


@pytest.mark.parametrize(
    "name, module",
    [
        ("console_io", NativeModule.CONSOLE_IO),
        ("file_io", NativeModule.FILE_IO),
        ("terminal_ansi", NativeModule.TERMINAL_ANSI),
        ("binary_io", NativeModule.BINARY_IO),
        ("date_time", NativeModule.DATE_TIME),
        ("system_env", NativeModule.SYSTEM_ENV),
        ("crypto", NativeModule.CRYPTO),
        ("debug", NativeModule.DEBUG),
        ("http", NativeModule.HTTP),
        ("websocket", NativeModule.WEB_SOCKET),
        ("tcp", NativeModule.TCP),
        ("udp", NativeModule.UDP),
        ("web_server", NativeModule.WEB_SERVER),
    ],
)
def test_from_name_known(name, module):
    assert NativeModule.from_name(name) is module


@pytest.mark.parametrize("name", ["unknown_module", "data_structures", "", "Console_IO"])
def test_from_name_unknown(name):
    assert NativeModule.from_name(name) is None


def test_new_registry_has_no_functions():
    registry = NativeFunctionRegistry()
    assert registry.is_native_function("print") is False
    assert registry.enabled_modules == ()


def test_call_without_module_fails():
    registry = NativeFunctionRegistry()
    with pytest.raises(NativeError) as info:
        registry.call("debug", ["This should fail"])
    assert info.value.code == 3005
    assert "debug" in info.value.message


def test_enable_console_io_registers_print(capsys):
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.CONSOLE_IO)
    assert registry.is_native_function("print")
    assert registry.call("print", ["Hello, World!"]) is None
    assert capsys.readouterr().out == "Hello, World!"


def test_enable_twice_is_idempotent():
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.DEBUG)
    registry.enable_module(NativeModule.DEBUG)
    assert registry.enabled_modules == (NativeModule.DEBUG,)


def test_multiple_modules(capsys):
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.CONSOLE_IO)
    registry.enable_module(NativeModule.DEBUG)
    registry.call("debug", [42.0])
    registry.call("println", ["Debug test"])
    out = capsys.readouterr().out
    assert out.startswith("[DEBUG]")
    assert out.endswith("Debug test\n")


def test_terminal_ansi_red():
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.TERMINAL_ANSI)
    assert registry.call("ansi_red", ["Error message"]) == "\x1b[31mError message\x1b[0m"


def test_binary_io_to_hex_round_trip():
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.BINARY_IO)
    hex_text = registry.call("to_hex", [255.0])
    assert registry.call("from_hex", [hex_text]) == 255.0


def test_file_io_exists(tmp_path):
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.FILE_IO)
    assert registry.call("file_exists", [str(tmp_path / "test.txt")]) is False
    assert registry.call("file_exists", [str(tmp_path)]) is True


def test_crypto_module_registers_sha256():
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.CRYPTO)
    assert len(registry.call("sha256", ["hello"])) == 16


def test_date_time_module():
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.DATE_TIME)
    assert registry.call("current_timestamp", ()) > 0


def test_system_env_module():
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.SYSTEM_ENV)
    assert registry.call("native_platform", []) in {"windows", "macos", "linux", "unknown"}


@pytest.mark.parametrize(
    "module", [NativeModule.HTTP, NativeModule.DATA_STRUCTURES, NativeModule.WEB_SOCKET]
)
def test_unimplemented_module_warns(module, capsys):
    registry = NativeFunctionRegistry()
    registry.enable_module(module)
    assert "ainda não implementado" in capsys.readouterr().err
    assert registry.enabled_modules == (module,)
    assert registry.is_native_function("print") is False


def test_native_error_propagates_from_function():
    registry = NativeFunctionRegistry()
    registry.enable_module(NativeModule.TERMINAL_ANSI)
    with pytest.raises(NativeError) as info:
        registry.call("ansi_blue", [])
    assert info.value.code == 3004