"""Native function registry for the Dryad language and the Oak project manager."""

__version__ = "0.1.0"
__all__ = ["values", "native_io", "native_system", "natives", "oak"]