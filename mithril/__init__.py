"""Development utilities: levelled logging, hex formatting, numeric constants, profiling and stack traces."""

__version__ = "0.1.0"
__all__ = ["log", "hex", "numbers", "profile", "stacktrace"]