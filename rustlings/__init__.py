"""Load, compile, run and track Rust exercises, plus solved reference exercises."""

__version__ = "5.6.1"