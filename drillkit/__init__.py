"""Load, compile, run and check small practice exercises."""

__version__ = "5.4.1"