"""Scripting engine that reads scripts and runs commands exposed by registered plugins."""

__version__ = "0.1.0"