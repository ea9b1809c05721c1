"""Helpers and a command-line tool for inspecting test program plists, pmfl and burst files."""

__version__ = "0.1.0"