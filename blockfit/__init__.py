"""Enumerate the exact fits of a program into free memory blocks, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["blocklist", "cli", "combos", "counting", "search", "tree"]