"""Command queue, executer state and scene commands for driving user-interface tests."""

__version__ = "0.1.0"