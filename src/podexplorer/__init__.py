"""Podexplorer - browse a remote podcast catalog from the terminal."""

__version__ = "0.1.0"
