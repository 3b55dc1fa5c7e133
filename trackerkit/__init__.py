"""Utilities for GPS tracker firmware: checksums, a JSON tree, GPS data, settings, logs, modem commands, clock and a debug command shell."""

__version__ = "0.1.0"