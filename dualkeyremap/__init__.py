"""Dual-role key remapping: configuration, key table and the remapping state machine."""

__version__ = "0.1.0"