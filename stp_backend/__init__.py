"""Systematic Transfer Plan projection backend."""

__version__ = "0.1.0"
