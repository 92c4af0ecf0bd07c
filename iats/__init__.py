"""Antenna-tracker utilities: checksums, coding, filters, geodesy and in-memory peripheral models."""

__version__ = "0.1.0"