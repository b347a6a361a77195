"""Guarded operations: small CLI drills built on typed failure results."""

__version__ = "0.1.0"
