"""Entropy-based password strength estimation and validation."""

__version__ = "1.0.0"