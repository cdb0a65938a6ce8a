"""Fluent, validating builder objects for dataclasses; see structbuilder.builder."""

__version__ = "0.1.0"

__all__ = ["builder"]