"""Abstractions layer - pure types and interfaces shared across hexmap."""
