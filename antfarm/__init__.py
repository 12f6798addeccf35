"""Ant-farm map parsing, path search and turn planning, with small text and buffer helpers."""

__version__ = "0.1.0"