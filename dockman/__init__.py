"""Components and utilities for a container deployment dashboard."""

__version__ = "0.1.0"