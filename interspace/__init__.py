"""Catalogue of UI-stack components, the path notation that links them, and tools to expand, filter, style and store them."""

__version__ = "0.1.0"