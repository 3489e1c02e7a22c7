"""Editor tool state, panel layout, brush tool mapping, virtual entity links and file helpers."""

__version__ = "0.16.0"
__all__ = ["panel", "tools", "ui", "utils", "virtual_link"]