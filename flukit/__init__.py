"""Fluent-style UI building blocks: shared enums, a tree row model, watermark layout, a hotkey registry and the icon code points."""

__version__ = "1.0.0"
__all__ = ["types", "treemodel", "watermark", "hotkey", "icons"]