"""Named Fluent icon glyphs and helpers to turn them into text."""

from __future__ import annotations

from enum import IntEnum

from flukit.icon_table_a import ICONS_A
from flukit.icon_table_b import ICONS_B

__all__ = ["FluentIcons", "icon_glyph", "icon_from_name"]


FluentIcons = IntEnum(
    "FluentIcons",
    {**ICONS_A, **ICONS_B},
    module=__name__,
    qualname="FluentIcons",
)
FluentIcons.__doc__ = "Fluent icon names mapped to their private-use code points."


def icon_from_name(name: str) -> FluentIcons:
    """The icon called ``name``; KeyError if there is none."""
    try:
        return FluentIcons[name]
    except KeyError:
        raise KeyError(f"unknown icon name: {name!r}") from None


def icon_glyph(icon: FluentIcons | int | str) -> str:
    """The one-character string that draws ``icon`` in the icon font.

    ``icon`` may be a member, its code point or its name. A code point
    that no icon uses raises ValueError; an unknown name raises KeyError.
    """
    if isinstance(icon, str):
        member = icon_from_name(icon)
    else:
        try:
            member = FluentIcons(icon)
        except ValueError:
            raise ValueError(f"no icon has code point {icon!r}") from None
    return chr(member.value)