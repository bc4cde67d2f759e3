"""Enumerations shared by the widgets of the toolkit."""

from enum import IntEnum, IntFlag

__all__ = [
    "SheetPosition",
    "DarkMode",
    "TimelineMode",
    "PageLaunchMode",
    "WindowLaunchMode",
    "TreeSelectionMode",
    "StatusMode",
    "ContentDialogButton",
    "HourFormat",
    "CalendarDisplayMode",
    "TabWidthBehavior",
    "CloseButtonVisibility",
    "NavigationDisplayMode",
    "NavigationPageMode",
]


class SheetPosition(IntEnum):
    """Edge from which a sheet slides in."""

    LEFT = 0x0000
    TOP = 0x0001
    RIGHT = 0x0002
    BOTTOM = 0x0004


class DarkMode(IntEnum):
    """Theme brightness selection."""

    SYSTEM = 0x0000
    LIGHT = 0x0001
    DARK = 0x0002


class TimelineMode(IntEnum):
    """Side on which timeline items are laid out."""

    LEFT = 0x0000
    RIGHT = 0x0001
    ALTERNATE = 0x0002


class PageLaunchMode(IntEnum):
    """How a page is pushed onto a navigation stack."""

    STANDARD = 0x0000
    SINGLE_TASK = 0x0001
    SINGLE_TOP = 0x0002
    SINGLE_INSTANCE = 0x0004


class WindowLaunchMode(IntEnum):
    """How a window is opened when it already exists."""

    STANDARD = 0x0000
    SINGLE_TASK = 0x0001
    SINGLE_INSTANCE = 0x0002


class TreeSelectionMode(IntEnum):
    """Selection behaviour of a tree view."""

    NONE = 0x0000
    SINGLE = 0x0001
    MULTIPLE = 0x0002


class StatusMode(IntEnum):
    """State shown by a status layout."""

    LOADING = 0x0000
    EMPTY = 0x0001
    ERROR = 0x0002
    SUCCESS = 0x0004


class ContentDialogButton(IntFlag):
    """Buttons shown by a content dialog; values combine as flags."""

    NEUTRAL = 0x0001
    NEGATIVE = 0x0002
    POSITIVE = 0x0004


class HourFormat(IntEnum):
    """Twelve or twenty-four hour clock for a time picker."""

    H = 0x0000
    HH = 0x0001


class CalendarDisplayMode(IntEnum):
    """Granularity shown by a calendar view."""

    MONTH = 0x0000
    YEAR = 0x0001
    DECADE = 0x0002


class TabWidthBehavior(IntEnum):
    """How tab widths are computed."""

    EQUAL = 0x0000
    SIZE_TO_CONTENT = 0x0001
    COMPACT = 0x0002


class CloseButtonVisibility(IntEnum):
    """When a tab's close button is shown."""

    NEVER = 0x0000
    ALWAYS = 0x0001
    ON_HOVER = 0x0002


class NavigationDisplayMode(IntEnum):
    """Layout of the navigation pane."""

    OPEN = 0x0000
    COMPACT = 0x0001
    MINIMAL = 0x0002
    AUTO = 0x0004


class NavigationPageMode(IntEnum):
    """Whether navigated pages are kept on a stack."""

    STACK = 0x0000
    NO_STACK = 0x0001