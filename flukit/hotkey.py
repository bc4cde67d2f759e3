"""System-wide hotkeys on top of a pluggable native backend."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntFlag

__all__ = [
    "KEY_UNKNOWN",
    "MODIFIER_MASK",
    "KeyboardModifier",
    "HotkeyError",
    "NativeShortcut",
    "HotkeyBackend",
    "HotkeyRegistry",
    "Hotkey",
]

_log = logging.getLogger(__name__)

KEY_UNKNOWN = 0x01FFFFFF
"""Key code meaning that no key is set."""

MODIFIER_MASK = 0xFE000000
"""Bits of a combined key sequence that hold the modifiers."""


class KeyboardModifier(IntFlag):
    """Keyboard modifiers, in the bit layout of a combined key sequence."""

    NONE = 0x00000000
    SHIFT = 0x02000000
    CONTROL = 0x04000000
    ALT = 0x08000000
    META = 0x10000000
    KEYPAD = 0x20000000
    GROUP_SWITCH = 0x40000000


class HotkeyError(Exception):
    """A shortcut could not be mapped, registered or unregistered."""


@dataclass(frozen=True)
class NativeShortcut:
    """A shortcut expressed in native key and modifier codes."""

    key: int = 0
    modifier: int = 0
    valid: bool = True

    @classmethod
    def invalid(cls) -> NativeShortcut:
        """The shortcut that stands for "no native shortcut"."""
        return cls(0, 0, False)


class HotkeyBackend(ABC):
    """Translates keys to native codes and grabs them from the system."""

    @abstractmethod
    def native_keycode(self, key: int) -> int | None:
        """The native code for ``key``, or None if it has none."""

    @abstractmethod
    def native_modifiers(self, modifiers: KeyboardModifier) -> int | None:
        """The native modifier bits for ``modifiers``, or None."""

    @abstractmethod
    def register(self, shortcut: NativeShortcut) -> None:
        """Grab ``shortcut``; raise HotkeyError on failure."""

    @abstractmethod
    def unregister(self, shortcut: NativeShortcut) -> None:
        """Release ``shortcut``; raise HotkeyError on failure."""


class HotkeyRegistry:
    """Tracks which hotkeys listen on which native shortcuts."""

    def __init__(self, backend: HotkeyBackend) -> None:
        self.backend = backend
        self._mapping: dict[tuple[int, KeyboardModifier], NativeShortcut] = {}
        self._shortcuts: dict[NativeShortcut, list[Hotkey]] = {}

    def add_mapping(self, key: int, modifiers: int, native: NativeShortcut) -> None:
        """Use ``native`` whenever ``key`` with ``modifiers`` is requested."""
        self._mapping[(key, KeyboardModifier(modifiers))] = native

    def native_shortcut(self, key: int, modifiers: int) -> NativeShortcut:
        """The native shortcut for a key and modifiers, or an invalid one."""
        modifiers = KeyboardModifier(modifiers)
        mapped = self._mapping.get((key, modifiers))
        if mapped is not None:
            return mapped
        native_key = self.backend.native_keycode(key)
        native_mods = self.backend.native_modifiers(modifiers)
        if native_key is None or native_mods is None:
            return NativeShortcut.invalid()
        return NativeShortcut(native_key, native_mods)

    def add(self, hotkey: Hotkey) -> bool:
        """Register ``hotkey``; False if it already was."""
        if hotkey.is_registered:
            return False
        shortcut = hotkey.native_shortcut
        if shortcut not in self._shortcuts:
            try:
                self.backend.register(shortcut)
            except HotkeyError as exc:
                raise HotkeyError(
                    f"Failed to register {hotkey.shortcut!r}. Error: {exc}"
                ) from exc
            self._shortcuts[shortcut] = []
        self._shortcuts[shortcut].append(hotkey)
        hotkey._registered = True
        hotkey._emit_registered_changed(True)
        return True

    def remove(self, hotkey: Hotkey) -> bool:
        """Unregister ``hotkey``; False if it was not registered here."""
        if not hotkey.is_registered:
            return False
        shortcut = hotkey.native_shortcut
        listeners = self._shortcuts.get(shortcut)
        if not listeners or hotkey not in listeners:
            return False
        listeners.remove(hotkey)
        hotkey._registered = False
        if not listeners:
            del self._shortcuts[shortcut]
            try:
                self.backend.unregister(shortcut)
            except HotkeyError as exc:
                raise HotkeyError(
                    f"Failed to unregister {hotkey.shortcut!r}. Error: {exc}"
                ) from exc
        hotkey._emit_registered_changed(False)
        return True

    def hotkeys_for(self, shortcut: NativeShortcut) -> list[Hotkey]:
        """The hotkeys currently listening on ``shortcut``."""
        return list(self._shortcuts.get(shortcut, ()))

    def activate(self, shortcut: NativeShortcut) -> None:
        """Tell every hotkey on ``shortcut`` that it was pressed."""
        for hotkey in self.hotkeys_for(shortcut):
            hotkey._emit_activated()

    def release(self, shortcut: NativeShortcut) -> None:
        """Tell every hotkey on ``shortcut`` that it was released."""
        for hotkey in self.hotkeys_for(shortcut):
            hotkey._emit_released()


class Hotkey:
    """A global shortcut that calls back when pressed and released."""

    def __init__(
        self,
        registry: HotkeyRegistry,
        *,
        key: int | None = None,
        modifiers: int = KeyboardModifier.NONE,
        native: NativeShortcut | None = None,
        auto_register: bool = False,
    ) -> None:
        self._registry = registry
        self._key = KEY_UNKNOWN
        self._modifiers = KeyboardModifier.NONE
        self._native = NativeShortcut.invalid()
        self._registered = False
        self.on_activated: list[Callable[[], None]] = []
        self.on_released: list[Callable[[], None]] = []
        self.on_registered_changed: list[Callable[[bool], None]] = []
        if key is not None:
            self.set_shortcut(key, modifiers, auto_register)
        elif native is not None:
            self.set_native_shortcut(native, auto_register)

    @property
    def is_registered(self) -> bool:
        return self._registered

    @property
    def key_code(self) -> int:
        return self._key

    @property
    def modifiers(self) -> KeyboardModifier:
        return self._modifiers

    @property
    def native_shortcut(self) -> NativeShortcut:
        return self._native

    @property
    def shortcut(self) -> int | None:
        """The combined key and modifiers, or None when no key is set."""
        if self._key == KEY_UNKNOWN:
            return None
        return self._key | int(self._modifiers)

    def _clear(self) -> None:
        self._key = KEY_UNKNOWN
        self._modifiers = KeyboardModifier.NONE
        self._native = NativeShortcut.invalid()

    def _release_for_change(self, auto_register: bool) -> bool:
        if not self._registered:
            return True
        if not auto_register:
            return False
        return self._registry.remove(self)

    def set_shortcut(
        self,
        key: int,
        modifiers: int = KeyboardModifier.NONE,
        auto_register: bool = False,
    ) -> bool:
        """Set the key and modifiers; False if a registered hotkey refuses."""
        if not self._release_for_change(auto_register):
            return False
        if key == KEY_UNKNOWN:
            self._clear()
            return True
        modifiers = KeyboardModifier(modifiers)
        self._key = key
        self._modifiers = modifiers
        self._native = self._registry.native_shortcut(key, modifiers)
        if self._native.valid:
            if auto_register:
                return self._registry.add(self)
            return True
        self._clear()
        raise HotkeyError(
            f"Unable to map shortcut to native keys. Key: {key:#x} "
            f"Modifiers: {modifiers!r}"
        )

    def set_key_sequence(
        self, combined: int | Iterable[int] | None, auto_register: bool = False
    ) -> bool:
        """Set the shortcut from a combined key, or a sequence of them."""
        if combined is None:
            sequence: list[int] = []
        elif isinstance(combined, int):
            sequence = [combined] if combined else []
        else:
            sequence = list(combined)
        if not sequence:
            return self.reset_shortcut()
        if len(sequence) > 1:
            _log.warning(
                "Key sequences with multiple shortcuts are not allowed! "
                "Only the first shortcut will be used!"
            )
        first = sequence[0]
        return self.set_shortcut(
            first & ~MODIFIER_MASK, first & MODIFIER_MASK, auto_register
        )

    def reset_shortcut(self) -> bool:
        """Forget the shortcut, unregistering it first if needed."""
        if self._registered and not self._registry.remove(self):
            return False
        self._clear()
        return True

    def set_native_shortcut(
        self, shortcut: NativeShortcut, auto_register: bool = False
    ) -> bool:
        """Listen on a native shortcut directly."""
        if not self._release_for_change(auto_register):
            return False
        self._clear()
        if shortcut.valid:
            self._native = shortcut
            if auto_register:
                return self._registry.add(self)
        return True

    def set_registered(self, registered: bool) -> bool:
        """Register or unregister; False if that cannot be done."""
        if self._registered and not registered:
            return self._registry.remove(self)
        if not self._registered and registered:
            if not self._native.valid:
                return False
            return self._registry.add(self)
        return True

    def close(self) -> None:
        """Unregister the hotkey if it is registered."""
        if self._registered:
            self._registry.remove(self)

    def __enter__(self) -> Hotkey:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _emit_activated(self) -> None:
        for callback in list(self.on_activated):
            callback()

    def _emit_released(self) -> None:
        for callback in list(self.on_released):
            callback()

    def _emit_registered_changed(self, registered: bool) -> None:
        for callback in list(self.on_registered_changed):
            callback(registered)