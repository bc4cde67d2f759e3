import pytest

from flukit.hotkey import (
    KEY_UNKNOWN,
    Hotkey,
    HotkeyBackend,
    HotkeyError,
    HotkeyRegistry,
    KeyboardModifier,
    NativeShortcut,
)

KEY_A = 0x41
KEY_B = 0x42
BIG_KEY = 0x01000030


class FakeBackend(HotkeyBackend):
    def __init__(self):
        self.registered = []
        self.register_calls = 0
        self.unregister_calls = 0
        self.fail_register = False
        self.fail_unregister = False

    def native_keycode(self, key):
        return key if key <= 0xFFFF else None

    def native_modifiers(self, modifiers):
        bits = 0
        if modifiers & KeyboardModifier.SHIFT:
            bits |= 1
        if modifiers & KeyboardModifier.CONTROL:
            bits |= 2
        return bits

    def register(self, shortcut):
        self.register_calls += 1
        if self.fail_register:
            raise HotkeyError("busy")
        self.registered.append(shortcut)

    def unregister(self, shortcut):
        self.unregister_calls += 1
        if self.fail_unregister:
            raise HotkeyError("gone")
        self.registered.remove(shortcut)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def registry(backend):
    return HotkeyRegistry(backend)


def test_invalid_shortcut_equality():
    assert NativeShortcut.invalid() == NativeShortcut.invalid()
    assert not NativeShortcut.invalid().valid
    assert NativeShortcut.invalid() != NativeShortcut(0, 0)


def test_native_shortcut_is_hashable():
    table = {NativeShortcut(KEY_A, 1): "x"}
    assert table[NativeShortcut(KEY_A, 1)] == "x"
    assert NativeShortcut(KEY_A) == NativeShortcut(KEY_A, 0)


def test_registry_native_shortcut_uses_backend(registry, backend):
    native = registry.native_shortcut(KEY_A, KeyboardModifier.SHIFT)
    expected_mods = backend.native_modifiers(KeyboardModifier.SHIFT)
    assert native == NativeShortcut(KEY_A, expected_mods)


def test_registry_native_shortcut_invalid_for_unmappable(registry):
    assert registry.native_shortcut(BIG_KEY, KeyboardModifier.NONE) == NativeShortcut.invalid()


def test_mapping_overrides_backend(registry):
    replacement = NativeShortcut(KEY_B, 7)
    registry.add_mapping(BIG_KEY, KeyboardModifier.CONTROL, replacement)
    assert registry.native_shortcut(BIG_KEY, KeyboardModifier.CONTROL) == replacement


def test_unmappable_shortcut_raises_and_clears(registry):
    hotkey = Hotkey(registry)
    with pytest.raises(HotkeyError):
        hotkey.set_shortcut(BIG_KEY, KeyboardModifier.SHIFT)
    assert hotkey.key_code == KEY_UNKNOWN
    assert hotkey.shortcut is None
    assert not hotkey.native_shortcut.valid


def test_auto_register(registry, backend):
    events = []
    hotkey = Hotkey(registry)
    hotkey.on_registered_changed.append(events.append)
    assert hotkey.set_shortcut(KEY_A, KeyboardModifier.SHIFT, True)
    assert hotkey.is_registered
    assert backend.registered == [hotkey.native_shortcut]
    assert events == [True]


def test_shortcut_round_trip(registry):
    hotkey = Hotkey(registry, key=KEY_A, modifiers=KeyboardModifier.CONTROL)
    assert hotkey.shortcut == KEY_A | KeyboardModifier.CONTROL
    assert hotkey.key_code == KEY_A
    assert hotkey.modifiers == KeyboardModifier.CONTROL
    assert not hotkey.is_registered


def test_shared_native_shortcut_registered_once(registry, backend):
    first = Hotkey(registry, key=KEY_A, auto_register=True)
    second = Hotkey(registry, key=KEY_A, auto_register=True)
    assert backend.register_calls == 1
    assert registry.hotkeys_for(first.native_shortcut) == [first, second]
    assert registry.remove(first)
    assert backend.unregister_calls == 0
    assert registry.remove(second)
    assert backend.unregister_calls == 1
    assert backend.registered == []


def test_activate_and_release_reach_matching_hotkeys(registry):
    pressed, released, other = [], [], []
    hotkey = Hotkey(registry, key=KEY_A, auto_register=True)
    unrelated = Hotkey(registry, key=KEY_B, auto_register=True)
    hotkey.on_activated.append(lambda: pressed.append(1))
    hotkey.on_released.append(lambda: released.append(1))
    unrelated.on_activated.append(lambda: other.append(1))
    registry.activate(hotkey.native_shortcut)
    registry.release(hotkey.native_shortcut)
    assert pressed == [1]
    assert released == [1]
    assert other == []


def test_change_while_registered_without_auto_register_refused(registry):
    hotkey = Hotkey(registry, key=KEY_A, auto_register=True)
    assert hotkey.set_shortcut(KEY_B) is False
    assert hotkey.key_code == KEY_A
    assert hotkey.is_registered


def test_change_while_registered_with_auto_register(registry, backend):
    hotkey = Hotkey(registry, key=KEY_A, auto_register=True)
    assert hotkey.set_shortcut(KEY_B, KeyboardModifier.NONE, True)
    assert hotkey.key_code == KEY_B
    assert hotkey.is_registered
    assert backend.registered == [hotkey.native_shortcut]


def test_set_registered_toggles(registry, backend):
    events = []
    hotkey = Hotkey(registry, key=KEY_A)
    hotkey.on_registered_changed.append(events.append)
    assert hotkey.set_registered(True)
    assert hotkey.is_registered
    assert hotkey.set_registered(True)
    assert hotkey.set_registered(False)
    assert not hotkey.is_registered
    assert events == [True, False]
    assert backend.registered == []


def test_set_registered_without_shortcut_fails(registry):
    hotkey = Hotkey(registry)
    assert hotkey.set_registered(True) is False
    assert not hotkey.is_registered


def test_backend_register_failure(registry, backend):
    backend.fail_register = True
    hotkey = Hotkey(registry, key=KEY_A)
    with pytest.raises(HotkeyError):
        hotkey.set_registered(True)
    assert not hotkey.is_registered
    assert registry.hotkeys_for(hotkey.native_shortcut) == []


def test_backend_unregister_failure(registry, backend):
    hotkey = Hotkey(registry, key=KEY_A, auto_register=True)
    backend.fail_unregister = True
    with pytest.raises(HotkeyError):
        hotkey.set_registered(False)
    assert not hotkey.is_registered


def test_add_twice_returns_false(registry):
    hotkey = Hotkey(registry, key=KEY_A, auto_register=True)
    assert registry.add(hotkey) is False


def test_remove_unregistered_returns_false(registry):
    hotkey = Hotkey(registry, key=KEY_A)
    assert registry.remove(hotkey) is False


def test_key_sequence_splits_modifiers(registry):
    hotkey = Hotkey(registry)
    combined = KEY_A | KeyboardModifier.SHIFT | KeyboardModifier.CONTROL
    assert hotkey.set_key_sequence(combined)
    assert hotkey.key_code == KEY_A
    assert hotkey.modifiers == KeyboardModifier.SHIFT | KeyboardModifier.CONTROL
    assert hotkey.shortcut == combined


def test_key_sequence_uses_first_of_many(registry):
    hotkey = Hotkey(registry)
    assert hotkey.set_key_sequence([KEY_B, KEY_A])
    assert hotkey.key_code == KEY_B


def test_empty_key_sequence_resets(registry, backend):
    hotkey = Hotkey(registry, key=KEY_A, auto_register=True)
    assert hotkey.set_key_sequence([])
    assert hotkey.shortcut is None
    assert not hotkey.is_registered
    assert backend.registered == []


def test_set_native_shortcut(registry, backend):
    native = NativeShortcut(KEY_B, 3)
    hotkey = Hotkey(registry, native=native, auto_register=True)
    assert hotkey.native_shortcut == native
    assert hotkey.key_code == KEY_UNKNOWN
    assert backend.registered == [native]


def test_set_invalid_native_shortcut_clears(registry):
    hotkey = Hotkey(registry, key=KEY_A)
    assert hotkey.set_native_shortcut(NativeShortcut.invalid())
    assert hotkey.shortcut is None
    assert not hotkey.native_shortcut.valid


def test_context_manager_unregisters(registry, backend):
    with Hotkey(registry, key=KEY_A, auto_register=True) as hotkey:
        assert hotkey.is_registered
    assert not hotkey.is_registered
    assert backend.registered == []