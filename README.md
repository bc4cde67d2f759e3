# flukit

Toolkit-independent building blocks for Fluent-style user interfaces. The
package has no dependencies outside the standard library.

## What is inside

- `flukit.types`: enumerations shared by Fluent controls, such as `DarkMode`,
  `PageLaunchMode`, `WindowLaunchMode`, `NavigationDisplayMode`,
  `NavigationPageMode`, `TabWidthBehavior`, `CloseButtonVisibility`,
  `StatusMode`, `SheetPosition` and `ContentDialogButton`. The last one is a
  flag enum, so its values can be combined.
- `flukit.treemodel`: `TreeNode` and `TreeModel`. `TreeModel` is a flat row
  model over a nested data source. It supports expand and collapse, check
  states that reach the leaves, and a selection of checked nodes.
- `flukit.watermark`: `Watermark`. It holds the watermark settings. Given a
  surface size and the measured size of the text, it works out where each copy
  of the text is centred.
- `flukit.hotkey`: `Hotkey`, `HotkeyRegistry`, `HotkeyBackend`,
  `NativeShortcut`, `KeyboardModifier` and `HotkeyError`. Together they form a
  registry of global shortcuts. You plug in a backend that turns keys into
  native codes.
- `flukit.icons`: `FluentIcons`, an `IntEnum` of Fluent icon names and their
  private-use code points, plus `icon_glyph()` and `icon_from_name()`.

## Installation

```
pip install flukit
```

To run the tests:

```
pip install "flukit[test]"
pytest
```

## Examples

### Tree model

```python
from flukit.treemodel import TreeModel

model = TreeModel()
model.set_data_source([
    {"title": "Root", "children": [
        {"title": "Leaf A"},
        {"title": "Leaf B", "checked": True},
    ]},
])
model.row_count()        # 3: every node starts expanded
model.collapse(0)
model.row_count()        # 1
model.expand(0)
model.check_row(0, True) # checks every leaf below the root
[node.data["title"] for node in model.selection()]  # all three nodes
```

`TreeModel` also provides the following operations:

- `all_expand()` and `all_collapse()`
- `insert_rows()` and `remove_rows()`, which ignore out-of-range requests
- `get_row()` and `set_row()`, which raise `IndexError` for a row that does
  not exist
- `hit_has_children_expanded()`

### Icons

```python
from flukit.icons import FluentIcons, icon_glyph, icon_from_name

icon_glyph(FluentIcons.Settings)   # "\ue713"
icon_glyph("Search")               # names work too
icon_from_name("Search")           # FluentIcons.Search
```

`icon_from_name()` raises `KeyError` for an unknown name. `icon_glyph()`
raises `ValueError` for a code point that no icon uses.

### Watermark layout

```python
from flukit.watermark import Watermark

mark = Watermark(text="Draft")     # gap (100, 100), offset defaults to half the gap
centers = mark.tile_centers(800, 600, text_width=40.0, text_height=20.0)
```

### Hotkeys

```python
from flukit.hotkey import Hotkey, HotkeyBackend, HotkeyRegistry, KeyboardModifier

class DemoBackend(HotkeyBackend):
    def native_keycode(self, key):
        return key & 0xFF
    def native_modifiers(self, modifiers):
        return int(modifiers) >> 25
    def register(self, shortcut):
        pass
    def unregister(self, shortcut):
        pass

registry = HotkeyRegistry(DemoBackend())
with Hotkey(registry, key=ord("K"), modifiers=KeyboardModifier.CONTROL,
            auto_register=True) as hotkey:
    hotkey.on_activated.append(lambda: print("pressed"))
    registry.activate(hotkey.native_shortcut)   # prints "pressed"
# leaving the block unregisters the hotkey
```

Backend errors surface as `HotkeyError`. The same error is raised when a key
cannot be mapped to a native shortcut. `HotkeyRegistry.add_mapping()` maps a
key and modifiers to a fixed native shortcut, and that mapping is used instead
of the backend's mapping.

## What the package does not do

- It draws nothing. The tree model, the watermark and the icon table provide
  data and layout for a view. You supply the view, the text measurement and
  the icon font.
- It does not include a real hotkey backend for any operating system.
  `HotkeyBackend` is abstract. To grab keys from the system, you must
  implement `native_keycode`, `native_modifiers`, `register` and `unregister`
  yourself. Pressing and releasing are reported only when your code calls
  `HotkeyRegistry.activate()` or `HotkeyRegistry.release()`.
- It has no command-line interface.