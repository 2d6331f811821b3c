# gamelib

Building blocks for games that draw to a terminal. It covers ANSI colours, logging, randomness, clocks, entity-component storage, session tracking, console UI cells and layers, and event packets.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `gamelib.utils`

- `ansi`: `AnsiMode`, `Color`, `AnsiColor` (built with `AnsiColor.basic`, `bright`, `color256` or `rgb`), `to_ansi_code(color, foreground)` and `ansi_print(text, fg, bg, bold, blink)`. `ansi_print` wraps the text in style and colour sequences and ends it with a reset.
- `logger`: `Level` and `Logger`. The logger has the `debug`, `info`, `warn` and `error` methods. You can change its minimum `level`, `color_enabled` and `console_enabled`. `open_log_file(filename)` appends records to a file, and `close()` closes that file. A `Logger` also works as a context manager that closes the file when it exits. `get_logger()` returns one logger that is shared by the whole process.
- `rng`: `RNG(seed=None)`. Its `random(minimum=0, maximum=RAND_MAX)` method returns an integer from the inclusive range. It raises `ValueError` when `minimum > maximum`.
- `clock`: `system_now_ms()` returns wall-clock milliseconds. `steady_now_ms()` returns monotonic milliseconds.
- `units`: `Pos2(x, y)`, a pair of integers. You can also read and write it as `col`/`row`, `hor`/`ver` or `width`/`height`.
- `ids`: `uuid4_str()` returns a random UUID as text.
- `terminal`: `Terminal(title)` writes lines to a temporary file and starts `xterm` to follow that file. If `xterm` cannot be started, the lines still go to the file. `close()`, or leaving the `with` block, deletes the file. `display_width(text)` counts the terminal columns that a string occupies. It returns 0 for bytes that are not valid UTF-8.

### `gamelib.game.ecs`

- `Component` is the base class for components.
- `ComponentStorage` holds one component of each type per entity, with `add`, `remove` and `get`.
- `System` is an abstract class with `update(dt, store, entities)`.

```python
from dataclasses import dataclass
from gamelib.game.ecs import Component, ComponentStorage

@dataclass
class Health(Component):
    hp: int

store = ComponentStorage()
store.add(1, Health(10))
assert store.get(1, Health).hp == 10
store.remove(1, Health)
assert store.get(1, Health) is None
```

### `gamelib.session.manager`

- `Session` is an abstract class with `start`, `close`, `send` and `last_active`.
- `SessionManager(timeout=300.0)` provides `register`, `unregister`, `find`, `find_typed`, `len()` and `in`.
- `SessionManager.tick(now=None)` closes and removes every session that has been idle for longer than the timeout.

### `gamelib.ui`

- `cell`: `UICell` holds text plus foreground and background colours. `empty()` is true for `""` or `" "`. `UIIcon(size)` is a grid of optional cells, read with `get(x, y)` and written with `set(x, y, cell)`.
- `element`: `UIElement` is an abstract dataclass with position, size, priority, display flag, row content, colours and children.
- `border`: `BorderPattern`, `Direction` and `UIBorder`. A border cell's `build_text()` picks the box-drawing glyph for its pattern and its connected directions. Borders can be combined with `|`, `&` and `^`.
- `layer`: `init_layer_buffer(width, height, max_priority)`, `render_to_layer(element, layers)` and `merge_layers(layers)`. `merge_layers` draws from the lowest priority to the highest, and non-empty cells win.

### `gamelib.net.packet`

`Packet(event, payload, corr_id="")` is an event with version 1 and a read-only `payload` view. A payload value can be `None`, an int, a str, a list of ints or strs, or a dict from str to int. `set_payload(key, value)` changes only keys that already exist. For any other key it raises `ValueError`.

## Coloured text

```python
from gamelib.utils.ansi import AnsiColor, Color, ansi_print

print(ansi_print("hello", AnsiColor.basic(Color.RED), None, True, False))
```

## What it does not do

- There is no game loop, tick scheduler or game state machine. You drive the systems and states yourself.
- There is no network transport. Sessions and packets are data structures only, and nothing here opens sockets.
- There is no command-line program and no finished screen renderer. The UI modules produce cells and layers, and printing them is up to you.