# chunkken

The gameplay data layer of a two-player fighting game:

* loaders for the game's CSV data tables (inputs, moves, move combos,
  characters, combos, hit effects, conditions, states and transitions),
* an input manager that keeps a ring buffer of the last 60 frames of button
  state for one character and turns newly pressed buttons into moves,
  following combo chains and the frame windows they allow,
* a frame counter and a camera rig that keeps both fighters in view.

It uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Data tables

Every table is a comma-separated file whose first line is a header. The
files live together in a `DataTable` directory under a content directory:

| File                        | Loaded by            | Module                   |
|-----------------------------|----------------------|--------------------------|
| `InputTable.csv`            | `InputTable`         | `chunkken.input_table`   |
| `MoveTable.csv`             | `MoveTable`          | `chunkken.moves`         |
| `MoveComboTable.csv`        | `MoveComboTree`      | `chunkken.move_combos`   |
| `CharacterTable.csv`        | `CharacterTable`     | `chunkken.tables`        |
| `ComboTable.csv`            | `ComboTable`         | `chunkken.tables`        |
| `ComboDetailsTable.csv`     | `ComboTable`         | `chunkken.tables`        |
| `HitEffectTable.csv`        | `HitEffectTable`     | `chunkken.tables`        |
| `ConditionListTable.csv`    | `ConditionTable`     | `chunkken.state_tables`  |
| `StateListTable.csv`        | `StateTable`         | `chunkken.state_tables`  |
| `TransitionListTable.csv`   | `TransitionTable`    | `chunkken.state_tables`  |

Rows with the wrong number of columns are skipped, and state rows with an
empty id are skipped too. Numbers are read leniently: a cell such as `12ab`
reads as 12 and a cell with no leading number reads as 0. The condition and
state tables allow commas inside double-quoted cells; the JSON cell of the
condition table has its doubled quotes collapsed and its outer quotes
removed. The row types are dataclasses in `chunkken.records`.

## Loading everything at once

```python
from chunkken.game_data import GameData

data = GameData.load("Content")
manager = data.input_manager()
```

`GameData.load` reads every table from `Content/DataTable/`. A file that
cannot be opened is logged as a warning and gives an empty table.
`input_manager()` returns a fresh `InputManager` wired to the loaded input,
move and move-combo tables.

From the command line, the same loading prints the number of characters,
states, conditions and hit effects, a line per move, the combos, the
transitions and the move-combo tree:

```
chunkken Content
```

The content directory defaults to `Content`.

## Using the pieces directly

Each table can be built from a file with `from_file` (which raises `OSError`
if the file cannot be read) or from any iterable of lines with `from_lines`:

```python
from chunkken.input_table import InputTable
from chunkken.moves import MoveTable
from chunkken.move_combos import MoveComboTree
from chunkken.input_manager import InputManager

inputs = InputTable.from_file("Content/DataTable/InputTable.csv")
moves = MoveTable.from_file("Content/DataTable/MoveTable.csv", inputs)
combos = MoveComboTree.from_file("Content/DataTable/MoveComboTable.csv")

manager = InputManager(inputs, moves, combos)
moveset = []
manager.push_pressed(char_id=1, input_id=5, frame_index=10, left=True)
executing = manager.extract_move(moveset)
print(executing.move_id, executing.frame_index, executing.ignore)
```

### Inputs and moves

`InputTable.bitmask(index)` gives the one-byte mask of an input id and
`InputTable.index(name)` the id of a name such as `"LP"`; unknown ids and
names give 0.

Move commands in `MoveTable.csv` are button steps separated by `|`, with
buttons pressed together joined by `+`; `f` stands for `RIGHT` and `b` for
`LEFT`. `MoveTable.parse_command` packs each step into one byte of a 64-bit
integer, and `bitmask_to_binary` shows a command as 64 binary digits.
`MoveTable.move_id(char_id, command)` returns the matching move id or -1,
and `move_data_by_id` returns the move's `MoveData` or `None`.

### The input manager

* `push_pressed` records a press on a frame. The first press on a new frame
  starts a new slot that also carries the buttons held on the previous slot.
  With `left=False`, a `LEFT` press is recorded as `RIGHT` and any other
  input as `LEFT`.
* `push_released` clears the bits of a release on a frame that already holds
  input, and raises `LookupError` if no input was recorded on that frame.
* `extract_move(moveset)` reads the newest slot as an `ExecutingMove`. With
  an empty moveset, only newly pressed attack buttons count. Otherwise the
  move is ignored if it arrives after the allowed window, matches no move,
  or the combo is already done; a move that does not follow the chain in the
  move-combo tree is ignored and ends the combo. A counted move is appended
  to `moveset`.

`MoveComboTree.is_move_in_combo(moveset, move_id)` answers whether a move
may follow the moves already performed, and `format_tree()` renders the
tree as indented text.

### Other tables

`CharacterTable`, `ComboTable`, `HitEffectTable`, `ConditionTable`,
`StateTable` and `TransitionTable` answer `get(id)` and return `None` for
unknown ids. `HitEffectTable.hit_effect_for_move(move_id)` gives the id of
the hit effect a move triggers, or 0. `ComboTable.describe()` and
`TransitionTable.describe()` return summary lines.

```python
from chunkken.tables import CharacterTable

characters = CharacterTable.from_file("Content/DataTable/CharacterTable.csv")
print(characters.get(1))
```

## Frames and camera

`FrameManager.update_frame(delta_seconds)` adds one to the frame index and
the duration to the elapsed time; its `frame_rate_limit` of 60 is a stored
value only.

`CameraRig` works on player positions given as `(x, y, z)` tuples.
`CameraRig.tick(player1, player2, delta_time)` places the camera midway
between the two fighters and eases its arm length, starting at 1200, toward
their distance clamped between `min_distance` (800) and `max_distance`
(2000), at `zoom_speed` 5 using `finterp_to`. If either position is `None`
nothing changes.

## What it does not do

There is no game loop, rendering, animation, physics or live input capture:
the package holds the data tables and the per-frame logic, and the caller
feeds it frames, button events and player positions. The condition, state
and transition tables are loaded and looked up, but nothing evaluates
conditions or runs the state machine.