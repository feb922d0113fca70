# toyrobot

A small simulator for a toy robot moving on a 5 x 5 table top. The robot is
driven by text commands read one per line, and it never falls off the table:
any command that would take it over an edge is ignored.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
toyrobot
```

The simulator prints a welcome message and then reads commands from standard
input until it sees a line holding `q` or `Q`, or until the input ends. It then
prints `Goodbye`. Commands can also come from a file:

```
toyrobot < commands.txt
```

`toyrobot --help` prints a short summary of the commands.

## Commands

| Command             | Effect                                                          |
|---------------------|-----------------------------------------------------------------|
| `PLACE X,Y,F`       | Put the robot at `X,Y` (each 0 to 4) facing `F`                 |
| `MOVE`              | Move one unit forward in the direction the robot is facing      |
| `LEFT`              | Turn 90 degrees counter-clockwise                               |
| `RIGHT`             | Turn 90 degrees clockwise                                       |
| `REPORT`            | Print the robot's position as `Output: X,Y,F`                   |

`F` is one of `NORTH`, `EAST`, `SOUTH` or `WEST`. The origin `0,0` is the
south-west corner of the table and `NORTH` points towards increasing `Y`.

Commands are case sensitive and must match exactly, with no extra spaces. A
line that is not a valid command is reported on standard error as
`Output: Invalid input [...]`. Blank lines are skipped. A `PLACE` may be given
again at any time to move the robot somewhere else. `MOVE`, `LEFT` and `RIGHT`
do nothing until the robot has been placed, and `REPORT` before then prints
`Output: Robot has not been placed`.

## Example

```
PLACE 1,2,EAST
MOVE
MOVE
LEFT
MOVE
REPORT
q
```

prints, after the welcome message,

```
Output: 3,3,NORTH
Goodbye
```

## Using it from Python

```python
from toyrobot.compass import Direction
from toyrobot.table import Table

table = Table()
table.place(0, 0, Direction.NORTH)
table.move()
table.left()
print(table.report())  # 0,1,WEST
```

The modules are:

- `toyrobot.compass`: the `Direction` enum, `left` and `right` for 90 degree
  turns, and `parse_direction`, which raises `ValueError` for an unknown name.
- `toyrobot.commands`: `parse_input` turns one line of text into its command
  parts (`["PLACE", "0", "1", "SOUTH"]`, `["MOVE"]`, ...) or returns `None`.
- `toyrobot.robot`: the `Robot` dataclass holding `x`, `y` and `facing`.
- `toyrobot.table`: the `Table`, which is 5 x 5 by default and takes other
  `width` and `height` values as arguments.
- `toyrobot.cli`: `run(stdin, stdout, stderr)` runs a whole session over any
  given text streams, and `main` is the `toyrobot` command.