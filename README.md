# cubscape

Tools for `.cub` maze scene files: reading and validating them, and casting
rays through their grids the way a first-person wall renderer does.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `.cub` format

A scene file has six settings followed by a map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE` and `EA` name `.xpm` wall textures. The key must be
  followed by a blank, and each named file must exist and be readable.
  Anything after the path on the same line may only be blanks.
- `F` and `C` give the floor and ceiling colours as three comma-separated
  numbers from 0 to 255.
- Each setting may be given once; a repeated setting is treated as a bad line.
- The map uses `1` for walls and `0` for floor; blanks are allowed. Exactly
  one of `N`, `S`, `E` or `W` marks where the player starts and which way
  they face.
- The map must come after all six settings, must have no blank lines inside
  it, and must be closed by walls all round the area the player can reach.
- The file name must end in `.cub`.

## Checking a scene from the command line

```
cubscape path/to/scene.cub
```

If the scene is valid, the command prints the map size and where the player
starts, for example `6x4 map, start N at (2.5, 2.5)`. If it is not, it prints
`Error` and a short reason on the next line, such as `False map`,
`Invalid map` or `There is empty line in map`. The command is given exactly
one file; otherwise it prints `Error` and `Number of wrong arguments`.

## Using the library

```python
from cubscape import mapfile, raycast

scene = mapfile.load("scene.cub")
x, y = scene.player_cell()

player = raycast.Player.from_start(x, y, scene.start)
hit = raycast.cast_ray(scene.grid, player.pos_x, player.pos_y,
                       player.dir_x, player.dir_y)
print(hit.distance, hit.side)

column = raycast.texture_x(hit, player.pos_x, player.pos_y, 64)
step, first_row = raycast.texture_sampling(hit.distance, 0, 64)
```

`load` raises `cubscape.checks.CubError` with a message when a file is not
valid. `mapfile.parse_lines` does the same work on lines you already have.

The modules:

- `cubscape.mapfile`: reads scene files into a `CubMap` (with `grid`,
  `start`, `features`, `width`, `height` and `player_cell()`) and checks that
  the map is enclosed (`load`, `parse_lines`, `read_lines`, `find_start`,
  `enclosed`).
- `cubscape.features`: the six settings (`Features`, with `accept`,
  `is_complete` and `validate`).
- `cubscape.checks`: checks on file names, texture entries and colours
  (`has_cub_extension`, `texture_path`, `is_loadable_texture`,
  `is_valid_color`) and the `CubError` exception.
- `cubscape.raycast`: the player's starting view (`Player`, `facing`), grid
  ray casting (`cast_ray`, `RayHit`) and texture sampling (`texture_x`,
  `texture_sampling`). The field of view is 66 degrees and the screen size
  used by default is 1920 by 1080.
- `cubscape.controls`: movement and turning keys as they are pressed and
  released (`Key`, `InputState`); Escape sets `quit_requested`.
- `cubscape.text`, `cubscape.chars`, `cubscape.memory`, `cubscape.output` and
  `cubscape.chain`: small string, character, byte buffer, output and linked
  list helpers.

## What it does not do

cubscape does not open a window, load texture images or draw anything. It
does not move or turn the player either: `InputState` only records which keys
are held, and nothing in the package applies it to a `Player`. The command
checks a scene and reports the start position; it does not run a game.