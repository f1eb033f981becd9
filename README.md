# expopisel

The game logic of a small side-scrolling platformer, kept apart from any
display or controller. The package models what happens on each frame:
tile collisions against fixed 40-column screen maps, gravity and jumping
for the player, an enemy that walks and turns around on a timer,
frame-counting timers, joypad input, and the game's states from the splash
screens through the menu to the running level.

Drawing is handed to a `Renderer`. `RecordingRenderer`, the default,
records every call it receives, so a whole game can be run and inspected
without a screen.

## Modules

- `expopisel.maps_plains`: `plains_map(name)` returns one of the collision
  maps `"1_1"`, `"1_2"`, `"1_3"` and `"1_4"` as a tuple of 1182 tile codes
  (40 x 28 cells row by row, padded with 0). Tile codes are `EMPTY_TILE`
  (13), `SOLID_TILE` (14), `ENTRY_TILE` (15) and `EXIT_TILE` (16). An
  unknown name raises `KeyError`.
- `expopisel.maps_cave`: `cave_map(name)` does the same for `"cueva"`,
  `"cueva2"` and `"cueva3"`.
- `expopisel.level`: `Screen`, `Level`, `get_level()` and `get_screen()`.
  A level holds four screens; a screen has a collision map, the names of
  its background and foreground images and the player's starting position.
  `Screen.tile_at(column, row)` reads one cell, and cells outside the map
  read as 0. Indexes out of range raise `IndexError`. Only the first level
  is filled in (three cave screens and plains screen `"1_4"`); the other
  three levels hold empty screens with no images.
- `expopisel.physics`: `Vector2D` and `Entity`. `Entity.update(deltatime)`
  moves by the velocity; `Entity.is_on_floor()` checks for a solid tile
  under the entity and `Entity.is_ceiling()` for one in the way of its
  horizontal motion, or for the left or right edge of the screen.
- `expopisel.timers`: `Timer(seconds, callback, repeat=False, pal=False)`
  counts frames after `start()` and calls `callback` once the time is up,
  then either stops or starts counting again. `pause()` and `stop()` halt
  it. `ticks_per_second()` and `seconds_to_ticks()` convert for 50 Hz
  (PAL) and 60 Hz machines.
- `expopisel.input`: `Button`, `JoypadButton` and `InputState`.
  `InputState.update(joypad)` refreshes the four direction slots from a
  joypad bitmask; `InputState.handle_event(joy, changed, status)` latches
  jump (A, B or C) and start presses on the first joypad until they are
  cleared with `InputState.reset()`.
- `expopisel.player`: `Player` and `PlayerDirection`.
  `Player.update_run()` applies gravity, jumping, walking and wall stops
  for one frame.
- `expopisel.enemy`: `Enemy` and `EnemyDirection`. `Enemy.update()` falls
  under gravity and walks in the current direction unless blocked;
  `Enemy.turn_around()` reverses it.
- `expopisel.game`: `GameState`, `Renderer`, `RecordingRenderer` and `Game`.

## Running the game loop

```python
from expopisel.game import Game, RecordingRenderer
from expopisel.input import JoypadButton

renderer = RecordingRenderer()
game = Game(renderer)
game.init()                          # first screen of the first level
game.frame(JoypadButton.RIGHT)       # one frame, walking right
game.handle_input_event(0, JoypadButton.A, JoypadButton.A)  # jump
game.frame(0)
print(renderer.named("set_sprite_position"))
```

`Game.frame(joypad)` runs `update`, `draw` and then `Renderer.end_frame()`.
The enemy turns around every two seconds of frames.

States move as follows: the first splash screen passes to the second after
two seconds, and that one to the menu; start in the menu enters the running
state; start in the end state returns to the first splash screen. Nothing
in the game moves into the end state by itself; call
`Game.load_next_state(GameState.END)` for that.

While running, start moves to the next screen of the level. The screen
index only wraps to the next level once it reaches 5, but a level has four
screens, so pressing start on the fourth screen raises `IndexError`.
Screens of the empty levels have no foreground, and loading one raises
`ValueError`.

## What this package does not do

It has no window, graphics, sound or command to start a game. Images,
palettes and sprites are passed to the renderer by name only; there is no
artwork in the package. It does not read a physical controller: the caller
supplies the joypad bitmask and button events each frame.