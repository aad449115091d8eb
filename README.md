# sigmarpg

sigmarpg is a small tile-based 2D role-playing game built on pygame. It has three screens:

- a splash screen,
- a main menu with a play button,
- a game world where you walk a character one tile at a time. The character is animated from a sprite sheet.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the game

```
sigmarpg
```

This runs `sigmarpg.game.main()`. It starts pygame, opens a full-screen 1920×1080 display titled "SIGMA" and runs a fixed-timestep loop at 60 updates per second. A single frame counts as at most 0.25 s of time, however long it actually took. The screens come in this order:

1. **Splash screen** (`SplashState`). Shows the background image, scaled up twelve times. After three seconds it is replaced by the main menu.
2. **Main menu** (`MainMenuState`). Draws the background, the title and the play button, all at the top-left corner. The button's clickable area is the size of its image. Hold the left mouse button over it while an event arrives to start the game.
3. **Game** (`GameState`). Draws the background and the player. The keys are:

   | Key | Direction |
   |-----|-----------|
   | W   | up        |
   | A   | left      |
   | S   | down      |
   | D   | right     |

   Each key press starts a step of one 64-pixel tile. The character glides to the tile while its animation plays through the row of the sprite sheet that matches the direction.

Close the window to quit. On exit the log file is closed and pygame is shut down.

### Assets and log file

No images ship with the package. The paths are relative to the working directory and are defined in `sigmarpg.definitions`:

- `../../resources/background_splash.png` is used as the splash background, the menu background, the menu title, the play button and the game background.
- `../../resources/BODY_male.png` is the character sheet. It is made of 64×64 frames with 9 frames per row, and its rows are:

  | Row | Direction |
  |-----|-----------|
  | 0   | up        |
  | 1   | left      |
  | 2   | down      |
  | 3   | right     |

If an image cannot be loaded, the failure is logged. Asking for that texture afterwards then raises `KeyError`, and the game stops.

Log lines are appended to `../log.txt` in this form:

```
[YYYY-MM-DD HH:MM:SS] [LEVEL] message
```

## Using the pieces

Each module can also be used on its own.

- `sigmarpg.logger`
  - `Level`: the levels `DEBUG`, `INFO`, `WARNING`, `ERROR` and `CRITICAL`, in that order.
  - `Logger(filename)`: a thread-safe logger that appends to a file. It has `log(level, message)`, `set_level(level)`, `should_log(level)`, a `level` property and `close()`, and it works as a context manager. If the file cannot be opened, it prints a notice to stderr and drops every message after that.
- `sigmarpg.movement`
  - `MoveDirection`: `STILL`, `LEFT`, `RIGHT`, `DOWN`, `UP`.
  - `Movement(tile_size=64.0, speed=100.0)`: grid movement.
    - `move(direction)` starts a step. It is ignored while a step is under way.
    - `update(dt)` glides toward the target tile. It moves at most one pixel per axis per update, and snaps to the target once within half a pixel.
    - `set_position(grid_pos)` places the mover on a tile at once.
    - `distance_to_target()` gives the pixel distance left to travel.
    - The properties are `grid_position`, `current_position`, `target_position`, `is_moving`, `tile_size` and `speed`.
- `sigmarpg.animation`
  - `Clock(time_source=time.monotonic)`: a restartable clock with `elapsed()` and `restart()`.
  - `Animation(animation_speed=0.1, total_frames=9, sprite_size=(64, 64), clock=None)`: frame animation with `play()`, `pause()`, `stop()` and `update(dt)`. `current_sprite_rect(direction)` returns `(left, top, width, height)`. For `STILL` it uses the row of `last_direction`, and row 2 if that is also `STILL`.
- `sigmarpg.state`
  - `State`: an abstract screen with `init()`, `handle_input()`, `update(dt)` and `render(dt)`. It also has optional `pause()` and `resume()` methods.
- `sigmarpg.state_machine`
  - `StateMachine(logger=None)`: a stack of states.
    - `add_state(state, is_replacing=False)` and `remove_state()` only schedule changes.
    - `process_state_changes()` applies them: first the removal, then the addition.
    - `active_state()` returns the top state and raises `IndexError` when the stack is empty.
    - `len()` gives the stack depth.
- `sigmarpg.assets`
  - `AssetsManager(logger=None)`: named storage for images and fonts.
    - `load_texture(name, filename)` and `get_texture(name)`. A missing name raises `KeyError`.
    - `load_font(name, filename, size=24)`. A `filename` of `None` selects pygame's built-in font.
    - `get_font(name)` returns `None` if no font was loaded under that name.
- `sigmarpg.input_manager`
  - `InputManager(pressed_buttons=None, mouse_pos=None)`: `is_sprite_clicked(rect, button)` and `mouse_position()`. Both default to pygame's mouse functions, and other sources can be passed in.
- `sigmarpg.game_data`
  - `GameData`: the shared context. It holds the machine, window, assets, input, logger, event, key and present callables, and the `is_open` flag. `GameData.create(window, log_path)` builds it with one shared logger, and `close_window()` ends the main loop.
- `sigmarpg.player`
  - `Player`: combines `Movement` and `Animation` and draws the current frame onto the window.
- `sigmarpg.states`
  - The three screens described above.
- `sigmarpg.game`
  - `Game(width, height, title)` with `run()` and `close()`, plus the `main()` entry point.

For example, to move one tile to the right:

```python
from sigmarpg.movement import Movement, MoveDirection

m = Movement(64.0, 100.0)
m.move(MoveDirection.RIGHT)
while m.is_moving:
    m.update(1 / 60)
print(m.grid_position, m.current_position)  # (1, 0) (64.0, 0.0)
```

## What it does not do

The game world is only a background and a walking character. There are no maps, obstacles, collisions, enemies, items, sound, text on screen or saved games. The window size and title in `main()` are fixed, and the command takes no options.

## Tests

```
pytest
```