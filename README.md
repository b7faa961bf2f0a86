# mmobattle

A small real-time battle built on pygame. You control a player; a monster
waits nearby and attacks when you come within its aggro range. Damage shows
as a red pop-up that floats upward over the character that was hit, and a HUD
shows your hit points.

## Installing

```
pip install .
```

## Playing

```
mmobattle --font path/to/font.ttf
```

Options:

- `--font` - the TrueType font used for the HUD and pop-ups. The default is
  `assets/fonts/Ldfcomicsans-jj7l.ttf`, looked up relative to the current
  directory; no font ships with the package, so pass one if that file is not
  there. If the font cannot be loaded the command prints an error and exits
  with status 1.
- `--frames N` - stop after `N` frames (the default, `0`, runs until the
  window is closed).

The game runs at 60 frames per second in an 800x600 window.

Controls:

- Arrow keys step the player: left and right along x, up and down forwards
  and backwards along z.
- `R` heals both fighters and puts them back at their starting places.
- Close the window to quit.

When your hit points reach zero a message tells you that you died; when the
monster's reach zero a win message appears. Press `R` to play again.

## Using the pieces

The game logic needs no window. With `None` as the font nothing is rendered,
and `None` as the screen skips drawing:

```python
from mmobattle.character import Monster, Player
from mmobattle.model import Direction

player = Player(100, 50, 10, 10, 10, 5, 5, 5, "player.png", None)
monster = Monster(20, 0, 30, 10, 5, "monster.png", None, 10, 45, 0, 0, 50)

player.model.move(Direction.BACKWARDS)
monster.check_player_proximity(player)
player.update(0, None)
monster.update(0, None)
print(player.hp)
```

`mmobattle.game.Battle` bundles the same player and monster with the HUD;
`Battle.press`, `Battle.release` and `Battle.reset` apply input, and
`Battle.step(screen)` runs one frame (pass `None` to run without drawing).

The modules are:

- `mmobattle.vec3` - the `Vec3` integer vector, `distance_between_points`,
  `distance_between_vecs` and `make_hud_string`.
- `mmobattle.model` - `Model`, the positioned body of a character, with the
  `Direction` and `Movement` enums.
- `mmobattle.hud` - `HUDElement` text labels and the rising
  `PopUpHUDElement`.
- `mmobattle.character` - `Character`, `Player`, `Monster` and `Skill`.
- `mmobattle.game` - the `GraphicsAPI` interface, the `PygameRenderer`, the
  `Battle` state and the `main` entry point.

## What it does not do

- Skills carry no behaviour; a `Player` only keeps the list it is given.
- `PygameRenderer.create_graphics_pipeline` stores the vertex and fragment
  programs but never runs them; models are drawn as plain squares.
- Mouse clicks are recorded on the `Battle` (`target`, `clicked`,
  `holding`) but do not move or attack.
- There is no levelling in play, no saving and no networking.

## Running the tests

```
pip install .[test]
pytest
```