# wavehunter

A top-down arcade survival game. Your hero fires a ring of bullets on a
timer. Enemies come at you in waves, and a boss arrives every fifth wave.
Kills earn levels, and each level gives you a choice of upgrades.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Playing

```
wavehunter
wavehunter --assets path/to/assets
```

`--assets` names the directory that holds the game's images and font. The
default is `assets` in the current directory. The game reads these files:

- `textures/<kind>_<facing>.png`. `<kind>` is `player`, `enemy` or `boss`,
  and `<facing>` is `up`, `down`, `left` or `right`. That makes twelve
  images in all. If any one of them is missing, the game draws every sprite
  as a plain coloured circle.
- `fonts/SourceHanSansSC-Bold.otf`. All on-screen text (menu, HUD, upgrade
  prompts, game-over message) is in Chinese, so you need a font with CJK
  glyphs. Without this file, pygame's default font is used instead.

Controls and rules:

- **Space** starts the game from the menu.
- **W / A / S / D** move the player. The player cannot leave the world,
  which is twice the window's size in each direction.
- Bullets fire on their own, in an even ring in every direction. A volley
  starts with 8 bullets, fired once per second.
- On a level-up the game pauses and offers upgrades. Press **1**, **2** or
  **3** to pick one:
  - more damage (+2)
  - faster attacks (interval × 0.8)
  - more bullets per volley (+2)

  Every upgrade also restores one point of health, up to the maximum.
- The player starts with 5 health. An enemy that touches the player takes
  one point, at most once per second.
- A new wave starts every 15 seconds. More enemies also keep appearing in
  a ring around you every 3 seconds.
- When your health reaches zero, press **R** to start again. The high score
  carries over from one game to the next until you close the window.

## Scoring

- A regular enemy is worth 10 points.
- A boss is worth 100 points.
- Reaching level `n + 1` takes `n * n * 5` total kills.

## Using the engine from code

The game rules do not depend on the window, so you can drive them directly.
`wavehunter.model.World` holds the whole game state. A new world starts on
the menu. `wavehunter.app.update_frame(world, dt, held, pressed)` advances
it by one frame. `held` is the set of keys held down (`"w"`, `"a"`, `"s"`,
`"d"`). `pressed` is the set of keys pressed this frame (`"space"`, `"r"`,
`"1"`, `"2"`, `"3"`).

```python
from wavehunter.model import World
from wavehunter.app import update_frame
from wavehunter.hud import hud_text

world = World()
update_frame(world, 1 / 60, pressed={"space"})   # leave the menu, spawn wave 1
update_frame(world, 1 / 60, held={"w"})          # move up for one frame
print(hud_text(world))
```

Each part of the game also has its own building blocks:

- `wavehunter.enemies` spawns enemies, moves them and keeps them apart. It
  also advances the waves.
- `wavehunter.combat` handles player movement and attacks, bullets, kills
  and level-ups.
- `wavehunter.progression` applies upgrades and restarts a game.
- `wavehunter.hud` places the camera and builds the HUD text.

`wavehunter.app.GameApp` wraps a world with a camera and draws it onto a
pygame surface.

## What it does not do

- The package ships no images or font. You supply them through `--assets`,
  as described above.
- Nothing is saved to disk. The high score is lost when the window closes.