# bullethell

A vertical bullet-hell shooter. You fly a ship through five levels while waves
of enemies come in from the top of the screen, fire at you and fly off again.
Enemy types and levels are described in JSON files, and finished games are
recorded in a JSON score table.

## Installing

```
pip install .
```

This installs pygame, which the game uses for its window, drawing, input and sound.

## Playing

Run the game from a directory that holds the `assets/` and `json/` folders:

```
bullethell
```

The window is 720 × 1280. The frame rate is limited to 240 frames per second;
`bullethell --fps 60` sets a different limit.

Controls:

- **W A S D**: move
- **Space**: shoot (at most one shot every 0.15 seconds)
- **Left mouse button** (hold): precision mode. The ship moves at a quarter of
  its speed and its hitbox is outlined.
- **Enter** (or keypad Enter): start a game from the menu, or go back to the
  menu after a win or a game over
- **Escape**, or closing the window: quit

You start with 250 health and 10000 points. The score drops by 10 points a
second and never below zero; each enemy you destroy adds its own score. After a
hit you cannot be hit again for 0.75 seconds. Clearing a level shows a
five-second transition and restores some health (40 plus 20 for each level
cleared so far, up to 250). Clear all five levels to win; lose all your health
and the game is over.

Missing sound, music or image files are logged and skipped, so the game still
runs without them. A level file that cannot be opened gives an empty level.

## Data files

- `json/enemy_types.json` maps each enemy type name to its settings: `health`,
  `speed`, `scale`, `initialY`, `bulletDelay`, `damage`, `bulletSpeed`, `score`,
  `poolSize`, `movement` (`RandomMovement`, `LateralMovement`, `StaticMovement`,
  `BerserkerMovement`), `attack` (`BasicAttackBehavior`, `PrecisionAttack`,
  `TurretAttack`, `Berserker`), `texture` and `bulletTexture`. Settings left out
  take default values. Creating an enemy of an unknown movement or attack name
  raises `ValueError`.
- `json/lvl1.json` to `json/lvl5.json` each give a `backgroundTexture`, a
  `musicTrack` and a list of `enemyWaves`. Each wave has `enemyType`, `count`,
  `spawnDelay` and `startTime`.
- `json/scores.json` is the score table. It is read at start-up and written,
  sorted from the highest score down, whenever a game ends.

## What it does not do

Scores are stored but there is no screen that shows them. There is no pause,
no options screen and no way to change the volume from within the game.

## Using the pieces

The modules can also be used on their own:

- `bullethell.pool.Pool`: a fixed-size object pool (`acquire`, `release`,
  `active`, `available`).
- `bullethell.spatial_grid.SpatialGrid`: a uniform grid for broad-phase
  collision lookups (`insert`, `nearby`, `clear`).
- `bullethell.levels.load_level` and `bullethell.enemy_types.load_enemy_types`:
  readers for the level and enemy-type files.
- `bullethell.scores.ScoreManager`: the JSON score table (`add_score`, `load`,
  `save`, `entries`).
- `bullethell.graphics.NullCanvas`: a headless canvas that records draw
  commands instead of drawing, so game states can run without a window.

## Running the tests

```
pip install .[test]
pytest
```