# gridsnake

A snake game played on a 30 × 20 grid. Eat apples to grow and to score
10 points each. Every 100 points takes you to the next level. Each level
lays out a new set of walls and makes the snake a little faster, down to
one step every 0.05 seconds.

## Installing

```
pip install .
```

This also installs pygame, which draws the window and plays the sounds.
To run the tests, install the `test` extra and run `pytest`.

## Playing

```
gridsnake
gridsnake --assets path/to/assets
```

The game looks for its images and sounds in the directory given by
`--assets`, which is `../assets` by default. It uses `images/apple.png`,
`audio/background.ogg`, `audio/eat.wav`, `audio/hit.wav` and
`audio/levelup.wav`. If a file is missing, a message is printed and the
game carries on without it; food is then drawn as a red circle. Text is
drawn with Arial or DejaVu Sans when one is found in the usual system
places, and with pygame's default font otherwise.

### Keys

| Screen      | Key          | Action                      |
|-------------|--------------|-----------------------------|
| Menu        | Space        | Start a new game            |
| Menu        | H            | Show high scores            |
| Menu        | Esc          | Quit                        |
| Playing     | W A S D      | Steer the snake             |
| Playing     | P            | Pause                       |
| Playing     | U            | Undo the last score gained  |
| Paused      | P            | Resume                      |
| Game over   | Space        | Back to the menu            |
| Game over   | R            | Restart                     |
| High scores | Esc or Space | Back to the menu            |

The game ends when the snake hits a wall, the edge of the board or its own
body. Your final score goes into the top-ten high score table.

## What it does not do

High scores are kept only while the program runs. They are not saved to
disk, so the table is empty each time the game starts.

## Using the pieces

The game logic can be used without a window:

- `gridsnake.graph.Graph` is the board as a grid graph. Walls are cells with
  no connections, and cells outside the grid count as walls.
  `generate_wall_level(level, rng)` clears the board and scatters up to
  three walls per level.
- `gridsnake.snake.Snake` is the snake's body, made of `Segment`s, and its
  movement in one of four `Direction`s. It will not turn straight back on
  itself.
- `gridsnake.food.Food` holds up to a fixed number of food cells.
  `spawn_random` places them at random on free cells. It raises
  `ValueError` when there are too few free cells left.
- `gridsnake.scores.ScoreManager` keeps the score, the level, an undo
  history, the last five gains and the high score table of `ScoreEntry`
  records.
- `gridsnake.engine.Engine` ties these together. It works as a state
  machine (`GameState`). It takes key names such as `"w"`, `"p"` or
  `"space"` through `handle_key`, and moves one step at a time through
  `update`, which returns the `SoundEvent`s to play.
- `gridsnake.app.App` is the pygame front end that runs it all, and
  `gridsnake.app.main` is the `gridsnake` command.

```python
import random
from gridsnake.engine import Engine

engine = Engine(30, 20, random.Random(1))
engine.start_new_game()
sounds = engine.update()
print(engine.state, engine.snake.head, engine.scores.score, sounds)
```