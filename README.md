# aimlab

A small first-person aim trainer drawn with pygame.

The game has four screens:

1. **Main menu**: the title "AIM LABS" and a play button.
2. **Start screen**: the practice scene with three cubes on the target wall.
   Click anywhere to start the round.
3. **Round**: a five-second countdown runs first. Then you have one minute
   to shoot cubes. When a cube is hit, it is removed and a new cube appears
   at another free slot in a 3×3 grid. The timer and the score show in the
   top-left corner.
4. **Game over**: a "GAME OVER!" message and an exit button.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
aimlab
```

Options:

- `--resources DIR`: the directory that holds sounds and media. The default
  is `resources`, relative to the current directory.
- `--fps N`: the frame-rate cap. The default is 60.

Controls:

- Move the mouse to look around. The crosshair in the middle of the screen
  marks where you aim.
- Click to shoot.
- On the menu screens, click a button.
- Close the window to quit.

The window hides the pointer and grabs the mouse. It grabs the mouse again
whenever it regains focus.

### Resource files

Two files are looked up under the resources directory:

- `sounds/Gunshot.mp3` is played when a cube is hit.
- `media/play_button.jpg` is the image used for buttons.

The package does not ship either file. If the sound is missing, a warning is
logged and the game runs silently. If the image is missing, buttons are drawn
as plain coloured rectangles.

## What it does not do

- Cubes and scenery are drawn as flat-shaded pygame polygons. They have no
  textures and no hardware 3D rendering.
- Text uses pygame's default font.
- You cannot move around. `Camera.set_direction` exists, but no keys are
  bound to it, so you can only look.
- The game-over screen has only an exit button. `GameOverButtons` records a
  `RESTART_BUTTON` click, but no such button is placed and no restart
  happens.
- Scores are not saved, and accuracy is not shown on screen.

## Using the pieces

You can use the game logic without opening a window.

```python
from aimlab.vector import Vec3
from aimlab.collision import AABB, BoxCollider2D

box = AABB(Vec3(-0.5, -0.5, -10.5), Vec3(0.5, 0.5, -9.5))
box.raycast(Vec3(0, 0, 0), Vec3(0, 0, -1))          # 9.5, or None on a miss
box.check_collision(Vec3(0, 0, 0), Vec3(0, 0, -1))  # True

button = BoxCollider2D(250, 250, 350, 350)
button.check_collision(300, 300)                    # True: strictly inside
```

Scores are kept by an observer that listens to a subject. Every reported
shot counts towards `missed`, and a hit also adds to `score`:

```python
from aimlab.events import Event, Subject
from aimlab.scoring import ScoreManager
from aimlab.gamedata import RoundStatistics, accuracy

shots = Subject()
scores = ScoreManager()
shots.add_observer(scores)
shots.notify(Event.TARGET_SHOT)
shots.notify(Event.TARGETS_MISSED)
accuracy(RoundStatistics(scores.score, scores.missed))  # 0.5
```

Other modules:

- `aimlab.transform`: 4×4 numpy matrix helpers (`translate`, `scale`,
  `rotate`, `look_at`, `perspective`, `ortho`) and `Transform`.
- `aimlab.camera`: a yaw/pitch `Camera`.
- `aimlab.targets`: `Target` and the free-position pool `TargetSlots`.
- `aimlab.world`: `World`, which turns `InputEvent`s into shots.
- `aimlab.canvas`: `Canvas` with `TextBox` and clickable `UIBox`.
- `aimlab.buttons`: click listeners for the menu screens.
- `aimlab.timer`: a pausable millisecond `Timer`.
- `aimlab.sound`: `SoundManager`.
- `aimlab.render`: `Renderer`, `Cursor` and `project`.
- `aimlab.states`: the screens and the `StateManager`. Each state takes an
  injectable clock and mouse-position function.
- `aimlab.app`: `main` and `translate_event`.