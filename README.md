# vimcanvas

The parts of a graphical editor front end that do not need a drawing surface,
in plain Python with no dependencies.

## Modules

- `vimcanvas.animation`: `Point`, an immutable 2D vector with `length()`,
  `normalized()`, `dot()` and `is_zero()`. It also has `lerp`, `ease`,
  `ease_point` and the easing curves `ease_linear`, `ease_in_quad`,
  `ease_out_quad`, `ease_in_out_quad`, `ease_in_cubic`, `ease_out_cubic`,
  `ease_in_out_cubic`, `ease_in_expo` and `ease_out_expo`.
- `vimcanvas.font_options`: `FontOptions.parse` reads a `guifont` string such
  as `"Fira Code Mono:h15:b:i:#h-slight:#e-alias"`. It uses the `FontHinting`
  and `FontEdging` enums and the helpers `parse_font_name` and
  `points_to_pixels`.
- `vimcanvas.scheduling`: `RedrawScheduler` decides whether the next frame
  needs drawing. `RunningTracker` records quit requests and the exit code.
  Shared instances are available as `REDRAW_SCHEDULER` and `RUNNING_TRACKER`.
- `vimcanvas.blink`: `BlinkStatus.update_status(cursor)` runs the cursor blink
  cycle (`BlinkState.WAITING`, `ON`, `OFF`) and returns whether the cursor is
  visible. The `cursor` argument can be any object with `blinkwait`, `blinkon`
  and `blinkoff` in milliseconds, or `None`. Each call schedules the next blink
  transition on a redraw scheduler.
- `vimcanvas.cursor_vfx`:
  - `CursorSettings` holds the cursor settings.
  - `VfxMode.parse` reads a mode name: `sonicboom`, `ripple`, `wireframe`,
    `railgun`, `torpedo`, `pixiedust`, or `""` for disabled.
  - `new_cursor_vfx(mode)` returns a `PointHighlight` or a `ParticleTrail`, or
    `None` when the mode is disabled.
  - `PcgRandom` is the deterministic random number generator used by the
    particles.
- `vimcanvas.frame_stats`: `FrameStats` keeps a rolling window of recent frame
  times, 48 by default. It computes frames per second and a `FrameSummary`
  with the minimum, maximum and average, and it gives the points of a
  frame-time graph.
- `vimcanvas.crash_report`: formats unhandled errors for stderr and appends
  them to `vimcanvas_backtraces.log`. `install_panic_hook()` installs the
  reporting function as `sys.excepthook`. With `debug=True`, setting
  `VIMCANVAS_BACKTRACE=1` (or `full`) adds the full traceback to the stderr
  message.

## Examples

Easing between two values:

```python
from vimcanvas.animation import ease, ease_in_out_cubic

ease(ease_in_out_cubic, 1.0, 0.0, 0.25)  # 0.9375
```

Parsing a font setting:

```python
from vimcanvas.font_options import FontHinting, FontOptions

options = FontOptions.parse("Fira Code Mono:h15:b:#h-slight")
options.primary_font()                    # "Fira Code Mono"
options.bold                              # True
options.hinting is FontHinting.SLIGHT     # True
```

In a font name, an underscore stands for a space. A backslash makes the next
character literal:

```python
from vimcanvas.font_options import parse_font_name

parse_font_name("Fira_Code_Mono")      # "Fira Code Mono"
parse_font_name(r"Fira\_Code\_Mono")   # "Fira_Code_Mono"
```

Deciding whether to draw:

```python
from vimcanvas.scheduling import RedrawScheduler

scheduler = RedrawScheduler()
scheduler.should_draw()       # True: the first frame is always queued
scheduler.should_draw()       # False: nothing queued or due
scheduler.queue_next_frame()
scheduler.should_draw()       # True
```

Running a particle trail:

```python
from vimcanvas.animation import Point
from vimcanvas.cursor_vfx import CursorSettings, VfxMode, new_cursor_vfx

trail = new_cursor_vfx(VfxMode.parse("railgun"))
alive = trail.update(CursorSettings(), Point(400.0, 300.0), Point(10.0, 20.0), 0.016)
len(trail.particles)  # particles spawned along the path travelled
```

## What it does not do

This package does not draw anything. It does not open a window, render text,
or shape and load fonts. It does not lay out or scroll editor windows, and it
does not animate the corners of the cursor shape. It has no command-line
program and does not connect to a running editor. It supplies the state and
arithmetic that such a front end would use.

## Running the tests

Install the `test` extra, then run pytest from the project root.