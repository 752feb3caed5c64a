# dfengine

A small engine for games drawn on a grid of text characters. A game is made of
objects that live in a world. The objects receive events and move with a
velocity. They collide by their bounding boxes and draw themselves through
animated sprites. A fixed-rate game loop ties these parts together.

The window, keyboard, mouse and audio go through `pygame`.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## What is in the package

### Geometry

- `dfengine.vector.Vector` is a frozen dataclass `(x, y)`. It has
  `magnitude()`, `normalized()` and `scale(s)`, and supports `+` and `-`.
  A vector of near-zero length is returned unchanged by `normalized()`.
- `dfengine.box.Box` is a box with an upper-left `corner` and the sizes
  `horizontal` and `vertical`.
- `dfengine.shapes` has `Line(p1, p2)` and `Circle(center, radius)`, both with
  a readable `str()`.
- `dfengine.utility` holds the geometry helpers:
  - `positions_intersect`
  - `box_intersects_box`, where touching edges count as overlapping
  - `value_in_range`
  - `world_box(obj, where=None)`
  - `box_contains_position`
  - `box_contains_box`
  - `distance`

### Basics

- `dfengine.color.Color` is an `IntEnum` of the colours the engine knows.
  `COLOR_DEFAULT` is `Color.WHITE`.
- `dfengine.clock.Clock` measures elapsed time in microseconds. `delta()`
  resets the clock and `split()` does not. You can pass your own timer.
- `dfengine.object_list.ObjectList` is an ordered collection of objects with a
  fixed capacity (1000 by default). Objects are compared by identity.
  - `insert` raises `ObjectListFullError` when the list is full.
  - `remove` raises `ValueError` when the object is not in the list.
  - Indexing out of range raises `IndexError`.

### Events

`dfengine.events` holds the dataclass `Event` and the event types below:

| Event | Fields |
| --- | --- |
| `EventCollision` | `object1`, `object2`, `position` |
| `EventKeyboard` | `key: Key`, `keyboard_action: KeyboardAction` |
| `EventMouse` | `mouse_action: MouseAction`, `mouse_button: MouseButton`, `mouse_position` |
| `EventOut` | none |
| `EventStep` | `step_count` |
| `EventView` | `tag`, `value`, `delta` |

`key_from_pygame(code)` maps a pygame key code onto `Key`. Codes it does not
know give `Key.UNDEFINED_KEY`.

### Managers

Every manager derives from `dfengine.manager.Manager`. A manager has
`start_up()`, `shut_down()`, `is_started` and `on_event(event)`. `on_event`
sends the event to every target object and returns how many objects received
it. A manager can also be used as a context manager. Failures raise
`ManagerError`.

- `LogManager` (the shared instance is `dfengine.log_manager.LM`) writes
  %-formatted messages to `dragonfly.log`. It provides `write_log`,
  `write_log_level` and `set_flush`.
- `DisplayManager` (the shared instance is `dfengine.display_manager.DM`) opens
  a window of 1024×768 pixels laid out as 80×24 character cells.
  - Drawing goes through `draw_ch`, `draw_string` and `swap_buffers`.
    `draw_string` takes a `Justification`.
  - `spaces_to_pixels` and `pixels_to_spaces` convert between the two grids.
  - `set_background_color` sets the colour behind the characters.
  - By default it loads the font file `df-font.ttf` from the working directory.
    Pass `font_file=None` to use pygame's built-in font.
  - Failures raise `DisplayError`.
- `WorldManager` (the shared instance is `dfengine.world_manager.WM`) holds
  every object in the world.
  - `mark_for_delete(obj)` removes an object at the start of the next
    `update()`.
  - `update()` moves each object by its velocity.
  - `move_object(obj, where)` sends collision events to both objects. It
    refuses the move and returns `False` when both objects are `HARD`. It sends
    an `EventOut` when an object leaves the world `boundary`.
  - `draw()` draws the objects in the `view`, lowest altitude first.
    View objects are always drawn.
  - The view can follow an object with `set_view_following`.
- `InputManager` (the shared instance is `dfengine.input_manager.IM`) turns
  pygame key and mouse events into engine events. It sends them to every object
  in the world. `get_input()` returns the events it sent.
- `GameManager` (the shared instance is `dfengine.game_manager.GM`) starts the
  managers in this order: log, world, display, input. It then sets the world
  boundary and view to the display size.
  - `run()` loops until `set_game_over()` is called. Each pass sends an
    `EventStep`, reads input, updates and draws the world, swaps buffers and
    sleeps out the rest of the 33 ms frame.
  - `run()` returns the number of steps it ran.
  - `shut_down()` stops the managers in reverse order.

### Drawing and objects

- `dfengine.frame.Frame(width, height, string)` holds one frame of characters,
  stored row by row.
- `dfengine.sprite.Sprite(max_frames, ...)` holds frames with a colour, a
  slowdown and a transparency character. `add_frame` raises `SpriteFullError`
  when the sprite already holds `max_frames` frames.
- `dfengine.animation.Animation` tracks the current frame and advances it
  according to the sprite's slowdown. A `slowdown_count` of -1 freezes the
  animation.
- `dfengine.game_object.GameObject` has a position, velocity, acceleration,
  mass, altitude from 0 to 4, `Solidness` (`HARD`, `SOFT`, `SPECTRAL`), a
  bounding box and an animation.
  - `set_sprite(sprite)` sizes the bounding box to the sprite.
  - When given a `world`, the object inserts itself into it on creation.
    `destroy()` removes it again.
- `dfengine.view_object.ViewObject` is a heads-up display showing
  `view_string` and `value`.
  - It is placed by `ViewLocation` and can have a `border`.
  - It applies any `EventView` whose tag matches its view string.
- `dfengine.sound` has `Sound` for effects held in memory and `Music` for
  streamed music. Both have `load`, `play`, `stop` and `pause`.

## A taste

```python
from dfengine.vector import Vector
from dfengine.utility import distance

v = Vector(3, 4)
v.magnitude()              # 5.0
v + Vector(1, 2)           # Vector(x=4, y=6)
distance(Vector(0, 0), v)  # 5.0
```

## Writing a game

1. Subclass `GameObject` and override `event_handler(event)` to react to
   events. It should return `True` when it handled the event.
2. Override `draw()` when an object draws itself by other means than its
   sprite.
3. Build sprites in code from `Frame`s and attach them with `set_sprite`.
4. Call `GM.start_up()`, create your objects with `world=WM` so they join the
   world, and call `GM.run()`.
5. Call `GM.shut_down()` once the loop ends.

## What the package does not do

- It does not read sprites, sounds or music from a resource directory. There is
  no loader for sprite files and no registry of assets by label. Sprites are
  built in code, and sounds and music are loaded one file at a time.
- It provides no command and no ready-to-play game. It is a library to build
  games with.