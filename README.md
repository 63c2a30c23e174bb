# retrolaunch

The building blocks of a retro game launcher frontend. The package has no
graphics or audio backend of its own: drawing and texture creation go through
objects you supply.

## Modules

- `retrolaunch.gamelist`: `GameListManager` reads a system list XML file
  (`<system>` elements) and, for the selected system, the `gamelist.xml` in its
  rom directory (`<game>` elements). Systems are sorted by label and games by
  name. `change_system_to_game_list()` and `change_game_to_system_list()` switch
  between the two lists; `add_id()` moves the selection with wrap-around and
  `change_id()` selects an index clamped to the list. Paths starting with `./`
  are resolved against the system's rom path. Entries are `SystemList` and
  `GameList` dataclasses; `CurrentList` says which list is shown.
- `retrolaunch.process`: `create_process()` starts a command line and returns
  its process id, `is_application_running()` reports whether a process started
  this way is still running, and `close_application_running()` asks a process
  to terminate. `PlatformProcess` tracks one launched program and, on each
  `tick()`, calls its `on_open` and `on_close` callables when the program starts
  and exits.
- `retrolaunch.entity`: `Entity` nodes form parent/child trees with z order,
  visibility and scissor areas. `EntityManager.create_entity()` names entities
  per `EntityType` and `draw()` draws them in z order through a renderer object
  with `draw_texture`, `begin_scissor` and `end_scissor` methods, looking
  textures up by name with a callable you provide.
- `retrolaunch.animation`: `AnimationFrame` cycles named lists of sprite-sheet
  positions, stepping when its `DelayAnimation` timer has elapsed.
- `retrolaunch.textures`: `TextureManager` keeps sprite textures by name and
  full-size and mini covers by game index, as `TextureImage` slots with a
  `StatusImage`. Textures are made and released by a loader object with `load`
  and `unload` methods.
- `retrolaunch.callbacks`: `CallbackQueue` lets worker threads `notify()`
  results that `execute()` later passes to a callback on the main loop.
- `retrolaunch.geometry`: `Vector2`, `Rectangle`, `Color` (with named palette
  colours via `Color.named()`), `Colors` (channels that may leave 0..255 while
  animating, clamped when drawn) and `Proportion` (aspect ratio in lowest terms).
- `retrolaunch.datetimes`: `DateTime` in the gamelist form `YYYYMMDDTHHMMSS`.
  `DateTime.parse()` returns 1900-01-01 00:00:00 for malformed or impossible
  values; `to_xml()` writes the same form back. Date-times are ordered
  chronologically.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from retrolaunch.gamelist import GameListManager

manager = GameListManager("Resources/systemlist.xml")
manager.initialize()

if manager.systems:
    manager.change_system_to_game_list()
    game = manager.current_game()
    if game is not None:
        print(game.name, game.path)
    manager.add_id(1)  # move to the next game, wrapping around
```

Dates in gamelists parse and print in the same format:

```python
from retrolaunch.datetimes import DateTime

released = DateTime.parse("19910823T000000")
print(released.to_xml())  # 19910823T000000
```

## What it does not do

There is no launcher command, window, menu screen, music player or video
player here. The package provides the data model, process control and scene
bookkeeping; rendering, sound and input handling are left to the program that
uses it.