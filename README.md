# golemstage

Game-logic building blocks for a side-scrolling boss fight: sprite-sheet
animation clips, timed effects, projectiles, floor buttons, barricades and a
stone-golem boss. Images are Pillow images, so everything runs headless and
can be tested without a window.

## Install

```
pip install golemstage
```

## Modules

- `golemstage.clip`: `Point`, `Size` and `Rect` (with `Rect.centered`,
  `width`, `height`), and `AnimationClip`, which steps through the frames of a
  sprite sheet laid out on a grid. Its `frame_pos`, `frame_size`, `image_rect`
  and `loop_time` are properties; `update`, `reset`, `stop`, `resume` and
  `copy` drive it.
- `golemstage.animation`: `Animation`, a sprite sheet holding named clips.
  `render` draws a region with a transparent colour key, `render_scaled` can
  also mirror it and blend it by an alpha value, and `render_rotated` turns it
  by an angle in radians.
- `golemstage.animation_manager`: `AnimationManager`, built with a loader
  function that turns a file name into a Pillow image. It keeps one prototype
  animation per key and `get_animation` hands out independent copies;
  `find_by_file` looks one up by its source file.
- `golemstage.effect`: `Effect`, an animation placed in the world that ends
  after a number of loops (`check_end`, `end`, `reset`), drawn mirrored or
  rotated as set.
- `golemstage.effect_manager`: `EffectManager`, which reads effect prototypes
  from a text file with one effect per line,
  `key file columns rows frame_length frame_time color_key alpha`, and starts,
  updates, renders and removes live effects made from them.
- `golemstage.keyinput`: `KeyInput` and `KeyState`, per-frame key tracking
  (down, pressed, up, double press) over any function that says whether a key
  code is held.
- `golemstage.structures`: `MoveDir`, `MonsterState`, the random `MonsterAI`,
  `Pixel` (packing to and from 0x00BBGGRR colour values), `AttackInfo`,
  `AnimationClipInfo`, `BuffInfo` and `World` (level size, view size, camera,
  `is_visible`).
- `golemstage.hpbar`: `HPBar`, a 50 by 5 pixel health bar drawn above an
  object.
- `golemstage.bullet`: `Bullet`, flying in a fixed direction, along an angle
  or toward a target.
- `golemstage.button`: `Button`, pressed down by any hit and raised again after
  ten seconds; `save` and `load` write and read its position as two
  little-endian 32-bit integers.
- `golemstage.barigate`: `Barigate`, a barrier box sized by hand or by its
  texture, with binary `save` and `load`.
- `golemstage.boss`: `Boss` and its `BossAI`, which chooses between a bullet
  fan and a targeted laser. Bullets are handed to a `spawn_bullet` callback.

## Example

```python
from PIL import Image

from golemstage.animation import Animation
from golemstage.clip import Point

sheet = Image.new("RGBA", (64, 64))
anim = Animation(sheet, "sheet.png", Point(4, 4))
anim.add_clip("walk", Point(0, 1), 3, 0.2)

walk = anim.clip("walk")
walk.update(0.25)
print(walk.frame_pos, walk.image_rect)
# Point(x=1, y=1) Rect(left=16, top=16, right=32, bottom=32)
```

## What it does not do

The package has no window, game loop, sound or command to start a game. It
does not load stages or map files, has no player or monster classes beyond the
pieces above, and has no multiplayer lobby or networking. Textures are not
managed for you: pass an image loader to `AnimationManager` and a mapping of
images to `Barigate`.

## Tests

```
pip install "golemstage[test]"
pytest
```