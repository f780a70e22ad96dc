# renderkit

Building blocks for a real-time 3D renderer, written against NumPy:
matrix and quaternion helpers, camera controllers, a virtual trackball,
tone-mapping curves, CPU shading of an infinite grid, in-memory bitmaps,
a frame-rate counter, and the bookkeeping behind SSAO blur passes and
HDR light adaptation.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

- `renderkit.glmath`: 4x4 matrices acting on column vectors and
  quaternions ordered `(w, x, y, z)`. `identity`, `translate`, `scale`,
  `rotate`, `perspective`, `look_at`, `yaw_pitch_roll`, `quat_from_euler`,
  `quat_multiply`, `quat_normalize`, `quat_to_mat4`, `quat_from_mat4`,
  `transform_point`, plus `clamp`, `clamp_length`, `random01`,
  `random_float`, `random_vec` and `rand_vec`.
- `renderkit.tonemap`: `ToneMappingMode` (`NONE`, `REINHARD`, `UCHIMURA`,
  `KHRONOS_PBR`) and the scalar curves `uchimura`, `reinhard2` and
  `pbr_neutral`.
- `renderkit.fps`: `FramesPerSecondCounter`. `tick(delta_seconds,
  frame_rendered=True)` returns `True` once per averaging interval, when
  `fps` holds a new value; it prints the rate unless `print_fps` is set to
  `False`. A non-positive interval raises `ValueError`.
- `renderkit.bitmap`: `Bitmap` with `BitmapFormat.UNSIGNED_BYTE` or
  `BitmapFormat.FLOAT` storage, `set_pixel` / `get_pixel` on RGBA tuples,
  and `bytes_per_component`. Out-of-range pixels raise `IndexError`.
- `renderkit.trackball`: `VirtualTrackball`, turning mouse drags in
  `[0, 1]^2` screen space into rotation matrices (`drag_to`,
  `rotation_matrix`, `rotation_delta`).
- `renderkit.camera`: `Camera` over a `CameraPositioner`;
  `FirstPersonPositioner` (mouse look plus `Movement` keys with
  acceleration, damping and a speed cap) and `MoveToPositioner` (glides
  towards `position_desired` and `angles_desired`); helpers `clip_angle`,
  `clip_angles` and `angle_delta`.
- `renderkit.grid`: `GridParameters` and `grid_color`, the anti-aliased
  grid colour with level-of-detail fading, given the screen-space
  derivatives of the grid coordinate.
- `renderkit.ssao`: `DrawMode`, `SSAOParams` and `CombineParams` (each
  with `pack()` for push-constant bytes), `blur_passes` for a ping-pong
  blur schedule, `is_horizontal_pass` and `dispatch_groups`.
- `renderkit.adaptation`: `PingPong` resource pairs, `AdaptationSettings`
  (`step_speed`, `initial_pixel`) and the half-float helpers `pack_half`
  and `unpack_half`.

## Example

```python
import numpy as np

from renderkit.adaptation import pack_half, unpack_half
from renderkit.camera import Camera, FirstPersonPositioner
from renderkit.glmath import perspective
from renderkit.ssao import blur_passes, dispatch_groups
from renderkit.tonemap import uchimura

positioner = FirstPersonPositioner((0.0, 3.0, -4.5), (0.0, 0.5, 0.0), (0.0, 1.0, 0.0))
positioner.movement.forward = True
positioner.update(1 / 60, (0.0, 0.0), False)

camera = Camera(positioner, perspective(np.radians(60.0), 16 / 9, 0.1, 1000.0))
view_proj = camera.projection @ camera.view_matrix()

mapped = uchimura(0.5, 1.0, 1.05, 0.1, 0.8, 3.0, 0.0)

passes = blur_passes("ssao", "blur0", "blur1", "ssao", 2)  # 4 passes
groups = dispatch_groups(1920, 1080)                      # (121, 68)

bits = pack_half(50.0)      # 0x5240
value = unpack_half(bits)   # 50.0
```

## What it does not do

renderkit computes values; it draws nothing. It opens no window, talks to
no GPU, compiles no shaders and loads no meshes, textures or scene files.
It has no bounding boxes or frustum culling, and no command-line program.