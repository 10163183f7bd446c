# cgl

cgl is a small computer-graphics toolkit written in pure Python. It uses only
the standard library.

## Modules

- `cgl.vector` provides `Vector2D`, `Vector3D` and `Vector4D`.
  - Each supports component indexing, `+`, `-`, negation, scalar `*` and `/`,
    `norm()`, `norm2()` and `unit()`.
  - `Vector3D` also supports element-wise `*` and `/` between two vectors. It
    has `rcp()` and `normalize()`, plus `to_color()`, `from_color()` and
    `illum()`. `r`, `g` and `b` are aliases for `x`, `y` and `z`.
  - `Vector4D` has `rcp()`, `normalize()`, `to_3d()`, `project_to_3d()` and
    `from_vector3()`. Its `unit()` returns the x, y and z components divided
    by the full four-component length, with `w` set to 0.
  - `dot(u, v)` works on vectors of equal dimension. `cross(u, v)` returns a
    number for two 2D vectors and a `Vector3D` for two 3D vectors.
- `cgl.matrix` provides `Matrix3x3` and `Matrix4x4`.
  - Both are built from row-major values, given either as a flat list or as
    a list of rows.
  - `m[i, j]` reads or writes row `i`, column `j`. `m[j]` (or `m.column(j)`)
    gives column `j` as a vector that shares storage with the matrix.
  - Both offer `det()`, `norm()` (Frobenius norm), `T()`, `inv()`, `zero()`,
    `identity()`, `+=`, `-`, `/=`, and `*` by a number, a matrix or a vector.
  - `inv()` raises `ZeroDivisionError` when the matrix is singular.
  - `Matrix3x3()` with no values is the identity. `Matrix4x4()` with no values
    is all zeros.
  - `Matrix3x3.cross_product(u)` builds the cross-product matrix of `u`.
  - `outer(u, v)` gives the outer product of two 3D vectors or of two 4D
    vectors.
- `cgl.quaternion` provides `Quaternion`, a subclass of `Vector4D`.
  - The default quaternion is the identity, (0, 0, 0, 1).
  - Constructors and setters: `from_vector3()`, `from_vector4()`,
    `from_axis_angle()`, `set_scaled_axis()` and `set_euler()`.
  - Parts: `complex()` and `real()`.
  - Algebra: `conjugate()`, `inverse()`, `product()` and `*`.
  - Matrix and vector forms: `matrix()`, `right_matrix()`,
    `rotation_matrix()` and `vector()`.
  - Rotations: `rotated_vector()`, `scaled_axis()`, `euler()` and
    `decouple_z()`.
  - Interpolation: the function `slerp(q0, q1, t)` and the method
    `slerp_to()`.
- `cgl.color` provides `Color`, a frozen RGB dataclass with components in
  [0, 1].
  - `Color.WHITE` and `Color.BLACK` are predefined.
  - `from_bytes()` builds a colour from three 0–255 values.
  - `from_hex()` parses text such as `"#ff8000"`.
  - `to_hex()` writes the hex digits of each channel without zero padding.
- `cgl.base64` provides `encode(data)` and `decode(text)`. Decoding is lenient
  and stops at the first `=` or at the first character outside the alphabet.
- `cgl.misc` provides the following:
  - constants: `PI`, `EPS_D`, `EPS_F`, `INF_D` and `INF_F`
  - functions: `radians`, `degrees` and `clamp`
  - `resolve_path`, which returns a real absolute path and raises
    `FileNotFoundError` for a path that does not exist
  - input enums: `MouseButton`, `Key`, `EventType` and `Modifier`
- `cgl.osdtext` provides `OSDText`, which holds `OSDLine` entries. Each entry
  records an id, an anchor, text, a size and a colour.
  - Lines are managed with `add_line()`, `del_line()`, `set_anchor()`,
    `set_text()`, `set_size()`, `set_color()` and `clear()`. An unknown line
    id is ignored.
  - Sizes are doubled when `use_hdpi` is set.
  - `render()` passes each line, with the scale factors set by `resize()`,
    to an optional `draw` callable. It returns copies of the lines in order.
- `cgl.renderer` provides the abstract `Renderer`.
  - Subclasses implement `init()`, `render()`, `resize()`, `name()` and
    `info()`.
  - The default event methods only record input state: `cursor_position`,
    `scroll_offset`, `mouse_buttons_down` and `keys_down`.
- `cgl.examples` provides sample renderers:
  - `EventDisplay` shows the last key event.
  - `TextDrawer` shows a line of text that follows the cursor.
  - `TriangleDrawer` shows a triangle that the R key toggles.
  - `TemplateRenderer` combines an orbiting `Camera`, the `coordinate_lines()`
    axes and grid, and a text line.
  - Their `render()` methods return what should be drawn: text lines,
    triangles, or a `TemplateFrame`.

## What it does not do

cgl opens no window and has no viewer or event loop. It makes no OpenGL
calls and does not rasterise fonts. Renderers and `OSDText` only compute
state and describe what to draw. Getting that onto a screen is the job of
the caller's own code, for example through the `OSDText.draw` callable.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Rotate a vector with a quaternion:

```python
from cgl.vector import Vector3D
from cgl.quaternion import Quaternion
from cgl.misc import radians

q = Quaternion()
q.from_axis_angle(Vector3D(0, 0, 1), radians(90.0))
print(q.rotated_vector(Vector3D(1, 0, 0)))   # approximately Vector3D(0, 1, 0)
```

Invert a matrix:

```python
from cgl.matrix import Matrix3x3

m = Matrix3x3([2, 0, 0, 0, 4, 0, 0, 0, 8])
print(m.det())          # 64.0
print(m.inv()[1, 1])    # 0.25
```

Manage on-screen text:

```python
from cgl.osdtext import OSDText
from cgl.color import Color

osd = OSDText(use_hdpi=False)
osd.resize(640, 480)
line = osd.add_line(-0.95, 0.85, "The Quick Brown Fox", 26, Color(1, 0, 0))
osd.set_text(line, "Jumps Over The Lazy Dog.")
for entry in osd:
    print(entry.id, entry.text, entry.size)
```