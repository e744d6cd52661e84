# miltoncore

Pieces of an infinite-canvas paint program that need no graphics context:
the vector and rectangle arithmetic it relies on, the vertex data for the
overlays drawn on top of the canvas, the rules that decide which strokes are
drawn or dropped from the GPU, the arithmetic used when reading a rendered
canvas back for export, and a tool that bundles GLSL shader files into a C
header.

Pure Python, no dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `miltoncore.vector` | `Vec2`, `Vec3`, `Vec4` and `lerp` |
| `miltoncore.geometry` | `Rect`, `WallTime` and math helpers (`distance`, `orientation`, `intersect_line_segments`, `string_hash`, ...) |
| `miltoncore.overlay` | vertices for the brush outline, the exporter rectangle and the color picker quad |
| `miltoncore.clipping` | visibility tests for strokes and stroke buckets, rotation matrices, blur kernel size |
| `miltoncore.readback` | `FramebufferStatus`, status messages, row flipping and export view arithmetic |
| `miltoncore.shadergen` | turns GLSL files into C string declarations |

## Examples

Vectors and rectangles:

```python
from miltoncore.vector import Vec2, lerp
from miltoncore.geometry import Rect, distance

a = Vec2(0.0, 0.0)
b = Vec2(3.0, 4.0)
distance(a, b)          # 5.0
lerp(a, b, 0.5)         # Vec2(x=1.5, y=2.0)

r = Rect.from_xywh(10, 20, 30, 40)
r.area()                # 1200
r.contains(15, 25)      # True
tiles = r.split(16, 16) # 6 tiles, clipped to the rectangle
```

Integer division on `Vec2` and in `Rect` truncates toward zero.
`Rect.contains` treats the right and bottom edges as outside.

Overlay geometry in clip space (`[-1, 1]` on both axes, y pointing up):

```python
from miltoncore.overlay import exporter_rect_vertices, outline_indices

verts = exporter_rect_vertices(Vec2(100, 100), Vec2(300, 200), 800, 600)
indices = outline_indices()   # 24 indices, two triangles per side
```

Clipping and readback helpers:

```python
from miltoncore.clipping import bucket_counts, is_outside
from miltoncore.readback import flip_rows, framebuffer_status_message, FramebufferStatus

bucket_counts(5, 2)                   # [2, 2, 1]
flip_rows([1, 2, 3, 4], 2, 2)         # [3, 4, 1, 2]
framebuffer_status_message(FramebufferStatus.UNSUPPORTED)  # "Unsupported Framebuffer"
```

## Generating shader headers

`miltoncore-shadergen` reads the program's GLSL files from `src/` (and an FXAA
prelude from `third_party/`) and writes them as C string declarations named
`g_<name>_<v|f>`, one per shader, with a prelude file prepended to some of
them. Double quotes in shader text become `Q`. Run it from the directory that
holds the `src/` folder:

```
miltoncore-shadergen
miltoncore-shadergen --output build/shaders.gen.h
```

The default output is `src/shaders.gen.h`. The same work is available from
Python through `miltoncore.shadergen.generate`, `render_shader` and
`shader_variable_name`; `errno_description` turns an errno value into text.

## What this package does not do

It does not open a window, talk to OpenGL or draw anything: it produces the
numbers a renderer would upload, not the rendering itself. It does not build
triangle meshes from strokes, and it holds no canvas, layers, brushes or file
format for saving paintings.