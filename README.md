# implicitplot

Tools for tracing implicit polynomial curves `P(x, y) = 0` in the plane.

The package samples a polynomial along horizontal and vertical lines and finds
roots with Newton's method. It stores the points in a quadtree and links them
into chains that follow the curve. It can estimate the curve's curvature at a
point. A small camera model converts between world and screen coordinates. It
pans and zooms in response to mouse, scroll and key events that you pass to it.

## Installation

```
pip install .
```

Install the test extra to run the tests:

```
pip install .[test]
pytest
```

## Modules

- `implicitplot.point`: `Point`, a 2-D point with `x`, `y` and `previous` / `next`
  links. `Point.dist(other)` returns the Euclidean distance, or `-1.0` when
  `other` is `None`.
- `implicitplot.polynomial`: `Term`, `Polynomial` and `power`.
- `implicitplot.quadtree`: `Quadtree`, `nearest_neighbour` and `link_unlinked`.
- `implicitplot.camera`: `Camera` and the event enums `MouseButton`, `Action`
  and `Key`.

## Building a polynomial

```python
from implicitplot.polynomial import Polynomial, Term

# x^2 + y^2 - 1
circle = Polynomial()
circle.add_term(Term(2, 0, 1.0))
circle.add_term(Term(0, 2, 1.0))
circle.add_term(Term(0, 0, -1.0))

circle.evaluate(1.0, 0.0)                 # 0.0
circle.derivative_x().evaluate(0.5, 0.0)  # 1.0
print(circle.format("P"))
```

`Polynomial(terms)` also accepts an iterable of terms. A term with a zero
coefficient is dropped when it is added. Like terms are not merged. Polynomials
support `+` and `*`, and `len()` and iteration over their terms:

```python
product = circle * circle
total = circle + circle
```

Other operations:

- `derivative_x()` and `derivative_y()` return partial derivatives.
- `substitute_x(x)` and `substitute_y(y)` fix one variable and return a
  polynomial in the other.
- `evaluate_x(x)` and `evaluate_y(y)` evaluate a polynomial in one variable.
- `power(x, n)` raises to a non-negative integer power. A negative `n` raises
  `ValueError`.

## Finding points on the curve

`roots_x(y, x_min, x_max, iterations, samples, precision, scale)` fixes `y` and
runs Newton's method from `samples + 1` evenly spaced starting values. A root is
kept only when it converged and lies strictly inside `(x_min, x_max)`. A
converged root means the last step moved by less than `precision`. The same
root can appear more than once. `roots_y` does the same with `x` fixed. The
returned points are multiplied by `scale`. A non-positive `samples` raises
`ValueError`.

`newton_root_x` and `newton_root_y` run a single Newton search. They return
`nan` when the search does not converge or meets a zero derivative.

## Quadtree and curvature

`build_quadtree` samples the rectangle in both directions and removes
near-duplicate points. It then subdivides space and links neighbouring points
into chains. It also attaches the derivatives that curvature needs:

```python
tree = circle.build_quadtree(
    x_max=2.0, x_min=-2.0, y_max=2.0, y_min=-2.0,
    iterations=20, samples=20, points_per_node=10,
    precision=1e-6, scale=1.0,
)
tree.curvature_at(1.0, 0.0)
```

`curvature_at` raises `ValueError` if no derivatives are attached. It returns
`nan` where the gradient is zero. To use a `Quadtree(subdivision, max_points)`
directly, call `add_point` or `extend`, then `remove_duplicates(precision)`,
`divide_space()` and `link_points(unlinked, max_step)`. `Polynomial.attach_curvature`
attaches the derivatives. `subdivision` must be at least 4.

Each point has `previous` and `next` links to its neighbours along the curve.

## Camera

```python
from implicitplot.camera import Action, Camera, Key, MouseButton

camera = Camera()
camera.on_key(Key.RIGHT, Action.PRESS)
camera.on_scroll(0.0, 1.0)  # zoom in by 5 %
camera.on_mouse_button(MouseButton.LEFT, Action.PRESS, 100.0, 100.0)
camera.on_cursor_move(80.0, 100.0)
screen_x = camera.world_to_camera_x(1.0)
world_x = camera.camera_to_world_x(screen_x)  # 1.0
```

Screen units are 20 times world units at zoom 1. An arrow key moves the view by
`10 / zoom` on each press or repeat.

## What the package does not do

The package opens no window and draws nothing. It has no command-line program.
The `Camera` only keeps view state. Your own windowing or drawing code must send
it events and use its coordinate conversions to render the linked points.