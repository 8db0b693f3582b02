import numpy as np

from odekit.integrators.output import _AppendWriter, _FixedGridWriter, make_writer


def linear_dense(x, y, f, h, xnext, out):
    out[:] = y + (xnext - x) * f[0]


def test_writer_selection():
    y0 = np.array([1.0])
    assert isinstance(make_writer(np.array([0.0, 1.0]), y0), _AppendWriter)
    assert isinstance(make_writer(np.array([0.0, 0.5, 1.0]), y0), _FixedGridWriter)


def test_fixed_grid_writer_fills_points_inside_step():
    xs = np.array([0.0, 0.25, 0.5, 0.75, 1.0])
    writer = _FixedGridWriter(xs, np.array([0.0]))
    f = np.array([[2.0]])

    writer.emit(0.0, np.array([0.0]), f, 0.6, 0.6, np.array([1.2]), linear_dense)
    ys, _ = writer.partial()
    np.testing.assert_allclose(ys[:, 0], [0.0, 0.5, 1.0])

    writer.emit(0.6, np.array([1.2]), f, 0.4, 1.0, np.array([2.0]), linear_dense)
    ys, xs_out = writer.result()
    np.testing.assert_allclose(ys[:, 0], [0.0, 0.5, 1.0, 1.5, 2.0])
    np.testing.assert_array_equal(xs_out, xs)


def test_fixed_grid_writer_copies_step_ends():
    xs = np.array([0.0, 0.5, 1.0])
    writer = _FixedGridWriter(xs, np.array([0.0]))

    def never(*args):
        raise AssertionError("dense output should not be used")

    writer.emit(0.0, np.array([0.0]), None, 0.5, 0.5, np.array([3.0]), never)
    ys, xs_out = writer.partial()
    np.testing.assert_array_equal(ys, [[0.0], [3.0]])
    np.testing.assert_array_equal(xs_out, [0.0, 0.5])


def test_append_writer_keeps_copies():
    writer = _AppendWriter(0.0, np.array([1.0, 2.0]))
    ynew = np.array([3.0, 4.0])
    writer.emit(0.0, None, None, 0.1, 0.1, ynew, linear_dense)
    ynew[:] = 0.0

    ys, xs = writer.result()
    np.testing.assert_array_equal(ys, [[1.0, 2.0], [3.0, 4.0]])
    np.testing.assert_array_equal(xs, [0.0, 0.1])
