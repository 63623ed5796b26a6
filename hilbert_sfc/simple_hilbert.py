"""
This module contains simple implementation of the Hilbert Curve on 2D (2^n * 2^n) structured grids,
both as the cell <-> distance conversion of a single cell and as whole-grid orderings.

A cell (x, y) is addressed as (row, column) of a (n, n) array, its flat index is x * n + y.
"""

import numpy as np
import matplotlib.pyplot as plt


def rotation(n, rx, ry, x, y):
    '''
    Rotate/flip a cell inside a sub-square of size n, shared by xy2d() and d2xy().

    Input:
    ---
    n: [int] the size of the sub-square (the current quadrant scale).
    rx, ry: [int] the quadrant bits at this scale.
    x, y: [int] the cell inside the sub-square.

    Output:
    ---
    (x, y): [tuple of int] the transformed cell.
    '''
    if ry == 0:
        if rx == 1:
            x = n - 1 - x
            y = n - 1 - y
        x, y = y, x
    return x, y


def xy2d(n, x, y):
    '''
    Convert a cell (x, y) on a n * n grid to its distance d along the Hilbert curve.

    n must be a power of 2 and 0 <= x, y < n, these are not checked:
    violating them gives an undefined (but still integer) result.

    Input:
    ---
    n: [int] the size of the square grid.
    x, y: [int] the row and column of the cell.

    Output:
    ---
    d: [int] the distance along the curve, in [0, n^2 - 1].
    '''
    d = 0
    s = n // 2
    while s > 0:
        # quadrant bits, column first
        rx = 1 if (y & s) > 0 else 0
        ry = 1 if (x & s) > 0 else 0
        d += s * s * ((3 * rx) ^ ry)
        x, y = rotation(s, rx, ry, x, y)
        s //= 2
    return d


def d2xy(n, d):
    '''
    Convert a distance d along the Hilbert curve to the cell (x, y) on a n * n grid,
    the exact inverse of xy2d().

    n must be a power of 2 and 0 <= d < n^2, these are not checked.

    Input:
    ---
    n: [int] the size of the square grid.
    d: [int] the distance along the curve.

    Output:
    ---
    (x, y): [tuple of int] the row and column of the cell.
    '''
    x = y = 0
    t = d
    s = 1
    while s < n:
        rx = 1 & (t // 2)
        ry = 1 & (t ^ rx)
        # undo the parent rotations before placing the quadrant
        x, y = rotation(s, rx, ry, x, y)
        x += s * ry
        y += s * rx
        t //= 4
        s *= 2
    return x, y


def check_grid_order(n):
    '''
    Check n is a valid grid size (a positive power of 2).

    Output:
    ---
    n_level: [int] log2(n).
    '''
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise ValueError("square grid size should be an integer, got %r!" % (n,))
    n = int(n)
    if n <= 0 or n & (n - 1) != 0:
        raise ValueError("square grid size %d not a power of 2!" % n)
    return n.bit_length() - 1


########################################## vectorised versions for whole grids ###################################################
def rotation_array(n, rx, ry, x, y):
    '''
    Elementwise version of rotation(), for integer arrays rx, ry, x, y.
    '''
    flip = (ry == 0) & (rx == 1)
    x = np.where(flip, n - 1 - x, x)
    y = np.where(flip, n - 1 - y, y)
    swap = (ry == 0)
    return np.where(swap, y, x), np.where(swap, x, y)


def xy2d_array(n, x, y):
    '''
    Elementwise version of xy2d(), x and y are integer arrays of the same shape.
    Computed in int64, so n should not exceed 2^31.
    '''
    x = np.asarray(x, dtype=np.int64)
    y = np.asarray(y, dtype=np.int64)
    d = np.zeros(np.broadcast(x, y).shape, dtype=np.int64)
    s = n // 2
    while s > 0:
        rx = ((y & s) > 0).astype(np.int64)
        ry = ((x & s) > 0).astype(np.int64)
        d += s * s * ((3 * rx) ^ ry)
        x, y = rotation_array(s, rx, ry, x, y)
        s //= 2
    return d


def d2xy_array(n, d):
    '''
    Elementwise version of d2xy(), d is an integer array.
    Computed in int64, so n should not exceed 2^31.
    '''
    t = np.array(d, dtype=np.int64)
    x = np.zeros_like(t)
    y = np.zeros_like(t)
    s = 1
    while s < n:
        rx = 1 & (t // 2)
        ry = 1 & (t ^ rx)
        x, y = rotation_array(s, rx, ry, x, y)
        x = x + s * ry
        y = y + s * rx
        t //= 4
        s *= 2
    return x, y


def hilbert_space_filling_curve(num = 4, ver_bose = False, ver_bose_contour = False):
    '''
    This function generates the Hilbert space-filling curve on a (2^n * 2^n) grid.

    Input:
    ---
    num: [int] the size of the square grid.
    ver_bose: [bool] If true, return a plot, view the space-filling curve directly.
    ver_bose_contour: [bool]  If true, return a contour plot of the indexing of the space-filling curve directly.

    Output:
    ---
    ordering: [1d-array] of shape (num^2, ), the flat index (x * num + y) of the cell visited at each distance.
    '''
    check_grid_order(num)

    x_coords, y_coords = d2xy_array(num, np.arange(num ** 2))
    ordering = x_coords * num + y_coords

    if ver_bose:

        fig, ax = plt.subplots(figsize=(20,20))
        ax.set_title("Hilbert space-filling curve on a %d * %d square grid" % (num, num), fontsize = 25)

        ax.plot(x_coords, y_coords, color = "black")

        plt.show()

    if ver_bose_contour:

        fig, ax = plt.subplots(figsize=(20,20))
        ax.set_title("Hilbert space-filling curve on a %d * %d square grid" % (num, num), fontsize = 25)
        xx, yy = np.meshgrid(np.arange(0, num), np.arange(0, num))

        cset = plt.contourf(xx, yy, inverse_ordering(ordering).reshape(num, num).T, levels=min(num ** 2, 256), cmap=None)
        fig.colorbar(cset, shrink=0.5, aspect=5)

        plt.show()

    return ordering


def inverse_ordering(order_index):
    '''
    The distance along the curve of every flat cell index.
    '''
    return np.argsort(order_index)
