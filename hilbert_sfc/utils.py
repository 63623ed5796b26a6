"""
This module contains utility functions for laying out structured-grid data along the Hilbert curve.
"""

import re
import numpy as np
from hilbert_sfc.simple_hilbert import check_grid_order, hilbert_space_filling_curve, inverse_ordering


def read_parameters(setting_file = 'parameters.ini'):
    '''
    This function reads all the parameter settings in a setting file 'parameters.ini', interact with plot_hilbert.py.
    The first line of the file is a header and is skipped, every other non-empty line is 'key = value'.

    Output:
    ---
    list_p: [dict] the parameters, values kept as strings.
    '''
    with open(setting_file, 'r') as f:
        lines = f.readlines()
    # create a dicitionary to store the parameters
    list_p = {}

    for line in lines[1:]:
        line = line.strip('\n')
        if not line.strip() or line.lstrip().startswith('#'): continue
        ss = re.split('=', line)
        list_p[ss[0].strip()] = ss[-1].strip()

    return list_p

def ordering_tensor(tensor, ordering):
    '''
    This function orders the tensor in the last axis with a provided ordering.

    Input:
    ---
    tensor: [nd-array] the data, of shape [..., number of Nodes]
    ordering: [1d-array] the (sfc) ordering of the Nodes.

    Output:
    ---
    tensor: [nd-array] the ordered data.
    '''
    return tensor[..., ordering]

def _square_size(field):
    if field.ndim < 2 or field.shape[-1] != field.shape[-2]:
        raise ValueError("expected data on a square grid in the last two axes, got shape %s!" % (field.shape,))
    check_grid_order(field.shape[-1])
    return field.shape[-1]

def grid_to_curve(field, ordering = None):
    '''
    Lay data on a square grid out along the Hilbert curve.

    Input:
    ---
    field: [nd-array] of shape [..., n, n], n a power of 2.
    ordering: [1d-array or NoneType] the sfc ordering to use, default is hilbert_space_filling_curve(n).

    Output:
    ---
    sequence: [nd-array] of shape [..., n^2], element d is the value at distance d along the curve.
    '''
    field = np.asarray(field)
    num = _square_size(field)
    if ordering is None: ordering = hilbert_space_filling_curve(num)
    return ordering_tensor(field.reshape(field.shape[:-2] + (num ** 2,)), ordering)

def curve_to_grid(sequence, ordering = None):
    '''
    The inverse of grid_to_curve().

    Input:
    ---
    sequence: [nd-array] of shape [..., n^2], n a power of 2.
    ordering: [1d-array or NoneType] the sfc ordering used, default is hilbert_space_filling_curve(n).

    Output:
    ---
    field: [nd-array] of shape [..., n, n].
    '''
    sequence = np.asarray(sequence)
    num = int(round(np.sqrt(sequence.shape[-1])))
    if num ** 2 != sequence.shape[-1]:
        raise ValueError("length %d is not the number of cells of a square grid!" % sequence.shape[-1])
    check_grid_order(num)
    if ordering is None: ordering = hilbert_space_filling_curve(num)
    return ordering_tensor(sequence, inverse_ordering(ordering)).reshape(sequence.shape[:-1] + (num, num))

def find_plus_neigh(ordering):
    '''
    This function returns the upper neighbour for a sfc ordering, the last Node is its own neighbour.

    Input:
    ---
    ordering: [1d-array] the (sfc) ordering of the Nodes.

    Return:
    ---
    plus_neigh: [1d-array] the upper-neighbour ordering.
    '''
    plus_neigh = np.zeros_like(ordering)
    plus_neigh[:-1] = ordering[1:]
    plus_neigh[-1] = ordering[-1]
    return plus_neigh

def find_minus_neigh(ordering):
    '''
    This function returns the lower neighbour for a sfc ordering, the first Node is its own neighbour.

    Input:
    ---
    ordering: [1d-array] the (sfc) ordering of the Nodes.

    Return:
    ---
    minus_neigh: [1d-array] the lower-neighbour ordering.
    '''
    minus_neigh = np.zeros_like(ordering)
    minus_neigh[1:] = ordering[:-1]
    minus_neigh[0] = ordering[0]
    return minus_neigh

def curve_step_lengths(ordering, size):
    '''
    Euclidean length of every step of a sfc ordering on a size * size grid.

    Output:
    ---
    lengths: [1d-array] of shape (size^2 - 1, ), all 1 for a continuous curve.
    '''
    ordering = np.asarray(ordering)
    x_coords = ordering // size
    y_coords = ordering % size
    plus_neigh = find_plus_neigh(np.arange(len(ordering)))
    return np.hypot(x_coords[plus_neigh] - x_coords, y_coords[plus_neigh] - y_coords)[:-1]
