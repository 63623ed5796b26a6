from hilbert_sfc.simple_hilbert import *
import numpy as np  # Numpy
import scipy.sparse as sp
import matplotlib.pyplot as plt


def get_hilbert_curves(size, num):
    '''
    Get the hilbert_curves on a structured square grid of size [size]^ 2.
    ---
    size: [int] the size of the square grid.
    num: [int] the number of space-filling curves want to generate, 1 or 2.
         The second curve is the first one mirrored across the main diagonal.
    ---
    Returns:

    curve_lists: [list of 1d-arrays] the list of space-filling curve orderings, of shape (number of curves, number of Nodes).
    inv_lists: [list of 1d-arrays] the list of inverse space-filling curve orderings, of shape (number of curves, number of Nodes).
    '''

    Hilbert_index = hilbert_space_filling_curve(size)
    invert_Hilbert_index = inverse_ordering(Hilbert_index)
    if num == 1: return [Hilbert_index], [invert_Hilbert_index]
    elif num == 2:
        Hilbert_index_2 = (Hilbert_index % size) * size + Hilbert_index // size
        invert_Hilbert_index_2 = inverse_ordering(Hilbert_index_2)
        return [Hilbert_index, Hilbert_index_2], [invert_Hilbert_index, invert_Hilbert_index_2]
    else:
        raise ValueError("only 1 or 2 hilbert curves can be generated on a square grid, got %d!" % num)

def sparse_square_grid(N):
    '''
    Get the CSR connectivity matrix of a square grid, in flat indexing (x * N + y).
    ---
    N: [int] the size of the square grid.
    ---
    Returns:

    K: [scipy.sparse.csr_matrix] of shape (N^2, N^2), 1 for each cell and its 4 direct neighbours.
    '''

    check_grid_order(N)
    if N == 1: return sp.csr_matrix(np.ones((1, 1)))
    n = N ** 2

    offsets = [-N, -1, 0, 1, N]
    diags = []
    # coefficient in front of u_{i-N}:
    diags.append(np.ones(n-N))
    # coefficient in front of u_{i-1}:
    diags.append(np.ones(n-1))
    # main diagonal
    diags.append(np.ones(n))
    # coefficient in front of u_{i+1}:
    diags.append(diags[1])
    # coefficient in front of u_{i+N}:
    diags.append(diags[0])

    K = sp.diags(diags, offsets, shape=(n, n), format='csr')

    # no wrap-around between the end of a row and the start of the next one
    for i in range(N, n, N):
        K[i, i-1] = 0
        K[i-1, i] = 0
    K.eliminate_zeros()

    return K

def csr_to_edges(K, direct = False):
    '''
    Convert a CSR connectivity matrix to a 2d-array of Edges, remove self-loop.
    ---
    K: [scipy.sparse matrix] the connectivity matrix.
    direct: [boolean] Whether the graph is directed or undirected, default is undirected.
    ---
    Returns:

    edge_list: [2d-array] The list of edges, shape of (number of Edges, 2).
    '''

    coo_1 = sp.coo_matrix(K)
    adjency_indice = (coo_1.row != coo_1.col)
    edge_list = (np.vstack((coo_1.row, coo_1.col)).T)[adjency_indice]
    if not direct: edge_list = np.sort(edge_list, axis = -1)
    return np.unique(edge_list, axis = 0)

def filled_edges_for_sfcs(edge_list, sfc_orderings):
    '''
    Obtain the number of edges filled by the sfc_list of an abstract graph.
    ---
    edge_list: [2d-array] list of edges, shape of (Number of Edges, 2)
    sfc_orderings: [list of 1d-arrays] list of space-filling orderings, shape of (Number of sfcs, Number of Nodes)
    ---
    Returns:

    filled: [list of int] the number of graph edges covered by the first 1, 2, ... curves,
            also printed as (edges_filled) / (total edges at the graph).
    '''
    graph_edges = set(tuple(x) for x in np.asarray(edge_list).tolist())
    exist_edges = set()
    filled = []

    for cnt, sfc_num in enumerate(sfc_orderings, 1):
        vertices_1 = sfc_num[:-1]
        vertices_2 = sfc_num[1:]
        edges_sfc = np.sort(np.vstack((vertices_1, vertices_2)).T, axis = -1)
        exist_edges |= set(tuple(x) for x in edges_sfc.tolist())
        common_edges = exist_edges & graph_edges
        filled.append(len(common_edges))
        print('filled adjacencies by the %d sfcs : %d / %d' % (cnt, len(common_edges), len(edge_list)))

    return filled

def _finish_plot(save_path):
    if save_path is not None:
        plt.savefig(save_path)
        plt.close()
    else:
        plt.show()

def plot_trace_structured_2D(sfc_ordering, levels = 16, save_path = None):
    '''
    Plot the trace of index ordering for a structured square grid.
    ---
    sfc_ordering: [1d-array] the space-filling orderings on a square grid.
    levels: [int] the number of colours the trace is split into, default is 16.
    save_path: [str or NoneType] where to save the figure, if None the plot is shown.
    ---
    Returns:

    Nonetype: The plot of the index ordering on a structured square grid.
    '''
    num = int(np.sqrt(len(sfc_ordering)))
    x_coords = sfc_ordering // num
    y_coords = sfc_ordering % num
    fig, ax = plt.subplots(figsize=(15, 15))
    cuts = np.linspace(0, len(sfc_ordering), levels + 1).astype(np.int32)
    for i in range(levels):
        # overlap by one node so the pieces join up
        end = min(cuts[i+1] + 1, len(sfc_ordering))
        ax.plot(x_coords[cuts[i]:end], y_coords[cuts[i]:end], '-')
    plt.axis('off')
    _finish_plot(save_path)

def plot_contour_structured_2D(sfc_ordering, levels = 256, cmap = None, save_path = None):
    '''
    Generate the contour plot of the index ordering for a structured square grid.
    ---
    sfc_ordering: [1d-array] the space-filling orderings on a square grid.
    levels: [int] the colorbar level for the index ordering, default is 256.
    cmap: [cmap] the colormap for the contour plot, default is None (i.e. viridis)
    save_path: [str or NoneType] where to save the figure, if None the plot is shown.
    ---
    Returns:

    Nonetype: The contour plot of the index ordering on a structured square grid.
    '''
    num = int(np.sqrt(len(sfc_ordering)))
    fig, ax = plt.subplots(figsize=(15, 15))
    xx, yy = np.meshgrid(np.arange(0, num), np.arange(0, num))
    cset = plt.contourf(xx, yy, inverse_ordering(sfc_ordering).reshape(num, num).T, levels=levels, cmap=cmap)
    fig.colorbar(cset, shrink=0.5, aspect=5)
    ax.axis('off')
    _finish_plot(save_path)
