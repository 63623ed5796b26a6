from hilbert_sfc import *
import sys

if(len(sys.argv) > 1):
   parameters = read_parameters(sys.argv[1])
else:
   parameters = read_parameters()

print(parameters)

size = int(parameters['size'])
sfc_nums = int(parameters['sfc_nums'])
levels = int(parameters['levels'])

curve_lists, inv_lists = get_hilbert_curves(size, sfc_nums)

# every step of a hilbert curve moves to a direct neighbour
steps = curve_step_lengths(curve_lists[0], size)
print('step lengths of the hilbert curve: min %.1f, max %.1f' % (steps.min(), steps.max()))

edges = csr_to_edges(sparse_square_grid(size))
filled_edges_for_sfcs(edges, curve_lists)

if parameters['save_path'] != 'None':
   save_path = parameters['save_path']
   plot_trace_structured_2D(curve_lists[0], levels = levels, save_path = save_path + '_trace.png')
   if parameters['contour'] == 'True':
      plot_contour_structured_2D(curve_lists[0], save_path = save_path + '_contour.png')
else:
   plot_trace_structured_2D(curve_lists[0], levels = levels)
   if parameters['contour'] == 'True':
      plot_contour_structured_2D(curve_lists[0])
