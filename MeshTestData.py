import os


# 3x3 quadrilaterals on the unit lattice [0, 3] x [0, 3], vertex id = 4*y + x
SQUARE_SU2 = """\
% 3 by 3 square of quadrilaterals
NDIME=2
NPOIN=16
0.0 0.0 0
1.0 0.0 1
2.0 0.0 2
3.0 0.0 3
0.0 1.0 4
1.0 1.0 5
2.0 1.0 6
3.0 1.0 7
0.0 2.0 8
1.0 2.0 9
2.0 2.0 10
3.0 2.0 11
0.0 3.0 12
1.0 3.0 13
2.0 3.0 14
3.0 3.0 15
NELEM=9
9 0 1 5 4 0
9 1 2 6 5 1
9 2 3 7 6 2
9 4 5 9 8 3
9 5 6 10 9 4
9 6 7 11 10 5
9 8 9 13 12 6
9 9 10 14 13 7
9 10 11 15 14 8
NMARK=4
MARKER_TAG=slip_wall_bottom
MARKER_ELEMS=3
3 0 1
3 1 2
3 2 3
MARKER_TAG=outflow
MARKER_ELEMS=3
3 3 7
3 7 11
3 11 15
MARKER_TAG=slip_wall_top
MARKER_ELEMS=3
3 12 13
3 13 14
3 14 15
MARKER_TAG=inflow
MARKER_ELEMS=3
3 0 4
3 4 8
3 8 12
"""

# a single triangle with one boundary edge
TRIANGLE_SU2 = """\
NDIME=2
NPOIN=3
0.0 0.0
1.0 0.0
0.5 1.0
NELEM=1
5 0 1 2
NMARK=1
MARKER_TAG=wall
MARKER_ELEMS=1
3 0 1
"""


def write_grid_file(directory, file_name, contents):
    """Write contents to directory/file_name and return the path"""
    path = os.path.join(directory, file_name)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(contents)
    return path
