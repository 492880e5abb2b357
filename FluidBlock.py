import numpy as np

from GridBlock import Block


class Ids:
    """
    Ragged lists of integers (e.g. the vertex ids of each cell) stored in one
    flat array, with offsets marking where each list starts.
    ids[i] is a view of the i'th list.
    """

    def __init__(self, id_lists):
        lengths = [len(ids) for ids in id_lists]
        self.offsets_ = np.zeros(len(lengths) + 1, dtype=np.int64)
        self.offsets_[1:] = np.cumsum(lengths, dtype=np.int64)
        self.ids_ = np.zeros(self.offsets_[-1], dtype=np.int64)
        for i, ids in enumerate(id_lists):
            self.ids_[self.offsets_[i]:self.offsets_[i + 1]] = ids

    def __getitem__(self, index):
        if not 0 <= index < len(self):
            raise IndexError(f"Index {index} out of range for {len(self)} id lists")
        return self.ids_[self.offsets_[index]:self.offsets_[index + 1]]

    def __len__(self):
        return len(self.offsets_) - 1

    def get_flat(self):
        return self.ids_

    def get_offsets(self):
        return self.offsets_

    def to_lists(self):
        return [self[i].tolist() for i in range(len(self))]

    def __repr__(self):
        return f"Ids(# lists={len(self)}, # ids={len(self.ids_)})"


def _vectors_to_array(vectors):
    if not vectors:
        return np.zeros((0, 3))
    return np.array([vector.to_array() for vector in vectors])


class FluidBlock:
    """
    Array based copy of a block's geometry, laid out for a finite volume solver.
    Vectors are (n, 3) arrays, per-interface and per-cell scalars are 1D arrays
    and per-cell id lists are Ids.
    """

    def __init__(self, block):
        """
        Initialize a FluidBlock.

        Args:
            block (Block): The block to copy the geometry from
        """
        if not isinstance(block, Block):
            raise TypeError("block must be an instance of Block")

        self.id_ = block.get_id()
        self.dimensions_ = block.get_dimensions()

        self.vertexPositions_ = _vectors_to_array([vertex.get_pos() for vertex in block.get_vertices()])

        interfaces = block.get_interfaces()
        self.interfaceVertices_ = Ids([interface.get_vertex_ids() for interface in interfaces])
        self.interfaceAreas_ = np.array([interface.get_area() for interface in interfaces], dtype=float)
        self.interfaceNormals_ = _vectors_to_array([interface.get_normal() for interface in interfaces])
        self.interfaceTangent1_ = _vectors_to_array([interface.get_tangent1() for interface in interfaces])
        self.interfaceTangent2_ = _vectors_to_array([interface.get_tangent2() for interface in interfaces])
        self.interfaceCentroids_ = _vectors_to_array([interface.get_centroid() for interface in interfaces])
        self.interfaceShapes_ = [interface.get_shape() for interface in interfaces]

        cells = block.get_cells()
        self.cellVertices_ = Ids([cell.get_vertex_ids() for cell in cells])
        self.cellInterfaces_ = Ids([cell.get_interface_ids() for cell in cells])
        # +1 where the interface normal points into the cell, -1 where it points out
        self.cellInterfaceDirections_ = Ids([
            [cellFace.get_direction().value for cellFace in cell.get_cell_faces()]
            for cell in cells
        ])
        self.cellVolumes_ = np.array([cell.get_volume() for cell in cells], dtype=float)
        self.cellCentroids_ = _vectors_to_array([cell.get_centroid() for cell in cells])
        self.cellShapes_ = [cell.get_shape() for cell in cells]

        self.boundaries_ = {
            tag: np.array(interfaceIds, dtype=np.int64)
            for tag, interfaceIds in block.get_boundaries().items()
        }

    def get_id(self):
        return self.id_

    def get_dimensions(self):
        return self.dimensions_

    def get_num_vertices(self):
        return self.vertexPositions_.shape[0]

    def get_num_interfaces(self):
        return len(self.interfaceShapes_)

    def get_num_cells(self):
        return len(self.cellShapes_)

    def get_vertex_positions(self):
        """(n, 3) array of vertex positions, may be updated in place if the grid moves"""
        return self.vertexPositions_

    def get_interface_vertices(self):
        return self.interfaceVertices_

    def get_interface_areas(self):
        return self.interfaceAreas_

    def get_interface_normals(self):
        return self.interfaceNormals_

    def get_interface_tangent1(self):
        return self.interfaceTangent1_

    def get_interface_tangent2(self):
        return self.interfaceTangent2_

    def get_interface_centroids(self):
        return self.interfaceCentroids_

    def get_interface_shapes(self):
        return self.interfaceShapes_

    def get_cell_vertices(self):
        return self.cellVertices_

    def get_cell_interfaces(self):
        return self.cellInterfaces_

    def get_cell_interface_directions(self):
        return self.cellInterfaceDirections_

    def get_cell_volumes(self):
        return self.cellVolumes_

    def get_cell_centroids(self):
        return self.cellCentroids_

    def get_cell_shapes(self):
        return self.cellShapes_

    def get_boundaries(self):
        return self.boundaries_

    def __repr__(self):
        return (
            f"FluidBlock(\n"
            f"  Id: {self.id_},\n"
            f"  Dimensions: {self.dimensions_},\n"
            f"  Vertices: {self.get_num_vertices()},\n"
            f"  Interfaces: {self.get_num_interfaces()},\n"
            f"  Cells: {self.get_num_cells()},\n"
            f"  Boundaries: {list(self.boundaries_.keys())}\n"
            f")"
        )
