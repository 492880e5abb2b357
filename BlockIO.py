import os

from Vector3 import Vector3
from GridProviders import VertexProvider, InterfaceProvider, CellProvider, BlockProvider
from MeshBlock import read_block, write_block, block_file_name
from FluidBlock import FluidBlock


class VertexIO(VertexProvider):
    """Light weight copy of a vertex position"""

    def __init__(self, x, y, z, vertex_id):
        self.pos_ = Vector3(x, y, z)
        self.id_ = int(vertex_id)

    def get_pos(self):
        return self.pos_

    def get_id(self):
        return self.id_


class InterfaceIO(InterfaceProvider):
    """Light weight copy of an interface's shape and vertices"""

    def __init__(self, interface_id, shape, vertex_ids):
        self.id_ = int(interface_id)
        self.shape_ = shape
        self.vertexIds_ = [int(vertexId) for vertexId in vertex_ids]

    def get_shape(self):
        return self.shape_

    def get_vertex_ids(self):
        return self.vertexIds_

    def get_id(self):
        return self.id_


class CellIO(CellProvider):
    """Light weight copy of a cell's shape, vertices and interfaces"""

    def __init__(self, cell_id, shape, vertex_ids, interface_ids):
        self.id_ = int(cell_id)
        self.shape_ = shape
        self.vertexIds_ = [int(vertexId) for vertexId in vertex_ids]
        self.interfaceIds_ = [int(interfaceId) for interfaceId in interface_ids]

    def get_shape(self):
        return self.shape_

    def get_vertex_ids(self):
        return self.vertexIds_

    def get_interface_ids(self):
        return list(self.interfaceIds_)

    def get_id(self):
        return self.id_


class FluidBlockIO(BlockProvider):
    """
    Writes a FluidBlock to disk.

    The topology (interfaces, cells, boundaries) is copied once when the
    object is created. Vertex positions are copied again on every write,
    since they are the only geometry a solver may change.
    """

    def __init__(self, fluid_block):
        """
        Args:
            fluid_block (FluidBlock): The block to write
        """
        if not isinstance(fluid_block, FluidBlock):
            raise TypeError("fluid_block must be an instance of FluidBlock")
        self.fluidBlock_ = fluid_block
        self.id_ = fluid_block.get_id()
        self.dimensions_ = fluid_block.get_dimensions()
        self.vertices_ = []
        self.interfaces_ = []
        self.cells_ = []
        self.boundaries_ = {}
        self.copy_interfaces()
        self.copy_cells()
        self.copy_boundaries()
        self.copy_vertex_positions()

    def copy_vertex_positions(self):
        self.vertices_ = [
            VertexIO(x, y, z, vertexId)
            for vertexId, (x, y, z) in enumerate(self.fluidBlock_.get_vertex_positions())
        ]

    def copy_interfaces(self):
        interfaceVertices = self.fluidBlock_.get_interface_vertices()
        self.interfaces_ = [
            InterfaceIO(interfaceId, shape, interfaceVertices[interfaceId])
            for interfaceId, shape in enumerate(self.fluidBlock_.get_interface_shapes())
        ]

    def copy_cells(self):
        cellVertices = self.fluidBlock_.get_cell_vertices()
        cellInterfaces = self.fluidBlock_.get_cell_interfaces()
        self.cells_ = [
            CellIO(cellId, shape, cellVertices[cellId], cellInterfaces[cellId])
            for cellId, shape in enumerate(self.fluidBlock_.get_cell_shapes())
        ]

    def copy_boundaries(self):
        self.boundaries_ = {
            tag: [int(interfaceId) for interfaceId in interfaceIds]
            for tag, interfaceIds in self.fluidBlock_.get_boundaries().items()
        }

    def write_fluid_block(self, directory):
        """
        Write the block to directory/blk<id>.grid.

        Returns:
            str: Path of the written file
        """
        self.copy_vertex_positions()
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, block_file_name(self.id_))
        write_block(self, path)
        return path

    def get_vertices(self):
        return self.vertices_

    def get_interfaces(self):
        return self.interfaces_

    def get_cells(self):
        return self.cells_

    def get_boundaries(self):
        return self.boundaries_

    def get_dimensions(self):
        return self.dimensions_

    def get_id(self):
        return self.id_


def read_fluid_block(file_path, block_id):
    """Read a grid file straight into a FluidBlock"""
    return FluidBlock(read_block(file_path, block_id))
