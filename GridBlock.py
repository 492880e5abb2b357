from GridProviders import BlockProvider
from MeshErrors import InconsistentBlockError


class Block(BlockProvider):
    """
    The vertices, interfaces, cells and boundary tags read from one grid file.
    A block owns everything it holds; cells and interfaces refer to each other
    and to vertices through ids, which are indices into the block's lists.
    Blocks are not modified after construction: the entity lists are tuples
    and boundary lists are handed out as copies.
    """

    def __init__(self, vertices, interfaces, cells, boundaries, dimensions, block_id):
        """
        Initialize a Block.

        Args:
            vertices (list): Vertex objects, vertex i must have id i
            interfaces (list): Interface objects, sorted by id
            cells (list): Cell objects
            boundaries (dict): Boundary tag -> list of interface ids
            dimensions (int): Spatial dimensions of the grid file, 2 or 3
            block_id (int): Position of the block in its collection

        Raises:
            ValueError: If dimensions is not 2 or 3
            InconsistentBlockError: If an id refers outside the block
        """
        if dimensions not in (2, 3):
            raise ValueError(f"Blocks must have 2 or 3 dimensions, got {dimensions}")
        self.vertices_ = tuple(vertices)
        self.interfaces_ = tuple(interfaces)
        self.cells_ = tuple(cells)
        self.boundaries_ = {tag: tuple(interfaceIds) for tag, interfaceIds in boundaries.items()}
        self.dimensions_ = int(dimensions)
        self.id_ = int(block_id)
        self.interfaceCells_ = None
        self._check_references()

    def _check_references(self):
        numVertices = len(self.vertices_)
        numInterfaces = len(self.interfaces_)
        for index, interface in enumerate(self.interfaces_):
            if interface.get_id() != index:
                raise InconsistentBlockError(
                    f"Interface at position {index} has id {interface.get_id()}"
                )
            for vertexId in interface.get_vertex_ids():
                if not 0 <= vertexId < numVertices:
                    raise InconsistentBlockError(
                        f"Interface {index} refers to vertex {vertexId}, block has {numVertices} vertices"
                    )
        for cell in self.cells_:
            for vertexId in cell.get_vertex_ids():
                if not 0 <= vertexId < numVertices:
                    raise InconsistentBlockError(
                        f"Cell {cell.get_id()} refers to vertex {vertexId}, block has {numVertices} vertices"
                    )
            for interfaceId in cell.get_interface_ids():
                if not 0 <= interfaceId < numInterfaces:
                    raise InconsistentBlockError(
                        f"Cell {cell.get_id()} refers to interface {interfaceId}, "
                        f"block has {numInterfaces} interfaces"
                    )
        for tag, interfaceIds in self.boundaries_.items():
            for interfaceId in interfaceIds:
                if not 0 <= interfaceId < numInterfaces:
                    raise InconsistentBlockError(
                        f"Boundary '{tag}' refers to interface {interfaceId}, "
                        f"block has {numInterfaces} interfaces"
                    )

    def get_vertices(self):
        return self.vertices_

    def get_interfaces(self):
        return self.interfaces_

    def get_cells(self):
        return self.cells_

    def get_boundaries(self):
        """Copy of boundary tag -> list of interface ids, in the order the tags were declared"""
        return {tag: list(interfaceIds) for tag, interfaceIds in self.boundaries_.items()}

    def get_boundary(self, tag):
        if tag not in self.boundaries_:
            raise KeyError(f"Block {self.id_} has no boundary tagged '{tag}'")
        return list(self.boundaries_[tag])

    def get_dimensions(self):
        return self.dimensions_

    def get_id(self):
        return self.id_

    def get_num_vertices(self):
        return len(self.vertices_)

    def get_num_interfaces(self):
        return len(self.interfaces_)

    def get_num_cells(self):
        return len(self.cells_)

    def get_interface_cells(self):
        """
        For each interface, the ids of the cells it bounds: one cell for
        interfaces on the edge of the grid, two for interior interfaces.
        """
        if self.interfaceCells_ is None:
            interfaceCells = [[] for _ in self.interfaces_]
            for cell in self.cells_:
                for interfaceId in cell.get_interface_ids():
                    interfaceCells[interfaceId].append(cell.get_id())
            self.interfaceCells_ = tuple(tuple(cellIds) for cellIds in interfaceCells)
        return [list(cellIds) for cellIds in self.interfaceCells_]

    def __repr__(self):
        return (
            f"Block(\n"
            f"  Id: {self.id_},\n"
            f"  Dimensions: {self.dimensions_},\n"
            f"  Vertices: {len(self.vertices_)},\n"
            f"  Interfaces: {len(self.interfaces_)},\n"
            f"  Cells: {len(self.cells_)},\n"
            f"  Boundaries: {list(self.boundaries_.keys())}\n"
            f")"
        )
