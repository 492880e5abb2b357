from enum import Enum

from Vector3 import TOLERANCE
from GeomCalc import compute_centre_of_vertices, triangle_area, quad_area
from GridProviders import CellProvider
from MeshErrors import InvalidShapeError


SU2_TRIANGLE = 5
SU2_QUADRILATERAL = 9


class CellShape(Enum):
    TRIANGLE = "triangle"
    QUADRILATERAL = "quadrilateral"

    @staticmethod
    def from_number_of_vertices(num_vertices):
        if num_vertices < 3:
            raise InvalidShapeError(f"Not enough vertices to form a cell: {num_vertices}")
        if num_vertices == 3:
            return CellShape.TRIANGLE
        if num_vertices == 4:
            return CellShape.QUADRILATERAL
        raise InvalidShapeError(f"Unsupported number of vertices for cell: {num_vertices}")

    @staticmethod
    def from_su2_element_type(element_type):
        if element_type == SU2_TRIANGLE:
            return CellShape.TRIANGLE
        if element_type == SU2_QUADRILATERAL:
            return CellShape.QUADRILATERAL
        raise InvalidShapeError(f"Invalid or unsupported su2 element type: {element_type}")

    def to_su2_element_type(self):
        if self == CellShape.TRIANGLE:
            return SU2_TRIANGLE
        return SU2_QUADRILATERAL

    def number_of_vertices(self):
        if self == CellShape.TRIANGLE:
            return 3
        return 4

    def interfaces(self, vertex_ids):
        """
        Vertex ids of each interface of a cell of this shape, walking around
        the cell in the order the vertices are given.
        """
        numVertices = self.number_of_vertices()
        if len(vertex_ids) != numVertices:
            raise InvalidShapeError(
                f"A {self.value} needs {numVertices} vertices, got {len(vertex_ids)}"
            )
        return [[vertex_ids[i], vertex_ids[(i + 1) % numVertices]] for i in range(numVertices)]

    def volume(self, vertices):
        """Volume (area in 2D) of a cell of this shape with the given vertices"""
        if self == CellShape.TRIANGLE:
            return triangle_area(vertices)
        return quad_area(vertices)


class CellFace:
    """One interface of a cell, and which way its normal points relative to the cell"""

    def __init__(self, interface_id, direction):
        self.interfaceId_ = int(interface_id)
        self.direction_ = direction

    def get_interface_id(self):
        return self.interfaceId_

    def get_direction(self):
        return self.direction_

    def __eq__(self, other):
        if not isinstance(other, CellFace):
            return NotImplemented
        return self.interfaceId_ == other.interfaceId_ and self.direction_ == other.direction_

    def __repr__(self):
        return f"CellFace(interface={self.interfaceId_}, direction={self.direction_.name})"


class Cell(CellProvider):
    """
    A triangle or quadrilateral in the grid.
    Refers to its vertices and interfaces by id into the owning block.
    """

    def __init__(self, interfaces, vertices, cell_id):
        """
        Initialize a Cell.

        Args:
            interfaces (list): The Interface objects bounding the cell
            vertices (list): The Vertex objects of the cell, in order around the cell
            cell_id (int): Index of the cell in its block

        Raises:
            InvalidShapeError: Unsupported number of vertices, or interface count not matching the shape
            DegenerateOrientationError: The centroid lies on one of the interfaces
        """
        self.shape_ = CellShape.from_number_of_vertices(len(vertices))
        if len(interfaces) != self.shape_.number_of_vertices():
            raise InvalidShapeError(
                f"A {self.shape_.value} has {self.shape_.number_of_vertices()} interfaces, "
                f"got {len(interfaces)}"
            )
        self.id_ = int(cell_id)
        self.vertexIds_ = [vertex.get_id() for vertex in vertices]
        self.centroid_ = compute_centre_of_vertices(vertices)
        self.cellFaces_ = [
            CellFace(interface.get_id(), interface.compute_direction(self.centroid_))
            for interface in interfaces
        ]
        self.volume_ = self.shape_.volume(vertices)

    def get_id(self):
        return self.id_

    def get_shape(self):
        return self.shape_

    def get_vertex_ids(self):
        return self.vertexIds_

    def get_cell_faces(self):
        return self.cellFaces_

    def get_interface_ids(self):
        return [cellFace.get_interface_id() for cellFace in self.cellFaces_]

    def get_volume(self):
        """Cell volume (area in 2D, per unit depth)"""
        return self.volume_

    def get_centroid(self):
        return self.centroid_

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self.id_ == other.id_ and
            self.shape_ == other.shape_ and
            self.vertexIds_ == other.vertexIds_ and
            self.cellFaces_ == other.cellFaces_ and
            abs(self.volume_ - other.volume_) < TOLERANCE and
            self.centroid_ == other.centroid_
        )

    def __repr__(self):
        return (
            f"Cell(id={self.id_}, shape={self.shape_.name}, "
            f"vertices={self.vertexIds_}, volume={self.volume_}, "
            f"centroid=({self.centroid_.x}, {self.centroid_.y}))"
        )
