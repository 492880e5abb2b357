from enum import Enum

from Vector3 import Vector3, TOLERANCE
from GeomCalc import compute_centre_of_vertices
from GridProviders import InterfaceProvider
from MeshErrors import InvalidShapeError, DegenerateOrientationError, MissingInterfaceError


SU2_LINE = 3


class InterfaceShape(Enum):
    LINE = "line"

    @staticmethod
    def from_number_of_vertices(num_vertices):
        """Shape of an interface made of num_vertices vertices (only lines are supported)"""
        if num_vertices < 2:
            raise InvalidShapeError(f"Not enough vertices to form an interface: {num_vertices}")
        if num_vertices == 2:
            return InterfaceShape.LINE
        raise InvalidShapeError(f"Unsupported number of vertices in interface: {num_vertices}")

    @staticmethod
    def from_su2_element_type(element_type):
        if element_type == SU2_LINE:
            return InterfaceShape.LINE
        raise InvalidShapeError(f"Invalid or unsupported su2 interface type: {element_type}")

    def to_su2_element_type(self):
        return SU2_LINE

    def number_of_vertices(self):
        return 2


class Direction(Enum):
    """
    Whether an interface normal points towards (INWARDS) or away from
    (OUTWARDS) the centroid of a given cell.
    """
    INWARDS = 1
    OUTWARDS = -1


def interface_key(vertex_ids):
    """
    Canonical key of an interface: its vertex ids sorted from highest to lowest.
    Two declarations of the same edge give the same key whatever their vertex order.
    """
    return tuple(sorted((int(vertex_id) for vertex_id in vertex_ids), reverse=True))


class Interface(InterfaceProvider):
    """
    A line segment between two vertices, shared by one (boundary) or two
    (interior) cells. Stores the geometric quantities a finite volume solver
    needs for fluxes across the interface.
    """

    def __init__(self, vertices, interface_id):
        """
        Initialize an Interface.

        Args:
            vertices (list): The two vertices making up the interface, in order
            interface_id (int): Index of the interface in its block

        Raises:
            InvalidShapeError: If the number of vertices is not two, or they are at the same position
        """
        self.shape_ = InterfaceShape.from_number_of_vertices(len(vertices))
        self.id_ = int(interface_id)
        self.vertexIds_ = [vertex.get_id() for vertex in vertices]

        # tangent1 runs along the line, tangent2 is out of the plane
        lineVector = vertices[0].vector_to(vertices[1])
        if lineVector.length() == 0.0:
            raise InvalidShapeError(
                f"Interface {self.id_} has zero length, vertices {self.vertexIds_} share a position"
            )
        self.tangent1_ = lineVector.normalized()
        self.tangent2_ = Vector3(0.0, 0.0, 1.0)
        self.normal_ = self.tangent1_.cross(self.tangent2_).normalized()
        self.area_ = lineVector.length()  # per unit depth
        self.centroid_ = compute_centre_of_vertices(vertices)

    def get_id(self):
        return self.id_

    def get_shape(self):
        return self.shape_

    def get_vertex_ids(self):
        return self.vertexIds_

    def get_key(self):
        return interface_key(self.vertexIds_)

    def get_area(self):
        """Length of the interface (area per unit depth)"""
        return self.area_

    def get_normal(self):
        return self.normal_

    def get_tangent1(self):
        return self.tangent1_

    def get_tangent2(self):
        return self.tangent2_

    def get_centroid(self):
        return self.centroid_

    def get_dimensions(self):
        return 2

    def compute_direction(self, point):
        """
        Whether the interface normal points towards or away from point.

        Args:
            point (Vector3): Usually the centroid of a cell bounded by this interface

        Returns:
            Direction: INWARDS if the normal points towards the point, otherwise OUTWARDS

        Raises:
            DegenerateOrientationError: If the point lies on the interface line
        """
        dot = (point - self.centroid_).dot(self.normal_)
        if abs(dot) < TOLERANCE:
            raise DegenerateOrientationError(
                f"Point ({point.x}, {point.y}, {point.z}) lies on interface {self.id_} "
                f"with vertices {self.vertexIds_}"
            )
        if dot > 0.0:
            return Direction.INWARDS
        return Direction.OUTWARDS

    def equal_to_vertex_ids(self, vertex_ids):
        """True if the interface is made of exactly these vertices, in any order"""
        return self.get_key() == interface_key(vertex_ids)

    def equal_to_vertices(self, vertices):
        return self.equal_to_vertex_ids([vertex.get_id() for vertex in vertices])

    def __eq__(self, other):
        if not isinstance(other, Interface):
            return NotImplemented
        return self.id_ == other.id_ and self.get_key() == other.get_key()

    def __repr__(self):
        return (
            f"Interface(id={self.id_}, "
            f"vertices={self.vertexIds_}, "
            f"area={self.area_}, "
            f"normal=({self.normal_.x}, {self.normal_.y}, {self.normal_.z}))"
        )


class InterfaceCollection:
    """
    Registry that makes sure every edge of the grid becomes exactly one
    Interface, even though each interior edge is declared by both of the
    cells it separates. Ids are handed out in order of first declaration.
    """

    def __init__(self):
        self.interfaces_ = {}
        self.idToKey_ = {}

    def add_or_retrieve(self, vertices):
        """
        Add an interface made of the given vertices, or return the id of the
        interface that already has them.

        Args:
            vertices (list): Vertices of the interface

        Returns:
            int: Id of the (new or existing) interface
        """
        key = interface_key([vertex.get_id() for vertex in vertices])
        if key not in self.interfaces_:
            interface = Interface(vertices, len(self.interfaces_))
            self.idToKey_[interface.get_id()] = key
            self.interfaces_[key] = interface
        return self.interfaces_[key].get_id()

    def find(self, vertices):
        """
        Id of the interface made of the given vertices, which must already
        have been added.

        Raises:
            MissingInterfaceError: If no such interface was registered
        """
        vertexIds = [vertex.get_id() for vertex in vertices]
        key = interface_key(vertexIds)
        if key not in self.interfaces_:
            raise MissingInterfaceError(f"Could not find interface with vertices {vertexIds}")
        return self.interfaces_[key].get_id()

    def interface_with_id(self, interface_id):
        if interface_id not in self.idToKey_:
            raise MissingInterfaceError(f"No interface with id {interface_id}")
        return self.interfaces_[self.idToKey_[interface_id]]

    def into_ordered_list(self):
        """All registered interfaces, sorted by id"""
        return sorted(self.interfaces_.values(), key=lambda interface: interface.get_id())

    def __len__(self):
        return len(self.interfaces_)

    def __repr__(self):
        return f"InterfaceCollection(# interfaces={len(self.interfaces_)})"
