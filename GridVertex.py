from Vector3 import Vector3
from GridProviders import VertexProvider


class Vertex(VertexProvider):
    """
    A point in the grid.
    Cells and interfaces refer to vertices by id only, the vertex itself is
    owned by the block it was read into.
    """

    def __init__(self, pos, vertex_id):
        """
        Args:
            pos (Vector3): Position of the vertex
            vertex_id (int): Index of the vertex in its block
        """
        if not isinstance(pos, Vector3):
            raise TypeError("pos must be an instance of Vector3")
        self.pos_ = pos.copy()
        self.id_ = int(vertex_id)

    def get_pos(self):
        return self.pos_

    def get_id(self):
        return self.id_

    def dist_to(self, other):
        """Distance to another vertex"""
        return self.pos_.dist_to(other.get_pos())

    def vector_to(self, other):
        """Vector pointing from this vertex to other"""
        return other.get_pos() - self.pos_

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id_ == other.id_ and self.pos_ == other.pos_

    def __repr__(self):
        return f"Vertex(id={self.id_}, pos=({self.pos_.x}, {self.pos_.y}, {self.pos_.z}))"
