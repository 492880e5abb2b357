from Vector3 import Vector3
from MeshErrors import InvalidShapeError


def triangle_area(vertices):
    """
    Area of a triangle from the x, y coordinates of its vertices.

    Args:
        vertices (list): Three objects with a get_pos() method

    Returns:
        float: The (non-negative) area
    """
    if len(vertices) != 3:
        raise InvalidShapeError(f"Expected 3 vertices in triangle, got {len(vertices)}")
    a = vertices[0].get_pos()
    b = vertices[1].get_pos()
    c = vertices[2].get_pos()
    tmp = a.x*(b.y - c.y) + b.x*(c.y - a.y) + c.x*(a.y - b.y)
    return 0.5 * abs(tmp)


def quad_area(vertices):
    """
    Area of a quadrilateral using the shoelace formula, vertices taken in the
    order given. The absolute value makes the result independent of winding.
    """
    if len(vertices) != 4:
        raise InvalidShapeError(f"Expected 4 vertices in quadrilateral, got {len(vertices)}")
    a = vertices[0].get_pos()
    b = vertices[1].get_pos()
    c = vertices[2].get_pos()
    d = vertices[3].get_pos()
    tmpPlus = a.x*b.y + b.x*c.y + c.x*d.y + d.x*a.y
    tmpMinus = b.x*a.y + c.x*b.y + d.x*c.y + a.x*d.y
    return 0.5 * abs(tmpPlus - tmpMinus)


def compute_centre_of_vertices(vertices):
    """Arithmetic mean of the vertex positions"""
    if len(vertices) == 0:
        raise InvalidShapeError("Cannot compute the centre of zero vertices")
    centre = Vector3(0.0, 0.0, 0.0)
    for vertex in vertices:
        centre += vertex.get_pos()
    centre.scale_in_place(1.0 / len(vertices))
    return centre
