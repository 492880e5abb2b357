class VertexProvider:
    """Anything with a position and an id that can be written as a grid vertex"""

    def get_pos(self):
        raise NotImplementedError("Must implement get_pos() in subclass")

    def get_id(self):
        raise NotImplementedError("Must implement get_id() in subclass")


class InterfaceProvider:
    """Anything that can be written as a grid interface"""

    def get_shape(self):
        raise NotImplementedError("Must implement get_shape() in subclass")

    def get_vertex_ids(self):
        raise NotImplementedError("Must implement get_vertex_ids() in subclass")

    def get_id(self):
        raise NotImplementedError("Must implement get_id() in subclass")


class CellProvider:
    """Anything that can be written as a grid cell"""

    def get_shape(self):
        raise NotImplementedError("Must implement get_shape() in subclass")

    def get_vertex_ids(self):
        raise NotImplementedError("Must implement get_vertex_ids() in subclass")

    def get_interface_ids(self):
        raise NotImplementedError("Must implement get_interface_ids() in subclass")

    def get_id(self):
        raise NotImplementedError("Must implement get_id() in subclass")


class BlockProvider:
    """
    Read contract for a block of grid data.
    The grid writers only talk to this interface, so the in-memory Block and
    the lightweight staging copies used for output can share one serializer.
    Interfaces must be indexable by their id.
    """

    def get_vertices(self):
        raise NotImplementedError("Must implement get_vertices() in subclass")

    def get_interfaces(self):
        raise NotImplementedError("Must implement get_interfaces() in subclass")

    def get_cells(self):
        raise NotImplementedError("Must implement get_cells() in subclass")

    def get_boundaries(self):
        raise NotImplementedError("Must implement get_boundaries() in subclass")

    def get_dimensions(self):
        raise NotImplementedError("Must implement get_dimensions() in subclass")

    def get_id(self):
        raise NotImplementedError("Must implement get_id() in subclass")
