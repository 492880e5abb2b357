"""
Reading and writing grids in the SU2 text format.

Only the sections needed for a 2D finite volume grid are understood:
NDIME, NPOIN, NELEM and NMARK. Any other top-level line is skipped, the same
way SU2 itself ignores lines it does not know about.
"""
from Vector3 import Vector3
from GridVertex import Vertex
from GridInterface import InterfaceCollection, InterfaceShape
from GridCell import Cell, CellShape
from GridBlock import Block
from MeshErrors import MalformedMeshFile, MissingInterfaceError


class _LineReader:
    """
    Hands out trimmed lines of a grid file, keeping track of where we are.
    The file is opened in binary mode and decoded line by line, so a bad
    byte is reported on the line it sits on.
    """

    def __init__(self, file, file_name):
        self.file_ = file
        self.fileName_ = file_name
        self.lineNumber_ = 0

    def _decode(self, raw_line):
        self.lineNumber_ += 1
        try:
            return raw_line.decode('utf-8').strip()
        except UnicodeDecodeError as exc:
            raise self.error(f"Line is not valid UTF-8: {exc.reason}") from None

    def __iter__(self):
        for rawLine in self.file_:
            yield self._decode(rawLine)

    def next_line(self, section):
        """Next non-blank, non-comment line inside a section"""
        for rawLine in self.file_:
            line = self._decode(rawLine)
            if not line or line.startswith('%'):
                continue
            return line
        raise self.error(f"Unexpected end of file in {section} section")

    def get_line_number(self):
        return self.lineNumber_

    def error(self, message, line_number=None):
        if line_number is None:
            line_number = self.lineNumber_
        return MalformedMeshFile(message, self.fileName_, line_number)


def _parse_value(line, reader, kind=int):
    """Value of a KEY=value line"""
    value = line.split('=', 1)[1].strip()
    try:
        return kind(value)
    except ValueError:
        raise reader.error(f"Could not parse '{value}' in line '{line}'") from None


def _parse_tokens(line, reader, count, kind=int):
    """The first count whitespace separated tokens of a line, converted to kind"""
    tokens = line.split()
    if len(tokens) < count:
        raise reader.error(f"Expected {count} values in line '{line}', found {len(tokens)}")
    try:
        return [kind(token) for token in tokens[:count]]
    except ValueError:
        raise reader.error(f"Could not parse numbers in line '{line}'") from None


def _read_points(reader, num_points, dimensions):
    vertices = []
    for pointIndex in range(num_points):
        line = reader.next_line("NPOIN")
        coords = _parse_tokens(line, reader, dimensions, float)
        vertices.append(Vertex(Vector3.from_list(coords), pointIndex))
    return vertices


def _read_elements(reader, num_elements):
    """(shape, vertex ids, line number) of each element, nothing is resolved yet"""
    elements = []
    for _ in range(num_elements):
        line = reader.next_line("NELEM")
        elementType = _parse_tokens(line, reader, 1)[0]
        shape = CellShape.from_su2_element_type(elementType)
        vertexIds = _parse_tokens(line, reader, 1 + shape.number_of_vertices())[1:]
        elements.append((shape, vertexIds, reader.get_line_number()))
    return elements


def _read_marker(reader):
    """Tag, line of the tag, and (vertex ids, line number) of each boundary edge of one marker"""
    line = reader.next_line("NMARK")
    if not line.startswith("MARKER_TAG="):
        raise reader.error(f"Expected MARKER_TAG= but found '{line}'")
    tag = line.split('=', 1)[1].strip()
    tagLine = reader.get_line_number()
    line = reader.next_line("NMARK")
    if not line.startswith("MARKER_ELEMS="):
        raise reader.error(f"Expected MARKER_ELEMS= but found '{line}'")
    numEdges = _parse_value(line, reader)
    edges = []
    for _ in range(numEdges):
        line = reader.next_line("NMARK")
        elementType = _parse_tokens(line, reader, 1)[0]
        shape = InterfaceShape.from_su2_element_type(elementType)
        vertexIds = _parse_tokens(line, reader, 1 + shape.number_of_vertices())[1:]
        edges.append((vertexIds, reader.get_line_number()))
    return tag, tagLine, edges


def _vertices_with_ids(vertices, vertex_ids, reader, line_number):
    for vertexId in vertex_ids:
        if not 0 <= vertexId < len(vertices):
            raise reader.error(
                f"Vertex index {vertexId} out of range, file has {len(vertices)} points",
                line_number
            )
    return [vertices[vertexId] for vertexId in vertex_ids]


def read_su2(file_path, block_id):
    """
    Read an SU2 grid file into a Block.

    Connectivity is recorded by vertex id while reading, and cells, interfaces
    and boundaries are only built once the whole file is read, so NELEM and
    NMARK may come before NPOIN. NDIME has to come before NPOIN since it says
    how many coordinates each point has.

    Args:
        file_path (str): Path to the grid file
        block_id (int): Id to give the block

    Returns:
        Block: the grid in the file

    Raises:
        MalformedMeshFile: If the file does not describe a valid grid
        InvalidShapeError: If an element type is not supported
        FileNotFoundError: If the file does not exist
    """
    fileName = str(file_path)
    dimensions = None
    vertices = []
    elements = None
    markers = {}

    with open(file_path, 'rb') as file:
        reader = _LineReader(file, fileName)
        for line in reader:
            if line.startswith("NDIME="):
                dimensions = _parse_value(line, reader)
                if dimensions not in (2, 3):
                    raise reader.error(f"NDIME must be 2 or 3, got {dimensions}")
            elif line.startswith("NPOIN="):
                if dimensions is None:
                    raise reader.error("NDIME must be given before NPOIN")
                numPoints = _parse_value(line, reader)
                vertices = _read_points(reader, numPoints, dimensions)
            elif line.startswith("NELEM="):
                numElements = _parse_value(line, reader)
                elements = _read_elements(reader, numElements)
            elif line.startswith("NMARK="):
                numMarkers = _parse_value(line, reader)
                for _ in range(numMarkers):
                    tag, tagLine, edges = _read_marker(reader)
                    if tag in markers:
                        raise reader.error(f"Duplicate marker tag '{tag}'", tagLine)
                    markers[tag] = edges

    if dimensions is None:
        raise MalformedMeshFile("No NDIME section", fileName)
    if elements is None:
        raise MalformedMeshFile("No NELEM section, could not find connectivity", fileName)

    interfaceCollection = InterfaceCollection()
    cells = []
    for cellId, (shape, vertexIds, lineNumber) in enumerate(elements):
        cellVertices = _vertices_with_ids(vertices, vertexIds, reader, lineNumber)
        cellInterfaces = []
        for edgeIds in shape.interfaces(vertexIds):
            edgeVertices = [vertices[vertexId] for vertexId in edgeIds]
            interfaceId = interfaceCollection.add_or_retrieve(edgeVertices)
            cellInterfaces.append(interfaceCollection.interface_with_id(interfaceId))
        cells.append(Cell(cellInterfaces, cellVertices, cellId))

    boundaries = {}
    for tag, edges in markers.items():
        interfaceIds = []
        for vertexIds, lineNumber in edges:
            edgeVertices = _vertices_with_ids(vertices, vertexIds, reader, lineNumber)
            try:
                interfaceIds.append(interfaceCollection.find(edgeVertices))
            except MissingInterfaceError:
                raise reader.error(
                    f"Boundary '{tag}' edge {vertexIds} is not an edge of any cell",
                    lineNumber
                ) from None
        boundaries[tag] = interfaceIds

    return Block(
        vertices, interfaceCollection.into_ordered_list(), cells, boundaries, dimensions, block_id
    )


def _format_float(value):
    # repr gives the shortest text that reads back to the same float
    return repr(float(value))


def write_su2(file_path, block_provider):
    """
    Write a block in the SU2 format.

    Args:
        file_path (str): Where to write the file, overwritten if it exists
        block_provider (BlockProvider): Anything implementing the block provider interface
    """
    dimensions = block_provider.get_dimensions()
    vertices = block_provider.get_vertices()
    cells = block_provider.get_cells()
    interfaces = block_provider.get_interfaces()
    boundaries = block_provider.get_boundaries()

    with open(file_path, 'w', encoding='utf-8') as file:
        file.write(f"NDIME={dimensions}\n")

        file.write(f"NPOIN={len(vertices)}\n")
        for vertex in vertices:
            pos = vertex.get_pos()
            coords = [pos.x, pos.y]
            if dimensions == 3:
                coords.append(pos.z)
            file.write(" ".join(_format_float(coord) for coord in coords) + "\n")

        file.write(f"NELEM={len(cells)}\n")
        for cell in cells:
            elementType = cell.get_shape().to_su2_element_type()
            vertexIds = " ".join(str(vertexId) for vertexId in cell.get_vertex_ids())
            file.write(f"{elementType} {vertexIds}\n")

        file.write(f"NMARK={len(boundaries)}\n")
        for tag, interfaceIds in boundaries.items():
            file.write(f"MARKER_TAG={tag}\n")
            file.write(f"MARKER_ELEMS={len(interfaceIds)}\n")
            for interfaceId in interfaceIds:
                interface = interfaces[interfaceId]
                elementType = interface.get_shape().to_su2_element_type()
                vertexIds = " ".join(str(vertexId) for vertexId in interface.get_vertex_ids())
                file.write(f"{elementType} {vertexIds}\n")
