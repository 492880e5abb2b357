"""
Exceptions raised while building or reading grid blocks.
All of them derive from MeshError so a caller can abort a single file's load
and decide whether to carry on with the rest.
"""


class MeshError(Exception):
    """Base class for grid construction and grid file errors"""


class UnknownFileType(MeshError):
    """A grid file whose extension is missing or not one we can read"""

    def __init__(self, file_name, extension=None):
        self.fileName_ = str(file_name)
        self.extension_ = extension
        if extension is None:
            message = f"No extension to file: '{self.fileName_}'"
        else:
            message = f"Unknown extension '{extension}' for file '{self.fileName_}'"
        super().__init__(message)

    def get_file_name(self):
        return self.fileName_

    def get_extension(self):
        return self.extension_


class MalformedMeshFile(MeshError):
    """The contents of a grid file could not be turned into a block"""

    def __init__(self, message, file_name=None, line_number=None):
        self.reason_ = message
        self.fileName_ = None if file_name is None else str(file_name)
        self.lineNumber_ = line_number
        location = ""
        if self.fileName_ is not None:
            location = f"{self.fileName_}"
            if line_number is not None:
                location += f":{line_number}"
            location += ": "
        super().__init__(location + message)

    def get_reason(self):
        return self.reason_

    def get_file_name(self):
        return self.fileName_

    def get_line_number(self):
        return self.lineNumber_


class InvalidShapeError(MeshError, ValueError):
    """Vertex count or element type that does not describe a supported shape"""


class DegenerateOrientationError(MeshError):
    """A point lies on an interface, so it is neither inwards nor outwards"""


class MissingInterfaceError(MeshError, KeyError):
    """An interface was looked up by vertices or id but was never registered"""

    def __str__(self):
        # KeyError quotes its argument, keep the message readable
        return Exception.__str__(self)


class InconsistentBlockError(MeshError):
    """A block refers to vertices or interfaces it does not hold"""
