import math
import numpy as np


TOLERANCE = 1e-14


class Vector3:
    """
    A three component vector of floats.
    Used for vertex positions, interface normals/tangents and centroids.
    Equality is tolerant (TOLERANCE on each component) so values that went
    through a write/read cycle still compare equal.
    """

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_list(cls, values):
        """
        Build a vector from 1 to 3 numbers, missing components are zero.

        Args:
            values (sequence): The components, in x, y, z order
        """
        values = list(values)
        if len(values) == 0:
            raise ValueError("No numbers to create a Vector3 from")
        if len(values) > 3:
            raise ValueError(f"Too many numbers to create a Vector3: {len(values)}")
        values += [0.0] * (3 - len(values))
        return cls(values[0], values[1], values[2])

    def length(self):
        """Euclidean length of the vector"""
        return math.sqrt(self.x*self.x + self.y*self.y + self.z*self.z)

    def scale_in_place(self, factor):
        self.x *= factor
        self.y *= factor
        self.z *= factor

    def scaled(self, factor):
        return Vector3(self.x*factor, self.y*factor, self.z*factor)

    def normalize_in_place(self):
        """
        Make the vector unit length.
        The vector must not have zero length, a ZeroDivisionError is raised if it does.
        """
        self.scale_in_place(1.0 / self._checked_length())

    def normalized(self):
        """
        Return a unit vector pointing in the same direction.
        The vector must not have zero length, a ZeroDivisionError is raised if it does.
        """
        length = self._checked_length()
        return Vector3(self.x/length, self.y/length, self.z/length)

    def _checked_length(self):
        length = self.length()
        if length == 0.0:
            raise ZeroDivisionError("Cannot normalize a zero length vector")
        return length

    def dist_to(self, other):
        """Distance between the points described by self and other"""
        return (other - self).length()

    def dot(self, other):
        return self.x*other.x + self.y*other.y + self.z*other.z

    def cross(self, other):
        x = self.y*other.z - self.z*other.y
        y = self.z*other.x - self.x*other.z
        z = self.x*other.y - self.y*other.x
        return Vector3(x, y, z)

    def to_array(self):
        """Components as a numpy array of shape (3,)"""
        return np.array([self.x, self.y, self.z])

    def copy(self):
        return Vector3(self.x, self.y, self.z)

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other):
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return (abs(self.x - other.x) < TOLERANCE and
                abs(self.y - other.y) < TOLERANCE and
                abs(self.z - other.z) < TOLERANCE)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self):
        return f"Vector3(x={self.x}, y={self.y}, z={self.z})"
