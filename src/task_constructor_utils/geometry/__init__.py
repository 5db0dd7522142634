"""Import classes representing pure geometric primitives."""

from .points import Point3D as Point3D
