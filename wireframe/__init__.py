"""Height-map reading and height colouring for wireframe drawing."""

__version__ = "0.1.0"