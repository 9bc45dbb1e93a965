"""docfront: documentation generator front end.

Walks a package graph in a fixed order and hands each documented element to
a rendering backend, tracking every file it writes.
"""

__version__ = "0.1.0"
