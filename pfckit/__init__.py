"""General-purpose utilities: byte order, audio sample math, containers, sorting, encodings, paths and POSIX descriptors."""

__version__ = "0.1.0"