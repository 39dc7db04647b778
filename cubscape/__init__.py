"""Read and validate .cub maze scenes, and cast rays through their grids."""

__version__ = "0.1.0"