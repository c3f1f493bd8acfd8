"""Software rasterizer: vectors, matrices, depth buffering, lit triangles and band-threaded scene rendering into an in-memory canvas."""

__version__ = "0.1.0"