"""API module for roview.

Decoding of hypermedia documents into transfer objects, and the models built
on top of them for the renderer.
"""

__all__ = []
