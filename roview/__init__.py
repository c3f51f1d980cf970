"""Client-side runtime model for Restful Objects hypermedia documents."""

__all__ = []
