"""Serialization helpers - Infrastructure Layer."""

from .directory_codec import DirectoryCodec

__all__ = ["DirectoryCodec"]
