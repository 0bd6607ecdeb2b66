"""PETSCII strings and lossy conversion to and from Unicode, in the codec module."""

__version__ = "0.1.0"
__all__ = ["codec"]