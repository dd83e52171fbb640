"""Tools for merging binary student grade files, sorting them and writing grade statistics."""

__version__ = "0.1.0"