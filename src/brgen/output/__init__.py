"""Persistence of generated BR sources."""

from brgen.output.file_writer import BRFileWriter, WriteResult

__all__ = ["BRFileWriter", "WriteResult"]
