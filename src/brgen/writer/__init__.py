"""
Index assignment and source emission for the BR class.

The functions here are pure: they take property names and a generation
config and return source text. Writing that text to disk is the job of
``brgen.output``.
"""

from brgen.writer.br_writer import (
    ALL_PROPERTIES,
    ALL_PROPERTIES_INDEX,
    BR_CLASS_NAME,
    BRWriter,
    IndexedProperty,
    ReservedPropertyError,
    assign_indices,
    emit,
    render_br,
)
from brgen.writer.code_builder import INDENT, LINE_SEPARATOR, CodeBuilder

__all__ = [
    "ALL_PROPERTIES",
    "ALL_PROPERTIES_INDEX",
    "BR_CLASS_NAME",
    "BRWriter",
    "CodeBuilder",
    "INDENT",
    "IndexedProperty",
    "LINE_SEPARATOR",
    "ReservedPropertyError",
    "assign_indices",
    "emit",
    "render_br",
]
