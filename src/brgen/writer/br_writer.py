"""
BR class writer.

Assigns each bindable property a stable integer index and renders the Java
``BR`` class holding those indices as constants. Index 0 is reserved for
``_all``, the "every property changed" sentinel.

Indices depend only on the set of names: they are sorted in Java string order
(UTF-16 code units) and numbered from 1, so regenerating from the same
properties always yields the same file.
"""

import logging
from collections.abc import Iterable
from functools import cached_property
from typing import NamedTuple

from brgen.config.models import GenerationConfig
from brgen.writer.code_builder import LINE_SEPARATOR, CodeBuilder

logger = logging.getLogger(__name__)

BR_CLASS_NAME = "BR"
ALL_PROPERTIES = "_all"
ALL_PROPERTIES_INDEX = 0


class ReservedPropertyError(ValueError):
    """Raised when a property collides with the reserved ``_all`` constant."""

    def __init__(self, name: str = ALL_PROPERTIES):
        super().__init__(
            f"Property name '{name}' is reserved for the all-properties constant "
            f"(index {ALL_PROPERTIES_INDEX})"
        )
        self.name = name


class IndexedProperty(NamedTuple):
    """A property name paired with its BR index."""

    name: str
    index: int


def _utf16_key(name: str) -> bytes:
    # Java String.compareTo order, not code point order
    return name.encode("utf-16-be", "surrogatepass")


def assign_indices(names: Iterable[str]) -> tuple[IndexedProperty, ...]:
    """Sort *names* and number them from 1 without gaps."""
    ordered = sorted(set(names), key=_utf16_key)
    return tuple(
        IndexedProperty(name, index) for index, name in enumerate(ordered, start=1)
    )


def _constant(name: str, value: int, use_final: bool) -> str:
    prefix = "final " if use_final else ""
    return f"public static {prefix}int {name} = {value};"


def _render_class(table: Iterable[IndexedProperty], use_final: bool) -> str:
    builder = CodeBuilder()
    with builder.block(f"public class {BR_CLASS_NAME}"):
        builder.line(_constant(ALL_PROPERTIES, ALL_PROPERTIES_INDEX, use_final))
        for prop in table:
            if prop.name == ALL_PROPERTIES:
                raise ReservedPropertyError(prop.name)
            builder.line(_constant(prop.name, prop.index, use_final))
    return builder.generate()


def _package_header(package_name: str) -> str:
    return f"package {package_name};{LINE_SEPARATOR}"


def emit(table: Iterable[IndexedProperty], config: GenerationConfig) -> str:
    """Render the BR source for an index table.

    Args:
        table: Pairs in the order they should be declared (normally the
            output of ``assign_indices``)
        config: Target package and finality of the constants

    Returns:
        Complete Java source text for ``BR.java``

    Raises:
        ReservedPropertyError: If the table declares ``_all``
    """
    return _package_header(config.package_name) + _render_class(table, config.use_final)


def render_br(names: Iterable[str], config: GenerationConfig) -> str:
    """Assign indices to *names* and render the BR source in one step."""
    table = assign_indices(names)
    logger.debug(f"Rendering {BR_CLASS_NAME} for {config.package_name} with {len(table)} properties")
    return emit(table, config)


class BRWriter:
    """
    Generator bound to one property set.

    Usage:
        writer = BRWriter({"age", "name"}, use_final=True)
        source = writer.write("com.example.app")

    The class body is rendered on first access and cached on this instance
    only; a new property set needs a new writer.
    """

    def __init__(self, properties: Iterable[str], use_final: bool = True):
        self.use_final = use_final
        self.indexed_props = assign_indices(properties)

    @cached_property
    def klass(self) -> str:
        return _render_class(self.indexed_props, self.use_final)

    def write(self, package_name: str) -> str:
        return _package_header(package_name) + self.klass
