"""Tree building for field descriptions.

This module expands a field-name to value mapping into a flat sequence of
elements. The shape of every value is decided once by ``classify_value``
into one of the ``FieldValue`` variants, and expansion dispatches on that
variant:

    Scalar      -> one element holding the formatted value
    Attributed  -> one element with attributes and formatted content values
    Repeated    -> one sibling element per item, in order
    Nested      -> one element whose children are built from a mapping
    Omitted     -> nothing
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from rss_channel.shared import get_logger
from rss_channel.tree.element import Element
from rss_channel.tree.formatting import format_field


@dataclass(frozen=True)
class Scalar:
    """A single string, number, boolean, date or pre-built element."""

    value: Any


@dataclass(frozen=True)
class Repeated:
    """A sequence of values rendered as sibling elements."""

    items: Tuple[Any, ...]


@dataclass(frozen=True)
class Attributed:
    """An attribute mapping followed by zero or more content values."""

    attributes: Mapping[str, Any]
    content: Tuple[Any, ...]


@dataclass(frozen=True)
class Nested:
    """A mapping rendered as child elements of a single element."""

    fields: Mapping[str, Any]


@dataclass(frozen=True)
class Omitted:
    """A None value; the field produces no element."""


FieldValue = Union[Scalar, Repeated, Attributed, Nested, Omitted]

_OMITTED = Omitted()


def classify_value(value: Any) -> FieldValue:
    """Decide which variant a raw description value belongs to.

    Examples:
        >>> classify_value(None)
        Omitted()
        >>> classify_value([{"domain": "http://example.com"}, "Tech"])
        Attributed(attributes={'domain': 'http://example.com'}, content=('Tech',))
        >>> classify_value(["a", "b"])
        Repeated(items=('a', 'b'))
    """
    if value is None:
        return _OMITTED
    if isinstance(value, Mapping):
        return Nested(value)
    if isinstance(value, (list, tuple)):
        if value and isinstance(value[0], Mapping):
            return Attributed(value[0], tuple(value[1:]))
        return Repeated(tuple(value))
    return Scalar(value)


def drop_none(description: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a copy of ``description`` without its None-valued fields."""
    if not description:
        return {}
    return {name: value for name, value in description.items() if value is not None}


def build_field(name: str, value: Any) -> List[Element]:
    """Expand a single field into its elements."""
    shape = classify_value(value)

    if isinstance(shape, Scalar):
        return [Element(name, None, [format_field(name, shape.value)])]

    if isinstance(shape, Attributed):
        content = [
            format_field(name, item) for item in shape.content if item is not None
        ]
        return [Element(name, dict(shape.attributes), content)]

    if isinstance(shape, Repeated):
        elements: List[Element] = []
        for item in shape.items:
            elements.extend(build_elements({name: item}))
        return elements

    if isinstance(shape, Nested):
        return [Element(name, None, build_elements(shape.fields))]

    return []


def build_elements(description: Mapping[str, Any]) -> List[Element]:
    """Expand a field description into a flat list of elements.

    Args:
        description: Field name to value mapping, in output order

    Returns:
        Elements for every non-None field, repeated values flattened into
        siblings
    """
    elements: List[Element] = []
    for name, value in description.items():
        elements.extend(build_field(name, value))
    return elements


class TreeBuilder:
    """Builds element lists from field descriptions with correlation logging."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize tree builder.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "tree_builder")

    def build(self, description: Mapping[str, Any]) -> List[Element]:
        """Build the elements for ``description``."""
        elements = build_elements(description)

        self.logger.debug(
            "Expanded field description",
            extra={
                "field_count": len(description),
                "element_count": len(elements),
            }
        )

        return elements
