"""Element and document model for generated RSS trees.

An ``Element`` is the single node type of the output tree. Its ``content`` is
either None, which renders as a self-closing tag, or a list of child nodes
where each child is literal text (or another scalar) or a nested Element.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


@dataclass(eq=True)
class Element:
    """Represents a single element of a generated document tree.

    Attributes:
        name: Tag name, possibly namespace-prefixed (``atom:link``)
        attributes: Insertion-ordered attribute mapping, or None
        content: Child nodes, or None for a self-closing tag
    """

    name: str
    attributes: Optional[Dict[str, Any]] = None
    content: Optional[List[Any]] = None

    def __post_init__(self) -> None:
        """Validate element values."""
        if not self.name:
            raise ValueError("Element name cannot be empty")

    @property
    def is_self_closing(self) -> bool:
        """Check if element renders as ``<name/>``."""
        return self.content is None

    @property
    def children(self) -> List["Element"]:
        """Get direct child elements, skipping text nodes."""
        return [node for node in self.content or [] if isinstance(node, Element)]

    @property
    def text(self) -> str:
        """Get the concatenated direct text nodes of this element."""
        return "".join(
            node_text(node) for node in self.content or []
            if not isinstance(node, Element)
        )

    @property
    def local_name(self) -> str:
        """Get local tag name without namespace prefix."""
        if ":" in self.name:
            return self.name.split(":", 1)[1]
        return self.name

    @property
    def namespace_prefix(self) -> Optional[str]:
        """Get namespace prefix if present."""
        if ":" in self.name:
            return self.name.split(":", 1)[0]
        return None

    def find_child(self, name: str) -> Optional["Element"]:
        """Find first direct child with matching tag name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_children(self, name: str) -> List["Element"]:
        """Find all direct children with matching tag name."""
        return [child for child in self.children if child.name == name]

    def find(self, name: str) -> Optional["Element"]:
        """Find first descendant element with matching tag name."""
        for child in self.children:
            if child.name == name:
                return child

        for child in self.children:
            found = child.find(name)
            if found:
                return found

        return None

    def find_all(self, name: str) -> List["Element"]:
        """Find all descendant elements with matching tag name in document order."""
        results = []

        for child in self.children:
            if child.name == name:
                results.append(child)
            results.extend(child.find_all(name))

        return results

    def iter(self) -> Iterator["Element"]:
        """Iterate over this element and all descendants, pre-order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def get_attribute(self, name: str, default: Optional[Any] = None) -> Optional[Any]:
        """Get attribute value with optional default."""
        if not self.attributes:
            return default
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return bool(self.attributes) and name in self.attributes

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {"name": self.name}

        if self.attributes is not None:
            result["attributes"] = dict(self.attributes)

        if self.content is not None:
            result["content"] = [
                node.to_dict() if isinstance(node, Element) else node
                for node in self.content
            ]

        return result


def tag(
    name: str,
    attributes: Optional[Dict[str, Any]] = None,
    content: Optional[List[Any]] = None
) -> Element:
    """Construct an element from a name, optional attributes and content list.

    Examples:
        >>> tag("category", {"domain": "http://example.com"}, ["Tech"]).attributes
        {'domain': 'http://example.com'}
        >>> tag("atom:link").is_self_closing
        True
    """
    return Element(
        name=name,
        attributes=dict(attributes) if attributes is not None else None,
        content=list(content) if content is not None else None,
    )


def node_text(node: Any) -> str:
    """Get the string form of a text node, rendering booleans as true/false."""
    if isinstance(node, bool):
        return "true" if node else "false"
    return "" if node is None else str(node)


@dataclass
class Document:
    """Root container for a generated RSS document.

    Represents the complete tree with its ``rss`` root element and the
    declaration metadata used by the serializer.
    """

    root: Element
    version: str = "1.0"
    encoding: str = "UTF-8"
    correlation_id: Optional[str] = field(default=None, compare=False)

    @property
    def channel(self) -> Optional[Element]:
        """Get the single ``channel`` element."""
        return self.root.find_child("channel")

    @property
    def items(self) -> List[Element]:
        """Get the channel's ``item`` elements in submission order."""
        channel = self.channel
        if channel is None:
            return []
        return channel.find_children("item")

    @property
    def total_elements(self) -> int:
        """Count every element in the document."""
        return sum(1 for _ in self.iter_elements())

    def iter_elements(self) -> Iterator[Element]:
        """Iterate over all elements in document order."""
        return self.root.iter()

    def find(self, name: str) -> Optional[Element]:
        """Find first element with matching tag name."""
        if self.root.name == name:
            return self.root
        return self.root.find(name)

    def find_all(self, name: str) -> List[Element]:
        """Find all elements with matching tag name."""
        results = []
        if self.root.name == name:
            results.append(self.root)
        results.extend(self.root.find_all(name))
        return results

    def to_dict(self) -> Dict[str, Any]:
        """Convert document to dictionary representation."""
        return {
            "version": self.version,
            "encoding": self.encoding,
            "root": self.root.to_dict(),
        }

    def to_xml(self) -> str:
        """Serialize document to markup text."""
        # Local import: the serializer depends on this module
        from rss_channel.tree.serializer import serialize

        return serialize(self)

    def __str__(self) -> str:
        return self.to_xml()
