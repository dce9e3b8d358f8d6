"""Namespace-aware, read-only view over a parsed XML part.

:class:`XmlNode` wraps an ElementTree element and answers queries by
*local name* within one namespace.  Prefixes never matter: ``w:p`` and
``ns0:p`` are the same node as long as both resolve to the namespace the
node was created with.  Lookups that miss, including names living in a
foreign namespace, return ``None`` or an empty sequence rather than raising.
"""

from __future__ import annotations

from typing import Iterator, Optional
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

from docx2quill.errors import MalformedXml


def parse_xml(blob: bytes | str, namespace: str) -> XmlNode:
    """Parse *blob* and return its root as an :class:`XmlNode`.

    Raises:
        MalformedXml: *blob* is not well-formed XML.
    """
    try:
        root = ET.fromstring(blob)
    except ET.ParseError as exc:
        raise MalformedXml(f"Document part is not well-formed XML: {exc}") from exc
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedXml(f"Document part cannot be decoded: {exc}") from exc
    return XmlNode(root, namespace)


class XmlNode:
    """Query interface over one element, scoped to *namespace*."""

    __slots__ = ("_element", "_namespace")

    def __init__(self, element: Element, namespace: str) -> None:
        self._element = element
        self._namespace = namespace

    def __repr__(self) -> str:
        return f"XmlNode({self._element.tag!r})"

    # -- naming -------------------------------------------------------------

    def _qualify(self, name: str) -> str:
        return f"{{{self._namespace}}}{name}"

    def _wrap(self, element: Element) -> XmlNode:
        return XmlNode(element, self._namespace)

    @property
    def local_name(self) -> Optional[str]:
        """Local tag name, or ``None`` when the tag is outside the namespace."""
        prefix = f"{{{self._namespace}}}"
        tag = self._element.tag
        if isinstance(tag, str) and tag.startswith(prefix):
            return tag[len(prefix):]
        return None

    def is_element(self, name: str) -> bool:
        return self.local_name == name

    # -- navigation ---------------------------------------------------------

    def child(self, name: str) -> Optional[XmlNode]:
        """First direct child called *name*, if any."""
        found = self._element.find(self._qualify(name))
        return self._wrap(found) if found is not None else None

    def children(self, name: Optional[str] = None) -> list[XmlNode]:
        """Direct element children in document order, optionally filtered."""
        if name is None:
            return [self._wrap(el) for el in self._element]
        return [self._wrap(el) for el in self._element.findall(self._qualify(name))]

    def descendants(self, name: str, *, stop_at: Optional[str] = None) -> Iterator[XmlNode]:
        """Yield descendants called *name* in document order.

        The walk does not enter descendants called *stop_at*, so a
        paragraph's runs can be collected without those of a paragraph
        nested inside it (text boxes, for instance).
        """
        wanted = self._qualify(name)
        barrier = self._qualify(stop_at) if stop_at else None
        stack = list(reversed(self._element))
        while stack:
            el = stack.pop()
            if el.tag == wanted:
                yield self._wrap(el)
            if barrier is not None and el.tag == barrier:
                continue
            stack.extend(reversed(el))

    # -- content ------------------------------------------------------------

    def attr(self, name: str) -> Optional[str]:
        """Value of the namespaced attribute *name*, if present."""
        return self._element.get(self._qualify(name))

    @property
    def text(self) -> str:
        """Concatenated text content of this node and its descendants."""
        return "".join(self._element.itertext())
