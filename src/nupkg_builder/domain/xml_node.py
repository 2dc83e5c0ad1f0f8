"""Immutable XML document tree.

Metadata documents are built as ``XmlNode`` values by pure functions and only
converted to ``xml.etree.ElementTree`` elements when serialized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
import xml.etree.ElementTree as ET


@dataclass(frozen=True)
class XmlNode:
    """An element with ordered attributes, optional text and child elements.

    ``tag`` and attribute names are written literally, so prefixed names such
    as ``dc:creator`` and ``xmlns:dc`` declarations are carried as-is.
    """

    tag: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple[XmlNode, ...] = ()
    text: Optional[str] = None

    def to_element(self) -> ET.Element:
        element = ET.Element(self.tag, dict(self.attributes))
        if self.text is not None:
            element.text = self.text
        for child in self.children:
            element.append(child.to_element())
        return element


def element(tag: str, *children: XmlNode, text: Optional[str] = None, **attributes: str) -> XmlNode:
    """Build an ``XmlNode``; keyword arguments become attributes in order."""
    return XmlNode(tag=tag, attributes=tuple(attributes.items()), children=tuple(children), text=text)
