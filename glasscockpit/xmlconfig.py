"""Read-only access to XML configuration documents."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from typing import Optional, Union

__all__ = ["XMLReadError", "XMLNode", "XMLParser"]

_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")

_TRUE_WORDS = frozenset({"1", "true", "TRUE", "True"})


class XMLReadError(Exception):
    """Raised when an XML document cannot be read or a node cannot be used."""


def _leading_float(text: str, pos: int = 0) -> Optional[re.Match]:
    return _FLOAT_RE.match(text, pos)


def _parse_float(text: str) -> float:
    """Parse a leading floating-point number, giving 0.0 when there is none."""
    match = _leading_float(text)
    return float(match.group(1)) if match else 0.0


def _parse_int(text: str) -> int:
    """Parse a leading integer in decimal, octal (0...) or hex (0x...) form."""
    match = _INT_RE.match(text)
    if not match:
        return 0
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def _node_content(element: ET.Element) -> Optional[str]:
    """Text content of an element's first child node, or None if it has none."""
    if element.text is not None:
        return element.text
    if len(element):
        return "".join(element[0].itertext())
    return None


class XMLNode:
    """A handle on one element of a document; it may be invalid (refer to nothing)."""

    __slots__ = ("_element",)

    def __init__(self, element: Optional[ET.Element] = None) -> None:
        self._element = element

    def __repr__(self) -> str:
        if self._element is None:
            return "XMLNode(<invalid>)"
        return f"XMLNode({self._element.tag!r})"

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def is_valid(self) -> bool:
        """True when the node refers to an existing element."""
        return self._element is not None

    def _require(self) -> ET.Element:
        if self._element is None:
            raise XMLReadError("operation on an invalid XML node")
        return self._element

    @property
    def name(self) -> str:
        """The element's tag name."""
        return self._require().tag

    @property
    def text(self) -> str:
        """The text content of the element's first child node."""
        content = _node_content(self._require())
        return content if content is not None else ""

    def child(self, name: str) -> "XMLNode":
        """The first child element called ``name``; an invalid node if none."""
        element = self._require()
        found = next((sub for sub in element if sub.tag == name), None)
        return XMLNode(found)

    def children(self, name: Optional[str] = None) -> list["XMLNode"]:
        """All child elements, or only those called ``name``."""
        element = self._require()
        return [XMLNode(sub) for sub in element if name is None or sub.tag == name]

    def has_child(self, name: str) -> bool:
        return self.child(name).is_valid

    def attribute(self, name: str) -> str:
        """The value of an attribute, or an empty string if it is absent."""
        return self._require().get(name, "")

    def has_attribute(self, name: str) -> bool:
        """True when the attribute exists and is not empty."""
        return bool(self.attribute(name))

    def text_as_float(self) -> float:
        return _parse_float(self.text)

    def text_as_int(self) -> int:
        return _parse_int(self.text)

    def text_as_bool(self) -> bool:
        return self.text in _TRUE_WORDS

    def text_as_coord(self) -> tuple[float, float]:
        """Parse text of the form ``x,y`` into a pair of floats."""
        text = self.text
        if "," not in text:
            raise ValueError("coordinates must contain a comma")
        first = _leading_float(text)
        if not first or text[first.end():first.end() + 1] != ",":
            raise ValueError(f"malformed coordinates {text!r}")
        second = _leading_float(text, first.end() + 1)
        if not second:
            raise ValueError(f"malformed coordinates {text!r}")
        return float(first.group(1)), float(second.group(1))


class XMLParser:
    """Loads an XML file and finds nodes in it by absolute path."""

    def __init__(self) -> None:
        self._root: Optional[ET.Element] = None

    def read(self, filename: Union[str, os.PathLike, None]) -> None:
        """Read and parse a file, replacing any document read before."""
        if filename is None:
            raise XMLReadError("invalid file name")
        try:
            tree = ET.parse(filename)
        except (ET.ParseError, OSError) as exc:
            raise XMLReadError(f'could not parse XML file "{filename}"') from exc
        root = tree.getroot()
        if root is None:
            raise XMLReadError(f'empty XML file "{filename}"')
        self._root = root

    def get_node(self, path: str) -> XMLNode:
        """Find a node by a path such as ``/Window/Title``; ``/`` is the root.

        The first matching node is returned at each step; a path that leads
        nowhere gives an invalid node.
        """
        if not path.startswith("/"):
            raise ValueError("XMLNode path must start with '/'")
        node = XMLNode(self._root)
        if path == "/":
            return node
        tokens = path[1:].split("/")
        if path.endswith("/"):
            tokens.pop()
        for token in tokens:
            if not node:
                break
            node = node.child(token)
        return node

    def has_node(self, path: str) -> bool:
        return self.get_node(path).is_valid

    def format_tree(self) -> str:
        """Render the document as an indented tree of names, attributes and text."""
        if self._root is None:
            return ""
        lines: list[str] = []
        self._format_element(self._root, "", lines)
        return "".join(lines)

    def _format_element(self, element: ET.Element, indentation: str, lines: list[str]) -> None:
        parts = [indentation, element.tag]
        parts.extend(f' ({key}="{value}")' for key, value in element.attrib.items())
        content = _node_content(element)
        if content is not None and " " not in content:
            parts.append(f' = "{content}"\n')
        else:
            parts.append("\n")
        lines.append("".join(parts))
        for sub in element:
            self._format_element(sub, indentation + "    ", lines)