"""SVG scene graph used by the chart engines.

Nodes keep their children in insertion order, which is also paint order:
shapes emitted later are drawn on top of earlier ones.  Serialisation is
deterministic so identical inputs always yield byte-identical documents.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

SVG_NS = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _attribute_name(key: str) -> str:
    # ``class_`` -> ``class``; ``stroke_width`` -> ``stroke-width``
    return key.rstrip("_").replace("_", "-")


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


@dataclass
class SvgElement:
    """A minimal SVG node.

    Attribute values are stored as strings.  ``set`` accepts Python style
    keyword names and converts them to SVG names, so ``class_`` and
    ``text_anchor`` become ``class`` and ``text-anchor``.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["SvgElement"] = field(default_factory=list)
    text: Optional[str] = None

    def set(self, **attrs: object) -> "SvgElement":
        for key, value in attrs.items():
            if value is None:
                continue
            self.attributes[_attribute_name(key)] = _format_value(value)
        return self

    def add(self, *children: "SvgElement") -> "SvgElement":
        self.children.extend(children)
        return self

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        pad = "  " * indent if pretty else ""
        attrs = "".join(
            f" {name}={_quote(value)}" for name, value in sorted(self.attributes.items())
        )
        if not self.children and self.text is None:
            return f"{pad}<{self.tag}{attrs}/>"
        if not self.children:
            # Inline text keeps whitespace-sensitive labels intact.
            return f"{pad}<{self.tag}{attrs}>{_escape(self.text or '')}</{self.tag}>"

        separator = "\n" if pretty else ""
        parts: List[str] = [f"{pad}<{self.tag}{attrs}>"]
        if self.text is not None:
            child_pad = "  " * (indent + 1) if pretty else ""
            parts.append(f"{child_pad}{_escape(self.text.strip())}")
        for child in self.children:
            parts.append(child.to_string(indent + 1, pretty=pretty))
        parts.append(f"{pad}</{self.tag}>")
        return separator.join(parts)


def _quote(value: str) -> str:
    return f'"{_escape(value)}"'


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def element(tag: str, text: Optional[str] = None, **attrs: object) -> SvgElement:
    """Shorthand for ``SvgElement(tag, text=text).set(**attrs)``."""

    return SvgElement(tag, text=text).set(**attrs)


class Fragment:
    """Ordered collection of elements produced by a layout engine."""

    def __init__(self, elements: Optional[Iterable[SvgElement]] = None) -> None:
        self.elements: List[SvgElement] = list(elements or ())

    # Element factories -------------------------------------------------
    def rect(self, x: float, y: float, width: float, height: float, **attrs: object) -> SvgElement:
        return self.add(element("rect", x=x, y=y, width=width, height=height, **attrs))

    def circle(self, cx: float, cy: float, r: float, **attrs: object) -> SvgElement:
        return self.add(element("circle", cx=cx, cy=cy, r=r, **attrs))

    def line(self, x1: float, y1: float, x2: float, y2: float, **attrs: object) -> SvgElement:
        return self.add(element("line", x1=x1, y1=y1, x2=x2, y2=y2, **attrs))

    def path(self, d: str, **attrs: object) -> SvgElement:
        return self.add(element("path", d=d, **attrs))

    def polygon(self, points: str, **attrs: object) -> SvgElement:
        return self.add(element("polygon", points=points, **attrs))

    def text(self, x: float, y: float, value: str, **attrs: object) -> SvgElement:
        return self.add(element("text", text=value, x=x, y=y, **attrs))

    def add(self, node: SvgElement) -> SvgElement:
        self.elements.append(node)
        return node

    def extend(self, other: "Fragment") -> "Fragment":
        self.elements.extend(other.elements)
        return self

    def __iter__(self) -> Iterator[SvgElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def to_string(self, indent: int = 0, pretty: bool = True) -> str:
        separator = "\n" if pretty else ""
        return separator.join(node.to_string(indent, pretty=pretty) for node in self.elements)


@dataclass
class SvgDocument:
    """Scene container that serialises to a standalone SVG document."""

    width: float
    height: float
    root: SvgElement = field(init=False)

    def __post_init__(self) -> None:
        self.root = SvgElement("svg").set(xmlns=SVG_NS, width=self.width, height=self.height)

    def add(self, node: SvgElement) -> SvgElement:
        self.root.add(node)
        return node

    def extend(self, nodes: Iterable[SvgElement]) -> None:
        for node in nodes:
            self.add(node)

    def to_string(self, pretty: bool = True, declaration: bool = True) -> str:
        body = self.root.to_string(indent=0, pretty=pretty)
        if not declaration:
            return body
        return f"{XML_DECLARATION}\n{body}"

    def to_bytes(self, pretty: bool = True) -> bytes:
        return self.to_string(pretty=pretty).encode("utf-8")
