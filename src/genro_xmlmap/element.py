# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Generic fallback for elements no schema describes.

XmlElement keeps an unrecognized subtree uninterpreted: its name,
attributes, namespace bindings and nested nodes (elements and text).
It round-trips through XmlElementSerializer.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .convert import ElementConverter
from .engine import ElementBuilder
from .ser import ElementSerializer, Sink
from .tokens import Attribute, Characters, ElementStart, QName


@dataclass
class XmlElement:
    """Uninterpreted element. nodes holds XmlElement children and text strings."""

    name: QName
    attributes: list[Attribute] = field(default_factory=list)
    namespaces: dict[str | None, str] = field(default_factory=dict)
    nodes: list[XmlElement | str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return ''.join(node for node in self.nodes if isinstance(node, str))

    @property
    def children(self) -> list[XmlElement]:
        return [node for node in self.nodes if isinstance(node, XmlElement)]

    def attribute(self, local_name: str) -> str | None:
        for attr in self.attributes:
            if attr.name.local_name == local_name:
                return attr.value
        return None

    def iter(self, local_name: str | None = None) -> Iterator[XmlElement]:
        """Depth-first walk over this element and its descendants."""
        if local_name is None or self.name.local_name == local_name:
            yield self
        for child in self.children:
            yield from child.iter(local_name)


class XmlElementBuilder(ElementBuilder):
    """Recursive catch-all builder. Whitespace-only text is dropped."""

    def on_start(self, elem_start: ElementStart) -> None:
        self.element = XmlElement(
            elem_start.name, list(elem_start.attributes), dict(elem_start.namespaces)
        )

    def on_child(self, elem_start: ElementStart) -> None:
        self.element.nodes.append(XmlElementBuilder(self.tokens).parse(elem_start))

    def on_text(self, text: str) -> None:
        self.element.nodes.append(text)

    def build(self) -> XmlElement:
        return self.element


class XmlElementSerializer(ElementSerializer):
    def attributes(self, record: XmlElement) -> list[Attribute]:
        return list(record.attributes)

    def namespaces(self, record: XmlElement) -> dict[str | None, str]:
        # prefixed names may rely on bindings declared by an ancestor
        namespaces = dict(record.namespaces)
        for name in [record.name] + [attr.name for attr in record.attributes]:
            if name.prefix and name.namespace and name.prefix not in namespaces:
                namespaces[name.prefix] = name.namespace
        return namespaces

    def children(self, record: XmlElement, sink: Sink) -> None:
        for node in record.nodes:
            if isinstance(node, str):
                sink.write(Characters(node))
            else:
                self.serialize(node, node.name, sink)


class XmlElementConverter(ElementConverter):
    builder = XmlElementBuilder
    serializer = XmlElementSerializer
