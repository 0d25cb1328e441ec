# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Schema Model - data-only description of document shapes.

A SchemaType is an ordered sequence of child element declarations plus a set
of attribute declarations. A SimpleType is a range-restricted primitive.
Instances are immutable and are consumed by the Generator.

Compact builder syntax (complex_type):
    sequence:   'metadata=metadataType, wpt[]=wptType'
    attributes: 'version=_gpx:version, creator=xsd:string, extra?=xsd:string'

Element cardinality syntax:
    foo      -> exactly one
    foo[]    -> zero or more
    foo[0:]  -> zero or more
    foo[0:*] -> zero or more
    foo[:1]  -> exactly one (optional)
    foo[1:3] -> zero or more (any upper bound above 1)

Attributes are required unless the name ends with '?'.

Example:
    >>> wpt = complex_type('ele=xsd:decimal, link[]=linkType',
    ...                    attributes='lat=latitudeType, lon=longitudeType')
    >>> wpt.sequence[1].cardinality
    <Cardinality.MANY: 'many'>
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from genro_toolbox import smartsplit

_TAG_SPEC = re.compile(r'([A-Za-z_][\w.\-]*)(?:\[(\d*)(?::(\d*|\*))?\])?$')


class Cardinality(Enum):
    """Multiplicity of a declared child element."""

    ONE = 'one'
    MANY = 'many'


@dataclass(frozen=True)
class ElementDecl:
    """Declared child element: tag, referenced type, cardinality."""

    tag: str
    type_name: str
    cardinality: Cardinality = Cardinality.ONE

    @property
    def many(self) -> bool:
        return self.cardinality is Cardinality.MANY


@dataclass(frozen=True)
class AttributeDecl:
    """Declared attribute: name, primitive type, required flag."""

    name: str
    type_name: str
    required: bool = False


@dataclass(frozen=True)
class SchemaType:
    """Complex type: ordered child sequence plus attributes."""

    sequence: tuple[ElementDecl, ...] = ()
    attributes: tuple[AttributeDecl, ...] = ()

    def __post_init__(self) -> None:
        _check_unique([e.tag for e in self.sequence], 'tag')
        _check_unique([a.name for a in self.attributes], 'attribute')

    def element(self, tag: str) -> ElementDecl | None:
        for decl in self.sequence:
            if decl.tag == tag:
                return decl
        return None

    def attribute(self, name: str) -> AttributeDecl | None:
        for decl in self.attributes:
            if decl.name == name:
                return decl
        return None


@dataclass(frozen=True)
class SimpleType:
    """Primitive restricted to a numeric range."""

    base: str
    min_inclusive: float | None = None
    max_inclusive: float | None = None
    max_exclusive: float | None = None


def _check_unique(names: list[str], what: str) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise ValueError(f'Duplicate {what} {name!r} in schema type')
        seen.add(name)


# =============================================================================
# Compact builders
# =============================================================================


def parse_tag_spec(spec: str) -> tuple[str, int, int | None]:
    """Parse 'tag[min:max]' into (tag, min, max). max=None means unbounded.

    Raises:
        ValueError: If the tag spec is malformed.
    """
    match = _TAG_SPEC.match(spec.strip())
    if not match:
        raise ValueError(f'Invalid tag spec {spec!r}')
    tag, min_str, max_str = match.groups()
    if min_str is None:
        return tag, 1, 1
    if max_str is None:
        # foo[] or foo[n]
        if not min_str:
            return tag, 0, None
        return tag, int(min_str), int(min_str)
    min_val = int(min_str) if min_str else 0
    max_val = int(max_str) if max_str and max_str != '*' else None
    return tag, min_val, max_val


def complex_type(sequence: str = '', attributes: str = '') -> SchemaType:
    """Build a SchemaType from the compact comma-separated syntax."""
    elements = []
    for item in [x.strip() for x in smartsplit(sequence, ',') if x.strip()]:
        spec, type_name = _split_pair(item)
        tag, _min, max_val = parse_tag_spec(spec)
        cardinality = Cardinality.ONE if max_val == 1 else Cardinality.MANY
        elements.append(ElementDecl(tag, type_name, cardinality))

    attrs = []
    for item in [x.strip() for x in smartsplit(attributes, ',') if x.strip()]:
        name, type_name = _split_pair(item)
        required = not name.endswith('?')
        attrs.append(AttributeDecl(name.rstrip('?'), type_name, required))

    return SchemaType(sequence=tuple(elements), attributes=tuple(attrs))


def _split_pair(item: str) -> tuple[str, str]:
    if '=' not in item:
        raise ValueError(f"Expected 'name=type', got {item!r}")
    name, type_name = item.split('=', 1)
    return name.strip(), type_name.strip()
