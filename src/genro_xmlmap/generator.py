# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Offline generator: Schema Model -> Python source.

For every requested struct the generator emits, in this order:
    - a record dataclass (kw_only, required attributes without default)
    - a builder implementing the Element Builder contract
    - a serializer writing attributes and children in declared order
    - a converter tying builder and serializer together
For every requested simple type it emits a BoundedConverter subclass.

Referenced types resolve, in order, through the conversion map, the
simple types and the complete structs generated in the same run. An
unresolved name raises GenerationError before any source is produced.

Output is deterministic: it depends only on the order of the inputs.

Example:
    >>> gen = Generator(types, conversions, header=HEADER)
    >>> source = gen.generate([StructInfo('Link', 'linkType')])
"""

from __future__ import annotations

import keyword
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .errors import GenerationError
from .schema import AttributeDecl, ElementDecl, SchemaType, SimpleType

logger = logging.getLogger(__name__)

DEFAULT_HEADER = '''"""Generated by genro_xmlmap.generator. Do not edit."""

from __future__ import annotations

from dataclasses import dataclass, field

from genro_xmlmap import xsd
from genro_xmlmap.convert import BoundedConverter, ElementConverter
from genro_xmlmap.element import XmlElement
from genro_xmlmap.engine import ElementBuilder
from genro_xmlmap.errors import unexpected_attribute
from genro_xmlmap.ser import ElementSerializer, Sink, collect_attributes
from genro_xmlmap.tokens import Attribute, ElementStart, TokenSource
'''

# Names that would shadow ElementBuilder attributes and methods
RESERVED_FIELDS = frozenset(
    {
        'tokens',
        'namespaces',
        'parse',
        'on_start',
        'on_child',
        'on_text',
        'on_whitespace',
        'build',
        'parse_unknown',
        'accepts',
        'own_attributes',
        'child_tag',
        'require',
    }
)

_SHADOWED = frozenset({'type', 'id', 'format', 'hash', 'input', 'min', 'max', 'object', 'property'})

INDENT = '    '


@dataclass(frozen=True)
class Conversion:
    """Python type hint and converter expression for one schema type."""

    type_hint: str
    converter: str


@dataclass(frozen=True)
class StructInfo:
    """What to generate for one complex type.

    Attributes:
        name: Record class name; builder/serializer/converter derive from it.
        type_name: Key of the SchemaType in the types map.
        tags: Tag or attribute name -> field name overrides.
        record: Emit the record dataclass.
        build: Emit build(). Without it the builder is named
            `{name}BuilderBase` and a hand-written subclass completes it.
        serializer: Emit the serializer.
        namespace: Default namespace declared by the serializer.
    """

    name: str
    type_name: str
    tags: Mapping[str, str] = field(default_factory=dict)
    record: bool = True
    build: bool = True
    serializer: bool = True
    namespace: str | None = None

    @property
    def complete(self) -> bool:
        return self.record and self.build and self.serializer

    @property
    def builder_name(self) -> str:
        return f'{self.name}Builder' if self.build else f'{self.name}BuilderBase'


@dataclass(frozen=True)
class SimpleTypeInfo:
    name: str
    type_name: str


def ident_safe(name: str) -> str:
    """Turn a tag or attribute name into a usable Python identifier."""
    name = re.sub(r'\W', '_', name)
    if name[:1].isdigit():
        name = f'_{name}'
    if keyword.iskeyword(name) or name in _SHADOWED:
        name = f'{name}_'
    return name


def element_field_name(decl: ElementDecl, tags: Mapping[str, str]) -> str:
    if decl.tag in tags:
        return ident_safe(tags[decl.tag])
    return ident_safe(f'{decl.tag}s' if decl.many else decl.tag)


def attribute_field_name(decl: AttributeDecl, tags: Mapping[str, str]) -> str:
    return ident_safe(tags.get(decl.name, decl.name))


def _literal(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


class Generator:
    """Compile Schema Model instances into builders and serializers.

    Args:
        types: Type name -> SchemaType or SimpleType.
        conversions: Type name -> Conversion for types implemented outside
            the generated module (primitives, hand-written converters).
        header: Module prologue (docstring and imports) of the output.
        builder_base: Expression of the class generated builders extend.
        serializer_base: Expression of the class generated serializers extend.
    """

    def __init__(
        self,
        types: Mapping[str, SchemaType | SimpleType],
        conversions: Mapping[str, Conversion],
        header: str = DEFAULT_HEADER,
        builder_base: str = 'ElementBuilder',
        serializer_base: str = 'ElementSerializer',
    ):
        self.types = types
        self.conversions = conversions
        self.header = header
        self.builder_base = builder_base
        self.serializer_base = serializer_base
        self._structs: dict[str, StructInfo] = {}
        self._simples: dict[str, SimpleTypeInfo] = {}

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def generate(
        self, structs: Sequence[StructInfo], simple_types: Sequence[SimpleTypeInfo] = ()
    ) -> str:
        """Return the generated module source.

        Raises:
            GenerationError: Unknown or mistyped type names, unresolvable
                references, or field names colliding with builder members.
        """
        self._structs = {info.type_name: info for info in structs}
        self._simples = {info.type_name: info for info in simple_types}

        for info in simple_types:
            self._simple_type(info.type_name)
            self.resolve(info.type_name)
        for info in structs:
            self._check_struct(info)

        parts = [self.header.rstrip('\n')]
        for info in simple_types:
            logger.debug('Generating converter %s for %s', info.name, info.type_name)
            parts.append(self.simple_converter(info))
        for info in structs:
            logger.debug('Generating %s for %s', info.name, info.type_name)
            parts.extend(self.struct_sections(info))
        return '\n\n\n'.join(parts) + '\n'

    def resolve(self, type_name: str) -> Conversion:
        """Conversion used for a referenced type name."""
        if type_name in self.conversions:
            return self.conversions[type_name]
        simple = self._simples.get(type_name)
        if simple is not None:
            base = self._simple_type(type_name).base
            if base not in self.conversions:
                raise GenerationError(f'Base type {base!r} of {type_name!r} has no conversion')
            return Conversion(self.conversions[base].type_hint, simple.name)
        struct = self._structs.get(type_name)
        if struct is not None and struct.complete:
            return Conversion(struct.name, f'{struct.name}Converter')
        raise GenerationError(f'Unresolved type {type_name!r}')

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _complex_type(self, type_name: str) -> SchemaType:
        type_ = self.types.get(type_name)
        if not isinstance(type_, SchemaType):
            raise GenerationError(f'Type {type_name!r} is not a defined complex type')
        return type_

    def _simple_type(self, type_name: str) -> SimpleType:
        type_ = self.types.get(type_name)
        if not isinstance(type_, SimpleType):
            raise GenerationError(f'Type {type_name!r} is not a defined simple type')
        return type_

    def _check_struct(self, info: StructInfo) -> None:
        type_ = self._complex_type(info.type_name)
        names = [name for name, _decl in self._fields(info, type_)]
        for name in names:
            if name in RESERVED_FIELDS:
                raise GenerationError(f'Field {name!r} of {info.name} collides with a builder member')
        if len(set(names)) != len(names):
            raise GenerationError(f'Duplicate field names in {info.name}: {names}')
        for decl in type_.attributes:
            self.resolve(decl.type_name)
        for decl in type_.sequence:
            self.resolve(decl.type_name)

    def _fields(
        self, info: StructInfo, type_: SchemaType
    ) -> list[tuple[str, AttributeDecl | ElementDecl]]:
        fields: list[tuple[str, AttributeDecl | ElementDecl]] = [
            (attribute_field_name(decl, info.tags), decl) for decl in type_.attributes
        ]
        fields.extend((element_field_name(decl, info.tags), decl) for decl in type_.sequence)
        return fields

    # -------------------------------------------------------------------------
    # Emitters
    # -------------------------------------------------------------------------

    def simple_converter(self, info: SimpleTypeInfo) -> str:
        type_ = self._simple_type(info.type_name)
        lines = [
            f'class {info.name}(BoundedConverter):',
            f'{INDENT}"""`{info.type_name}`: restricted {type_.base}."""',
            '',
            f'{INDENT}base = {self.resolve(type_.base).converter}',
        ]
        for facet in ('min_inclusive', 'max_inclusive', 'max_exclusive'):
            value = getattr(type_, facet)
            if value is not None:
                lines.append(f'{INDENT}{facet} = {_literal(value)}')
        return '\n'.join(lines)

    def struct_sections(self, info: StructInfo) -> list[str]:
        type_ = self._complex_type(info.type_name)
        sections = []
        if info.record:
            sections.append(self.record(info, type_))
        sections.append(self.builder(info, type_))
        if info.serializer:
            sections.append(self.serializer(info, type_))
        if info.complete:
            sections.append(
                '\n'.join(
                    [
                        f'class {info.name}Converter(ElementConverter):',
                        f'{INDENT}builder = {info.builder_name}',
                        f'{INDENT}serializer = {info.name}Serializer',
                    ]
                )
            )
        return sections

    def record(self, info: StructInfo, type_: SchemaType) -> str:
        lines = [
            '@dataclass(kw_only=True)',
            f'class {info.name}:',
            f'{INDENT}"""`{info.type_name}` contents."""',
            '',
        ]
        for name, decl in self._fields(info, type_):
            hint = self.resolve(decl.type_name).type_hint
            if isinstance(decl, AttributeDecl) and decl.required:
                lines.append(f'{INDENT}{name}: {hint}')
            elif isinstance(decl, ElementDecl) and decl.many:
                lines.append(f'{INDENT}{name}: list[{hint}] = field(default_factory=list)')
            else:
                lines.append(f'{INDENT}{name}: {hint} | None = None')
        lines.append(f'{INDENT}unknown_elements: list[XmlElement] = field(default_factory=list)')
        return '\n'.join(lines)

    def builder(self, info: StructInfo, type_: SchemaType) -> str:
        i2, i3, i4 = INDENT * 2, INDENT * 3, INDENT * 4
        lines = [
            f'class {info.builder_name}({self.builder_base}):',
            f'{INDENT}"""Parses `{info.type_name}` elements."""',
            '',
            f'{INDENT}def __init__(self, tokens: TokenSource):',
            f'{i2}super().__init__(tokens)',
        ]
        for name, decl in self._fields(info, type_):
            hint = self.resolve(decl.type_name).type_hint
            if isinstance(decl, ElementDecl) and decl.many:
                lines.append(f'{i2}self.{name}: list[{hint}] = []')
            else:
                lines.append(f'{i2}self.{name}: {hint} | None = None')

        lines += [
            '',
            f'{INDENT}def on_start(self, elem_start: ElementStart) -> None:',
            f'{i2}for attr in self.own_attributes(elem_start):',
        ]
        if type_.attributes:
            lines.append(f'{i3}name = attr.name.local_name')
            for index, decl in enumerate(type_.attributes):
                keyword_ = 'if' if index == 0 else 'elif'
                field_name = attribute_field_name(decl, info.tags)
                converter = self.resolve(decl.type_name).converter
                lines += [
                    f'{i3}{keyword_} name == "{decl.name}":',
                    f'{i4}self.{field_name} = {converter}.from_attribute(attr.value)',
                ]
            lines += [f'{i3}else:', f'{i4}raise unexpected_attribute(attr.name)']
        else:
            lines.append(f'{i3}raise unexpected_attribute(attr.name)')

        if type_.sequence:
            lines += [
                '',
                f'{INDENT}def on_child(self, elem_start: ElementStart) -> None:',
                f'{i2}tag = self.child_tag(elem_start)',
            ]
            for index, decl in enumerate(type_.sequence):
                keyword_ = 'if' if index == 0 else 'elif'
                field_name = element_field_name(decl, info.tags)
                call = f'{self.resolve(decl.type_name).converter}.parse_via(self.tokens, elem_start)'
                lines.append(f'{i2}{keyword_} tag == "{decl.tag}":')
                if decl.many:
                    lines.append(f'{i3}self.{field_name}.append({call})')
                else:
                    lines.append(f'{i3}self.{field_name} = {call}')
            lines += [f'{i2}else:', f'{i3}self.parse_unknown(elem_start)']

        if info.build:
            lines += [
                '',
                f'{INDENT}def build(self) -> {info.name}:',
                f'{i2}return {info.name}(',
            ]
            for name, decl in self._fields(info, type_):
                if isinstance(decl, AttributeDecl) and decl.required:
                    lines.append(f'{i3}{name}=self.require("{decl.name}", self.{name}),')
                else:
                    lines.append(f'{i3}{name}=self.{name},')
            lines += [f'{i3}unknown_elements=self.unknown_elements,', f'{i2})']
        return '\n'.join(lines)

    def serializer(self, info: StructInfo, type_: SchemaType) -> str:
        i2, i3 = INDENT * 2, INDENT * 3
        lines = [
            f'class {info.name}Serializer({self.serializer_base}):',
            f'{INDENT}"""Writes {info.name} as `{info.type_name}`."""',
        ]
        if type_.attributes:
            lines += [
                '',
                f'{INDENT}def attributes(self, record: {info.name}) -> list[Attribute]:',
                f'{i2}return collect_attributes(',
            ]
            for decl in type_.attributes:
                field_name = attribute_field_name(decl, info.tags)
                converter = self.resolve(decl.type_name).converter
                lines.append(f'{i3}("{decl.name}", {converter}, record.{field_name}),')
            lines.append(f'{i2})')
        if info.namespace:
            lines += [
                '',
                f'{INDENT}def namespaces(self, record: {info.name}) -> dict[str | None, str]:',
                f'{i2}return {{None: "{info.namespace}"}}',
            ]
        if type_.sequence:
            lines += [
                '',
                f'{INDENT}def children(self, record: {info.name}, sink: Sink) -> None:',
            ]
            for decl in type_.sequence:
                field_name = element_field_name(decl, info.tags)
                converter = self.resolve(decl.type_name).converter
                if decl.many:
                    lines += [
                        f'{i2}for item in record.{field_name}:',
                        f'{i3}{converter}.serialize_via(item, sink, "{decl.tag}")',
                    ]
                else:
                    lines += [
                        f'{i2}if record.{field_name} is not None:',
                        f'{i3}{converter}.serialize_via(record.{field_name}, sink, "{decl.tag}")',
                    ]
        return '\n'.join(lines)
