# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Error and position model.

Builders and converters raise plain MapError instances carrying one
ErrorKind. The element engine wraps them into PositionedError at the depth
where they were raised, and every enclosing element appends itself as
context while the error travels up the stack.

Classes:
    Position - (line, column, offset) location in the source document
    ErrorKind - every failure the mapper can report
    MapError - local error raised by builders and converters
    PositionedError - MapError annotated with its source location
    GenerationError - configuration fault detected by the generator
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Position:
    """Location of an event in the source document.

    Lines are 1-based, columns are 0-based, offset is the byte index.
    """

    line: int = 1
    column: int = 0
    offset: int = 0

    def __str__(self) -> str:
        return f'line {self.line}, column {self.column}'


class ErrorKind(Enum):
    """Failure categories."""

    TOKENIZATION = 'tokenization'
    UNEXPECTED_END = 'unexpected_end'
    UNEXPECTED_EVENT = 'unexpected_event'
    UNEXPECTED_ATTRIBUTE = 'unexpected_attribute'
    INVALID_VALUE = 'invalid_value'
    PRIMITIVE_DECODE = 'primitive_decode'
    MISSING_FIELD = 'missing_field'
    DUPLICATE_ROOT = 'duplicate_root'
    MISSING_ROOT = 'missing_root'
    GENERATION_CONFIG = 'generation_config'


class MapError(ValueError):
    """Error raised while building or serializing a single element."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f'{self.kind.value}: {self.message}'


class GenerationError(MapError):
    """Unresolvable generator configuration."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.GENERATION_CONFIG, message)


class PositionedError(Exception):
    """A MapError annotated with the position where it was raised.

    Attributes:
        error: The wrapped MapError.
        position: Innermost position, closest to the fault. Never
            overwritten while the error propagates.
        context: Enclosing elements as (name, start position) pairs,
            innermost first.
    """

    def __init__(self, error: MapError, position: Position):
        super().__init__(str(error))
        self.error = error
        self.position = position
        self.context: list[tuple[Any, Position]] = []

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def add_context(self, name: Any, position: Position) -> PositionedError:
        """Record an enclosing element. Returns self for chaining."""
        self.context.append((name, position))
        return self

    def __str__(self) -> str:
        text = f'{self.error} at {self.position}'
        for name, position in self.context:
            text += f'\n  in <{name}> started at {position}'
        return text


# =============================================================================
# Factories
# =============================================================================


def unexpected_attribute(name: Any) -> MapError:
    return MapError(ErrorKind.UNEXPECTED_ATTRIBUTE, f'unexpected attribute {name!s}')


def unexpected_end(expected: Any, found: Any) -> MapError:
    return MapError(
        ErrorKind.UNEXPECTED_END, f'expected end of <{expected}>, found end of <{found}>'
    )


def unexpected_event(event: Any) -> MapError:
    return MapError(ErrorKind.UNEXPECTED_EVENT, f'unexpected {type(event).__name__} event')


def missing_field(name: str) -> MapError:
    return MapError(ErrorKind.MISSING_FIELD, f'missing required field {name!r}')


def decode_failure(text: str, type_name: str) -> MapError:
    return MapError(ErrorKind.PRIMITIVE_DECODE, f'cannot decode {text!r} as {type_name}')


def invalid_value(message: str) -> MapError:
    return MapError(ErrorKind.INVALID_VALUE, message)


def too_small(limit: Any, value: Any) -> MapError:
    return invalid_value(f'value {value} is below the limit {limit}')


def too_large(limit: Any, value: Any) -> MapError:
    return invalid_value(f'value {value} exceeds the limit {limit}')


def duplicate_root(name: Any) -> MapError:
    return MapError(ErrorKind.DUPLICATE_ROOT, f'repeated root element <{name}>')


def missing_root(names: Any) -> MapError:
    expected = ', '.join(f'<{name}>' for name in names)
    return MapError(ErrorKind.MISSING_ROOT, f'document has no root element among {expected}')
