import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from sndemangle.DemanglingConfig import DemanglingConfig

from .cursor import Cursor
from .errors import MalformedCPointerError, TruncatedInputError, UnknownNullableTagError, UnknownTypeTagError
from .names import read_name
from .rendering import common_type_name, scala_root_name


class PrimitiveKind(Enum):
    BOOLEAN = "Boolean"
    CHAR = "Char"
    FLOAT = "Float"
    DOUBLE = "Double"
    UNIT = "Unit"
    NULL = "Null"
    NOTHING = "Nothing"
    BYTE = "Byte"
    SHORT = "Short"
    INT = "Int"
    LONG = "Long"


PRIMITIVE_TAGS = {
    "z": PrimitiveKind.BOOLEAN,
    "c": PrimitiveKind.CHAR,
    "f": PrimitiveKind.FLOAT,
    "d": PrimitiveKind.DOUBLE,
    "u": PrimitiveKind.UNIT,
    "l": PrimitiveKind.NULL,
    "n": PrimitiveKind.NOTHING,
    "b": PrimitiveKind.BYTE,
    "s": PrimitiveKind.SHORT,
    "i": PrimitiveKind.INT,
    "j": PrimitiveKind.LONG,
}


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind

    def render(self, config) -> str:
        return scala_root_name(self.kind.value, config)


@dataclass(frozen=True)
class CVararg:
    def render(self, config) -> str:
        return "<c vararg>"


@dataclass(frozen=True)
class CPointer:
    def render(self, config) -> str:
        return "<c pointer>"


@dataclass(frozen=True)
class CArray:
    element: object
    count: int

    def render(self, config) -> str:
        return f"CArray[{self.element.render(config)}]"


@dataclass(frozen=True)
class NullableArray:
    element: object

    def render(self, config) -> str:
        return f"Array[{self.element.render(config)}]"


@dataclass(frozen=True)
class NullableClass:
    name: str

    def render(self, config) -> str:
        return common_type_name(self.name, config)


@dataclass(frozen=True)
class ExactClass:
    name: str

    def render(self, config) -> str:
        return common_type_name(self.name, config)


@dataclass(frozen=True)
class Class:
    name: str

    def render(self, config) -> str:
        return common_type_name(self.name, config)


# <type-name> ::=
#     v                              // c vararg
#     R _                            // c pointer type-name
#     A <type-name> <number> _       // c array type-name
#     b | s | i | j                  // scala.Byte, scala.Short, scala.Int, scala.Long
#     z | c | f | d                  // scala.Boolean, scala.Char, scala.Float, scala.Double
#     u | l | n                      // scala.Unit, scala.Null, scala.Nothing
#     L <nullable-type-name>         // nullable type-name
#     X <name>                       // nonnull exact class type-name
# S <type-name>+ E (c anonymous struct) is not supported and rejected as an unknown tag.
def read_type(cursor: Cursor, config):
    config.trace("type_name", cursor.rest())
    cursor.check_recursion_limit(config.MAX_RECURSION_DEPTH)
    try:
        if cursor.at_end():
            raise TruncatedInputError(cursor.inn, "type_name: unexpected end of input")
        tag = cursor.next_char()
        if tag == "v":
            return CVararg()
        elif tag in PRIMITIVE_TAGS:
            return Primitive(PRIMITIVE_TAGS[tag])
        elif tag == "R":
            if cursor.at_end():
                raise TruncatedInputError(cursor.inn, "type_name: unexpected end of input after R")
            cursor.expect("_", MalformedCPointerError, f"type_name: after R expected _, got `{cursor.peek()}` instead")
            return CPointer()
        elif tag == "L":
            return read_nullable_type(cursor, config)
        elif tag == "A":
            element = read_type(cursor, config)
            count = cursor.digits()
            cursor.expect("_", UnknownTypeTagError, "type_name: expected _ to close c array")
            try:
                return CArray(element, int(count) if count else 0)
            except ValueError:
                raise UnknownTypeTagError(
                    cursor.text(cursor.pos - len(count) - 1), f"type_name: c array count of {len(count)} digits is too long"
                ) from None
        elif tag == "X":
            return ExactClass(read_name(cursor, config))
        else:
            raise UnknownTypeTagError(cursor.text(cursor.pos - 1), f"type_name: unexpected start character `{tag}`")
    finally:
        cursor.leave()


def read_nullable_type(cursor: Cursor, config):
    config.trace("nullable_type_name", cursor.rest())
    if cursor.at_end():
        raise TruncatedInputError(cursor.inn, "nullable_type_name: unexpected end of input")
    tag = cursor.peek()
    if tag == "A":
        cursor.next_char()
        element = read_type(cursor, config)
        cursor.expect("_", UnknownNullableTagError, "nullable_type_name: expected _ to close array")
        return NullableArray(element)
    elif tag == "X":
        cursor.next_char()
        return NullableClass(read_name(cursor, config))
    elif tag in string.digits:
        return Class(read_name(cursor, config))
    raise UnknownNullableTagError(cursor.rest(), f"nullable_type_name: unexpected start `{tag}`")


def decode_type(inn: str, config=None) -> Tuple[int, object]:
    """Decode a single type name from the start of inn, returning (consumed bytes, type name)."""
    config = config if config is not None else DemanglingConfig()
    cursor = Cursor(inn)
    type_name = read_type(cursor, config)
    return cursor.pos, type_name
