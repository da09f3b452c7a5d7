from dataclasses import dataclass
from typing import Tuple

from .cursor import Cursor
from .errors import MalformedSignatureError, TruncatedInputError, UnknownSignatureTagError
from .names import read_name
from .rendering import render_member
from .scope import Public, read_scope
from .type_names import read_type


@dataclass(frozen=True)
class Field:
    name: str
    scope: object

    def render(self, config) -> str:
        return f"{self.scope.render()}{self.name}"


@dataclass(frozen=True)
class Constructor:
    param_types: Tuple

    def render(self, config) -> str:
        return ", ".join(t.render(config) for t in self.param_types)


@dataclass(frozen=True)
class Method:
    name: str
    param_types: Tuple
    return_type: object
    scope: object

    def render(self, config) -> str:
        type_names = [t.render(config) for t in self.param_types + (self.return_type,)]
        return render_member(self.scope.render(), self.name, type_names)


@dataclass(frozen=True)
class Proxy:
    name: str
    param_types: Tuple
    return_type: object

    def render(self, config) -> str:
        type_names = [t.render(config) for t in self.param_types + (self.return_type,)]
        return render_member(Public().render(), self.name, type_names)


@dataclass(frozen=True)
class Duplicate(Proxy):
    pass


@dataclass(frozen=True)
class CExternOrGenerated:
    name: str

    def render(self, config) -> str:
        return self.name


@dataclass(frozen=True)
class StaticInit:
    def render(self, config) -> str:
        return "<clinit>"


def read_type_names(cursor: Cursor, config) -> Tuple:
    """Read type names up to and including the terminating E."""
    type_names = []
    while not cursor.startswith("E"):
        if cursor.at_end():
            raise TruncatedInputError(cursor.inn, "type names: missing terminating E")
        type_names.append(read_type(cursor, config))
    cursor.expect("E")
    return tuple(type_names)


def _split_return_type(cursor: Cursor, tag: str, type_names: Tuple):
    if not type_names:
        raise MalformedSignatureError(cursor.inn, f"sig_name: `{tag}` requires at least a return type")
    return type_names[:-1], type_names[-1]


# <sig-name> ::=
#     F <name> <scope>                    // field name
#     R <type-name>* E                    // constructor name
#     D <name> <type-name>+ E <scope>     // method name
#     P <name> <type-name>+ E             // proxy name
#     C <name>                            // c extern name
#     G <name>                            // generated name
#     K <name> <type-name>+ E             // duplicate name
#     I                                   // static initializer
def read_signature(cursor: Cursor, config):
    config.trace("sig_name", cursor.rest())
    cursor.check_recursion_limit(config.MAX_RECURSION_DEPTH)
    try:
        if cursor.at_end():
            raise UnknownSignatureTagError(cursor.inn, "sig_name: unexpectedly empty signature")
        tag = cursor.next_char()
        if tag in ("C", "G"):
            return CExternOrGenerated(read_name(cursor, config))
        elif tag == "I":
            return StaticInit()
        elif tag == "F":
            name = read_name(cursor, config)
            return Field(name, read_scope(cursor, config))
        elif tag == "R":
            return Constructor(read_type_names(cursor, config))
        elif tag == "D":
            name = read_name(cursor, config)
            param_types, return_type = _split_return_type(cursor, tag, read_type_names(cursor, config))
            config.trace("sig_name:D", cursor.rest())
            return Method(name, param_types, return_type, read_scope(cursor, config))
        elif tag in ("P", "K"):
            name = read_name(cursor, config)
            param_types, return_type = _split_return_type(cursor, tag, read_type_names(cursor, config))
            if tag == "P":
                return Proxy(name, param_types, return_type)
            return Duplicate(name, param_types, return_type)
        raise UnknownSignatureTagError(
            cursor.text(cursor.pos - 1), f"sig_name: expected to start with F/R/D/P/C/G/K/I, got `{tag}`"
        )
    finally:
        cursor.leave()
