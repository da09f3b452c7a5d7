from dataclasses import dataclass

from .cursor import Cursor
from .errors import UnknownScopeTagError


@dataclass(frozen=True)
class Public:
    def render(self) -> str:
        return ""


@dataclass(frozen=True)
class PublicStatic:
    def render(self) -> str:
        return ""


@dataclass(frozen=True)
class Private:
    owner_path: str

    def render(self) -> str:
        return f"<private[{self.owner_path}]>"


@dataclass(frozen=True)
class PrivateStatic:
    owner_path: str

    def render(self) -> str:
        return f"<private[{self.owner_path}]>"


# <scope> ::=
#     O                              // public
#     o                              // public static
#     P <defn-name>                  // private to defn-name
#     p <defn-name>                  // private static to defn-name
def read_scope(cursor: Cursor, config):
    config.trace("scope", cursor.rest())
    # imported here, scopes and definitions are mutually recursive
    from .definition import read_definition

    if cursor.eat("O"):
        return Public()
    elif cursor.eat("o"):
        return PublicStatic()
    elif cursor.eat("P"):
        return Private(read_definition(cursor, config))
    elif cursor.eat("p"):
        return PrivateStatic(read_definition(cursor, config))
    raise UnknownScopeTagError(cursor.rest(), f"scope: cannot read `{cursor.rest()}`")
