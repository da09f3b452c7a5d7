from sndemangle.DemanglingConfig import DemanglingConfig

from .cursor import Cursor
from .errors import MalformedDefinitionError
from .names import read_name
from .signature import read_signature


# <defn-name> ::=
#     T <name>                       // top-level name
#     M <name> <sig-name>            // member name
def read_definition(cursor: Cursor, config) -> str:
    config.trace("defn_name", cursor.rest())
    cursor.check_recursion_limit(config.MAX_RECURSION_DEPTH)
    try:
        if cursor.eat("T"):
            config.trace("toplevel_name", cursor.rest())
            return read_name(cursor, config)
        elif cursor.eat("M"):
            config.trace("member_name", cursor.rest())
            owner = read_name(cursor, config)
            signature = read_signature(cursor, config)
            return f"{owner}.{signature.render(config)}"
        elif cursor.at_end():
            raise MalformedDefinitionError(cursor.inn, "defn_name: unexpectedly empty rest of identifier")
        raise MalformedDefinitionError(cursor.rest(), f"defn_name: unknown name modifier '{cursor.peek()}'")
    finally:
        cursor.leave()


def decode_definition(inn: str, config=None) -> str:
    """Decode a definition, inn is the identifier without its _S prefix."""
    config = config if config is not None else DemanglingConfig()
    return read_definition(Cursor(inn), config)
