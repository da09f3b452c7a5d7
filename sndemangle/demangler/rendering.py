from typing import List

IMMUTABLE_COLLECTIONS_PREFIX = "scala.collection.immutable."

COLLAPSED_NAMES = {
    "java.lang.Object": "Object",
    "java.lang.String": "String",
    "java.lang.Throwable": "Throwable",
}


def scala_root_name(name: str, config) -> str:
    """Primitive kinds live in the scala package, which is only spelled out when not collapsing."""
    if config.COLLAPSE_KNOWN_NAMES:
        return name
    return f"scala.{name}"


def common_type_name(name: str, config) -> str:
    if not config.COLLAPSE_KNOWN_NAMES:
        return name
    if name in COLLAPSED_NAMES:
        return COLLAPSED_NAMES[name]
    if name.startswith(IMMUTABLE_COLLECTIONS_PREFIX):
        return name[len(IMMUTABLE_COLLECTIONS_PREFIX) :]
    return name


def render_member(prefix: str, name: str, type_names: List[str]) -> str:
    # the last type name is the return type, everything before it are parameters
    *params, return_type = type_names
    if not params:
        return f"{prefix}{name}: {return_type}"
    return "{}{}({}): {}".format(prefix, name, ",".join(params), return_type)
