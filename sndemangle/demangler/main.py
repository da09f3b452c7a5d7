from .ScalaNativeDemangler import ScalaNativeDemangler


def demangle(inp_str: str, config=None) -> str:
    """Demangle a Scala Native identifier.

    Args:
        inp_str: The mangled identifier, starting with _S.
        config: Optional DemanglingConfig, defaults are used if omitted.

    Returns:
        The demangled, fully-qualified name.

    Raises:
        MissingSchemePrefixError: If the identifier does not start with _S.
        DemanglingError: If the identifier violates the mangling grammar.
    """
    demangler = ScalaNativeDemangler(config)
    return demangler.demangle(inp_str)


def decode(inp_str: str, config=None):
    """Demangle a Scala Native identifier without raising.

    Returns:
        A DemanglingResult holding either the demangled name or the error description.
    """
    demangler = ScalaNativeDemangler(config)
    return demangler.decode(inp_str)
