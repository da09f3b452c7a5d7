import logging

from sndemangle.DemanglingConfig import DemanglingConfig
from sndemangle.DemanglingResult import DemanglingResult

from .cursor import Cursor
from .definition import read_definition
from .errors import DemanglingError, MissingSchemePrefixError

LOGGER = logging.getLogger(__name__)

SCHEME_PREFIX = "_S"


class ScalaNativeDemangler:
    def __init__(self, config=None):
        self.config = config if config is not None else DemanglingConfig()

    def demangle(self, identifier: str) -> str:
        """Demangle the given identifier

        Args:
            identifier (str): Scala Native identifier, starting with _S

        Raises:
            DemanglingError: on the first violation of the mangling grammar
        """
        if not identifier.startswith(SCHEME_PREFIX):
            raise MissingSchemePrefixError(identifier)
        cursor = Cursor(identifier, len(SCHEME_PREFIX))
        self.config.trace("demangle", cursor.rest())
        return read_definition(cursor, self.config)

    def decode(self, identifier: str) -> DemanglingResult:
        """Like demangle(), but report grammar violations in the result instead of raising."""
        try:
            return DemanglingResult(identifier, demangled=self.demangle(identifier))
        except DemanglingError as exc:
            LOGGER.debug("Failed to demangle %s: %s", identifier, exc)
            return DemanglingResult(identifier, error=exc.describe())

    def decodeAll(self, identifiers):
        for identifier in identifiers:
            yield self.decode(identifier)
