from .errors import RecursionLimitExceededError, TruncatedInputError

DIGITS = b"0123456789"


class Cursor:
    """Owns the identifier being decoded and the byte offset of the next unread byte.

    Lengths in the mangling scheme count UTF-8 bytes, so the cursor walks the encoded
    identifier. All accessors raise a DemanglingError instead of running off the end of
    the input or splitting a multi-byte character.
    """

    def __init__(self, inn: str, pos: int = 0) -> None:
        self.inn = inn
        self.data = inn.encode("utf-8", "surrogatepass")
        self.pos = pos
        self.recursion = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def remaining(self) -> int:
        return max(len(self.data) - self.pos, 0)

    def text(self, start: int) -> str:
        """Input from byte offset start onwards, for messages and traces."""
        return self.data[start:].decode("utf-8", "replace")

    def rest(self) -> str:
        return self.text(self.pos)

    def peek(self) -> str:
        if self.at_end():
            raise TruncatedInputError(self.inn)
        # tags are ASCII, any byte of a multi-byte character matches none of them
        return chr(self.data[self.pos])

    def next_char(self) -> str:
        c = self.peek()
        self.pos += 1
        return c

    def startswith(self, literal: str) -> bool:
        return self.data.startswith(literal.encode("ascii"), self.pos)

    def eat(self, literal: str) -> bool:
        if self.startswith(literal):
            self.pos += len(literal)
            return True
        return False

    def expect(self, literal: str, error_cls=TruncatedInputError, message=None) -> None:
        if self.eat(literal):
            return
        if self.at_end():
            raise TruncatedInputError(self.inn)
        if message is None:
            message = f"expected `{literal}`, got `{self.peek()}` instead"
        raise error_cls(self.rest(), message)

    def take(self, length: int) -> str:
        """Consume length bytes and return them as text."""
        if length < 0 or length > self.remaining():
            raise TruncatedInputError(self.rest(), f"expected {length} more bytes, got {self.remaining()}")
        start = self.pos
        try:
            payload = self.data[start : start + length].decode("utf-8")
        except UnicodeDecodeError:
            raise TruncatedInputError(self.text(start), f"{length} bytes end inside a multi-byte character") from None
        self.pos += length
        return payload

    def digits(self) -> str:
        start = self.pos
        while self.pos < len(self.data) and self.data[self.pos] in DIGITS:
            self.pos += 1
        return self.data[start : self.pos].decode("ascii")

    def check_recursion_limit(self, limit: int) -> None:
        """Check and increment recursion counter. Must be paired with leave()."""
        if self.recursion >= limit:
            raise RecursionLimitExceededError(self.rest())
        self.recursion += 1

    def leave(self) -> None:
        self.recursion -= 1
