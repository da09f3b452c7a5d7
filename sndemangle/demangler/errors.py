class DemanglingError(Exception):
    category = "DemanglingError"

    def __init__(self, given_str, message="Not able to demangle the given string"):
        self.message = message
        self.given_str = given_str
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.given_str}] {self.message}"

    def describe(self):
        return f"{self.category}: {self}"


class MissingSchemePrefixError(DemanglingError):
    category = "MissingSchemePrefix"

    def __init__(self, given_str, message="identifier doesn't start with _S"):
        super().__init__(given_str, message)


class MalformedDefinitionError(DemanglingError):
    category = "MalformedDefinition"


class InvalidNameLengthError(DemanglingError):
    category = "InvalidNameLength"


class TruncatedInputError(DemanglingError):
    category = "TruncatedInput"

    def __init__(self, given_str, message="unexpected end of input"):
        super().__init__(given_str, message)


class UnknownTypeTagError(DemanglingError):
    category = "UnknownTypeTag"


class UnknownNullableTagError(DemanglingError):
    category = "UnknownNullableTag"


class MalformedCPointerError(DemanglingError):
    category = "MalformedCPointer"


class UnknownScopeTagError(DemanglingError):
    category = "UnknownScopeTag"


class UnknownSignatureTagError(DemanglingError):
    category = "UnknownSignatureTag"


class MalformedSignatureError(DemanglingError):
    category = "MalformedSignature"


class RecursionLimitExceededError(DemanglingError):
    category = "RecursionLimitExceeded"

    def __init__(self, given_str, message="Recursion limit exceeded"):
        super().__init__(given_str, message)
