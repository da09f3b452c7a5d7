class DemanglingResult(object):
    """ simple DTO holding the outcome of demangling a single identifier """

    def __init__(self, identifier, demangled=None, error=None):
        self.identifier = identifier
        self.demangled = demangled
        # "<Category>: [<offending input>] <message>" if demangling failed
        self.error = error

    def isOk(self):
        return self.error is None

    def toDict(self):
        return {
            "identifier": self.identifier,
            "demangled": self.demangled,
            "error": self.error,
        }

    def __str__(self):
        if self.isOk():
            return "{} = {}".format(self.identifier, self.demangled)
        return "{} ERROR {}".format(self.identifier, self.error)
