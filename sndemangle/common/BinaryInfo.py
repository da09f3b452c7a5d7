import hashlib


class BinaryInfo(object):
    """ simple DTO to contain the binary/buffer whose symbols are to be demangled """

    raw_data = b""
    binary_size = 0
    file_path = ""
    sha256 = ""

    def __init__(self, binary, file_path=""):
        self.raw_data = binary
        self.binary_size = len(binary)
        self.file_path = file_path
        self.sha256 = hashlib.sha256(binary).hexdigest()

    @classmethod
    def fromFile(cls, file_path):
        with open(file_path, "rb") as fin:
            return cls(fin.read(), file_path=file_path)

    def getFormat(self):
        if self.raw_data[:4] == b"\x7fELF":
            return "elf"
        if self.raw_data[:2] == b"MZ":
            return "pe"
        if self.raw_data[:4] in (b"\xcf\xfa\xed\xfe", b"\xce\xfa\xed\xfe", b"\xfe\xed\xfa\xcf", b"\xfe\xed\xfa\xce"):
            return "macho"
        return ""
