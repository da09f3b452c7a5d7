#!/usr/bin/python

import logging

import lief

from sndemangle.demangler import DemanglingError, ScalaNativeDemangler

from .AbstractLabelProvider import AbstractLabelProvider

lief.logging.disable()
LOGGER = logging.getLogger(__name__)


class ScalaNativeSymbolProvider(AbstractLabelProvider):
    """Resolver for Scala Native symbols found in ELF, PE and Mach-O symbol tables"""

    def __init__(self, config):
        self._config = config
        self._demangler = ScalaNativeDemangler(config)
        # addr:func_name
        self._func_symbols = {}

    def isSymbolProvider(self):
        return True

    def isApiProvider(self):
        return False

    def getApi(self, to_address, api_address=None):
        return ("", "")

    def isScalaNativeBinary(self, binary_info):
        """
        Checks for strings the Scala Native runtime leaves in every binary it links into.
        """
        data = binary_info.raw_data
        if not data:
            return False
        signatures = [b"scala.scalanative.runtime", b"scala.scalanative.unsafe"]
        return any(sig in data for sig in signatures)

    def update(self, binary_info):
        self._func_symbols = {}
        if not binary_info.raw_data or not binary_info.getFormat():
            return
        try:
            lief_binary = lief.parse(binary_info.raw_data)
        except Exception as exc:
            LOGGER.debug("Failed to parse binary with LIEF: %s", type(exc).__name__)
            return
        if not lief_binary:
            return
        if isinstance(lief_binary, lief.ELF.Binary):
            self._func_symbols.update(self._parse_lief_symbols(lief_binary.symtab_symbols))
            self._func_symbols.update(self._parse_lief_symbols(lief_binary.dynamic_symbols))
        elif isinstance(lief_binary, lief.MachO.Binary):
            self._func_symbols.update(self._parse_lief_symbols(lief_binary.symbols, require_function=False))
        # PE exports are relative to the image base
        base_addr = lief_binary.imagebase if isinstance(lief_binary, lief.PE.Binary) else 0
        for address, name in self.parseExports(lief_binary, base_addr).items():
            if address not in self._func_symbols:
                self._func_symbols[address] = name

    def parseExports(self, binary, base_addr=0):
        function_symbols = {}
        for function in binary.exported_functions:
            demangled = self._demangle(function.name)
            if demangled:
                function_symbols[base_addr + function.address] = demangled
        return function_symbols

    def _parse_lief_symbols(self, symbols, require_function=True):
        function_symbols = {}
        for symbol in symbols:
            if symbol is None or symbol.value == 0:
                continue
            if require_function and not symbol.is_function:
                continue
            demangled = self._demangle(symbol.name)
            if demangled:
                function_symbols[symbol.value] = demangled
        return function_symbols

    def _demangle(self, raw_name):
        if not self._is_scala_native_symbol(raw_name):
            return ""
        # Mach-O prepends an underscore to every C-level symbol name
        if raw_name.startswith("__S"):
            raw_name = raw_name[1:]
        try:
            return self._demangler.demangle(raw_name)
        except DemanglingError as exc:
            LOGGER.debug("Failed to demangle Scala Native symbol %s: %s", raw_name, exc)
        return ""

    def _is_scala_native_symbol(self, name):
        """Check if a symbol name appears to be a Scala Native mangled identifier.

        Scala Native definitions are either top-level (_ST) or members (_SM).
        """
        return name.startswith(("_ST", "_SM", "__ST", "__SM"))

    def getSymbol(self, address):
        return self._func_symbols.get(address, "")

    def getFunctionSymbols(self):
        return self._func_symbols
