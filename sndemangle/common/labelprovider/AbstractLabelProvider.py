#!/usr/bin/python

from abc import abstractmethod

import logging
LOGGER = logging.getLogger(__name__)


class AbstractLabelProvider:

    def __init__(self, config):
        raise NotImplementedError

    @abstractmethod
    def update(self, binary_info):
        """Parse the symbol tables of the given BinaryInfo and populate the provider"""
        raise NotImplementedError

    @abstractmethod
    def getSymbol(self, address):
        """Return the demangled symbol for the given address if known, else an empty string"""
        raise NotImplementedError

    @abstractmethod
    def isSymbolProvider(self):
        """Returns whether the getSymbol(..) function of the AbstractLabelProvider is functional"""
        return False

    @abstractmethod
    def getFunctionSymbols(self):
        """Return all demangled symbols as address:name"""
        return {}
