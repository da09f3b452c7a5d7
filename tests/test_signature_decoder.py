#!/usr/bin/python

import logging
import unittest

from sndemangle.demangler.cursor import Cursor
from sndemangle.demangler.definition import decode_definition
from sndemangle.demangler.errors import (
    MalformedDefinitionError,
    MalformedSignatureError,
    TruncatedInputError,
    UnknownScopeTagError,
    UnknownSignatureTagError,
    UnknownTypeTagError,
)
from sndemangle.demangler.scope import Private, PrivateStatic, Public, PublicStatic, read_scope
from sndemangle.demangler.signature import Duplicate, Method, Proxy, StaticInit, read_signature
from sndemangle.demangler.type_names import Class, Primitive, PrimitiveKind

from .context import config, raw_config

LOG = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(asctime)-15s %(message)s")
logging.disable(logging.CRITICAL)

INT = Primitive(PrimitiveKind.INT)


class SignatureDecoderTestSuite(unittest.TestCase):
    """Definitions, signatures and scopes below the _S prefix"""

    def testDefinitions(self):
        self.assertEqual(decode_definition("T10__dispatch", config), "__dispatch")
        self.assertEqual(decode_definition("M3FooF3barO", config), "Foo.bar")
        with self.assertRaises(MalformedDefinitionError) as context:
            decode_definition("", config)
        self.assertIn("empty", str(context.exception))
        with self.assertRaises(MalformedDefinitionError) as context:
            decode_definition("Q3Foo", config)
        self.assertIn("unknown name modifier 'Q'", str(context.exception))

    def testScopes(self):
        self.assertEqual(read_scope(Cursor("O"), config), Public())
        self.assertEqual(read_scope(Cursor("o"), config), PublicStatic())
        self.assertEqual(read_scope(Cursor("PT3Foo"), config), Private("Foo"))
        self.assertEqual(read_scope(Cursor("pM3FooF3barO"), config), PrivateStatic("Foo.bar"))
        self.assertEqual(Public().render(), "")
        self.assertEqual(PublicStatic().render(), "")
        self.assertEqual(Private("Foo").render(), "<private[Foo]>")
        self.assertEqual(PrivateStatic("Foo").render(), "<private[Foo]>")
        with self.assertRaises(UnknownScopeTagError):
            read_scope(Cursor("X"), config)
        with self.assertRaises(UnknownScopeTagError):
            read_scope(Cursor(""), config)

    def testFields(self):
        self.assertEqual(decode_definition("M3FooF3barO", config), "Foo.bar")
        self.assertEqual(decode_definition("M3FooF3baro", config), "Foo.bar")
        self.assertEqual(decode_definition("M3FooF3barPT3Baz", config), "Foo.<private[Baz]>bar")
        with self.assertRaises(UnknownScopeTagError):
            decode_definition("M3FooF3bar", config)

    def testMethods(self):
        signature = read_signature(Cursor("D3bariiEO"), config)
        self.assertEqual(signature, Method("bar", (INT,), INT, Public()))
        self.assertEqual(signature.render(config), "bar(Int): Int")
        self.assertEqual(signature.render(raw_config), "bar(scala.Int): scala.Int")
        self.assertEqual(decode_definition("M3FooD3bariEO", config), "Foo.bar: Int")
        self.assertEqual(decode_definition("M3FooD3barL16java.lang.StringzuEO", config), "Foo.bar(String,Boolean): Unit")
        self.assertEqual(decode_definition("M3FooD3bariEPM3BazF3quxO", config), "Foo.<private[Baz.qux]>bar: Int")

    def testMethodParameterCount(self):
        for count in range(0, 6):
            identifier = "M3FooD3bar" + "i" * count + "jEO"
            result = decode_definition(identifier, config)
            if count == 0:
                self.assertEqual(result, "Foo.bar: Long")
            else:
                self.assertEqual(result, "Foo.bar({}): Long".format(",".join(["Int"] * count)))

    def testProxyAndDuplicate(self):
        self.assertEqual(read_signature(Cursor("P3bariuE"), config), Proxy("bar", (INT,), Primitive(PrimitiveKind.UNIT)))
        self.assertEqual(read_signature(Cursor("K3barjE"), config), Duplicate("bar", (), Primitive(PrimitiveKind.LONG)))
        self.assertEqual(decode_definition("M3FooP3bariuE", config), "Foo.bar(Int): Unit")
        self.assertEqual(decode_definition("M3FooP3bariiuE", config), "Foo.bar(Int,Int): Unit")
        self.assertEqual(decode_definition("M3FooK3barjE", config), "Foo.bar: Long")
        self.assertEqual(decode_definition("M3FooK3barL3BazjE", config), "Foo.bar(Baz): Long")

    def testConstructors(self):
        self.assertEqual(decode_definition("M3FooRiL16java.lang.StringE", config), "Foo.Int, String")
        self.assertEqual(decode_definition("M3FooRE", config), "Foo.")

    def testExternGeneratedAndStaticInit(self):
        self.assertEqual(decode_definition("M3FooC6malloc", config), "Foo.malloc")
        self.assertEqual(decode_definition("M3FooG4$gen", config), "Foo.$gen")
        self.assertEqual(decode_definition("M3FooIE", config), "Foo.<clinit>")
        self.assertEqual(read_signature(Cursor("I"), config), StaticInit())

    def testMalformedSignatures(self):
        with self.assertRaises(MalformedSignatureError):
            decode_definition("M3FooD3barEO", config)
        with self.assertRaises(MalformedSignatureError):
            decode_definition("M3FooP3barE", config)
        with self.assertRaises(UnknownTypeTagError):
            decode_definition("M3FooD3bariO", config)
        with self.assertRaises(TruncatedInputError):
            decode_definition("M3FooD3bari", config)
        with self.assertRaises(UnknownSignatureTagError):
            decode_definition("M3FooQ", config)
        with self.assertRaises(UnknownSignatureTagError):
            decode_definition("M3Foo", config)

    def testClassParameters(self):
        signature = read_signature(Cursor("D3barL3BazuEO"), config)
        self.assertEqual(signature.param_types, (Class("Baz"),))


if __name__ == "__main__":
    unittest.main()
