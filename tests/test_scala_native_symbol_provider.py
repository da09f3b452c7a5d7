import unittest

from sndemangle.common.BinaryInfo import BinaryInfo
from sndemangle.common.labelprovider.ScalaNativeSymbolProvider import ScalaNativeSymbolProvider

from .context import config, raw_config


class MockSymbol:
    def __init__(self, name, value, is_function=True):
        self.name = name
        self.value = value
        self.is_function = is_function


class MockExport:
    def __init__(self, name, address):
        self.name = name
        self.address = address


class MockLiefBinary:
    def __init__(self, exported_functions=None):
        self.exported_functions = exported_functions if exported_functions else []


class TestScalaNativeSymbolProvider(unittest.TestCase):
    def test_symbol_table_parsing(self):
        provider = ScalaNativeSymbolProvider(config)
        symbols = [
            MockSymbol("_SM17java.lang.IntegerD7compareiiiEo", 0x1000),
            # Mach-O flavor with an additional leading underscore
            MockSymbol("__ST10__dispatch", 0x2000),
            MockSymbol("main", 0x3000),
            MockSymbol("_SM3FooQ", 0x4000),
            MockSymbol("_ST3foo", 0x5000, is_function=False),
            MockSymbol("_ST3bar", 0),
            None,
        ]

        results = provider._parse_lief_symbols(symbols)

        self.assertEqual(results[0x1000], "java.lang.Integer.compare(Int,Int): Int")
        self.assertEqual(results[0x2000], "__dispatch")
        self.assertNotIn(0x3000, results)
        self.assertNotIn(0x4000, results)
        self.assertNotIn(0x5000, results)
        self.assertEqual(len(results), 2)

    def test_symbol_table_without_function_flag(self):
        provider = ScalaNativeSymbolProvider(config)
        results = provider._parse_lief_symbols([MockSymbol("_ST3foo", 0x5000, is_function=False)], require_function=False)
        self.assertEqual(results, {0x5000: "foo"})

    def test_raw_names(self):
        provider = ScalaNativeSymbolProvider(raw_config)
        results = provider._parse_lief_symbols([MockSymbol("_SM17java.lang.IntegerD7compareiiiEo", 0x1000)])
        self.assertEqual(results[0x1000], "java.lang.Integer.compare(scala.Int,scala.Int): scala.Int")

    def test_exports(self):
        provider = ScalaNativeSymbolProvider(config)
        mock_binary = MockLiefBinary(
            exported_functions=[
                MockExport("_ST10__dispatch", 0x1000),
                MockExport("ExportedFunc", 0x2000),
                MockExport("_SM38scala.scalanative.junit.JUnitFrameworkIE", 0x3000),
            ]
        )

        results = provider.parseExports(mock_binary, 0x400000)

        self.assertEqual(results[0x401000], "__dispatch")
        self.assertNotIn(0x402000, results)
        self.assertEqual(results[0x403000], "scala.scalanative.junit.JUnitFramework.<clinit>")

    def test_detection_logic(self):
        provider = ScalaNativeSymbolProvider(config)
        bi = BinaryInfo(b"some code... scala.scalanative.runtime.GC ... more code")
        self.assertTrue(provider.isScalaNativeBinary(bi))
        bi2 = BinaryInfo(b"random binary data")
        self.assertFalse(provider.isScalaNativeBinary(bi2))
        self.assertFalse(provider.isScalaNativeBinary(BinaryInfo(b"")))

    def test_unknown_format_is_skipped(self):
        provider = ScalaNativeSymbolProvider(config)
        provider.update(BinaryInfo(b"random binary data"))
        self.assertEqual(provider.getFunctionSymbols(), {})
        self.assertEqual(provider.getSymbol(0x1000), "")
        self.assertTrue(provider.isSymbolProvider())
        self.assertFalse(provider.isApiProvider())

    def test_binary_formats(self):
        self.assertEqual(BinaryInfo(b"\x7fELF\x02\x01").getFormat(), "elf")
        self.assertEqual(BinaryInfo(b"MZ\x90\x00").getFormat(), "pe")
        self.assertEqual(BinaryInfo(b"\xcf\xfa\xed\xfe\x07\x00").getFormat(), "macho")
        self.assertEqual(BinaryInfo(b"\x00\x01").getFormat(), "")


if __name__ == "__main__":
    unittest.main()
