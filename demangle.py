import argparse
import json
import logging
import os
import sys

from sndemangle.DemanglingConfig import DemanglingConfig
from sndemangle.DemanglingResult import DemanglingResult
from sndemangle.common.BinaryInfo import BinaryInfo
from sndemangle.common.labelprovider.ScalaNativeSymbolProvider import ScalaNativeSymbolProvider
from sndemangle.demangler import ScalaNativeDemangler


def readIdentifiers(file_path):
    """Yield (identifier, error) for each non-empty line, error is set for lines that are not UTF-8."""
    with open(file_path, "rb") as fin:
        for line_number, line in enumerate(fin, 1):
            line = line.rstrip(b"\r\n")
            if not line:
                continue
            try:
                identifier = line.decode("utf-8")
            except UnicodeDecodeError as exc:
                logging.warning("%s:%d is not valid UTF-8: %s", file_path, line_number, exc)
                yield line.decode("utf-8", "backslashreplace"), "InvalidEncoding: line {} is not valid UTF-8 ({})".format(
                    line_number, exc.reason
                )
                continue
            yield identifier, None


def demangleFile(file_path, config, as_json=False, fout=None):
    fout = fout if fout is not None else sys.stdout
    demangler = ScalaNativeDemangler(config)
    results = []
    for identifier, error in readIdentifiers(file_path):
        result = DemanglingResult(identifier, error=error) if error else demangler.decode(identifier)
        if not result.isOk():
            logging.debug("failed: %s", result.error)
        if as_json:
            results.append(result.toDict())
        else:
            print(result, file=fout)
    if as_json:
        json.dump(results, fout, indent=1, sort_keys=True)
        print(file=fout)
    return 0


def demangleIdentifier(identifier, config, as_json=False, fout=None, ferr=None):
    fout = fout if fout is not None else sys.stdout
    ferr = ferr if ferr is not None else sys.stderr
    result = ScalaNativeDemangler(config).decode(identifier)
    if as_json:
        json.dump(result.toDict(), fout, indent=1, sort_keys=True)
        print(file=fout)
    elif result.isOk():
        print(result.demangled, file=fout)
    if not result.isOk():
        print(result, file=ferr)
        return 1
    return 0


def demangleBinary(file_path, config, as_json=False, fout=None):
    fout = fout if fout is not None else sys.stdout
    binary_info = BinaryInfo.fromFile(file_path)
    provider = ScalaNativeSymbolProvider(config)
    if not provider.isScalaNativeBinary(binary_info):
        logging.warning("No Scala Native runtime strings found in %s, symbols may be missing.", file_path)
    provider.update(binary_info)
    symbols = provider.getFunctionSymbols()
    logging.info("Demangled %d Scala Native symbols from %s", len(symbols), os.path.basename(file_path))
    if as_json:
        json.dump({"0x%08x" % addr: name for addr, name in symbols.items()}, fout, indent=1, sort_keys=True)
        print(file=fout)
    else:
        for addr in sorted(symbols):
            print("0x%08x: %s" % (addr, symbols[addr]), file=fout)
    return 0


def buildParser():
    parser = argparse.ArgumentParser(description='Demangle Scala Native identifiers, given one by one, as a file with one identifier per line, or from the symbol table of a binary.')
    parser.add_argument('-r', '--raw', action='store_true', default=False, help='Do not shorten well-known names (e.g. keep scala.Int and java.lang.String).')
    parser.add_argument('-j', '--json', action='store_true', default=False, help='Emit results as JSON.')
    parser.add_argument('-v', '--verbose', action='store_true', default=False, help='Enable debug logging and trace every grammar production.')
    subparsers = parser.add_subparsers(dest='command')
    file_parser = subparsers.add_parser('file', help='Process a file of mangled identifiers, outputting results inline, separating mangled/unmangled names via ` = `.')
    file_parser.add_argument('name', type=str, help='Path to file with one identifier per line.')
    id_parser = subparsers.add_parser('id', help='Demangle a single identifier.')
    id_parser.add_argument('name', type=str, help='Identifier to demangle, e.g. _ST10__dispatch.')
    binary_parser = subparsers.add_parser('binary', help='Demangle all Scala Native symbols of an ELF, PE or Mach-O binary.')
    binary_parser.add_argument('name', type=str, help='Path to binary.')
    return parser


def main(argv=None):
    parser = buildParser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    config = DemanglingConfig(collapse_known_names=not args.raw, debug=args.verbose)
    if args.verbose:
        config.LOG_LEVEL = logging.DEBUG
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    if args.command == 'file':
        if not os.path.isfile(args.name):
            logging.error("Not a file: %s", args.name)
            return 1
        return demangleFile(args.name, config, as_json=args.json)
    if args.command == 'id':
        return demangleIdentifier(args.name, config, as_json=args.json)
    if not os.path.isfile(args.name):
        logging.error("Not a file: %s", args.name)
        return 1
    return demangleBinary(args.name, config, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
