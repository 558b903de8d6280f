#!/usr/bin/env python3
"""
Command-line interface for lambdagen - functional interface source generator.
"""

import argparse
import json
import sys
from pathlib import Path

from .config import DEFAULT_BASE_PACKAGE, DEFAULT_OUTPUT_ROOT, GeneratorConfig
from .types import GenerationError, Kind


def _config_from_args(args) -> GeneratorConfig:
    return GeneratorConfig(
        output_root=Path(args.output),
        base_package=args.package,
        encoding=args.encoding,
        author=args.author,
    )


def generate_command(args):
    """Generate the whole interface family."""
    from .driver import generate_all

    config = _config_from_args(args)

    def on_write(path):
        if args.verbose:
            print(f"Wrote {path}")

    try:
        report = generate_all(config, on_write=on_write)
    except (GenerationError, OSError) as e:
        print(f"Error generating into {config.output_root}: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.quiet:
        print(f"Generated {report.file_count} file(s) for {report.signatures} signature(s)")


def name_command(args):
    """Print the class name of one signature."""
    from .signature import OperatorSignature, SignatureSpec
    from .types import PREDICATE, lookup_token

    try:
        if args.operator:
            if args.returns.lower() in ("none", "predicate"):
                raise GenerationError("Operators need an element type")
            signature = OperatorSignature(
                lookup_token(args.returns), tuple(lookup_token(p) for p in args.params))
        else:
            if args.returns.lower() == "none":
                return_token = None
            elif args.returns.lower() == "predicate":
                return_token = PREDICATE
            else:
                return_token = lookup_token(args.returns)
            signature = SignatureSpec(return_token, tuple(lookup_token(p) for p in args.params))
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(signature.class_name(args.throw) + signature.generic_declaration(args.throw))


def decode_command(args):
    """Decode generated class names and output them as JSON."""
    from .decoder import NameDecoder, NameDecodeError

    decoder = NameDecoder()
    for name in args.names:
        try:
            decoded = decoder.decode(Path(name).name)
        except NameDecodeError as e:
            print(f"Error decoding {name}: {e}", file=sys.stderr)
            sys.exit(1)
        print(json.dumps(decoded.to_dict()))


def list_command(args):
    """List planned class names."""
    from .driver import plan

    try:
        signatures = plan()
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for signature in signatures:
        if args.kind and signature.kind.directory != args.kind:
            continue
        print(signature.class_name(False))
        print(signature.class_name(True))


def _add_generate_options(parser, suppress_defaults=False):
    """Register the generate options.

    The sub-parser copy suppresses its defaults so values given before the
    sub-command are not overwritten.
    """
    def default(value):
        return argparse.SUPPRESS if suppress_defaults else value

    parser.add_argument(
        "-o", "--output",
        default=default(str(DEFAULT_OUTPUT_ROOT)),
        help=f"Source root for generated files (default: {DEFAULT_OUTPUT_ROOT})",
    )
    parser.add_argument(
        "--package",
        default=default(DEFAULT_BASE_PACKAGE),
        help=f"Base Java package (default: {DEFAULT_BASE_PACKAGE})",
    )
    parser.add_argument(
        "--encoding",
        default=default("utf-8"),
        help="Charset of generated files (default: utf-8)",
    )
    parser.add_argument(
        "--author",
        default=default("zhitron"),
        help="@author tag of generated files (empty to omit)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=default(False),
        help="Print each generated file",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=default(False),
        help="Suppress summary output",
    )


def main(argv=None):
    """Main entry point for lambdagen CLI."""
    parser = argparse.ArgumentParser(
        prog="lambdagen",
        description="Generate Java functional interfaces for every primitive/generic signature",
    )
    _add_generate_options(parser)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write every interface under the output root",
    )
    _add_generate_options(generate_parser, suppress_defaults=True)
    generate_parser.set_defaults(func=generate_command)

    # Name command
    name_parser = subparsers.add_parser(
        "name",
        help="Print the class name for a return type and parameter types",
    )
    name_parser.add_argument(
        "returns",
        help="Return type token, 'none' for consumers or 'predicate'",
    )
    name_parser.add_argument(
        "params",
        nargs="+",
        help="Parameter type tokens (boolean, char, byte, short, int, long, float, double, object)",
    )
    name_parser.add_argument(
        "--throw",
        action="store_true",
        help="Name the throwing variant",
    )
    name_parser.add_argument(
        "--operator",
        action="store_true",
        help="Name an operator; every param must be the element type",
    )
    name_parser.set_defaults(func=name_command)

    # Decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode generated class names and output JSON",
    )
    decode_parser.add_argument(
        "names",
        nargs="+",
        help="Class names or .java file names",
    )
    decode_parser.set_defaults(func=decode_command)

    # List command
    list_parser = subparsers.add_parser(
        "list",
        help="List every class name that generate would write",
    )
    list_parser.add_argument(
        "--kind",
        choices=[kind.directory for kind in Kind],
        help="Only list one family",
    )
    list_parser.set_defaults(func=list_command)

    args = parser.parse_args(argv)

    # No sub-command: generate with the top-level options
    if args.command is None:
        generate_command(args)
        return

    args.func(args)


if __name__ == "__main__":
    main()
