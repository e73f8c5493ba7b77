"""
Command-line interface for json2ts.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape

from json2ts.options import CASE_TYPES

console = Console(stderr=True)

EXPORT_CODES = {"a": "all", "r": "root", "n": "none"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2ts",
        description="Generate TypeScript interfaces from JSON data",
        epilog="Reads standard input when neither --file nor --text is given.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-f", "--file", help="Path to the JSON file to convert")
    source.add_argument("-t", "--text", help="Raw JSON string to convert")

    parser.add_argument(
        "-o", "--output",
        help="File to write the declarations to (default: standard output)",
    )
    parser.add_argument(
        "-n", "--name",
        default=None,
        help="Name of the root interface (default: RootObject)",
    )
    parser.add_argument(
        "--suggest-name",
        action="store_true",
        help="Derive the root interface name from the data when --name is not given",
    )
    parser.add_argument(
        "-l", "--flat",
        action="store_true",
        help="Generate a single flattened interface instead of nested interfaces",
    )
    parser.add_argument(
        "-e", "--export",
        choices=sorted(EXPORT_CODES),
        default="r",
        help="Export all (a), root only (r) or none (n) of the interfaces (default: r)",
    )
    parser.add_argument(
        "--max-tuple",
        type=int,
        default=10,
        help="Longest array typed as a tuple (default: 10)",
    )
    parser.add_argument(
        "--min-tuple",
        type=int,
        default=2,
        help="Shortest array typed as a tuple (default: 2)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Type null and undefined literally instead of as unknown",
    )
    parser.add_argument(
        "-m", "--type-map",
        action="append",
        default=[],
        metavar="KEY=TYPE",
        help="Override the type of a property name, literal value or runtime type (repeatable)",
    )
    parser.add_argument(
        "--type-map-file",
        help="YAML or JSON file mapping keys to TypeScript types",
    )
    parser.add_argument(
        "-c", "--property-case",
        choices=CASE_TYPES,
        default="original",
        help="Naming convention for property names (default: original)",
    )
    parser.add_argument(
        "--readonly",
        action="store_true",
        help="Mark every property readonly",
    )
    parser.add_argument(
        "--optional",
        action="store_true",
        help="Mark every property optional",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=100,
        help="Deepest nesting level accepted (default: 100)",
    )
    parser.add_argument(
        "--sample",
        type=int,
        default=None,
        metavar="N",
        help="Only read the first N elements of a top-level array in --file",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while sampling",
    )
    return parser


def load_type_map(entries: List[str], path: Optional[str]) -> Optional[Dict[str, str]]:
    """Merges a type map file with KEY=TYPE entries; entries win."""
    type_map: Dict[str, str] = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Type map file {path} must contain a mapping")
        type_map.update({str(k): str(v) for k, v in loaded.items()})

    for entry in entries:
        key, sep, value = entry.partition("=")
        if not sep or not key or not value:
            raise ValueError(f"Invalid type map entry {entry!r}, expected KEY=TYPE")
        type_map[key] = value

    return type_map or None


def read_input(args: argparse.Namespace) -> Any:
    """
    Returns JSON text, or the parsed sample when --sample is used.
    None means there was nothing to read.
    """
    if args.file:
        if args.sample is not None:
            from json2ts.sampling import read_sample
            return read_sample(args.file, args.sample, progress=args.progress)
        return Path(args.file).read_text(encoding="utf-8")
    if args.text is not None:
        return args.text
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from json2ts import __version__
        console.print(f"json2ts version {__version__}")
        return 0

    if args.sample is not None and not args.file:
        parser.error("--sample requires --file")

    # Import here to avoid slow startup for --help
    from json2ts.converters import JsonToFlattenedTsConverter, JsonToTsConverter
    from json2ts.errors import Json2TsError, WriteFailure
    from json2ts.naming import check_identifier, suggest_type_name
    from json2ts.options import ConvertOptions
    from json2ts.parser import parse_json

    try:
        raw = read_input(args)
        if raw is None:
            parser.print_help()
            return 0

        if isinstance(raw, str):
            parsed = parse_json(raw)
            if not parsed.ok:
                console.print(f"[bold red]Error parsing JSON: {escape(parsed.describe())}[/bold red]")
                return 1
            data = parsed.data
        else:
            data = raw

        name = args.name
        if name is None:
            name = suggest_type_name(data) if args.suggest_name else "RootObject"
        if not check_identifier(name):
            console.print(f"[bold red]Error: invalid interface name {escape(repr(name))}[/bold red]")
            return 1

        options = ConvertOptions(
            array_max_tuple_size=args.max_tuple,
            array_min_tuple_size=args.min_tuple,
            strict=args.strict,
            type_map=load_type_map(args.type_map, args.type_map_file),
            property_case=args.property_case,
            readonly_properties=args.readonly,
            optional_properties=args.optional,
            max_depth=args.max_depth,
        )

        converter = JsonToFlattenedTsConverter if args.flat else JsonToTsConverter
        output = converter.convert_value(data, name, EXPORT_CODES[args.export], options)
        if output is None:
            return 1

        if args.output:
            try:
                Path(args.output).write_text(output + "\n", encoding="utf-8")
            except OSError as e:
                raise WriteFailure(f"Cannot write {args.output}: {e}") from e
            console.print(f"[bold green]Successfully wrote TypeScript definitions to: {escape(args.output)}[/bold green]")
        else:
            sys.stdout.write(output + "\n")

    except WriteFailure as e:
        console.print(f"[bold red]Error writing output file: {escape(str(e))}[/bold red]")
        return 1
    except (OSError, ValueError, yaml.YAMLError, Json2TsError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
