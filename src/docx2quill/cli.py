"""Command-line interface for docx2quill.

Usage::

    docx2quill chapter1.docx                    # writes chapter1.html
    docx2quill *.docx -o chapters/              # explicit output directory
    docx2quill chapter1.docx --style html        # use the html preset
    docx2quill chapter1.docx --json              # print the batch result
    docx2quill --list-styles                     # list available presets
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from docx2quill import __version__
from docx2quill.config import PRESETS
from docx2quill.converter import Converter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docx2quill",
        description="Convert Word (.docx) files to rich-text editor HTML.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="input",
        help="Paths to the .docx files to convert.",
    )
    parser.add_argument(
        "-o", "--output-dir",
        help="Directory for the .html files. Defaults to each input's directory.",
    )
    parser.add_argument(
        "-s", "--style",
        default="quill",
        choices=PRESETS,
        help="Output preset (default: %(default)s).",
    )
    parser.add_argument(
        "-j", "--workers",
        type=int,
        default=1,
        help="Number of files converted in parallel (default: %(default)s).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the results as JSON instead of writing files.",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="List available presets and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_styles:
        print("Available presets:")
        for preset in PRESETS:
            print(f"  - {preset}")
        return 0

    if not args.inputs:
        parser.error("the following arguments are required: input")

    input_paths = [Path(p) for p in args.inputs]
    for path in input_paths:
        if not path.is_file():
            print(f"Error: file not found: {path}", file=sys.stderr)
            return 1

    # Packages are named by the path as given, so every document maps back
    # to its own source file.
    packages = [(str(path), path.read_bytes()) for path in input_paths]
    converter = Converter(style_preset=args.style)
    result = converter.convert_batch(packages, max_workers=max(args.workers, 1))

    for failure in result.failures:
        print(f"Failed to import {failure.name}: {failure.kind.value}", file=sys.stderr)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0 if result.ok else 1

    ok = result.ok
    written: dict[Path, str] = {}
    for doc in result.documents:
        out_dir = Path(args.output_dir) if args.output_dir else Path(doc.name).parent
        output_path = out_dir / f"{doc.title}.html"
        key = output_path.resolve()
        if key in written:
            print(
                f"Error: {doc.name} not written, {output_path} already holds "
                f"{written[key]}",
                file=sys.stderr,
            )
            ok = False
            continue
        out_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(doc.html, encoding="utf-8")
        written[key] = doc.name
        if args.verbose:
            print(f"{doc.name} -> {output_path} ({len(doc.html)} chars)")
        else:
            print(f"Converted: {output_path}")

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
