"""
vectoricon — SVG shapes to vector icon commands.

Usage:
  vectoricon input.svg                         # prints to terminal
  vectoricon input.svg -o icon.icon            # saves to file
  vectoricon input.svg --scale-x 2 --flip-x    # scale, then mirror horizontally
  vectoricon folder/ -o output_folder/         # batch process folder
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace

from vectoricon.config import settings
from vectoricon.engine.config import ConverterConfig
from vectoricon.engine.errors import ConversionError
from vectoricon.engine.pipeline import create_converter
from vectoricon.svg.parser import canvas_size, load_document

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".icon"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vectoricon", description="SVG → vector icon commands")
    parser.add_argument("input", help="SVG file or folder of SVGs")
    parser.add_argument("-o", "--output", help="Output file or folder")
    parser.add_argument("--scale-x", type=float, default=1.0)
    parser.add_argument("--scale-y", type=float, default=1.0)
    parser.add_argument("--translate-x", type=float, default=0.0)
    parser.add_argument("--translate-y", type=float, default=0.0)
    parser.add_argument("--flip-x", action="store_true", help="Mirror horizontally across the canvas width")
    parser.add_argument(
        "--group-traversal",
        choices=["all", "first"],
        default=settings.vectoricon_group_traversal,
        help="'first' reproduces the legacy walk that stops at the first plain <g>",
    )
    parser.add_argument("--strict", action="store_true", default=settings.vectoricon_strict, help="Abort on the first broken shape")
    parser.add_argument("--keep-unfilled", action="store_true", help="Also convert <path fill=\"none\">")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> ConverterConfig:
    return ConverterConfig(
        scale_x=args.scale_x,
        scale_y=args.scale_y,
        translate_x=args.translate_x,
        translate_y=args.translate_y,
        group_traversal=args.group_traversal,
        strict=args.strict,
        skip_unfilled_paths=not args.keep_unfilled,
    )


def flipped(config: ConverterConfig, svg_text: str) -> ConverterConfig:
    """Mirror x so the canvas' right edge lands at the origin's place."""
    width, _ = canvas_size(load_document(svg_text))
    return replace(
        config,
        scale_x=-config.scale_x,
        translate_x=config.translate_x + width * config.scale_x,
    )


def convert_text(svg_text: str, config: ConverterConfig, flip_x: bool = False) -> str:
    if flip_x:
        config = flipped(config, svg_text)
    ctx = create_converter(config).convert(svg_text)
    for diagnostic in ctx.diagnostics:
        print(f"  {diagnostic}", file=sys.stderr)
    return ctx.text


def process_file(input_path: str, output_path: str | None, config: ConverterConfig, flip_x: bool = False) -> bool:
    """Convert one file. Returns True on success."""
    logger.debug("Converting %s", input_path)
    with open(input_path, encoding="utf-8") as f:
        svg_text = f.read()

    try:
        output = convert_text(svg_text, config, flip_x)
    except ConversionError as e:
        print(f"  Error: {e}", file=sys.stderr)
        return False

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        print(f"  Saved → {output_path}")
    else:
        print(output)
    return True


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.vectoricon_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = config_from_args(args)

    if os.path.isdir(args.input):
        # Batch mode
        svg_files = sorted(f for f in os.listdir(args.input) if f.lower().endswith(".svg"))
        if not svg_files:
            print("No .svg files found in folder.", file=sys.stderr)
            return 1

        out_dir = args.output or args.input.rstrip("/\\") + "_icons"
        os.makedirs(out_dir, exist_ok=True)

        print(f"Processing {len(svg_files)} files...\n")
        success = 0
        for fname in svg_files:
            print(f"[{fname}]")
            out_path = os.path.join(out_dir, os.path.splitext(fname)[0] + OUTPUT_SUFFIX)
            if process_file(os.path.join(args.input, fname), out_path, config, args.flip_x):
                success += 1

        print(f"\nDone: {success}/{len(svg_files)} converted → {out_dir}")
        return 0 if success == len(svg_files) else 1

    # Single file
    if not os.path.exists(args.input):
        print(f"File not found: {args.input}", file=sys.stderr)
        return 1
    return 0 if process_file(args.input, args.output, config, args.flip_x) else 1


if __name__ == "__main__":
    sys.exit(main())
