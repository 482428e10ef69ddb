"""
rrg-glossary: pull the GLOSSARY section out of the rules reference PDF.

Examples:
  rrg-glossary --pdf rrg/2020-02-28.pdf > glossary.md
  rrg-glossary --format json --out data/glossary.json -v
  rrg-glossary --list-fonts
  rrg-glossary --debug --debug-dir data/debug
"""
import argparse
import dataclasses
import logging
import os
import sys

from rrg_glossary.config import PDF_PATH, StyleConfig
from rrg_glossary.extract import font_usage, iter_fragments, render_debug_overlays
from rrg_glossary.glossary import build_glossary
from rrg_glossary.render import to_json, to_markdown


def setup_logging(verbose: int):
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract the glossary from the rules reference PDF using PyMuPDF")
    parser.add_argument('--pdf', default=PDF_PATH, help=f'Path to PDF (default: {PDF_PATH})')
    parser.add_argument('--format', choices=('markdown', 'json'), default='markdown', help='Output format')
    parser.add_argument('--out', default=None, help='Output path (default: stdout)')
    parser.add_argument('--banner-font', default=None, help='Font of section banners such as "GLOSSARY"')
    parser.add_argument('--title-font', default=None, help='Font of glossary entry titles')
    parser.add_argument('--title-min-height', type=float, default=None, help='Minimum size of an entry title')
    parser.add_argument('--list-fonts', action='store_true', help='Print font usage and exit')
    parser.add_argument('--debug', action='store_true', help='Write debug overlay images')
    parser.add_argument('--debug-dir', default='data/debug', help='Directory for debug images')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='-v for info, -vv for debug')
    return parser


def style_from_args(args) -> StyleConfig:
    style = StyleConfig.from_env()
    overrides = {}
    if args.banner_font:
        overrides['banner_font'] = args.banner_font
    if args.title_font:
        overrides['title_font'] = args.title_font
    if args.title_min_height is not None:
        overrides['title_min_height'] = args.title_min_height
    if overrides:
        style = dataclasses.replace(style, **overrides)
    return style


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if not os.path.exists(args.pdf):
        raise FileNotFoundError(f"PDF not found: {args.pdf}")

    if args.list_fonts:
        for font, size, n, sample in font_usage(args.pdf):
            print(f"{font:<40} {size:>6.1f} {n:>7}  {sample}")
        return 0

    style = style_from_args(args)
    print(f"Parsing {args.pdf} ...", file=sys.stderr)
    glossary = build_glossary(iter_fragments(args.pdf), style)

    if args.format == 'json':
        output = to_json(glossary, source=os.path.basename(args.pdf))
    else:
        output = to_markdown(glossary)

    if args.out:
        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.out, 'w', encoding='utf-8') as f:
            f.write(output)
        print(f"Wrote {args.out} with {len(glossary)} terms", file=sys.stderr)
    else:
        sys.stdout.write(output)

    if args.debug:
        written = render_debug_overlays(args.pdf, args.debug_dir, style)
        print(f"Wrote {len(written)} debug images to {args.debug_dir}", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
