"""
CLI entry point for docx-easy.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG, Config
from .cover import build_cover_document
from .exceptions import DocxEasyError
from .fonts import CHINESE_FONT_SIZE_MAP, font_size_names
from .layout import PAPER_SIZES
from .utils import print_error, print_info


def _parse_info(items: list[str]) -> list[tuple[str, str]]:
    pairs = []
    for item in items:
        label, sep, value = item.partition("=")
        if not sep:
            raise DocxEasyError(f"--info expects LABEL=VALUE, got {item!r}")
        pairs.append((label.strip(), value.strip()))
    return pairs


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="docx-easy",
        description="Build Word documents (.docx) with a formatted cover page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docx-easy report.docx --title "年度报告"                     Cover with a title bar
  docx-easy report.docx --title T --info 姓名=小明 --paper B5  Add an info table
  docx-easy --init-config                                    Generate default config file
  docx-easy --font-sizes                                     List named font sizes
        """,
    )
    parser.add_argument("output", nargs="?", help="Output Word file path")
    parser.add_argument("-c", "--config", default="config.json", help="Config file path (default: config.json)")
    parser.add_argument("--title", action="append", default=[], help="Title line (repeatable)")
    parser.add_argument("--subtitle", help="Subtitle under the title")
    parser.add_argument("--info", action="append", default=[], help="LABEL=VALUE row of the info table (repeatable)")
    parser.add_argument("--paper", choices=sorted(PAPER_SIZES), help="Paper size (default: from config)")
    parser.add_argument("--init-config", action="store_true", help="Generate default config file")
    parser.add_argument("--font-sizes", action="store_true", help="List named font sizes and their points")
    parser.add_argument("-v", "--version", action="store_true", help="Show version")

    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print(f"docx-easy {__version__}")
        return 0

    if args.font_sizes:
        for name in font_size_names():
            print(f"{name}\t{CHINESE_FONT_SIZE_MAP[name]:g}")
        return 0

    if args.init_config:
        import json

        config_path = Path(args.config)
        if config_path.exists():
            print_error(f"Config file already exists: {config_path}")
            return 1
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(DEFAULT_CONFIG, f, ensure_ascii=False, indent=4)
        print_info(f"Config file created: {config_path}")
        return 0

    if not args.output:
        parser.print_help()
        return 1

    try:
        # Load config
        config_path = Path(args.config)
        if config_path.exists():
            config = Config.from_file(config_path)
        else:
            config = Config()

        document = build_cover_document(
            args.title or [Path(args.output).stem],
            info=_parse_info(args.info),
            config=config,
            paper=args.paper,
            subtitle=args.subtitle,
        )
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        document.save(str(output_path))
        print_info(f"Document saved: {output_path}")
        return 0
    except (DocxEasyError, OSError, ValueError) as e:
        print_error(f"Build failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
