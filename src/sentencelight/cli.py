"""Command-line interface for SentenceLight settings and document scans."""

import argparse
import logging
import sys
from pathlib import Path

from sentencelight.core.util import safe_json
from sentencelight.runtime.threshold import long_sentences
from sentencelight.settings.loader import load_settings, SettingsLoadError
from sentencelight.settings.schema import HighlighterSettings


def validate_settings_command(args):
    """Validate a SentenceLight settings file."""
    try:
        settings_path = Path(args.settings_file)
        if not settings_path.exists():
            print(f"Error: Settings file not found: {settings_path}")
            return 1

        print(f"Validating settings: {settings_path}")
        settings = load_settings(settings_path)

        print("✅ Settings validation successful!")
        print(f"   Max words: {settings.max_words}")
        print(f"   Style: {settings.highlight_style.value} ({settings.highlight_color})")
        print(f"   Enabled: {settings.enabled}")

        if args.verbose:
            delays = settings.delays
            print("\nDebounce delays (ms):")
            print(f"   initial: {delays.initial}")
            print(f"   view_change: {delays.view_change}")
            print(f"   theme_change: {delays.theme_change}")
            print(f"   document_change: {delays.document_change}")

        return 0

    except SettingsLoadError as e:
        print(f"❌ Settings validation failed: {e}")
        return 1
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        return 1


def scan_command(args):
    """Report the long sentences of a text file."""
    try:
        doc_path = Path(args.file)
        if not doc_path.exists():
            print(f"Error: File not found: {doc_path}")
            return 1

        settings = load_settings(args.settings) if args.settings else HighlighterSettings()
        max_words = args.max_words if args.max_words is not None else settings.max_words
        if max_words <= 0:
            print("Error: --max-words must be positive")
            return 1

        text = doc_path.read_text(encoding="utf-8")
        units = long_sentences(text, max_words)

        if args.json:
            print(safe_json(units))
            return 0

        print(f"Scanning {doc_path} (max words: {max_words})")
        if not units:
            print("✅ No long sentences found")
            return 0

        print(f"\n⚠️  {len(units)} long sentence(s):")
        for unit in units:
            preview = unit.text if len(unit.text) <= 80 else unit.text[:77] + "..."
            print(f"\n   [{unit.start}:{unit.end}] {unit.word_count} words")
            print(f"   {preview}")

        return 0

    except SettingsLoadError as e:
        print(f"❌ Settings error: {e}")
        return 1
    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def info_command(args):
    """Display SentenceLight version and system information."""
    print("SentenceLight CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("long-sentence-highlighter")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    defaults = HighlighterSettings()
    print("\nDefaults:")
    print(f"   max_words: {defaults.max_words}")
    print(f"   highlight_style: {defaults.highlight_style.value}")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sentencelight",
        description="Long sentence highlighter settings and scanning CLI"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a settings file"
    )
    validate_parser.add_argument(
        "settings_file",
        help="Path to the settings YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )

    scan_parser = subparsers.add_parser(
        "scan",
        help="List the long sentences of a text file"
    )
    scan_parser.add_argument(
        "file",
        help="Path to the text file"
    )
    scan_parser.add_argument(
        "-s", "--settings",
        help="Settings YAML file (default: built-in defaults)"
    )
    scan_parser.add_argument(
        "-m", "--max-words",
        type=int,
        help="Override the word threshold"
    )
    scan_parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences as JSON"
    )

    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "validate":
        return validate_settings_command(args)
    elif args.command == "scan":
        return scan_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
