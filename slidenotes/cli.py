"""
Command-line interface for SlideNotes.
"""

import sys
import asyncio
import argparse
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from slidenotes import __version__
from slidenotes.audit import DiffHTMLGenerator
from slidenotes.config import load_config
from slidenotes.diff import diff_text, log_stats, render_terminal
from slidenotes.errors import MissingCredentialsError, SlideNotesError
from slidenotes.extractors import pptx_to_raw_notes
from slidenotes.formatter import format_notes
from slidenotes.models import ScriptKind, ScriptParams
from slidenotes.reviser import create_reviser
from slidenotes.scripts import FONT_FAMILIES, generate_script
from slidenotes.session import NotesSession

SCRIPT_COMMANDS = {
    "extract": ScriptKind.EXTRACT,
    "update": ScriptKind.BULK_UPDATE,
    "clear": ScriptKind.CLEAR,
}


def read_input(path: Optional[Path]) -> str:
    """Read text from a file, or stdin for None / '-'."""
    if path is None or str(path) == "-":
        return sys.stdin.read()
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def read_notes(args) -> str:
    if getattr(args, "pptx", None):
        return pptx_to_raw_notes(args.pptx)
    return read_input(args.input)


def cmd_format(args) -> int:
    print(format_notes(read_notes(args)))
    return 0


def cmd_revise(args) -> int:
    # Missing credentials are fatal before any work is done
    config = load_config(provider=args.provider, model=args.model, dotenv=False)
    session = NotesSession(create_reviser(config))
    session.convert(read_notes(args))

    outcome = asyncio.run(session.revise())
    if not outcome.ok:
        print(f"Error: {outcome.error or 'revision discarded'}", file=sys.stderr)
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(session.revised, encoding="utf-8")
        print(f"[Revise] Saved revision to {args.output}", file=sys.stderr)
    else:
        print(session.revised)

    segments = session.diff()
    log_stats(segments)
    if args.diff:
        print(render_terminal(segments, color=sys.stderr.isatty()), file=sys.stderr)
    if args.html:
        DiffHTMLGenerator().generate(segments, args.html)
    return 0


def cmd_diff(args) -> int:
    original = read_input(args.original)
    revised = read_input(args.revised)
    segments = diff_text(original, revised)
    log_stats(segments)

    if args.html:
        DiffHTMLGenerator().generate(segments, args.html)
    else:
        print(render_terminal(segments, color=sys.stdout.isatty() and not args.no_color))
    return 0


def cmd_script(args) -> int:
    notes = read_input(args.notes) if args.notes else None
    params = ScriptParams(
        presentation_id=args.presentation,
        font_family=args.font,
        font_size=args.size,
        notes=notes,
    )
    script = generate_script(SCRIPT_COMMANDS[args.kind], params)
    print(f"Run function: {script.entry_point}", file=sys.stderr)
    print(script.code)
    return 0


def cmd_fonts(args) -> int:
    for font in FONT_FAMILIES:
        print(font)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slidenotes",
        description="SlideNotes: Convert Google Slides speaker notes to Markdown and enhance them with AI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Format notes pasted into a file (slides separated by '---' lines)
  slidenotes format notes.txt

  # Format notes straight from a local PowerPoint file
  slidenotes format --pptx deck.pptx

  # Revise with Gemini and write an HTML diff
  slidenotes revise notes.txt --html output/diff.html

  # Get the Apps Script that extracts notes from a presentation
  slidenotes script extract https://docs.google.com/presentation/d/<id>/edit

  # Write notes back with a font and size
  slidenotes script update <id> --notes revised.txt --font Roboto --size 14

Environment Variables:
  GEMINI_API_KEY               API key for Gemini (default provider)
  ANTHROPIC_API_KEY            API key for Claude
  SLIDENOTES_PROVIDER          gemini or anthropic
  SLIDENOTES_MODEL             Model override
  SLIDENOTES_INSTRUCTION_FILE  Custom revision instruction
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"SlideNotes {__version__}",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command")

    p_format = subparsers.add_parser("format", help="Format raw notes as Markdown")
    p_format.add_argument("input", nargs="?", type=Path, help="Notes file (default: stdin)")
    p_format.add_argument("--pptx", type=Path, help="Read notes from a PPTX file instead")
    p_format.set_defaults(func=cmd_format)

    p_revise = subparsers.add_parser("revise", help="Format notes and revise them with AI")
    p_revise.add_argument("input", nargs="?", type=Path, help="Notes file (default: stdin)")
    p_revise.add_argument("--pptx", type=Path, help="Read notes from a PPTX file instead")
    p_revise.add_argument("--provider", choices=["gemini", "anthropic"], help="Text-generation provider")
    p_revise.add_argument("--model", help="Model name override")
    p_revise.add_argument("--output", "-o", type=Path, help="Write the revision to a file")
    p_revise.add_argument("--diff", action="store_true", help="Show a diff on stderr")
    p_revise.add_argument("--html", type=Path, help="Write an HTML diff report")
    p_revise.set_defaults(func=cmd_revise)

    p_diff = subparsers.add_parser("diff", help="Character diff of two text files")
    p_diff.add_argument("original", type=Path)
    p_diff.add_argument("revised", type=Path)
    p_diff.add_argument("--html", type=Path, help="Write an HTML diff report")
    p_diff.add_argument("--no-color", action="store_true", help="Use [-removed-]{+inserted+} markers")
    p_diff.set_defaults(func=cmd_diff)

    p_script = subparsers.add_parser("script", help="Generate an Apps Script helper")
    p_script.add_argument("kind", choices=sorted(SCRIPT_COMMANDS))
    p_script.add_argument("presentation", help="Google Slides URL or presentation ID")
    p_script.add_argument("--notes", type=Path, help="Notes to write (update only)")
    p_script.add_argument("--font", help=f"Font family, e.g. {', '.join(FONT_FAMILIES[:3])}")
    p_script.add_argument("--size", type=int, help="Font size in points")
    p_script.set_defaults(func=cmd_script)

    p_fonts = subparsers.add_parser("fonts", help="List suggested font families")
    p_fonts.set_defaults(func=cmd_fonts)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    load_dotenv()  # Load .env file if present

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except MissingCredentialsError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    except (SlideNotesError, FileNotFoundError, ValueError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
