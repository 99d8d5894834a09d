"""
Basic usage example for SlideNotes.

This example formats speaker notes, revises them with Gemini, and
writes an HTML diff using the Python API.
"""

import asyncio
from pathlib import Path

from slidenotes import NotesSession, ScriptKind, ScriptParams, generate_script
from slidenotes.audit import DiffHTMLGenerator
from slidenotes.config import load_config
from slidenotes.reviser import create_reviser

NOTES = """Welcome everyone. Today we look at last quarter's numbers.
---
Revenue grew 12 percent, mostly from the new subscription tier.
---
Next steps: hire two engineers and launch in Europe."""


async def main():
    # Reads GEMINI_API_KEY (or ANTHROPIC_API_KEY with SLIDENOTES_PROVIDER=anthropic)
    config = load_config()
    session = NotesSession(create_reviser(config))

    markdown = session.convert(NOTES)
    print(markdown)

    outcome = await session.revise()
    if not outcome.ok:
        print(f"Revision failed: {outcome.error}")
        return

    print("\n✓ Revision complete!\n")
    print(session.revised)

    DiffHTMLGenerator().generate(session.diff(), Path("output/notes_diff.html"))

    # Script to write the revision back into the presentation
    script = generate_script(
        ScriptKind.BULK_UPDATE,
        ScriptParams(
            presentation_id="https://docs.google.com/presentation/d/1AbCdEfGhIjKlMnOp/edit",
            font_family="Roboto",
            font_size=14,
            notes=NOTES,
        ),
    )
    print(f"\nPaste into Apps Script and run {script.entry_point}():\n")
    print(script.code)


if __name__ == "__main__":
    asyncio.run(main())
