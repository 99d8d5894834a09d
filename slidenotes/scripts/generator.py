"""
Fill Apps Script skeletons with user values.
"""

import re
import sys
from typing import Optional

from slidenotes.errors import (
    InvalidPresentationUrlError,
    InvalidScriptParamsError,
    MalformedNotesPayloadError,
)
from slidenotes.formatter import DELIMITER, split_notes
from slidenotes.models import GeneratedScript, ScriptKind, ScriptParams
from slidenotes.scripts.templates import TEMPLATES

PRESENTATION_URL_PATTERN = re.compile(r"presentation/d/([a-zA-Z0-9_-]+)")
PRESENTATION_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")

FONT_FAMILIES = (
    "Arial",
    "Calibri",
    "Comic Sans MS",
    "Courier New",
    "Georgia",
    "Lato",
    "Merriweather",
    "Montserrat",
    "Noto Sans JP",
    "Open Sans",
    "Roboto",
    "Times New Roman",
    "Trebuchet MS",
    "Verdana",
)


def extract_presentation_id(url_or_id: str) -> str:
    """
    Get the presentation ID from a Google Slides URL.

    A bare ID is returned unchanged.
    """
    value = (url_or_id or "").strip()
    match = PRESENTATION_URL_PATTERN.search(value)
    if match:
        return match.group(1)
    if PRESENTATION_ID_PATTERN.match(value):
        return value
    raise InvalidPresentationUrlError()


def _check_font(font_family: Optional[str], font_size: Optional[int]) -> None:
    if font_family is not None and re.search(r"[\"'\\]", font_family):
        raise InvalidScriptParamsError(f"Invalid font family: {font_family}")
    if font_size is not None:
        if isinstance(font_size, bool) or not isinstance(font_size, int) or font_size <= 0:
            raise InvalidScriptParamsError(
                f"Font size must be a positive whole number of points, got {font_size!r}"
            )


def generate_script(kind: ScriptKind, params: ScriptParams) -> GeneratedScript:
    """
    Render one script skeleton.

    Raises:
        InvalidPresentationUrlError: presentation ID has the wrong shape
        InvalidScriptParamsError: bad font family or size
        MalformedNotesPayloadError: bulk-update notes contain no slides
    """
    kind = ScriptKind(kind)
    presentation_id = extract_presentation_id(params.presentation_id)

    context = {"presentation_id": presentation_id}

    if kind == ScriptKind.EXTRACT:
        context["separator"] = f"\n{DELIMITER}\n"

    elif kind == ScriptKind.BULK_UPDATE:
        font_family = params.font_family.strip() if params.font_family else None
        _check_font(font_family or None, params.font_size)

        notes = split_notes(params.notes or "")
        if not notes:
            raise MalformedNotesPayloadError()

        context.update(
            notes=notes,
            font_family=font_family or None,
            font_size=params.font_size,
        )

    code = TEMPLATES[kind].render(**context).strip()
    print(f"[Script] Generated {kind.value} script for {presentation_id}", file=sys.stderr)

    return GeneratedScript(kind=kind, entry_point=kind.entry_point, code=code)
