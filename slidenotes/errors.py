"""
Error taxonomy for SlideNotes.

Every error carries a message that is safe to show to the user as-is.
"""


class SlideNotesError(Exception):
    """Base class for all SlideNotes errors."""

    default_message = "An unknown error occurred."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInputError(SlideNotesError):
    default_message = "Paste your speaker notes first."


class NoValidSlidesError(SlideNotesError):
    default_message = (
        "No slide content found. Make sure each slide is separated by a "
        "'---' line on its own."
    )


class EmptyInstructionError(SlideNotesError):
    default_message = "The revision instruction is empty."


class MalformedNotesPayloadError(SlideNotesError):
    default_message = (
        "The notes to write contain no slides. Separate each slide's notes "
        "with a '---' line."
    )


class InvalidPresentationUrlError(SlideNotesError):
    default_message = (
        "Invalid Google Slides URL. Make sure it is a valid presentation link."
    )


class InvalidScriptParamsError(SlideNotesError):
    default_message = "Invalid script parameters."


class ReviserError(SlideNotesError):
    """Failure reported by the remote text-generation service."""


class InvalidCredentialsError(ReviserError):
    default_message = "The provided API key is invalid. Check your settings."


class ServiceUnavailableError(ReviserError):
    default_message = (
        "Failed to get a response from the AI. The service may be "
        "temporarily unavailable."
    )


class RevisionInProgressError(SlideNotesError):
    default_message = "A revision is already running for this document."


class MissingCredentialsError(SlideNotesError):
    """Raised at startup only. The tool cannot work without a key."""

    default_message = "No API key configured."
