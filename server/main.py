"""
Main FastAPI application.
"""

import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slidenotes.config import load_config
from slidenotes.diff import diff_stats, diff_text
from slidenotes.errors import SlideNotesError
from slidenotes.formatter import split_notes
from slidenotes.models import ScriptKind, ScriptParams
from slidenotes.reviser import create_reviser
from slidenotes.scripts import FONT_FAMILIES, generate_script
from slidenotes.session import NotesSession
from server.models import (
    DiffRequest,
    DiffResponse,
    FormatRequest,
    FormatResponse,
    ReviseResponse,
    ScriptRequest,
    ScriptResponse,
    SessionState,
)

# Errors not listed here are client input errors (400)
ERROR_STATUS = {
    "InvalidCredentialsError": 401,
    "RevisionInProgressError": 409,
    "ServiceUnavailableError": 503,
    "MissingCredentialsError": 500,
}


def status_for(error_kind: Optional[str]) -> int:
    return ERROR_STATUS.get(error_kind, 400)


def create_app(session: Optional[NotesSession] = None) -> FastAPI:
    """
    Build the API app.

    Args:
        session: Prebuilt session. When omitted, configuration is loaded
            from the environment at startup and a missing API key stops
            the server from starting.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if session is None:
            config = load_config()
            app.state.config = config
            app.state.session = NotesSession(create_reviser(config))
        else:
            app.state.config = getattr(session.reviser, "config", None)
            app.state.session = session
        print("[Server] SlideNotes API ready", file=sys.stderr)
        yield
        # Shutdown
        pass

    app = FastAPI(
        title="SlideNotes API",
        description="Convert speaker notes to Markdown and enhance them with AI",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SlideNotesError)
    async def slidenotes_error_handler(request: Request, exc: SlideNotesError):
        return JSONResponse(
            status_code=status_for(type(exc).__name__),
            content={"detail": exc.message},
        )

    # --- API Endpoints ---

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "message": "SlideNotes API is running"}

    @app.get("/api/session", response_model=SessionState)
    async def get_session(request: Request):
        """Current notes, revision and last error."""
        current: NotesSession = request.app.state.session
        return SessionState(
            markdown=current.document,
            revised=current.revised,
            error=current.error,
            revising=current.revising,
        )

    @app.post("/api/format", response_model=FormatResponse)
    async def format_notes(body: FormatRequest, request: Request):
        """Format raw notes and make them the current document."""
        current: NotesSession = request.app.state.session
        markdown = current.convert(body.notes)
        return FormatResponse(markdown=markdown, slide_count=len(split_notes(body.notes)))

    @app.post("/api/revise", response_model=ReviseResponse)
    async def revise_notes(request: Request):
        """
        Revise the current document with AI.

        Only one revision runs at a time. Results for a document that has
        since been replaced are discarded.
        """
        current: NotesSession = request.app.state.session
        outcome = await current.revise()

        if outcome.stale:
            raise HTTPException(
                status_code=409,
                detail="The notes changed while the revision was running. Result discarded.",
            )
        if outcome.error is not None:
            raise HTTPException(status_code=status_for(outcome.error_kind), detail=outcome.error)

        return ReviseResponse(request_id=outcome.request_id, revised=outcome.revised)

    @app.post("/api/diff", response_model=DiffResponse)
    async def diff_notes(body: DiffRequest, request: Request):
        """Character diff of two texts, or of the session's notes and revision."""
        if body.original is None and body.revised is None:
            segments = request.app.state.session.diff()
        else:
            segments = diff_text(body.original or "", body.revised or "")
        return DiffResponse(segments=segments, stats=diff_stats(segments))

    @app.post("/api/scripts/{kind}", response_model=ScriptResponse)
    async def create_script(kind: ScriptKind, body: ScriptRequest):
        """Generate an Apps Script helper."""
        script = generate_script(
            kind,
            ScriptParams(
                presentation_id=body.presentation,
                font_family=body.font_family,
                font_size=body.font_size,
                notes=body.notes,
            ),
        )
        return ScriptResponse(kind=script.kind, entry_point=script.entry_point, code=script.code)

    @app.get("/api/fonts")
    async def list_fonts():
        return {"fonts": list(FONT_FAMILIES)}

    @app.get("/api/settings")
    async def get_settings(request: Request):
        """Get current settings (masked API key)."""
        config = request.app.state.config
        if config is None:
            return {"provider": None, "model": None, "api_key": None}
        return {
            "provider": config.provider,
            "model": config.model,
            "api_key": config.masked_key,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
