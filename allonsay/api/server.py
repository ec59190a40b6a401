"""FastAPI server exposing voice routing."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from .. import __version__
from ..language_router import DEFAULT_VOICES, RoutingResult, VoiceMap, VoiceRouter

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
_LOGGER = logging.getLogger(__name__)

CONFIG_PATH = Path("local/server.json")


class VoiceConfig(BaseModel):
    """Voice identifiers per language/script."""

    english: str = DEFAULT_VOICES.english
    dutch: str = DEFAULT_VOICES.dutch
    ideographic: str = DEFAULT_VOICES.ideographic


class ServerConfig(BaseModel):
    """Server configuration."""

    voices: VoiceConfig = Field(default_factory=VoiceConfig)


class RouteRequest(BaseModel):
    """Request body for routing."""

    text: Optional[str] = Field(None, description="Text to split and assign voices to")


class AssignmentInfo(BaseModel):
    """One routed segment."""

    text: str
    start: int
    end: int
    ideographic: bool
    script: str
    voice: str


class RouteResponse(BaseModel):
    """Whole-text language and ordered voice assignments."""

    language: Optional[str]
    assignments: list[AssignmentInfo]


def _load_config(path: Path = CONFIG_PATH) -> ServerConfig:
    """Load server configuration from local/server.json."""
    if not path.exists():
        return ServerConfig()
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return ServerConfig(**data)


def _to_response(result: RoutingResult) -> RouteResponse:
    return RouteResponse(
        language=result.language.value if result.language else None,
        assignments=[
            AssignmentInfo(
                text=a.segment.text,
                start=a.segment.start,
                end=a.segment.end,
                ideographic=a.segment.is_ideographic,
                script=a.segment.script,
                voice=a.voice,
            )
            for a in result.assignments
        ],
    )


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Create the FastAPI application."""
    if config is None:
        config = _load_config()

    router = VoiceRouter(voices=VoiceMap(**config.voices.model_dump()))

    app = FastAPI(
        title="allonsay API",
        description="Language classification and voice routing for bilingual text",
        version=__version__,
    )

    def _route(text: Optional[str]) -> RouteResponse:
        if not text:
            raise HTTPException(status_code=400, detail="Must provide 'text'")
        return _to_response(router.plan(text))

    @app.get("/")
    async def health():
        """Health check and server info."""
        return {
            "status": "ok",
            "version": __version__,
            "voices": config.voices.model_dump(),
        }

    @app.post("/route", response_model=RouteResponse)
    async def route(request: RouteRequest):
        """Split text into script runs and assign a voice to each run."""
        return _route(request.text)

    @app.get("/route", response_model=RouteResponse)
    async def route_get(
        text: Optional[str] = Query(None, description="Text to split and assign voices to"),
    ):
        """Same as POST /route, with the text as a query parameter."""
        return _route(text)

    _LOGGER.info("Server ready (voices: %s)", config.voices.model_dump())
    return app


def run():
    """Run the server with uvicorn."""
    import os

    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    _LOGGER.info("Starting server at http://%s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port, reload=False)
