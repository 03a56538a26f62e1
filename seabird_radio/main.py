"""Main application module for seabird radio.

This module defines the FastAPI application that acts as the chat
transport: command events are POSTed in and the bot's replies are
returned in order.  The two lookups are also exposed as plain REST
endpoints and mounted as MCP tools.  At startup it constructs the app
via ``create_app`` and exposes it as ``app`` for ASGI servers.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from fastapi_mcp import FastApiMCP

from seabird_radio import config
from seabird_radio.adapters.pota import find_most_recent_match, format_activation
from seabird_radio.errors import ParseError, RadioError
from seabird_radio.middleware import RequestLogMiddleware, log_error
from seabird_radio.models import Band, CommandEvent, Mode
from seabird_radio.router import COMMANDS, CommandRouter, ReplyCollector


def create_app(router: Optional[CommandRouter] = None) -> FastAPI:
    """Factory function for constructing the FastAPI application.

    ``router`` defaults to one backed by the live hamqsl and POTA feeds;
    tests pass a router with canned sources instead.
    """
    router = router or CommandRouter()
    app = FastAPI(title="Seabird Radio")

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    api_key_header = APIKeyHeader(name="x-api-key", auto_error=False)

    def require_api_key(x_api_key: str = Depends(api_key_header)) -> None:
        """Validate the ``x-api-key`` header against ``API_KEY``."""
        if config.API_KEY and x_api_key != config.API_KEY:
            raise HTTPException(status_code=401, detail="Missing or invalid API key")

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    @app.get("/api")
    def api_root():
        """Return a simple service descriptor for programmatic clients."""
        return {
            "ok": True,
            "service": "Seabird Radio",
            "docs": "/docs",
            "health": "/health",
            "commands": "/api/commands",
            "mcp": "/mcp",
        }

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/api/commands", tags=["Chat"])
    def list_commands() -> JSONResponse:
        """Commands the bot answers, with their help text."""
        return JSONResponse(
            {"commands": [c.model_dump(by_alias=True) for c in COMMANDS.values()]}
        )

    @app.post(
        "/api/commands",
        operation_id="chat_command",
        tags=["Chat"],
        dependencies=[Depends(require_api_key)],
    )
    async def post_command(event: CommandEvent) -> JSONResponse:
        """Handle one inbound chat command and return the replies it produced."""
        collector = ReplyCollector()
        await router.dispatch(event, collector)
        return JSONResponse(
            {"replies": [r.model_dump(by_alias=True) for r in collector.replies]}
        )

    @app.get("/api/bands", operation_id="band_conditions", tags=["Conditions"])
    async def rest_band_conditions() -> JSONResponse:
        """Current day/night HF band conditions from hamqsl.com."""
        try:
            report = await router.solar_source()
        except RadioError as e:
            log_error("band_conditions_error", error=str(e))
            raise HTTPException(status_code=502, detail="Unable to fetch band conditions")
        return JSONResponse({"record": report.model_dump(), "lines": report.lines()})

    @app.get("/api/pota/{band}", operation_id="pota_latest", tags=["POTA"])
    async def rest_pota_latest(
        band: str, mode: str = Query(config.DEFAULT_MODE)
    ) -> JSONResponse:
        """Most recent Parks on the Air activation on a band in a mode.

        ``band`` is ``20m`` or ``40m``; ``mode`` defaults to SSB.
        """
        try:
            parsed_band = Band.parse(band)
            parsed_mode = Mode.parse(mode)
        except ParseError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            activations = await router.spot_source()
        except RadioError as e:
            log_error("pota_latest_error", error=str(e))
            raise HTTPException(status_code=502, detail="Unable to fetch POTA spots")

        activation = find_most_recent_match(activations, parsed_band, parsed_mode)
        if activation is None:
            raise HTTPException(
                status_code=404,
                detail=f"no activations found on {parsed_band} over {parsed_mode}",
            )
        return JSONResponse(
            {
                "record": activation.model_dump(mode="json"),
                "text": format_activation(activation),
            }
        )

    # -----------------------------------------------------------------------
    # MCP server mount
    # -----------------------------------------------------------------------
    mcp = FastApiMCP(app, include_operations=["band_conditions", "pota_latest"])
    mcp.mount()

    return app


# ---------------------------------------------------------------------------
# FastAPI application instance
# ---------------------------------------------------------------------------
app = create_app()
