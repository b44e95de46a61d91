"""
Relay HTTP service for the PLS Command Center.

Holds the Anthropic API key so the browser/Streamlit client never sees it,
and exposes:
1. Health - GET /api/health
2. Extraction - POST /api/extract (AI with pattern-matching fallback)
3. Chat - POST /api/chat (PLS Assistant)

Usage:
    python -m plscc.api.server --port 3001

    # Or with uvicorn
    uvicorn plscc.api.server:app --host 0.0.0.0 --port 3001
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..chat import ChatRelay
from ..config import Settings, get_settings
from ..errors import InputValidationError
from ..extract import ExtractionConfig, LegislationExtractor
from ..llm import AnthropicClient, LLMConfig
from .schemas import ChatRequest, ExtractRequest, HealthResponse

logger = logging.getLogger(__name__)


MESSAGES_REQUIRED_ERROR = "Messages array is required"
INVALID_REQUEST_ERROR = "Invalid request body"


# ============================================================================
# Lifespan
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Opens the upstream HTTP client on startup and closes it on shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting PLS relay...")

    owns_client = app.state.llm_client is None
    if owns_client:
        app.state.llm_client = AnthropicClient(LLMConfig.from_settings(settings))

    if settings.ai_configured:
        logger.info(f"AI extraction enabled ({settings.llm_model})")
    else:
        logger.warning("ANTHROPIC_API_KEY not set, extraction will use pattern matching")

    yield

    if owns_client:
        await app.state.llm_client.aclose()
        app.state.llm_client = None
    logger.info("PLS relay stopped.")


def _llm_client(request: Request) -> AnthropicClient:
    return request.app.state.llm_client


def _describe_validation_error(exc: RequestValidationError) -> str:
    """'Invalid request body: messages: Input should be a valid list'."""
    errors = exc.errors()
    if not errors:
        return INVALID_REQUEST_ERROR
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"{INVALID_REQUEST_ERROR}: {location}: {first.get('msg', 'invalid value')}"
    return f"{INVALID_REQUEST_ERROR}: {first.get('msg', 'invalid value')}"


# ============================================================================
# App factory
# ============================================================================

def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[AnthropicClient] = None,
) -> FastAPI:
    """
    Builds the relay application.

    Args:
        settings: Settings (default: get_settings())
        llm_client: Upstream client; when omitted one is created in the
            lifespan from settings and closed on shutdown

    Returns:
        FastAPI app
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="PLS Command Center - Relay",
        description="Legislation extraction and PLS Assistant chat",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.llm_client = llm_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies get the same 400 envelope as short document text."""
        error = InputValidationError(_describe_validation_error(exc))
        logger.warning(f"Rejected {request.url.path}: {error.message}")
        return JSONResponse(status_code=400, content=error.to_dict())

    # ========================================================================
    # Endpoints - Health
    # ========================================================================

    @app.get("/api/health")
    async def health_check():
        """Liveness and AI configuration status."""
        response = HealthResponse(
            status="ok",
            ai_configured=settings.ai_configured,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        return response.model_dump(by_alias=True)

    # ========================================================================
    # Endpoints - Extraction
    # ========================================================================

    @app.post("/api/extract")
    async def extract(body: ExtractRequest, request: Request):
        """Extracts legislation details; falls back to pattern matching."""
        extractor = LegislationExtractor(
            _llm_client(request),
            config=ExtractionConfig(
                min_document_chars=settings.min_document_chars,
                document_char_limit=settings.extraction_char_limit,
            ),
        )
        try:
            response = await extractor.extract(body.text, body.filename)
        except InputValidationError as e:
            return JSONResponse(status_code=400, content=e.to_dict())

        return response.to_dict()

    # ========================================================================
    # Endpoints - Chat
    # ========================================================================

    @app.post("/api/chat")
    async def chat(body: ChatRequest, request: Request):
        """Relays the conversation to the PLS Assistant."""
        if body.messages is None:
            return JSONResponse(
                status_code=400,
                content={"success": False, "error": MESSAGES_REQUIRED_ERROR},
            )

        relay = ChatRelay(_llm_client(request), document_limit=settings.chat_document_char_limit)
        reply = await relay.reply(
            [m.model_dump() for m in body.messages],
            document_text=body.document_text,
            context=body.context,
        )
        if not reply.success:
            logger.error(f"Chat failed: {reply.error}")
        return reply.to_dict()

    return app


app = create_app()


# ============================================================================
# Main
# ============================================================================

def main():
    import argparse
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    defaults = get_settings()
    parser = argparse.ArgumentParser(description="PLS Command Center relay")
    parser.add_argument("--port", type=int, default=defaults.port, help="Server port")
    parser.add_argument("--host", type=str, default=defaults.host, help="Host")
    args = parser.parse_args()

    logger.info(f"PLS relay on http://{args.host}:{args.port}")
    uvicorn.run(
        "plscc.api.server:app",
        host=args.host,
        port=args.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
