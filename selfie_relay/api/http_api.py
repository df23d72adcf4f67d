"""
HTTP API adapter for the SelfieRelay engine.

Architectural role:
- Expose the selfie flow as a small JSON service.
- Enforce adapter-level input validation through pydantic request models.
- Delegate work to `selfie_relay.core.engine.generate_and_send`.

Endpoint responsibilities:
- `GET /v1/aspect-ratios`: list supported aspect ratios.
- `POST /v1/selfies/preview`: resolve mode and prompt without network I/O.
- `POST /v1/selfies`: run the full flow and return the JSON summary.

Error handling strategy:
- Invalid bodies are rejected by FastAPI with HTTP 422.
- `ConfigurationError` and invalid environment settings -> HTTP 500.
- Upstream, empty-result, transport and dispatch failures -> HTTP 502.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Reads configuration per request so environment changes apply without restart.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Literal

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from selfie_relay.core.engine import generate_and_send
from selfie_relay.core.errors import ConfigurationError, SelfieRelayError
from selfie_relay.core.provider_config import load_config
from selfie_relay.core.selfie_types import (
    AUTO_MODE,
    ASPECT_RATIO_CHOICES,
    DEFAULT_CAPTION,
    AspectRatio,
    SelfieRequest,
)
from selfie_relay.messaging.transport import TRANSPORT_GATEWAY
from selfie_relay.nlp.mode_selector import matched_keywords, resolve_mode
from selfie_relay.prompting.prompt_builder import build_selfie_prompt

logger = logging.getLogger(__name__)

app = FastAPI(title="SelfieRelay")

ModeOption = Literal["auto", "mirror", "direct"]


# ============================================================
# Request Schemas
# ============================================================

class PreviewRequest(BaseModel):
    context: str
    mode: ModeOption = AUTO_MODE


class SelfieBody(BaseModel):
    context: str
    channel: str
    caption: str = DEFAULT_CAPTION
    aspect_ratio: AspectRatio = AspectRatio.SQUARE
    mode: ModeOption = AUTO_MODE
    transport: Literal["cli", "gateway"] = TRANSPORT_GATEWAY


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": type(exc).__name__, "detail": str(exc)},
    )


# ============================================================
# Endpoints
# ============================================================

@app.get("/v1/aspect-ratios")
def list_aspect_ratios():
    return {"object": "list", "data": ASPECT_RATIO_CHOICES}


@app.post("/v1/selfies/preview")
def preview_selfie(body: PreviewRequest):
    """Return the mode and prompt that `/v1/selfies` would use."""
    mode = resolve_mode(body.context, body.mode)
    return {
        "mode": mode.value,
        "keywords": matched_keywords(body.context),
        "prompt": build_selfie_prompt(mode, body.context),
    }


@app.post("/v1/selfies")
def create_selfie(body: SelfieBody):
    """
    Generate a selfie and deliver it to `body.channel`.

    Input validation behavior:
    - Blank `context`/`channel` -> HTTP 422.
    """
    try:
        request = SelfieRequest(
            context=body.context,
            channel=body.channel,
            explicit_mode=body.mode,
            caption=body.caption,
            aspect_ratio=body.aspect_ratio,
        )
    except ValueError as e:
        return _error(422, e)

    try:
        config = load_config()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return _error(500, e)

    try:
        result = generate_and_send(request, config, transport_kind=body.transport)
    except ConfigurationError as e:
        logger.error("Selfie request rejected: %s", e)
        return _error(500, e)
    except SelfieRelayError as e:
        logger.warning("Selfie flow failed: %s", e)
        return _error(502, e)

    return result.to_dict()
