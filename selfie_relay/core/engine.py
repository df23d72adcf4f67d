"""Core orchestration for one selfie transaction.

Architectural role:
    Provides the execution pipeline used by CLI/HTTP layers to turn one
    `SelfieRequest` into a delivered image.

Control-flow model:
    1. Resolve mode and build prompt (`image.service.prepare_prompt`).
    2. Generate the image (`image.client.MiniMaxImageClient`).
    3. Dispatch URL + caption (`messaging.dispatcher.dispatch_image`).
    4. Return `DispatchResult`.

    Step 3 never starts unless step 2 returned a URL.

Error handling strategy:
    Every `SelfieRelayError` is terminal and propagates to the adapter. Nothing
    is retried and no partial result is returned.

Determinism:
    Local mode/prompt selection is deterministic. Image content and delivery
    outcome depend on external services.
"""

import logging

from selfie_relay.core.provider_config import SelfieConfig
from selfie_relay.core.selfie_types import DispatchResult, SelfieRequest
from selfie_relay.image.client import MiniMaxImageClient
from selfie_relay.image.service import generate_selfie_image
from selfie_relay.messaging.dispatcher import dispatch_image
from selfie_relay.messaging.transport import TRANSPORT_CLI, MessageTransport, build_transport


logger = logging.getLogger(__name__)


def generate_and_send(
    request: SelfieRequest,
    config: SelfieConfig,
    image_client: MiniMaxImageClient | None = None,
    transport: MessageTransport | None = None,
    transport_kind: str = TRANSPORT_CLI,
) -> DispatchResult:
    """Generate a selfie and deliver it to `request.channel`.

    Args:
        request: Validated selfie request.
        config: Explicit configuration object.
        image_client: Optional pre-built client (tests inject fakes).
        transport: Optional pre-built transport. When omitted one is built from
            `transport_kind` and `config`.
        transport_kind: `"cli"` (default) or `"gateway"`.

    Returns:
        `DispatchResult` with `success=True`. The `prompt` field holds the prompt
        actually sent to the image API.

    Failure scenarios:
        `ConfigurationError`, `TransportError`, `UpstreamError`,
        `EmptyResultError` and `DispatchError` propagate unchanged.
    """
    if image_client is None:
        image_client = MiniMaxImageClient(config)
    if transport is None:
        transport = build_transport(transport_kind, config)

    image = generate_selfie_image(request, image_client)

    dispatch_image(transport, request.channel, request.caption, image.url)

    return DispatchResult(
        success=True,
        channel=request.channel,
        image_url=image.url,
        prompt=image.source_prompt,
    )
