"""Image service used by the core selfie flow.

Role in pipeline:
    - Receives a `SelfieRequest` from orchestration.
    - Resolves the framing mode and builds the prompt.
    - Delegates the network call to `MiniMaxImageClient`.

Error handling strategy:
    - Exceptions from the provider client are intentionally propagated.

Determinism:
    - Mode and prompt selection are deterministic for fixed inputs.
    - Output image remains externally non-deterministic.
"""

import logging

from selfie_relay.core.selfie_types import GeneratedImage, SelfieRequest
from selfie_relay.image.client import MiniMaxImageClient
from selfie_relay.nlp.mode_selector import matched_keywords, resolve_mode
from selfie_relay.prompting.prompt_builder import build_selfie_prompt


logger = logging.getLogger(__name__)


def prepare_prompt(request: SelfieRequest) -> str:
    """Resolve the mode for `request` and return the final prompt string."""
    mode = resolve_mode(request.context, request.explicit_mode)
    logger.debug(
        "Resolved mode=%s explicit=%s keywords=%s",
        mode.value,
        request.explicit_mode,
        matched_keywords(request.context),
    )
    return build_selfie_prompt(mode, request.context)


def generate_selfie_image(request: SelfieRequest, client: MiniMaxImageClient) -> GeneratedImage:
    """Generate the selfie image described by `request`.

    Args:
        request: Validated selfie request.
        client: Configured image client.

    Returns:
        `GeneratedImage` carrying the first returned URL and the prompt used.
    """
    prompt = prepare_prompt(request)

    logger.info("Generating image with %s...", client.config.model)
    logger.info("Prompt: %s", prompt)
    logger.info("Aspect ratio: %s", request.aspect_ratio.value)

    image = client.generate(prompt, request.aspect_ratio)

    logger.info("Image generated: %s", image.url)
    return image
