"""MiniMax image-provider HTTP client.

Processing flow:
    1. Check the configured bearer credential (no I/O when it is missing).
    2. Submit the JSON payload to the provider endpoint.
    3. Validate HTTP status and the `base_resp` envelope.
    4. Return the first image URL.

Error handling strategy:
    - Missing credential -> `ConfigurationError`.
    - Network failure, timeout, non-2xx, non-JSON body -> `TransportError`.
    - Non-zero `base_resp.status_code` -> `UpstreamError`.
    - No URL in `data.image_urls` -> `EmptyResultError`.
    No retry loop is implemented.

Determinism:
    - Request assembly is deterministic for fixed inputs/configuration.
    - Final output remains provider/network dependent.

Security considerations:
    - Exceptions may include upstream provider response bodies.
    - The API key is never logged.
"""

import logging

import requests

from selfie_relay.core.errors import (
    ConfigurationError,
    EmptyResultError,
    TransportError,
    UpstreamError,
)
from selfie_relay.core.provider_config import MINIMAX_KEY_HELP_URL, SelfieConfig
from selfie_relay.core.selfie_types import DEFAULT_ASPECT_RATIO, AspectRatio, GeneratedImage


logger = logging.getLogger(__name__)


def build_image_payload(config: SelfieConfig, prompt: str, aspect_ratio=DEFAULT_ASPECT_RATIO) -> dict:
    """Assemble the provider JSON body for one generation request."""
    return {
        "model": config.model,
        "prompt": prompt,
        "aspect_ratio": AspectRatio(aspect_ratio).value,
        "response_format": "url",
        "subject_reference": [
            {
                "type": "character",
                "image_file": config.reference_image,
            }
        ],
    }


def extract_image_url(result: dict) -> str:
    """Validate a parsed provider envelope and return its first image URL.

    Args:
        result: Parsed JSON response body.

    Returns:
        First entry of `data.image_urls`. Further URLs are ignored.

    Error handling:
        - Missing or non-zero `base_resp.status_code` -> `UpstreamError`; the
          payload is not inspected further.
        - Missing, empty or non-list `data.image_urls` -> `EmptyResultError`.
    """
    if not isinstance(result, dict):
        raise UpstreamError("Image generation failed: response is not a JSON object")

    base_resp = result.get("base_resp")
    if not isinstance(base_resp, dict):
        raise UpstreamError("Image generation failed: response has no base_resp envelope")

    status_code = base_resp.get("status_code")
    status_msg = base_resp.get("status_msg") or "Unknown error"
    if status_code != 0:
        raise UpstreamError(
            f"Image generation failed: {status_msg}",
            status_code=status_code,
            status_msg=status_msg,
        )

    data = result.get("data") or {}
    image_urls = data.get("image_urls") if isinstance(data, dict) else None
    if not isinstance(image_urls, list) or not image_urls or not image_urls[0]:
        raise EmptyResultError("No image URL returned from the API.")

    if len(image_urls) > 1:
        logger.debug("Provider returned %d image URLs, using the first", len(image_urls))

    return image_urls[0]


class MiniMaxImageClient:
    """Single-shot client for the MiniMax image-generation endpoint.

    Args:
        config: Explicit configuration (credential, endpoint, model, timeout).
        session: Object exposing `post(url, json=..., headers=..., timeout=...)`.
            Defaults to the `requests` module itself; tests inject fakes.
    """

    def __init__(self, config: SelfieConfig, session=None):
        self.config = config
        self.session = session if session is not None else requests

    def _headers(self) -> dict:
        if not self.config.api_key:
            raise ConfigurationError(
                "MINIMAX_API_KEY environment variable not set. "
                f"Get your key from {MINIMAX_KEY_HELP_URL}"
            )
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    def send_image_request(self, payload: dict) -> dict:
        """Post a payload and return the parsed JSON body.

        Error handling:
            - Missing credential -> `ConfigurationError` (before any I/O).
            - Request exceptions, non-2xx status, invalid JSON -> `TransportError`.
        """
        headers = self._headers()

        try:
            response = self.session.post(
                self.config.api_url,
                json=payload,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as err:
            raise TransportError(f"HTTP request failed: {err}") from err

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"HTTP request failed: {response.status_code} - {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as err:
            raise TransportError(
                f"HTTP response is not valid JSON: {response.text}",
                status_code=response.status_code,
                body=response.text,
            ) from err

    def generate(self, prompt: str, aspect_ratio=DEFAULT_ASPECT_RATIO) -> GeneratedImage:
        """Generate one image and return its URL together with the prompt."""
        payload = build_image_payload(self.config, prompt, aspect_ratio)
        result = self.send_image_request(payload)
        url = extract_image_url(result)
        return GeneratedImage(url=url, source_prompt=prompt)
