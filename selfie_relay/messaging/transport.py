"""OpenClaw delivery transports.

Two policy-equivalent implementations of `MessageTransport.deliver`:

    - `CliTransport`: runs `openclaw message send ...` as an argument vector
      (no shell interpolation). Success is the process exit code.
    - `GatewayTransport`: `POST {gateway_url}/message` with a JSON body and an
      optional bearer header.

Error handling strategy:
    - CLI: non-zero exit, an executable that cannot be started (any `OSError`)
      or timeout -> `DispatchError`.
    - Gateway: request exceptions -> `TransportError`; non-2xx -> `DispatchError`
      carrying the response body.
    No retry is attempted.
"""

import logging
import subprocess
from typing import Protocol

import requests

from selfie_relay.core.errors import DispatchError, TransportError
from selfie_relay.core.provider_config import SelfieConfig


logger = logging.getLogger(__name__)

TRANSPORT_CLI = "cli"
TRANSPORT_GATEWAY = "gateway"
TRANSPORT_CHOICES = [TRANSPORT_CLI, TRANSPORT_GATEWAY]


class MessageTransport(Protocol):
    """Minimal interface required by the dispatcher."""

    def deliver(self, channel: str, message: str, media: str) -> None:
        """Send `message` with attached `media` URL to `channel`."""
        ...


def build_message(channel: str, message: str, media: str) -> dict:
    """Return the OpenClaw send payload shared by both transports."""
    return {
        "action": "send",
        "channel": channel,
        "message": message,
        "media": media,
    }


class CliTransport:
    """Deliver through the local OpenClaw command-line tool."""

    def __init__(self, command: str = "openclaw", timeout: float | None = None, runner=None):
        self.command = command
        self.timeout = timeout
        self.runner = runner if runner is not None else subprocess.run

    def build_command(self, channel: str, message: str, media: str) -> list:
        payload = build_message(channel, message, media)
        return [
            self.command, "message", "send",
            "--action", payload["action"],
            "--channel", payload["channel"],
            "--message", payload["message"],
            "--media", payload["media"],
        ]

    def deliver(self, channel: str, message: str, media: str) -> None:
        cmd = self.build_command(channel, message, media)

        try:
            result = self.runner(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self.timeout,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as err:
            raise DispatchError(f"OpenClaw CLI not found: {self.command}") from err
        except OSError as err:
            raise DispatchError(f"OpenClaw CLI could not be started: {err}") from err
        except subprocess.TimeoutExpired as err:
            raise DispatchError(f"OpenClaw CLI timed out after {self.timeout}s") from err

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise DispatchError(
                f"OpenClaw send failed (exit {result.returncode}): {stderr or 'no output'}",
                body=stderr,
                returncode=result.returncode,
            )

        logger.debug("OpenClaw CLI output: %s", (result.stdout or "").strip())


class GatewayTransport:
    """Deliver through the OpenClaw gateway HTTP API."""

    def __init__(self, gateway_url: str, token: str | None = None, timeout: float | None = None, session=None):
        self.gateway_url = gateway_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session if session is not None else requests

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def deliver(self, channel: str, message: str, media: str) -> None:
        url = f"{self.gateway_url}/message"

        try:
            response = self.session.post(
                url,
                json=build_message(channel, message, media),
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as err:
            raise TransportError(f"OpenClaw gateway request failed: {err}") from err

        if not 200 <= response.status_code < 300:
            raise DispatchError(
                f"OpenClaw send failed: {response.text}",
                body=response.text,
            )


def build_transport(kind: str, config: SelfieConfig) -> MessageTransport:
    """Create the transport named by `kind` (`"cli"` or `"gateway"`)."""
    if kind == TRANSPORT_CLI:
        return CliTransport(command=config.cli_command, timeout=config.timeout)
    if kind == TRANSPORT_GATEWAY:
        return GatewayTransport(config.gateway_url, token=config.gateway_token, timeout=config.timeout)
    raise ValueError(f"Unknown transport: {kind}")
