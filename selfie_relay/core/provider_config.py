"""Provider/runtime configuration for the selfie flow.

Architectural role:
    Centralizes endpoint selection and credential lookup for `selfie_relay.image`
    and `selfie_relay.messaging`. Values are collected into an explicit
    `SelfieConfig` object that adapters build once and pass into each component.

Determinism:
    Deterministic for a fixed process environment and key files. `load_config`
    reads the environment at call time, not at import time.

Failure behavior:
    Missing key material is represented as `None`. The image client raises
    `ConfigurationError` for it before any network call.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# MiniMax image-generation endpoint and model.
MINIMAX_API_URL = "https://api.minimaxi.com/v1/image_generation"
MINIMAX_MODEL = "image-01"
MINIMAX_KEY_FILE = "config/minimax.key"
MINIMAX_KEY_HELP_URL = "https://platform.minimaxi.com/user-center/basic-information/interface-key"

# Fixed character reference sent as `subject_reference`.
REFERENCE_IMAGE = "https://cdn.jsdelivr.net/gh/FIngerFrings/clawra_minimax@main/assets/clawra.png"

# OpenClaw messaging gateway.
OPENCLAW_GATEWAY_URL = "http://localhost:18789"
OPENCLAW_CLI = "openclaw"

# Applied to both HTTP calls and the CLI subprocess.
DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class SelfieConfig:
    """Explicit configuration passed into every component.

    Attributes:
        api_key: MiniMax bearer credential. Required at request time.
        gateway_url: OpenClaw gateway base address.
        gateway_token: Optional OpenClaw bearer credential.
        api_url: Image-generation endpoint.
        model: Image model identifier.
        reference_image: Character reference image URL.
        cli_command: OpenClaw executable name or path.
        timeout: Seconds allowed per outbound call.
    """

    api_key: str | None = None
    gateway_url: str = OPENCLAW_GATEWAY_URL
    gateway_token: str | None = None
    api_url: str = MINIMAX_API_URL
    model: str = MINIMAX_MODEL
    reference_image: str = REFERENCE_IMAGE
    cli_command: str = OPENCLAW_CLI
    timeout: float = DEFAULT_TIMEOUT


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/minimax.key` -> `MINIMAX_API_KEY`).
        2. Raw file contents at `path`.

    Edge cases:
        - `None` path returns `None`.
        - Missing file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


def _read_timeout(raw):
    if raw is None or not str(raw).strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"timeout must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"timeout must be positive, got {raw!r}")
    return value


def load_config(**overrides) -> SelfieConfig:
    """Build a `SelfieConfig` from the process environment.

    Args:
        **overrides: Field values that take precedence over the environment
            (used by adapters for command-line options). `None` values are ignored.

    Returns:
        Populated configuration. The API key may still be `None`; absence is
        reported by the image client, not here.
    """
    values = {
        "api_key": load_key(MINIMAX_KEY_FILE),
        "gateway_url": (os.getenv("OPENCLAW_GATEWAY_URL") or OPENCLAW_GATEWAY_URL).rstrip("/"),
        "gateway_token": os.getenv("OPENCLAW_GATEWAY_TOKEN") or None,
        "api_url": os.getenv("MINIMAX_API_URL") or MINIMAX_API_URL,
        "model": os.getenv("MINIMAX_MODEL") or MINIMAX_MODEL,
        "reference_image": os.getenv("SELFIE_REFERENCE_IMAGE") or REFERENCE_IMAGE,
        "cli_command": os.getenv("OPENCLAW_CLI") or OPENCLAW_CLI,
        "timeout": _read_timeout(os.getenv("SELFIE_REQUEST_TIMEOUT")),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    values["timeout"] = _read_timeout(values["timeout"])
    return SelfieConfig(**values)
