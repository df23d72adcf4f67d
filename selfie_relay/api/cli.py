"""
Command-line adapter for SelfieRelay.

Architectural role:
- Parses positional arguments and options into a `SelfieRequest`.
- Builds the explicit `SelfieConfig` from environment plus options.
- Delegates the flow to `selfie_relay.core.engine.generate_and_send`.

Request lifecycle (one invocation):
1. Parse `<context> <channel> [caption] [aspect_ratio]` and options.
2. Resolve the transport (`--transport auto` picks the CLI when the OpenClaw
   executable is on PATH, otherwise the gateway API).
3. Run the engine.
4. Print the JSON summary on success.

Input validation behavior:
- Missing required arguments print usage and exit with status 2.
- Unknown aspect ratios/modes/transports are rejected by argparse choices.

Error handling strategy:
- Any `SelfieRelayError` prints `[ERROR] <message>` to stderr and returns 1.
- The summary is only printed after the whole flow succeeded.

Side effects:
- Configures root logging on stderr.
- Writes the result summary to stdout.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import json
import logging
import shutil
import sys

from selfie_relay.core.engine import generate_and_send
from selfie_relay.core.errors import SelfieRelayError
from selfie_relay.core.provider_config import load_config
from selfie_relay.core.selfie_types import (
    AUTO_MODE,
    ASPECT_RATIO_CHOICES,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_CAPTION,
    MODE_CHOICES,
    SelfieRequest,
)
from selfie_relay.messaging.transport import TRANSPORT_CHOICES, TRANSPORT_CLI, TRANSPORT_GATEWAY


logger = logging.getLogger(__name__)

TRANSPORT_AUTO = "auto"

EPILOG = """\
Environment:
  MINIMAX_API_KEY         MiniMax API key (required)
  OPENCLAW_GATEWAY_URL    OpenClaw gateway URL (default: http://localhost:18789)
  OPENCLAW_GATEWAY_TOKEN  Gateway auth token (optional)
  SELFIE_REQUEST_TIMEOUT  Seconds per outbound call (default: 60)

Example:
  MINIMAX_API_KEY=your_key selfie-relay "wearing a santa hat" "#general" "Merry Christmas!"
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selfie-relay",
        description="Generate a selfie with MiniMax image-01 and send it via OpenClaw",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("context", help="Scene or outfit description (required)")
    parser.add_argument("channel", help="Target channel (required) e.g. #general, @user")
    parser.add_argument(
        "caption",
        nargs="?",
        default=DEFAULT_CAPTION,
        help=f"Message caption (default: '{DEFAULT_CAPTION}')",
    )
    parser.add_argument(
        "aspect_ratio",
        nargs="?",
        default=DEFAULT_ASPECT_RATIO.value,
        choices=ASPECT_RATIO_CHOICES,
        help=f"Image ratio (default: {DEFAULT_ASPECT_RATIO.value})",
    )
    parser.add_argument("--mode", default=AUTO_MODE, choices=MODE_CHOICES, help="Selfie framing (default: auto)")
    parser.add_argument(
        "--transport",
        default=TRANSPORT_AUTO,
        choices=[TRANSPORT_AUTO] + TRANSPORT_CHOICES,
        help="Delivery transport (default: auto)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Seconds per outbound call")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_transport_kind(requested: str, cli_command: str) -> str:
    """Map `--transport` to a concrete transport kind.

    `auto` picks the CLI when `cli_command` is found on PATH and falls back to
    the gateway API otherwise.
    """
    if requested != TRANSPORT_AUTO:
        return requested
    if shutil.which(cli_command):
        return TRANSPORT_CLI
    logger.warning("%s CLI not found - will attempt direct API call", cli_command)
    return TRANSPORT_GATEWAY


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    """
    Run one selfie transaction from command-line arguments.

    Returns:
        Process exit status: 0 on success, 1 on any flow failure. Argument
        errors exit with status 2 through argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        config = load_config(timeout=args.timeout)
        request = SelfieRequest(
            context=args.context,
            channel=args.channel,
            explicit_mode=args.mode,
            caption=args.caption,
            aspect_ratio=args.aspect_ratio,
        )
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    transport_kind = resolve_transport_kind(args.transport, config.cli_command)

    try:
        result = generate_and_send(request, config, transport_kind=transport_kind)
    except SelfieRelayError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print("\n--- Result ---")
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
