"""Message dispatcher used by the core selfie flow.

Forwards a generated image URL and caption to one channel through the
caller-selected transport. Transport exceptions propagate unchanged.
"""

import logging

from selfie_relay.messaging.transport import MessageTransport


logger = logging.getLogger(__name__)


def dispatch_image(transport: MessageTransport, channel: str, caption: str, image_url: str) -> None:
    """Deliver `image_url` with `caption` to `channel`."""
    logger.info("Sending to channel: %s", channel)
    transport.deliver(channel, caption, image_url)
    logger.info("Done! Image sent to %s", channel)
