"""Prompt assembly helpers for selfie generation.

This module only builds prompt strings from an already resolved mode. Mode
selection happens in `selfie_relay.nlp.mode_selector`; payload assembly and the
model call happen in `selfie_relay.image.client`.

Design constraints:
    - Deterministic construction for identical inputs.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    User context is interpolated as a raw string. The only escaping applied is
    the JSON encoding performed by the transport layer.
"""

from selfie_relay.core.selfie_types import Mode


# =========================================================
# MIRROR TEMPLATE
# =========================================================
# Outfit / full-body framing. Context is spliced mid-sentence.

MIRROR_TEMPLATE = "make a pic of this person, but {context}. the person is taking a mirror selfie"


# =========================================================
# DIRECT TEMPLATE
# =========================================================
# Close-up framing at a location. Context names the place.

DIRECT_TEMPLATE = (
    "a close-up selfie taken by herself at {context}, "
    "direct eye contact with the camera, "
    "looking straight into the lens, "
    "eyes centered and clearly visible, "
    "not a mirror selfie, "
    "phone held at arm's length, "
    "face fully visible"
)

TEMPLATES = {
    Mode.MIRROR: MIRROR_TEMPLATE,
    Mode.DIRECT: DIRECT_TEMPLATE,
}


def build_selfie_prompt(mode, context: str) -> str:
    """Build the literal image prompt for a resolved mode.

    Args:
        mode: `Mode` (or its string value) chosen by the mode selector.
        context: User context text, inserted verbatim.

    Returns:
        Prompt string sent to the image API.

    Failure handling:
        Unknown mode strings raise `ValueError` from `Mode(...)`.
    """
    template = TEMPLATES[Mode(mode)]
    # str.replace keeps braces inside user context literal
    return template.replace("{context}", context)
