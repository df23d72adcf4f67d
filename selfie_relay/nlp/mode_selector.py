"""Rule-based selfie mode selector.

Purpose:
    Map free-text context to exactly one prompt framing style (`mirror` or
    `direct`) before prompt construction.

Validation model:
    - Rule-based only (case-insensitive substring matching), no model inference.
    - Explicit overrides are evaluated before any keyword set.
    - The direct keyword set is evaluated before the mirror keyword set.

Determinism:
    For the same input text and keyword lists, output is deterministic.

Known limitations:
    Substring matching also hits inside longer words ("address" contains
    "dress"). Callers can always pass an explicit mode instead.
"""

from selfie_relay.core.selfie_types import AUTO_MODE, Mode


# Place or portrait framing. Checked first.
DIRECT_KEYWORDS = [
    "cafe",
    "restaurant",
    "beach",
    "park",
    "city",
    "close-up",
    "portrait",
    "face",
    "eyes",
    "smile",
]

# Outfit or full-body framing.
MIRROR_KEYWORDS = [
    "outfit",
    "wearing",
    "clothes",
    "dress",
    "suit",
    "fashion",
    "full-body",
    "mirror",
]

DEFAULT_MODE = Mode.MIRROR


def matched_keywords(context: str) -> dict:
    """Return the keywords from each set that occur in `context`.

    Returns:
        `{"direct": [...], "mirror": [...]}` in keyword-list order.
    """
    text = (context or "").lower()
    return {
        Mode.DIRECT.value: [k for k in DIRECT_KEYWORDS if k in text],
        Mode.MIRROR.value: [k for k in MIRROR_KEYWORDS if k in text],
    }


def resolve_mode(context: str, explicit_mode=None) -> Mode:
    """Resolve the framing mode for a selfie context.

    Args:
        context: Free-text scene/outfit description.
        explicit_mode: `Mode`, mode string, `"auto"` or `None`.

    Returns:
        Exactly one `Mode`.

    Evaluation order:
        1. Explicit mode other than `"auto"` -> returned unchanged.
        2. Any direct keyword -> `direct`.
        3. Any mirror keyword -> `mirror`.
        4. Otherwise `mirror`.

    Failure handling:
        Unknown explicit mode strings raise `ValueError` from `Mode(...)`.
    """
    if explicit_mode is not None and explicit_mode != AUTO_MODE:
        return Mode(explicit_mode)

    text = (context or "").lower()

    if any(k in text for k in DIRECT_KEYWORDS):
        return Mode.DIRECT

    if any(k in text for k in MIRROR_KEYWORDS):
        return Mode.MIRROR

    return DEFAULT_MODE
