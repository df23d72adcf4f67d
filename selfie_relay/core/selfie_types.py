"""Value objects exchanged between selfie-flow stages.

Architectural role:
    Defines the minimal schema produced by adapters (`SelfieRequest`), by the image
    service (`GeneratedImage`) and returned by `engine.generate_and_send`
    (`DispatchResult`).

Lifecycle:
    All objects are frozen and transient. Nothing here is cached or persisted; each
    instance lives for one transaction only.

Determinism:
    The data classes are purely structural and state-free.
"""

from dataclasses import dataclass
from enum import Enum


DEFAULT_CAPTION = "Generated with MiniMax image-01"

# Input-only override value meaning "resolve from keywords".
AUTO_MODE = "auto"


class Mode(str, Enum):
    """Prompt framing style."""

    MIRROR = "mirror"
    DIRECT = "direct"


class AspectRatio(str, Enum):
    """Aspect ratios accepted by the image-generation endpoint."""

    SQUARE = "1:1"
    WIDE = "16:9"
    LANDSCAPE = "4:3"
    PHOTO = "3:2"
    PHOTO_PORTRAIT = "2:3"
    PORTRAIT = "3:4"
    TALL = "9:16"
    ULTRAWIDE = "21:9"


DEFAULT_ASPECT_RATIO = AspectRatio.SQUARE

ASPECT_RATIO_CHOICES = [ratio.value for ratio in AspectRatio]
MODE_CHOICES = [AUTO_MODE] + [mode.value for mode in Mode]


@dataclass(frozen=True)
class SelfieRequest:
    """One selfie transaction as requested by a caller.

    Attributes:
        context: Free-text scene/outfit description.
        channel: Opaque messaging destination.
        explicit_mode: `Mode`, `"auto"` or `None`. Anything other than `None` and
            `"auto"` always wins over keyword resolution.
        caption: Message text sent alongside the image.
        aspect_ratio: Requested output ratio.

    Edge cases:
        - Blank `context` or `channel` -> `ValueError`.
        - Unknown ratio or mode strings -> `ValueError` from enum coercion.
    """

    context: str
    channel: str
    explicit_mode: Mode | str | None = None
    caption: str = DEFAULT_CAPTION
    aspect_ratio: AspectRatio = DEFAULT_ASPECT_RATIO

    def __post_init__(self):
        if not self.context or not self.context.strip():
            raise ValueError("context must not be empty")
        if not self.channel or not self.channel.strip():
            raise ValueError("channel must not be empty")

        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "aspect_ratio", AspectRatio(self.aspect_ratio or DEFAULT_ASPECT_RATIO))
        if self.caption is None:
            object.__setattr__(self, "caption", DEFAULT_CAPTION)
        if self.explicit_mode is not None and self.explicit_mode != AUTO_MODE:
            object.__setattr__(self, "explicit_mode", Mode(self.explicit_mode))


@dataclass(frozen=True)
class GeneratedImage:
    url: str
    source_prompt: str


@dataclass(frozen=True)
class DispatchResult:
    """Terminal value of a successful transaction."""

    success: bool
    channel: str
    image_url: str
    prompt: str

    def to_dict(self) -> dict:
        """Render the JSON summary printed by adapters."""
        return {
            "success": self.success,
            "imageUrl": self.image_url,
            "channel": self.channel,
            "prompt": self.prompt,
        }
