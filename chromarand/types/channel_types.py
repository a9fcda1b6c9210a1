from enum import Enum
from typing import NamedTuple


class ChannelKind(str, Enum):
    """How a channel is bounded when it is perturbed."""
    LINEAR = "linear"        # independent, [0, 1]
    CIRCULAR = "circular"    # hue, wraps modulo 1
    CHROMA = "chroma"        # [0, max chroma at current hue/second channel]
    SECOND = "second"        # value/lightness/luma, range depends on chroma
    ALPHA = "alpha"          # opacity, [0, 1]


class ChannelSpec(NamedTuple):
    name: str
    short: str
    kind: ChannelKind
