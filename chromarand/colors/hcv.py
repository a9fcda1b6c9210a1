from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.channel_types import ChannelKind, ChannelSpec
from .color_base import ChromaColorBase, channel_property, build_registry
from .rgb import ALPHA


class ColorHCV(ChromaColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HCV
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("hue", "h", ChannelKind.CIRCULAR),
        ChannelSpec("chroma", "c", ChannelKind.CHROMA),
        ChannelSpec("value", "v", ChannelKind.SECOND),
        ALPHA,
    )

    v = channel_property(2, "Value, max(r, g, b); chroma may not exceed it.")
    a = channel_property(3)


hcv_space_to_class = build_registry(ColorHCV)
