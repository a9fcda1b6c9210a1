from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.channel_types import ChannelKind, ChannelSpec
from .color_base import ChromaColorBase, channel_property, build_registry
from .rgb import ALPHA


class ColorHCL(ChromaColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HCL
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("hue", "h", ChannelKind.CIRCULAR),
        ChannelSpec("chroma", "c", ChannelKind.CHROMA),
        ChannelSpec("lightness", "l", ChannelKind.SECOND),
        ALPHA,
    )

    lightness = l = channel_property(2, "Lightness, (max + min) / 2.")
    a = channel_property(3)


hcl_space_to_class = build_registry(ColorHCL)
