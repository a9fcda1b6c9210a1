from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.channel_types import ChannelKind, ChannelSpec
from .color_base import ColorBase, channel_property, build_registry

ALPHA = ChannelSpec("alpha", "a", ChannelKind.ALPHA)


class ColorRGB(ColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.RGB
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("red", "r", ChannelKind.LINEAR),
        ChannelSpec("green", "g", ChannelKind.LINEAR),
        ChannelSpec("blue", "b", ChannelKind.LINEAR),
        ALPHA,
    )

    red = r = channel_property(0)
    green = g = channel_property(1)
    blue = b = channel_property(2)
    a = channel_property(3)


rgb_space_to_class = build_registry(ColorRGB)
