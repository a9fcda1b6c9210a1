from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.channel_types import ChannelKind, ChannelSpec
from .color_base import ColorBase, channel_property, build_registry
from .rgb import ALPHA


class ColorHSY(ColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HSY
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("hue", "h", ChannelKind.CIRCULAR),
        ChannelSpec("saturation", "s", ChannelKind.LINEAR),
        ChannelSpec("luma", "y", ChannelKind.LINEAR),
        ALPHA,
    )

    hue = h = channel_property(0, "Hue in turns, [0, 1).")
    saturation = s = channel_property(1)
    luma = y = channel_property(2, "Luma, Rec. 601 weighted sum of r, g, b.")
    a = channel_property(3)


hsy_space_to_class = build_registry(ColorHSY)
