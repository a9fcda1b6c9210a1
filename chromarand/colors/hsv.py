from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.channel_types import ChannelKind, ChannelSpec
from .color_base import ColorBase, channel_property, build_registry
from .rgb import ALPHA


class ColorHSV(ColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HSV
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("hue", "h", ChannelKind.CIRCULAR),
        ChannelSpec("saturation", "s", ChannelKind.LINEAR),
        ChannelSpec("value", "v", ChannelKind.LINEAR),
        ALPHA,
    )

    hue = h = channel_property(0, "Hue in turns, [0, 1).")
    saturation = s = channel_property(1)
    v = channel_property(2, "Value, max(r, g, b).")
    a = channel_property(3)


hsv_space_to_class = build_registry(ColorHSV)
