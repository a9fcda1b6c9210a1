from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.channel_types import ChannelKind, ChannelSpec
from .color_base import ColorBase, channel_property, build_registry
from .rgb import ALPHA


class ColorCMY(ColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.CMY
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("cyan", "c", ChannelKind.LINEAR),
        ChannelSpec("magenta", "m", ChannelKind.LINEAR),
        ChannelSpec("yellow", "y", ChannelKind.LINEAR),
        ALPHA,
    )

    cyan = c = channel_property(0)
    magenta = m = channel_property(1)
    yellow = y = channel_property(2)
    a = channel_property(3)


class ColorCMYK(ColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.CMYK
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("cyan", "c", ChannelKind.LINEAR),
        ChannelSpec("magenta", "m", ChannelKind.LINEAR),
        ChannelSpec("yellow", "y", ChannelKind.LINEAR),
        ChannelSpec("key", "k", ChannelKind.LINEAR),
        ALPHA,
    )

    cyan = c = channel_property(0)
    magenta = m = channel_property(1)
    yellow = y = channel_property(2)
    key = k = channel_property(3)
    a = channel_property(4)


cmy_space_to_class = build_registry(ColorCMY, ColorCMYK)
