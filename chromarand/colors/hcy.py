from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from ..types.channel_types import ChannelKind, ChannelSpec
from .color_base import ChromaColorBase, channel_property, build_registry
from .rgb import ALPHA


class ColorHCY(ChromaColorBase):
    __slots__ = ()
    mode:     ClassVar[ColorSpace] = ColorSpace.HCY
    channels: ClassVar[Tuple[ChannelSpec, ...]] = (
        ChannelSpec("hue", "h", ChannelKind.CIRCULAR),
        ChannelSpec("chroma", "c", ChannelKind.CHROMA),
        ChannelSpec("luma", "y", ChannelKind.SECOND),
        ALPHA,
    )

    luma = y = channel_property(2, "Luma; its range at a given chroma depends on hue.")
    a = channel_property(3)


hcy_space_to_class = build_registry(ColorHCY)
