from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Iterator, Optional, Tuple, Union, cast

from boundednumbers import clamp

from ..conversions.hue import wrap_hue
from ..conversions.gamut import ChromaGamut, get_gamut
from ..types.color_types import ColorSpace, ScalarVector, CHROMA_SPACES, HUE_SPACES
from ..types.channel_types import ChannelKind, ChannelSpec

ColorValue = Union[ScalarVector, "ColorBase"]


class ColorBase:
    """
    Immutable unit-float color with a trailing alpha channel.

    Subclasses declare ``mode`` and ``channels``. Values are normalized on
    construction: hue channels wrap into [0, 1), every other channel is
    clamped to [0, 1]. A tuple without the alpha channel gets alpha 1.0.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode:     ClassVar[ColorSpace]
    channels: ClassVar[Tuple[ChannelSpec, ...]]
    # installed by colors/color.py
    convert:  Callable[[ColorBase, Union[ColorSpace, str, None]], ColorBase]
    from_rgb: Callable[[ColorBase], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = value.convert(self.mode).value

        values = tuple(cast(Tuple[Any, ...], value))
        if len(values) == self.num_channels - 1:
            values = values + (1.0,)
        if len(values) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels - 1} or {self.num_channels} channels, "
                f"got {len(values)}"
            )

        normalized = []
        for spec, v in zip(self.channels, values):
            v = float(v)
            if spec.kind is ChannelKind.CIRCULAR:
                normalized.append(wrap_hue(v))
            else:
                normalized.append(float(clamp(v, 0.0, 1.0)))

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(normalized)

        # freeze instance
        super().__setattr__('_is_frozen', True)

    # ------------------ CLASS INFO ------------------
    @classmethod
    def channel_names(cls) -> Tuple[str, ...]:
        return tuple(spec.name for spec in cls.channels)

    @classmethod
    def channel_index(cls, name: str) -> int:
        """
        Index of a channel by long or short name ("luma" or "y").

        Raises:
            ValueError: for names the model does not have
        """
        key = name.lower()
        for i, spec in enumerate(cls.channels):
            if key == spec.name or key == spec.short:
                return i
        raise ValueError(f"{cls.mode} has no channel {name!r}; expected one of {cls.channel_names()}")

    @classmethod
    def channel_spec(cls, name: str) -> ChannelSpec:
        return cls.channels[cls.channel_index(name)]

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def num_channels(self) -> int:
        return len(self.channels)

    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def color(self) -> ScalarVector:
        """Channels without alpha."""
        return self._value[:-1]

    @property
    def alpha(self) -> float:
        return self._value[-1]

    @property
    def has_hue(self) -> bool:
        return self.mode in HUE_SPACES

    @property
    def is_chroma_based(self) -> bool:
        return self.mode in CHROMA_SPACES

    def channel(self, name: str) -> float:
        return self._value[self.channel_index(name)]

    # ------------------ DERIVED COLORS ------------------
    def replace(self, **channels: float) -> "ColorBase":
        """Return a copy with the named channels replaced (long or short names)."""
        values = list(self._value)
        for name, v in channels.items():
            values[self.channel_index(name)] = v
        return self.__class__(tuple(values))

    def with_alpha(self, alpha: float) -> "ColorBase":
        return self.__class__(self.color + (alpha,))

    def to_rgb(self) -> "ColorBase":
        return self.convert(ColorSpace.RGB)

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __getitem__(self, index: int) -> float:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        body = ", ".join(f"{spec.short}={v:.6g}" for spec, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({body})"


def channel_property(index: int, doc: Optional[str] = None) -> property:
    def getter(self: ColorBase) -> float:
        return self._value[index]
    return property(getter, doc=doc)


class ChromaColorBase(ColorBase):
    """
    Hue/chroma/(value|lightness|luma) color.

    Construction does not correct gamut: any (chroma, second channel) pair
    in the unit square is stored as given. ``is_valid`` is recomputed on
    every access.
    """
    __slots__ = ()

    hue = channel_property(0, "Hue in turns, [0, 1).")
    h = hue
    chroma = channel_property(1, "Chroma, [0, max_chroma].")
    c = chroma
    second = channel_property(2, "Value, lightness or luma.")

    @property
    def gamut(self) -> ChromaGamut:
        return get_gamut(self.mode)

    @property
    def is_valid(self) -> bool:
        h, c, s = self.color
        return self.gamut.is_valid(h, c, s)

    @property
    def max_chroma(self) -> float:
        return self.gamut.max_chroma(self.hue, self.second)

    @property
    def second_range(self) -> Tuple[float, float]:
        return self.gamut.min_max_second(self.hue, self.chroma)

    def nearest_valid(self) -> "ChromaColorBase":
        """Closest in-gamut color at the same hue and alpha; self when already valid."""
        if self.is_valid:
            return self
        h, c, s = self.gamut.nearest_valid(*self.color)
        return self.__class__((h, c, s, self.alpha))


def build_registry(*classes: type[ColorBase]) -> Dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
