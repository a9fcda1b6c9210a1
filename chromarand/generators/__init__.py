"""Random colors: whole-space generators, per-channel perturbations and named colors."""

from .channels import (
    ChannelOperation, channel_bounds, ordered_channels, perturb_channel, split_argument,
)
from .whole_space import (
    random_rgb, random_cmy, random_cmyk,
    random_hsv, random_hsl, random_hsy,
    random_hcv, random_hcl, random_hcy,
    random_hsv_uniform_chroma, random_hsl_uniform_chroma, random_color,
)
from .operations import (
    guard_chroma_mutation,
    shift_channels, spread_channels, lerp_channels, randomize_channels,
    lerp_color, shift_color, spread_color,
)
from .specific import (
    gray,
    dark_red, dark_green, dark_blue,
    light_red, light_green, light_blue,
    any_red, any_green, any_blue,
    darken, lighten,
)

__all__ = [
    "ChannelOperation", "channel_bounds", "ordered_channels", "perturb_channel", "split_argument",
    "random_rgb", "random_cmy", "random_cmyk",
    "random_hsv", "random_hsl", "random_hsy",
    "random_hcv", "random_hcl", "random_hcy",
    "random_hsv_uniform_chroma", "random_hsl_uniform_chroma", "random_color",
    "guard_chroma_mutation",
    "shift_channels", "spread_channels", "lerp_channels", "randomize_channels",
    "lerp_color", "shift_color", "spread_color",
    "gray", "dark_red", "dark_green", "dark_blue",
    "light_red", "light_green", "light_blue",
    "any_red", "any_green", "any_blue",
    "darken", "lighten",
]
