"""Reference conversions from unit RGB. Hue is in turns."""

samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (1 / 3, 1.0, 1.0),
    (0.0, 0.0, 1.0): (2 / 3, 1.0, 1.0),
    (1.0, 1.0, 0.0): (1 / 6, 1.0, 1.0),
    (1.0, 0.5, 0.0): (1 / 12, 1.0, 1.0),
    (0.2, 0.4, 0.6): (7 / 12, 2 / 3, 0.6),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (1 / 3, 1.0, 0.5),
    (1.0, 0.5, 0.0): (1 / 12, 1.0, 0.5),
    (0.2, 0.4, 0.6): (7 / 12, 0.5, 0.4),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
}

samples_rgb_hsy = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.299),
    (0.0, 0.0, 1.0): (2 / 3, 1.0, 0.114),
    (0.2, 0.4, 0.6): (7 / 12, 0.449036, 0.363),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

samples_rgb_hcv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.2, 0.4, 0.6): (7 / 12, 0.4, 0.6),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
}

samples_rgb_hcl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.2, 0.4, 0.6): (7 / 12, 0.4, 0.4),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
}

samples_rgb_hcy = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.299),
    (0.0, 1.0, 0.0): (1 / 3, 1.0, 0.587),
    (0.0, 0.0, 1.0): (2 / 3, 1.0, 0.114),
    (1.0, 1.0, 0.0): (1 / 6, 1.0, 0.886),
    (1.0, 0.5, 0.0): (1 / 12, 1.0, 0.5925),
    (0.2, 0.4, 0.6): (7 / 12, 0.4, 0.363),
}

samples_rgb_cmyk = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0, 0.0),
    (0.2, 0.4, 0.6): (2 / 3, 1 / 3, 0.0, 0.4),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0, 1.0),
}
