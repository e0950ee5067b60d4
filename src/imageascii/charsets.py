# Density ramps, ordered from the lowest to the highest effective luminance.

DEFAULT_DENSITY_CHARS = (".", ",", ":", "+", "*", "?", "%", "#", "@")

# Block elements: blank, light/medium/dark shade, full block
BLOCKS = (" ", "░", "▒", "▓", "█")

# Paul Bourke's 70-level ramp, reversed so the densest glyph is last
DETAILED = tuple(reversed("$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "))

CHARSETS = {
    "default": DEFAULT_DENSITY_CHARS,
    "blocks": BLOCKS,
    "detailed": DETAILED,
}
