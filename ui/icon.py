"""
Window icon: the numeral "IV" in white on a transparent 32x32 square.
"""

ICON_SIZE = 32


def icon_mask(size: int = ICON_SIZE) -> list:
    """
    Returns a size x size grid of booleans, True where the "IV" glyph is drawn.

    The "I" is a 3px wide bar; the "V" is two 3px wide strokes converging downward.
    """
    mask = [[False] * size for _ in range(size)]

    def paint(x, y):
        if 0 <= x < size and 0 <= y < size:
            mask[y][x] = True

    # "I"
    for y in range(6, 18):
        for x in range(8, 11):
            paint(x, y)

    # "V"
    for i in range(12):
        y = 6 + i
        left = 16 + i // 2
        right = 26 - i // 2
        for dx in range(3):
            if y < 26 and left < 26:
                paint(left + dx, y)
            if y < 26 and right >= 16:
                paint(right + dx, y)

    return mask


def create_icon(master, size: int = ICON_SIZE):
    """Renders icon_mask() into a tk PhotoImage; unpainted pixels stay transparent."""
    import tkinter as tk

    image = tk.PhotoImage(master=master, width=size, height=size)
    for y, row in enumerate(icon_mask(size)):
        for x, painted in enumerate(row):
            if painted:
                image.put("#ffffff", (x, y))
    return image
