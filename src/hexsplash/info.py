"""Text of the information overlay shown over the palette screen."""

INFO_TITLE = "Welcome to HexSplash!"

# (control, what it does)
INFO_ITEMS: tuple[tuple[str, str], ...] = (
    ("Colour cell", "Click on the color view to change it to a randomised color."),
    ("Lock", "Click the lock icon to lock or unlock the view from being randomised."),
    ("Generate", "Randomise every unlocked color at once."),
    ("Info", "View this modal."),
    ("Unlock all", "Unlock all locks in the palette."),
    ("Share", "Export your palette as a list of hex codes."),
)


def info_overlay() -> dict[str, object]:
    return {
        "title": INFO_TITLE,
        "items": [{"control": c, "text": t} for c, t in INFO_ITEMS],
    }
