"""Theme colors for the terminal UI."""

from typing import Tuple


class Palette:
    """Warm dark palette used by every screen."""

    FG = "#DCD7CD"
    DIM = "#5A5550"
    GREEN = "#82C378"
    RED = "#D25A50"
    YELLOW = "#DCB950"
    BG = "#161412"
    BORDER = "#3C3732"
    TITLE = "#C8A05A"


def _rgb(color: str) -> Tuple[int, int, int]:
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


LOW_ACCURACY_RGB = _rgb(Palette.RED)
HIGH_ACCURACY_RGB = _rgb(Palette.GREEN)


def accuracy_color(accuracy: float) -> str:
    """Shade from red at 50% accuracy or below to green at 100%."""
    weight = max(0.0, min(1.0, (accuracy - 50.0) / 50.0))
    r, g, b = (
        int(low + (high - low) * weight)
        for low, high in zip(LOW_ACCURACY_RGB, HIGH_ACCURACY_RGB)
    )
    return f"#{r:02X}{g:02X}{b:02X}"
