"""Color definitions organized semantically for the sun dial image."""


class Colors:
    """Semantic color organization for the sun dial."""

    class UI:
        """Canvas and text colors."""

        BACKGROUND = (255, 255, 250)
        TITLE = (32, 32, 240)
        LABEL = (32, 32, 240)

    class Dial:
        """Static dial colors."""

        CIRCLE = (176, 176, 176)
        TICK = (176, 176, 176)
        TIME_LABEL = (176, 176, 176)
        SUN_CIRCLE = (80, 71, 115)

    class Solar:
        """Sun arc and marker colors."""

        ARC = (224, 208, 0)
        SUN_UP = (255, 224, 0)
        SUN_DOWN = (209, 175, 2)
        TWILIGHT = (212, 91, 11)


def rgba(color: tuple[int, int, int], alpha: int = 255) -> tuple[int, int, int, int]:
    """Add an alpha channel to an RGB tuple."""
    return (color[0], color[1], color[2], alpha)


# Flat names for simple imports
BACKGROUND = Colors.UI.BACKGROUND
TITLE_COLOR = Colors.UI.TITLE
LABEL_COLOR = Colors.UI.LABEL

CIRCLE_COLOR = Colors.Dial.CIRCLE
TICK_COLOR = Colors.Dial.TICK
TIME_LABEL_COLOR = Colors.Dial.TIME_LABEL
SUN_CIRCLE_COLOR = Colors.Dial.SUN_CIRCLE

SUN_ARC_COLOR = Colors.Solar.ARC
SUN_UP_COLOR = Colors.Solar.SUN_UP
SUN_DOWN_COLOR = Colors.Solar.SUN_DOWN
TWILIGHT_COLOR = Colors.Solar.TWILIGHT
