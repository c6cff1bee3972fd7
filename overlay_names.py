"""
overlay_names.py - Image names for scenario map overlays

Maps an overlay's type, sub type and direction to the name of the image a
renderer draws for it. An empty name means "do not draw".
"""

from typing import Optional

VERTICAL_DIRECTIONS = ("vertical", "vertical-reverse")

# Door sub types (both spellings seen in scenario data) to base image names
DOOR_BASE_NAMES = {
    "stone": "door-stone",
    "wooden": "door-wooden",
    "dark-fog": "door-dark-fog",
    "darkFog": "door-dark-fog",
    "light-fog": "door-light-fog",
    "lightFog": "door-light-fog",
    "breakable-wall": "door-breakable-wall",
    "breakableWall": "door-breakable-wall",
    "altar": "door-altar",
    "altarDoor": "door-altar",
}

# Only these doors have a separate image for vertical placement
DOORS_WITH_VERTICAL_IMAGE = ("door-stone", "door-wooden", "door-breakable-wall")

# Overlay types drawn as "<type>-<sub type>"
SUB_TYPED_OVERLAYS = ("obstacle", "trap", "hazard", "wall")

# Known overlay types that are not drawn yet
HIDDEN_OVERLAYS = ("starting-location", "token")


def is_vertical(direction: str) -> bool:
    return direction in VERTICAL_DIRECTIONS


def door_image_name(sub_type: str, direction: str) -> str:
    """
    Image name for a door.

    Corridor doors pass through unchanged and unknown sub types fall back to
    the stone door. Vertical doors get a "-vert" image when one exists.
    """
    if sub_type in DOOR_BASE_NAMES:
        base_name = DOOR_BASE_NAMES[sub_type]
    elif sub_type.startswith("corridor"):
        return sub_type
    else:
        base_name = "door-stone"
    if is_vertical(direction) and base_name in DOORS_WITH_VERTICAL_IMAGE:
        return base_name + "-vert"
    return base_name


def overlay_image_name(overlay_type: str, sub_type: Optional[str], direction: str) -> str:
    """
    Image name for a map overlay, or "" when it should not be drawn.

    Args:
        overlay_type: Overlay category, e.g. "obstacle" or "difficult-terrain"
        sub_type: Category specific variant, e.g. "boulder-1" (may be None)
        direction: Overlay orientation, e.g. "horizontal" or "vertical"

    Returns:
        Image name, empty for hidden or unknown overlays
    """
    if overlay_type in HIDDEN_OVERLAYS:
        return ""
    if overlay_type == "door":
        return door_image_name(sub_type or "stone", direction)
    if overlay_type in SUB_TYPED_OVERLAYS:
        return f"{overlay_type}-{sub_type or ''}"
    if overlay_type == "difficult-terrain":
        if sub_type == "stairs" and is_vertical(direction):
            return "difficult-terrain-stairs-vert"
        return f"difficult-terrain-{sub_type or ''}"
    if overlay_type == "treasure":
        return "treasure-coin" if sub_type == "coin" else "treasure-chest"
    if overlay_type == "rift":
        return "rift"
    return ""
