from typing import Final

WEEKDAYS: Final[tuple] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DAYS_IN_WEEK: Final[int] = len(WEEKDAYS)

BLOCK_ONE_NIGHT: Final[str] = "oneNight"
BLOCK_TWO_NIGHT: Final[str] = "twoNight"
BLOCK_TAKEAWAY: Final[str] = "takeaway"
BLOCK_MUM: Final[str] = "mum"
BLOCK_TYPES: Final[tuple] = (BLOCK_ONE_NIGHT, BLOCK_TWO_NIGHT, BLOCK_TAKEAWAY, BLOCK_MUM)
# Blocks that bind to the active recipe when placed
RECIPE_BLOCKS: Final[tuple] = (BLOCK_ONE_NIGHT, BLOCK_TWO_NIGHT)

BLOCK_LABELS: Final[dict[str, str]] = {
    BLOCK_TAKEAWAY: "Takeaway night",
    BLOCK_MUM: "Mum's food",
}

EXPORT_LINE_PREFIX: Final[str] = "- "
EXPORT_LINE_SEPARATOR: Final[str] = "\r\n"

MEAL_ID_PREFIX: Final[str] = "meal_"
