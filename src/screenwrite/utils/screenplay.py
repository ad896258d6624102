"""Scene heading parsing helpers."""

from __future__ import annotations

import re

from screenwrite.screenplay.classifier import SCENE_HEADING_PATTERN

TIME_INDICATORS = (
    "DAY",
    "NIGHT",
    "MORNING",
    "AFTERNOON",
    "EVENING",
    "DAWN",
    "DUSK",
    "CONTINUOUS",
    "MOMENTS LATER",
    "LATER",
    "SUNSET",
    "SUNRISE",
    "NOON",
)


class ScreenplayUtils:
    """Utility functions for scene headings."""

    @staticmethod
    def strip_prefix(heading: str) -> str:
        """Remove the INT/EXT/INT./EXT./I/E prefix from a heading."""
        match = SCENE_HEADING_PATTERN.match(heading.upper())
        if not match:
            return heading.strip()
        rest = heading[match.end() :]
        # "INT./EXT." puts a second prefix after the first separator
        second = re.match(r"^/(EXT|INT)\.?", rest, re.IGNORECASE)
        if second and match.group(1) in ("INT", "EXT"):
            rest = rest[second.end() :]
        return rest.strip()

    @staticmethod
    def extract_location(heading: str | None) -> str | None:
        """Extract location from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Extracted location or None
        """
        if not heading:
            return None

        rest = ScreenplayUtils.strip_prefix(heading)

        if " - " in rest:
            location, _ = rest.rsplit(" - ", 1)
            location = location.strip()
            return location if location else None

        if rest.startswith("- "):
            return None

        return rest if rest else None

    @staticmethod
    def extract_time(heading: str | None) -> str | None:
        """Extract time of day from scene heading.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Extracted time or None
        """
        if not heading:
            return None

        last_part = heading.upper().rsplit(" - ", 1)[-1]
        if re.search(r"\bMIDNIGHT\b", last_part):
            return "NIGHT"

        for indicator in TIME_INDICATORS:
            if re.search(rf"\b{re.escape(indicator)}\b", last_part):
                return indicator

        return None

    @staticmethod
    def parse_scene_heading(heading: str | None) -> tuple[str, str | None, str | None]:
        """Parse a scene heading into its components.

        Args:
            heading: Scene heading text (e.g., "INT. COFFEE SHOP - DAY")

        Returns:
            Tuple of (scene_type, location, time_of_day)
        """
        if not heading:
            return "", None, None

        scene_type = ""
        heading_upper = heading.upper()

        if heading_upper.startswith(("INT./EXT", "INT/EXT", "I/E")):
            scene_type = "INT/EXT"
        elif heading_upper.startswith(("INT.", "INT ")):
            scene_type = "INT"
        elif heading_upper.startswith(("EXT.", "EXT ")):
            scene_type = "EXT"

        location = ScreenplayUtils.extract_location(heading)
        time_of_day = ScreenplayUtils.extract_time(heading)

        return scene_type, location, time_of_day
