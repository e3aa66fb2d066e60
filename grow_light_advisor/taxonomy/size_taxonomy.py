"""
Plant size taxonomy and fixture power tiers.

``SizeCategory`` is the closed set of physical scales a plant can be assigned
by the upstream analysis step.  The member values match the labels that the
analysis payload carries (``"Small"``, ``"Medium"``, ``"Large"``), so a raw
payload string converts directly with ``SizeCategory(value)``.

Power tiers
-----------
The reference catalog ships four rated power levels (7W, 10W, 24W, 28W).
Wattage suitability only distinguishes two thresholds:

    LOW_POWER_THRESHOLD_W  = 10   # 10W and below count as low power
    HIGH_POWER_THRESHOLD_W = 24   # 24W and above count as high power

This module has NO imports from any other ``grow_light_advisor`` package.
"""

from enum import StrEnum

LOW_POWER_THRESHOLD_W: float = 10.0
HIGH_POWER_THRESHOLD_W: float = 24.0


class SizeCategory(StrEnum):
    """Physical scale of the plant being lit."""

    SMALL = "Small"
    """Seedlings, succulents, small pots on a desk or shelf."""

    MEDIUM = "Medium"
    """Typical houseplants: pothos, monstera juveniles, herbs in planters."""

    LARGE = "Large"
    """Floor plants and shrubs that need wide canopy coverage."""

    @classmethod
    def parse(cls, value: str) -> "SizeCategory":
        """Case-insensitive lookup by label (``"small"`` → ``SMALL``).

        Raises:
            ValueError: If ``value`` is not a known size label.
        """
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(
            f"Unknown size category '{value}'. "
            f"Must be one of {[m.value for m in cls]}."
        )
