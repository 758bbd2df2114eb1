"""Gender value object - selects sex-specific formula terms."""

import logging
from enum import Enum
from typing import Any

from .. import constants

logger = logging.getLogger(__name__)

_FEMALE_ALIASES = {"female", "f", "0"}
_MALE_ALIASES = {"male", "m", "1"}


class Gender(str, Enum):
    """Biological sex used by the BMR and essential body fat tables.

    Only two cases exist. Anything that is not recognised as female is
    handled by the male branch (see ``from_value``).
    """

    FEMALE = "Female"
    MALE = "Male"

    @classmethod
    def from_value(cls, value: Any) -> "Gender":
        """Coerce a raw form value into a Gender.

        Accepts Gender members, their names/values in any case, the
        single-letter forms "F"/"M" and the legacy integer codes 0/1.
        Unrecognised values fall through to MALE.

        Example:
            >>> Gender.from_value("f")
            <Gender.FEMALE: 'Female'>
            >>> Gender.from_value(1)
            <Gender.MALE: 'Male'>
        """
        if isinstance(value, Gender):
            return value

        key = str(value).strip().lower()
        if key in _FEMALE_ALIASES:
            return cls.FEMALE
        if key in _MALE_ALIASES:
            return cls.MALE

        logger.warning("Unrecognised gender %r, using male formulas", value)
        return cls.MALE

    def bmr_offset(self) -> int:
        """Get the sex-specific constant of the BMR equation.

        Returns:
            int: -161 for females, +5 otherwise
        """
        if self is Gender.FEMALE:
            return constants.BMR_FEMALE_OFFSET
        return constants.BMR_MALE_OFFSET

    def essential_body_fat_percent(self) -> int:
        """Get the essential body fat floor in percent.

        Returns:
            int: 8 for females, 3 otherwise
        """
        if self is Gender.FEMALE:
            return constants.ESSENTIAL_BODY_FAT_FEMALE
        return constants.ESSENTIAL_BODY_FAT_MALE
