"""
Product codes, attribute paths and other fixed vocabulary of a quote.

Centralized here so the model, services and tests agree on the exact
strings stored in (and emitted from) the attribute tree.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional, Tuple


class HospitalCode(str, Enum):
    """Hospital cover levels, from no cover to top cover with pregnancy."""
    NONE = "None"
    BASIC = "BASIC"
    MID = "MID"
    TOP = "TOP_NO_OBS"
    TOP_WITH_PREGNANCY = "TOP_WITH_OBS"


class ExtrasCode(str, Enum):
    """Extras products that can be selected by code."""
    NONE = "None"
    CORE = "Core"
    CORE_PLUS = "CorePlus"
    TOP = "Top"
    WELLBEING = "Wellbeing"


# Marks a hand-built bundle structure; never settable as a code
EXTRAS_BUNDLED: Final[str] = "Bundles"

HOSPITAL_CODES: Final[Tuple[str, ...]] = tuple(code.value for code in HospitalCode)
EXTRAS_CODES: Final[Tuple[str, ...]] = tuple(code.value for code in ExtrasCode)


# ---------------- Attribute paths ---------------- #

TITLE_PATH: Final[str] = "PersonalDetails.PolicyHolder.Title"
GENDER_PATH: Final[str] = "PersonalDetails.PolicyHolder.Gender"
FIRST_NAME_PATH: Final[str] = "PersonalDetails.PolicyHolder.FirstName"
LAST_NAME_PATH: Final[str] = "PersonalDetails.PolicyHolder.LastName"
EMAIL_PATH: Final[str] = "PersonalDetails.PolicyHolder.Email"
DATE_OF_BIRTH_PATH: Final[str] = "PersonalDetails.PolicyHolder.DateOfBirth"

HOSPITAL_CODE_PATH: Final[str] = "ProductSelection.Hospital.Code"
EXTRAS_PATH: Final[str] = "ProductSelection.Extras"
EXTRAS_CODE_PATH: Final[str] = "ProductSelection.Extras.Code"

INCOME_TIER_PATH: Final[str] = "GovernmentDetails.IncomeTier"
APPLY_REBATE_PATH: Final[str] = "GovernmentDetails.ApplyGovernmentRebate"


# ---------------- Alias events ---------------- #

HOSPITAL_CODE_EVENT: Final[str] = "HospitalCode"
EXTRAS_CODE_EVENT: Final[str] = "ExtrasCode"


# ---------------- Price sensitivity ---------------- #

PRICE_AFFECTING_PROPERTIES: Final[Mapping[str, bool]] = MappingProxyType({
    DATE_OF_BIRTH_PATH: True,
    "ContactDetails.Address": True,
    "ContactDetails.Address.State": True,
    "GovernmentDetails.PolicyHolderPreviousFundDetails.PreviouslyHadHealthInsurance": True,
    APPLY_REBATE_PATH: True,
    INCOME_TIER_PATH: True,
    "FinancialDetails.PaymentFrequency": True,
})


# ---------------- Titles ---------------- #

MALE: Final[str] = "Male"
FEMALE: Final[str] = "Female"

GENDER_BY_TITLE: Final[Mapping[str, str]] = MappingProxyType({
    "Mr": MALE,
    "Miss": FEMALE,
    "Mrs": FEMALE,
    "Ms": FEMALE,
})


def empty_extras_bundle() -> dict:
    """Return a fresh copy of the bundle structure meaning "no extras"."""
    return {"Code": ExtrasCode.NONE.value, "BaseBundle": None, "Bundles": []}


def code_value(code: object) -> Optional[str]:
    """Unwrap enum members to their stored string value."""
    if isinstance(code, Enum):
        return code.value
    return code if isinstance(code, str) else None


__all__ = [
    "HospitalCode",
    "ExtrasCode",
    "EXTRAS_BUNDLED",
    "HOSPITAL_CODES",
    "EXTRAS_CODES",
    "TITLE_PATH",
    "GENDER_PATH",
    "FIRST_NAME_PATH",
    "LAST_NAME_PATH",
    "EMAIL_PATH",
    "DATE_OF_BIRTH_PATH",
    "HOSPITAL_CODE_PATH",
    "EXTRAS_PATH",
    "EXTRAS_CODE_PATH",
    "INCOME_TIER_PATH",
    "APPLY_REBATE_PATH",
    "HOSPITAL_CODE_EVENT",
    "EXTRAS_CODE_EVENT",
    "PRICE_AFFECTING_PROPERTIES",
    "MALE",
    "FEMALE",
    "GENDER_BY_TITLE",
    "empty_extras_bundle",
    "code_value",
]
