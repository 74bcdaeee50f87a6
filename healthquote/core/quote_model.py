"""
Reactive domain model of a health insurance quote.

The quote keeps its data in a nested attribute tree addressed by dotted
paths and broadcasts every non-silent write as an event named after the
path. A price engine (or any other consumer) subscribes to those events
to learn when a quote needs re-pricing.

Listeners wired here are registered once, at construction, and none of
them writes the path it listens on.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Union

from healthquote.core.age import elapsed, normalize_unit, parse_date_of_birth
from healthquote.core.bundle_catalog import BundleCatalog, structurally_equal
from healthquote.core.change_bus import ChangeBus, Listener
from healthquote.core.errors import InvalidArgument
from healthquote.core.path_store import PathStore
from healthquote.core.product_codes import (
    APPLY_REBATE_PATH,
    DATE_OF_BIRTH_PATH,
    EMAIL_PATH,
    EXTRAS_BUNDLED,
    EXTRAS_CODE_EVENT,
    EXTRAS_CODE_PATH,
    EXTRAS_CODES,
    EXTRAS_PATH,
    FIRST_NAME_PATH,
    GENDER_BY_TITLE,
    GENDER_PATH,
    HOSPITAL_CODE_EVENT,
    HOSPITAL_CODE_PATH,
    HOSPITAL_CODES,
    INCOME_TIER_PATH,
    LAST_NAME_PATH,
    PRICE_AFFECTING_PROPERTIES,
    TITLE_PATH,
    ExtrasCode,
    HospitalCode,
    code_value,
    empty_extras_bundle,
)
from healthquote.core.rebate import RebateTier, RebateTierFactory, RebateTierLookup, build_rebate_lookup
from healthquote.schemas.quote_schema import LifetimeLoading, QuoteModelOptions


logger = logging.getLogger(__name__)


class QuoteModel:
    """
    A health insurance quote.

    Args:
        agr: Rebate tier data. Passed to `agr_factory` when one is given,
            otherwise it must already provide `get_tier()`.
        lhc: Lifetime Health Cover data exposing a numeric `Loading`.
        attributes: Initial attribute tree, applied without emitting events.
        pre_bundled_extras_products: Extras code to bundle structure.
        agr_factory: Host-supplied constructor for the tier lookup.
    """

    HospitalCode = HospitalCode
    ExtrasCode = ExtrasCode
    HOSPITAL_CODES = HOSPITAL_CODES
    EXTRAS_CODES = EXTRAS_CODES
    EXTRAS_BUNDLED = EXTRAS_BUNDLED

    def __init__(
        self,
        agr: Any,
        lhc: Any = None,
        attributes: Optional[Mapping[str, Any]] = None,
        pre_bundled_extras_products: Optional[Union[BundleCatalog, Mapping[str, Mapping[str, Any]]]] = None,
        agr_factory: Optional[RebateTierFactory] = None,
    ) -> None:
        self.agr: RebateTierLookup = build_rebate_lookup(agr, agr_factory)
        self.lhc = LifetimeLoading() if lhc is None else LifetimeLoading.model_validate(lhc)

        self._bus = ChangeBus()
        self._store = PathStore(attributes, on_change=self._bus.emit)

        if pre_bundled_extras_products is None or isinstance(pre_bundled_extras_products, BundleCatalog):
            self.pre_bundled_extras_products = pre_bundled_extras_products
        else:
            self.pre_bundled_extras_products = BundleCatalog(pre_bundled_extras_products)

        # update the gender when the title changes
        self.on(TITLE_PATH, self._on_title_changed)

        # generic events for data that may be mapped to multiple values
        (
            self
            .on(HOSPITAL_CODE_PATH, lambda value: self.emit(HOSPITAL_CODE_EVENT, value))
            .on(EXTRAS_PATH, lambda value: self.emit(EXTRAS_CODE_EVENT, value))
        )

    @classmethod
    def from_options(
        cls,
        options: Union[QuoteModelOptions, Mapping[str, Any]],
        agr_factory: Optional[RebateTierFactory] = None,
    ) -> "QuoteModel":
        """
        Build a model from a single options object.

        Recognized keys: `agr`, `lhc`, `attributes`, `preBundledExtrasProducts`.

        Raises:
            pydantic.ValidationError: If the options are malformed.
        """
        if not isinstance(options, QuoteModelOptions):
            options = QuoteModelOptions.model_validate(dict(options))
        return cls(
            agr=options.agr,
            lhc=options.lhc,
            attributes=options.attributes,
            pre_bundled_extras_products=options.extras_catalog_data(),
            agr_factory=agr_factory,
        )

    # ---------------- Attribute access and events ---------------- #

    def get(self, path: str, default: Any = None) -> Any:
        return self._store.get(path, default)

    def set(
        self,
        path: Union[str, Mapping[str, Any]],
        value: Any = None,
        silent: bool = False,
    ) -> "QuoteModel":
        """Write one path, or a `{path: value}` mapping; emits each path unless silent."""
        self._store.set(path, value, silent=silent)
        return self

    def on(self, event_name: str, listener: Listener) -> "QuoteModel":
        self._bus.on(event_name, listener)
        return self

    def off(self, event_name: str, listener: Optional[Listener] = None) -> "QuoteModel":
        self._bus.off(event_name, listener)
        return self

    def emit(self, event_name: str, *args: Any) -> "QuoteModel":
        self._bus.emit(event_name, *args)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Deep copy of the attribute tree, suitable for persisting."""
        return self._store.to_dict()

    # ---------------- Classification ---------------- #

    @staticmethod
    def is_property_price_affecting(path: str) -> bool:
        """Return True if a change to `path` could change the quoted price."""
        return PRICE_AFFECTING_PROPERTIES.get(path, False)

    @staticmethod
    def get_gender_from_title(title: Any) -> Optional[str]:
        """
        Guess a gender from a person's title.

        Returns:
            "Male" for Mr, "Female" for Miss, Mrs and Ms, otherwise None.
        """
        if not isinstance(title, str):
            return None
        return GENDER_BY_TITLE.get(title)

    # ---------------- Policy holder ---------------- #

    def get_policy_holder_first_name(self) -> Optional[str]:
        return self.get(FIRST_NAME_PATH)

    def get_policy_holder_last_name(self) -> Optional[str]:
        return self.get(LAST_NAME_PATH)

    def get_policy_holder_email(self) -> Optional[str]:
        return self.get(EMAIL_PATH)

    def get_policy_holder_age(self, unit: str = "years", today: Optional[date] = None) -> Optional[int]:
        """
        Get the policy holder's age, floored to whole units.

        Args:
            unit: One of "years", "months", "weeks" or "days".
            today: Reference date; defaults to the current local date.

        Returns:
            The age, or None when the date of birth is missing or is not
            a valid YYYY-MM-DD date.

        Raises:
            ValueError: If `unit` is not supported.
        """
        unit = normalize_unit(unit)
        dob = parse_date_of_birth(self.get(DATE_OF_BIRTH_PATH))
        if dob is None:
            logger.debug("No parseable date of birth at %s", DATE_OF_BIRTH_PATH)
            return None
        if isinstance(today, datetime):
            today = today.date()
        return elapsed(dob, today or date.today(), unit)

    def default_policy_holder_gender(self) -> "QuoteModel":
        """Set the gender implied by the current title, keeping the old gender otherwise."""
        new_title = self.get(TITLE_PATH)
        old_gender = self.get(GENDER_PATH)
        self.set(GENDER_PATH, self.get_gender_from_title(new_title) or old_gender)
        return self

    def _on_title_changed(self, _title: Any) -> None:
        self.default_policy_holder_gender()

    # ---------------- Hospital ---------------- #

    def is_hospital_product_selected(self) -> bool:
        code = self.get_hospital_product_code()
        return code in HOSPITAL_CODES and code != HospitalCode.NONE.value

    def get_hospital_product_code(self) -> Optional[str]:
        return self.get(HOSPITAL_CODE_PATH)

    def set_hospital_product_code(self, code: Union[str, HospitalCode]) -> "QuoteModel":
        """
        Select a hospital product.

        Raises:
            InvalidArgument: If `code` is not a hospital code.
        """
        value = code_value(code)
        if value not in HOSPITAL_CODES:
            logger.warning("Rejected hospital code %r", code)
            raise InvalidArgument("hospital", code)

        self.set(HOSPITAL_CODE_PATH, value)
        return self

    # ---------------- Extras ---------------- #

    def is_extras_product_selected(self) -> bool:
        return self.get(EXTRAS_CODE_PATH) != ExtrasCode.NONE.value

    def get_extras_product_code(self) -> Optional[str]:
        """
        Get the code of the selected extras product.

        The stored bundle structure is matched against the pre-bundled
        catalog; the empty "no extras" structure always resolves to "None".

        Returns:
            The matching code, or None for a structure with no catalog match.
        """
        extras = self.get(EXTRAS_PATH)

        if self.pre_bundled_extras_products is not None:
            code = self.pre_bundled_extras_products.find_code(extras)
            if code is not None:
                return code

        if structurally_equal(extras, empty_extras_bundle()):
            return ExtrasCode.NONE.value
        return None

    def set_extras_product_code(self, code: Union[str, ExtrasCode]) -> "QuoteModel":
        """
        Select an extras product by code, storing its bundle structure.

        Raises:
            InvalidArgument: If `code` is not an extras code, or the catalog
                has no structure for it.
        """
        value = code_value(code)
        if value not in EXTRAS_CODES:
            logger.warning("Rejected extras code %r", code)
            raise InvalidArgument("extras", code)

        if value == ExtrasCode.NONE.value:
            extras = empty_extras_bundle()
        else:
            catalog = self.pre_bundled_extras_products
            extras = catalog.get(value) if catalog is not None else None
            if extras is None:
                logger.warning("No pre-bundled extras product for code %r", value)
                raise InvalidArgument("extras", code, "No pre-bundled extras product is configured for it.")

        self.set(EXTRAS_PATH, extras)
        return self

    # ---------------- Government rebate and loading ---------------- #

    def get_agr_tier(self) -> RebateTier:
        """Get the Australian Government Rebate tier for the current income tier."""
        return self.agr.get_tier(self.get(INCOME_TIER_PATH))

    def is_agr_applied(self) -> bool:
        return bool(self.get(APPLY_REBATE_PATH, False))

    def get_agr_percentage(self) -> float:
        """Rebate percentage of the current tier at the policy holder's age in years."""
        return self.get_agr_tier().get_percentage(self.get_policy_holder_age())

    def is_lhc_applied(self) -> bool:
        return self.lhc.Loading > 0

    def get_lhc_percentage(self) -> float:
        return self.lhc.Loading


__all__ = ["QuoteModel"]
