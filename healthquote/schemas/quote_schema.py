"""
Pydantic schemas for quote model construction options.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class LifetimeLoading(BaseModel):
    """Lifetime Health Cover loading supplied by the host."""
    Loading: Union[int, float] = Field(0, ge=0, description="Loading percentage; greater than 0 means loading applies")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "Loading": 10
            }
        }


class ExtrasBundle(BaseModel):
    """
    Canonical structure of an extras product selection.

    Unknown keys are kept so that structural comparison sees the whole
    record exactly as the host supplied it.
    """
    Code: str = Field(..., description="Extras code, or 'Bundles' for a hand-built bundle")
    BaseBundle: Optional[Any] = Field(..., description="Base bundle identifier, null for no extras")
    Bundles: List[Any] = Field(default_factory=list, description="Ordered add-on bundles")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "Code": "Top",
                "BaseBundle": "TopExtras",
                "Bundles": ["Dental", "Optical"]
            }
        }


class QuoteModelOptions(BaseModel):
    """Options accepted by `QuoteModel.from_options`."""
    agr: Any = Field(..., description="Rebate tier data or a tier lookup")
    lhc: Optional[LifetimeLoading] = Field(None, description="Lifetime Health Cover loading data")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Initial attribute tree, applied silently")
    pre_bundled_extras_products: Optional[Dict[str, ExtrasBundle]] = Field(
        None,
        alias="preBundledExtrasProducts",
        description="Extras code to canonical bundle structure",
    )

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True

    def extras_catalog_data(self) -> Optional[Dict[str, Dict[str, Any]]]:
        """
        Return the catalog as plain dictionaries, or None if not configured.

        Only the keys the host supplied are kept, so each structure compares
        equal to the same record stored on a quote.
        """
        if self.pre_bundled_extras_products is None:
            return None
        catalog: Dict[str, Dict[str, Any]] = {}
        for code, bundle in self.pre_bundled_extras_products.items():
            structure = bundle.model_dump(exclude_unset=True)
            structure.update(bundle.model_extra or {})
            catalog[code] = structure
        return catalog


__all__ = ["LifetimeLoading", "ExtrasBundle", "QuoteModelOptions"]
