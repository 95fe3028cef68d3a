"""Certificate subject model."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tlsbootstrap.utils.validators import validate_common_name, validate_country_code


def _unique_values(values) -> List[str]:
    """Trim values, drop empty ones and keep the first occurrence of each."""
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    seen = {}
    for value in values:
        value = value.strip()
        if value:
            seen.setdefault(value, None)
    return list(seen)


class Subject(BaseModel):
    """Distinguished name of a certificate subject."""

    model_config = ConfigDict(frozen=True)

    country: List[str] = Field(default_factory=list)
    organization: List[str] = Field(default_factory=list)
    organizational_unit: List[str] = Field(default_factory=list)
    locality: List[str] = Field(default_factory=list)
    province: List[str] = Field(default_factory=list)
    common_name: str = ""

    @field_validator("country", "organization", "organizational_unit", "locality", "province", mode="before")
    @classmethod
    def normalize_values(cls, v):
        """Collapse repeated flag values into an insertion-ordered set."""
        return _unique_values(v)

    @field_validator("country")
    @classmethod
    def check_country_codes(cls, v):
        """Upper-case country codes and check them against ISO 3166-1 alpha-2."""
        v = _unique_values([country.upper() for country in v])
        for country in v:
            validate_country_code(country)
        return v

    @field_validator("common_name", mode="before")
    @classmethod
    def check_common_name(cls, v):
        """Strip the common name and enforce the X.509 length limit."""
        v = (v or "").strip()
        if v:
            validate_common_name(v)
        return v

    def is_empty(self) -> bool:
        """Return True if no DN attribute is set."""
        return not any(
            [
                self.country,
                self.organization,
                self.organizational_unit,
                self.locality,
                self.province,
                self.common_name,
            ]
        )
