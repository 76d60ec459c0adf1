"""Pydantic models for IPLocate lookup responses.

This module provides validation for the JSON document returned by:
https://iplocate.io/api/lookup/{ip}

Fields the backend could not resolve are either omitted or sent as `null`;
both decode to `None`, which keeps them apart from legitimate empty strings.
Models validate strictly: a value of the wrong JSON type is rejected rather
than coerced (`"37.5"` is not a latitude, `1` is not a flag).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _null_as_false(value: object) -> object:
    """Decode a `null` flag as `False`; flags are never in a "not present" state."""
    return False if value is None else value


class ASN(BaseModel):
    """Model for the Autonomous System the address is routed by."""

    model_config = ConfigDict(strict=True)

    asn: str
    route: str
    netname: str
    name: str
    country_code: str
    domain: str
    type: str
    rir: str


class Privacy(BaseModel):
    """Model for privacy and threat detection flags."""

    model_config = ConfigDict(strict=True)

    is_abuser: bool = False
    is_anonymous: bool = False
    is_bogon: bool = False
    is_hosting: bool = False
    is_icloud_relay: bool = False
    is_proxy: bool = False
    is_tor: bool = False
    is_vpn: bool = False

    null_flags_are_false = field_validator(
        'is_abuser', 'is_anonymous', 'is_bogon', 'is_hosting', 'is_icloud_relay', 'is_proxy', 'is_tor', 'is_vpn',
        mode='before',
    )(_null_as_false)


class Company(BaseModel):
    """Model for the company associated with the address."""

    model_config = ConfigDict(strict=True)

    name: str
    domain: str
    country_code: str
    type: str


class Hosting(BaseModel):
    """Model for hosting provider information."""

    model_config = ConfigDict(strict=True)

    provider: str | None = None
    domain: str | None = None
    network: str | None = None
    region: str | None = None
    service: str | None = None


class Abuse(BaseModel):
    """Model for the abuse contact of the network."""

    model_config = ConfigDict(strict=True)

    address: str | None = None
    country_code: str | None = None
    email: str | None = None
    name: str | None = None
    network: str | None = None
    phone: str | None = None


class LookupResponse(BaseModel):
    """Model for the complete lookup response.

    Latitude and longitude are independently optional; the backend normally
    sends both or neither, but no joint presence is enforced here.
    """

    model_config = ConfigDict(strict=True)

    ip: str

    # Location information
    country: str | None = None
    country_code: str | None = None
    is_eu: bool = False
    city: str | None = None
    continent: str | None = None
    subdivision: str | None = None
    postal_code: str | None = None

    # Coordinates
    latitude: float | None = None
    longitude: float | None = None

    # Timezone, currency and phone
    time_zone: str | None = None
    currency_code: str | None = None
    calling_code: str | None = None

    # Network
    network: str | None = None
    asn: ASN | None = None

    # Detection flags
    privacy: Privacy = Field(default_factory=Privacy)

    company: Company | None = None
    hosting: Hosting | None = None
    abuse: Abuse | None = None

    null_is_eu_is_false = field_validator('is_eu', mode='before')(_null_as_false)
