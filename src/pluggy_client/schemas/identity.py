"""
Identity of the account holder behind an Item.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .common import as_datetime


@dataclass
class PhoneNumber:
    value: str
    type: str | None = None  # Personal, Work, Residencial

    @classmethod
    def from_api_response(cls, data: dict) -> "PhoneNumber":
        return cls(value=data.get("value", ""), type=data.get("type"))


@dataclass
class Email:
    value: str
    type: str | None = None  # Personal, Work

    @classmethod
    def from_api_response(cls, data: dict) -> "Email":
        return cls(value=data.get("value", ""), type=data.get("type"))


@dataclass
class Address:
    full_address: str | None = None
    primary_address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    state: str | None = None
    country: str | None = None
    type: str | None = None  # Personal, Work

    @classmethod
    def from_api_response(cls, data: dict) -> "Address":
        return cls(
            full_address=data.get("fullAddress"),
            primary_address=data.get("primaryAddress"),
            city=data.get("city"),
            postal_code=data.get("postalCode"),
            state=data.get("state"),
            country=data.get("country"),
            type=data.get("type"),
        )


@dataclass
class IdentityRelation:
    type: str | None = None  # Mother, Father, Spouse
    name: str | None = None
    document: str | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "IdentityRelation":
        return cls(
            type=data.get("type"),
            name=data.get("name"),
            document=data.get("document"),
        )


@dataclass
class IdentityResponse:
    """Personal data of the Item owner as reported by the institution."""

    id: str
    birth_date: datetime | None = None
    tax_number: str | None = None
    document: str | None = None
    document_type: str | None = None
    job_title: str | None = None
    full_name: str | None = None
    phone_numbers: list[PhoneNumber] = field(default_factory=list)
    emails: list[Email] = field(default_factory=list)
    addresses: list[Address] = field(default_factory=list)
    relations: list[IdentityRelation] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "IdentityResponse":
        return cls(
            id=data["id"],
            birth_date=as_datetime(data.get("birthDate")),
            tax_number=data.get("taxNumber"),
            document=data.get("document"),
            document_type=data.get("documentType"),
            job_title=data.get("jobTitle"),
            full_name=data.get("fullName"),
            phone_numbers=[PhoneNumber.from_api_response(p) for p in data.get("phoneNumbers") or []],
            emails=[Email.from_api_response(e) for e in data.get("emails") or []],
            addresses=[Address.from_api_response(a) for a in data.get("addresses") or []],
            relations=[IdentityRelation.from_api_response(r) for r in data.get("relations") or []],
        )
