"""
Connector: an institution integration and the credentials it asks for.
"""

from dataclasses import dataclass, field

from .common import coerce_enum
from .enums import ConnectorType, CredentialType


@dataclass
class CredentialSelectOption:
    """One choice of a `select` credential."""

    value: str
    label: str

    @classmethod
    def from_api_response(cls, data: dict) -> "CredentialSelectOption":
        return cls(value=data.get("value", ""), label=data.get("label", ""))


@dataclass
class ConnectorCredential:
    """
    Parameter needed to execute a connector.

    `validation` is a regex the submitted value must match before execution;
    `validation_message` is what to show the user when it does not.
    `mfa` marks parameters requested as a second authentication factor.
    """

    label: str
    name: str
    type: CredentialType | str | None = None
    mfa: bool = False
    placeholder: str | None = None
    validation: str | None = None
    validation_message: str | None = None
    optional: bool = False
    # QR code / captcha payload for image credentials
    data: str | None = None
    assistive_text: str | None = None
    options: list[CredentialSelectOption] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "ConnectorCredential":
        return cls(
            label=data.get("label", ""),
            name=data.get("name", ""),
            type=coerce_enum(CredentialType, data.get("type")),
            mfa=bool(data.get("mfa", False)),
            placeholder=data.get("placeholder"),
            validation=data.get("validation"),
            validation_message=data.get("validationMessage"),
            optional=bool(data.get("optional", False)),
            data=data.get("data"),
            assistive_text=data.get("assistiveText"),
            options=[
                CredentialSelectOption.from_api_response(o) for o in data.get("options") or []
            ],
        )


@dataclass
class ConnectorHealth:
    """Connector availability, only returned when asked for with includeHealth."""

    status: str
    stage: str | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "ConnectorHealth":
        return cls(status=data.get("status", ""), stage=data.get("stage"))


@dataclass
class Connector:
    """Institution integration available to create Items with."""

    id: int
    name: str
    institution_url: str = ""
    image_url: str = ""
    primary_color: str | None = None
    type: ConnectorType | str | None = None
    country: str = ""
    credentials: list[ConnectorCredential] = field(default_factory=list)
    # Only set for OAuth connectors: connect the user here, then the item is created
    oauth_url: str | None = None
    health: ConnectorHealth | None = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Connector":
        health = data.get("health")
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            institution_url=data.get("institutionUrl", ""),
            image_url=data.get("imageUrl", ""),
            primary_color=data.get("primaryColor"),
            type=coerce_enum(ConnectorType, data.get("type")),
            country=data.get("country", ""),
            credentials=[
                ConnectorCredential.from_api_response(c) for c in data.get("credentials") or []
            ],
            oauth_url=data.get("oauthUrl"),
            health=ConnectorHealth.from_api_response(health) if health else None,
        )

    @property
    def mfa_credentials(self) -> list[ConnectorCredential]:
        return [c for c in self.credentials if c.mfa]
