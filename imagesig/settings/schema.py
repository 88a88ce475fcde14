from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Dict, Mapping, Optional, Tuple, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    # camelCase keys only; Python field names are not accepted as input
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        frozen=True,
    )


def _freeze(value: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


def _thaw(value: Mapping[str, str]) -> Dict[str, str]:
    return dict(value)


# Read-only once validated, written back out as a plain mapping.
Annotations = Annotated[
    Dict[StrictStr, StrictStr],
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=Dict[str, str]),
]


class KeylessInfo(_WireModel):
    issuer: StrictStr = Field(..., description="OIDC issuer of the signing identity.")
    subject: StrictStr = Field(
        ...,
        description="Subject of the signing identity. Used as a prefix by KeylessPrefix.",
    )


class PubKeys(_WireModel):
    image: StrictStr
    pub_keys: Tuple[StrictStr, ...] = Field(..., description="PEM encoded public keys.")
    annotations: Optional[Annotations] = None


class Keyless(_WireModel):
    image: StrictStr
    keyless: Tuple[KeylessInfo, ...]
    annotations: Optional[Annotations] = None


class GithubActions(_WireModel):
    """Keyless signature produced by a GitHub Actions workflow."""

    # e.g. registry.testing.lan/busybox:1.0.0
    image: StrictStr
    owner: StrictStr = Field(..., description="Owner of the repository, e.g. octocat.")
    repo: Optional[StrictStr] = Field(
        None, description="Repository of the workflow that signed the image."
    )
    annotations: Optional[Annotations] = Field(
        None, description="Annotations every signer must have provided."
    )


class KeylessPrefix(_WireModel):
    image: StrictStr
    keyless_prefix: Tuple[KeylessInfo, ...]
    annotations: Optional[Annotations] = None


# No discriminant on the wire: variants are tried in declaration order and the
# first one whose shape fits wins.
Signature = Annotated[
    Union[PubKeys, Keyless, GithubActions, KeylessPrefix],
    Field(union_mode="left_to_right"),
]

SIGNATURE_KINDS = ("pubKeys", "keyless", "owner", "keylessPrefix")


class Settings(_WireModel):
    signatures: Tuple[Signature, ...] = Field(
        default_factory=tuple,
        description="Signature requirements, evaluated per matching image.",
    )
    modify_images_with_digest: StrictBool = Field(
        True,
        description="Replace image tags with the digest that was verified.",
    )
