"""Role metadata extension - `roles` array added to NFT metadata JSON."""

from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nftroles.domain.exceptions import ValidationError
from nftroles.domain.value_objects import RoleId


class RoleInput(BaseModel):
    """One field of the role data payload, ABI style.

    `tuple` and `tuple[]` fields describe their members in `components`.
    """

    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    components: list["RoleInput"] = []


class RoleDescriptor(BaseModel):
    """Describes one role offered on a token."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str = Field(min_length=1)
    description: str = ""
    supports_multiple_assignments: bool = Field(
        default=False, alias="supportsMultipleAssignments"
    )
    inputs: list[RoleInput] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, v: str) -> str:
        try:
            return RoleId.from_hex(v).hex
        except ValidationError as e:
            raise ValueError(str(e)) from e

    @property
    def role_id(self) -> RoleId:
        return RoleId.from_hex(self.id)

    @property
    def id_matches_name(self) -> bool:
        """True if id is the conventional hash of name."""
        return RoleId.from_name(self.name) == self.role_id


class RoleMetadataDocument(BaseModel):
    """NFT metadata document carrying a `roles` array. Other keys pass through."""

    model_config = ConfigDict(extra="allow")

    roles: list[RoleDescriptor]

    @model_validator(mode="after")
    def _unique_ids(self) -> "RoleMetadataDocument":
        seen: set[str] = set()
        for role in self.roles:
            if role.id in seen:
                raise ValueError(f"Duplicate role id {role.id}")
            seen.add(role.id)
        return self

    def get(self, role: RoleId) -> RoleDescriptor | None:
        """Descriptor for role, or None if the document does not list it."""
        for descriptor in self.roles:
            if descriptor.id == role.hex:
                return descriptor
        return None


def parse_role_metadata(payload: Any) -> RoleMetadataDocument:
    """Validate metadata payload; raise domain ValidationError on failure."""
    try:
        return RoleMetadataDocument.model_validate(payload)
    except pydantic.ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'document'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Invalid role metadata: {details}") from e
