"""Unit tests for role metadata documents."""

import pytest

from nftroles.application.dto.role_metadata import parse_role_metadata
from nftroles.domain.exceptions import ValidationError
from nftroles.domain.value_objects import RoleId

USER_ROLE = RoleId.from_name("USER_ROLE")


def _document(**overrides) -> dict:
    role = {
        "id": USER_ROLE.hex,
        "name": "USER_ROLE",
        "description": "Allows the grantee to use the NFT",
        "supportsMultipleAssignments": True,
        "inputs": [
            {"name": "profitSplit", "type": "uint256"},
            {"name": "recipient", "type": "address"},
        ],
    }
    role.update(overrides)
    return {
        "name": "Example NFT",
        "image": "ipfs://image",
        "roles": [role],
    }


def test_parse_role_metadata_valid() -> None:
    document = parse_role_metadata(_document())

    [role] = document.roles
    assert role.role_id == USER_ROLE
    assert role.supports_multiple_assignments is True
    assert [i.name for i in role.inputs] == ["profitSplit", "recipient"]
    assert role.id_matches_name is True


def test_parse_role_metadata_keeps_other_nft_keys() -> None:
    """Unknown NFT metadata keys pass through."""
    document = parse_role_metadata(_document())
    assert document.model_extra["name"] == "Example NFT"


def test_parse_role_metadata_normalizes_id_case() -> None:
    document = parse_role_metadata(_document(id=USER_ROLE.hex.upper().replace("0X", "0x")))
    assert document.roles[0].id == USER_ROLE.hex
    assert document.get(USER_ROLE) is document.roles[0]


def test_parse_role_metadata_defaults() -> None:
    """supportsMultipleAssignments defaults to unique; inputs default empty."""
    document = parse_role_metadata(
        {"roles": [{"id": USER_ROLE.hex, "name": "USER_ROLE"}]}
    )
    role = document.roles[0]
    assert role.supports_multiple_assignments is False
    assert role.inputs == []
    assert role.description == ""


def test_parse_role_metadata_id_not_matching_name() -> None:
    document = parse_role_metadata(_document(name="SOMETHING_ELSE"))
    assert document.roles[0].id_matches_name is False


def test_parse_role_metadata_invalid_id() -> None:
    with pytest.raises(ValidationError, match="roles.0.id"):
        parse_role_metadata(_document(id="0x1234"))


def test_parse_role_metadata_duplicate_ids() -> None:
    doc = _document()
    doc["roles"].append(dict(doc["roles"][0]))
    with pytest.raises(ValidationError, match="Duplicate role id"):
        parse_role_metadata(doc)


def test_parse_role_metadata_missing_roles() -> None:
    with pytest.raises(ValidationError, match="roles"):
        parse_role_metadata({"name": "no roles"})


def test_parse_role_metadata_input_requires_type() -> None:
    with pytest.raises(ValidationError):
        parse_role_metadata(_document(inputs=[{"name": "x"}]))


def test_parse_role_metadata_tuple_input_components() -> None:
    """tuple[] inputs keep their nested components."""
    document = parse_role_metadata(
        _document(
            inputs=[
                {
                    "name": "profitSplit",
                    "type": "tuple[]",
                    "components": [
                        {"name": "eventId", "type": "uint256"},
                        {"name": "split", "type": "uint256[]"},
                    ],
                }
            ]
        )
    )

    [tuple_input] = document.roles[0].inputs
    assert [c.name for c in tuple_input.components] == ["eventId", "split"]
    assert tuple_input.components[1].type == "uint256[]"


def test_parse_role_metadata_get_unknown_role() -> None:
    document = parse_role_metadata(_document())
    assert document.get(RoleId.from_name("NOT_LISTED")) is None
