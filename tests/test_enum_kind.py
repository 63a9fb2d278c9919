from collections.abc import Callable

import pytest

import vknames


@pytest.mark.parametrize(
    ("marker", "expected"),
    [
        ("bitmask", vknames.EnumKind.FLAG_SET),
        ("enum", vknames.EnumKind.ENUMERATION),
        (None, vknames.EnumKind.CONSTANT_GROUP),
        ("", vknames.EnumKind.CONSTANT_GROUP),
    ],
)
def test_classify_enum_kind_known_markers(
    marker: str | None, expected: vknames.EnumKind
) -> None:
    assert vknames.classify_enum_kind(marker) is expected


@pytest.mark.parametrize("marker", ["constants", "Bitmask", "flags", "ENUM"])
def test_classify_enum_kind_rejects_unknown_marker(marker: str) -> None:
    with pytest.raises(vknames.RegistryError) as exc_info:
        vknames.classify_enum_kind(marker)

    assert exc_info.value.code == "UNKNOWN_ENUM_KIND"
    assert marker in exc_info.value.message
    assert exc_info.value.code in vknames.VALID_REGISTRY_ERROR_CODES


def test_registry_error_rejects_unknown_code() -> None:
    with pytest.raises(ValueError, match="Unknown registry error code"):
        vknames.RegistryError("NOT_A_CODE", "boom")


def test_build_context_aborts_on_unknown_kind(
    make_registry: Callable[[str], vknames.Registry],
) -> None:
    registry = make_registry(
        '<enums name="VkNewThing" type="bitfield"><enum value="0" name="VK_X"/></enums>'
    )

    with pytest.raises(vknames.RegistryError) as exc_info:
        vknames.build_context(registry)

    assert exc_info.value.code == "UNKNOWN_ENUM_KIND"
    assert "bitfield" in str(exc_info.value)
