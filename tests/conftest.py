import argparse
import sys
import xml.etree.ElementTree as ET
from collections.abc import Callable
from pathlib import Path

import pytest

PROJECT_DIR = Path(__file__).resolve().parent.parent
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

import vknames  # noqa: E402


@pytest.fixture
def existing_paths(tmp_path: Path) -> dict[str, Path]:
    vk_xml = tmp_path / "vk.xml"
    vk_xml.write_text("<registry />\n", encoding="utf-8")
    return {"vk_xml": vk_xml}


@pytest.fixture
def missing_path(tmp_path: Path) -> Path:
    return tmp_path / "missing"


@pytest.fixture
def make_args(existing_paths: dict[str, Path]) -> Callable[..., argparse.Namespace]:
    def _make_args(**overrides: object) -> argparse.Namespace:
        base_args: dict[str, object] = {
            "vk_xml": existing_paths["vk_xml"],
            "list_enums": False,
            "info": None,
            "filter": None,
        }
        base_args.update(overrides)
        return argparse.Namespace(**base_args)

    return _make_args


@pytest.fixture
def make_registry_root() -> Callable[[str], ET.Element]:
    def _make_registry_root(inner_xml: str) -> ET.Element:
        return ET.fromstring(f"<registry>{inner_xml}</registry>")

    return _make_registry_root


@pytest.fixture
def make_registry(
    make_registry_root: Callable[[str], ET.Element],
) -> Callable[[str], vknames.Registry]:
    def _make_registry(inner_xml: str) -> vknames.Registry:
        return vknames.registry_from_element(make_registry_root(inner_xml))

    return _make_registry


@pytest.fixture
def write_registry(tmp_path: Path) -> Callable[[str], Path]:
    def _write_registry(inner_xml: str) -> Path:
        vk_xml = tmp_path / "vk.xml"
        vk_xml.write_text(f"<registry>{inner_xml}</registry>\n", encoding="utf-8")
        return vk_xml

    return _write_registry


SAMPLE_REGISTRY_XML = """
<comment>Sample registry</comment>
<tags>
    <tag name="KHR" author="Khronos" contact="Tom Olson @tomolson"/>
    <tag name="EXT" author="Multivendor" contact="Jon Leech @oddhack"/>
    <tag name="NV" author="NVIDIA Corporation" contact="Daniel Koch @dgkoch"/>
</tags>
<types>
    <type category="enum" name="VkResult"/>
    <type category="enum" name="VkImageType"/>
    <type category="enum" name="VkSurfaceCounterFlagBitsEXT"/>
    <type category="bitmask"><type>VkFlags</type> <name>VkSurfaceCounterFlagsEXT</name></type>
</types>
<enums name="API Constants">
    <enum value="256" name="VK_MAX_EXTENSION_NAME_SIZE"/>
</enums>
<enums name="VkResult" type="enum">
    <enum value="0" name="VK_SUCCESS"/>
    <enum value="-1" name="VK_ERROR_OUT_OF_HOST_MEMORY"/>
</enums>
<enums name="VkImageType" type="enum">
    <enum value="0" name="VK_IMAGE_TYPE_1D"/>
    <enum value="1" name="VK_IMAGE_TYPE_2D"/>
    <enum value="2" name="VK_IMAGE_TYPE_3D"/>
</enums>
<enums name="VkSurfaceCounterFlagBitsEXT" type="bitmask">
    <enum bitpos="0" name="VK_SURFACE_COUNTER_VBLANK_BIT_EXT"/>
</enums>
<extensions>
    <extension name="VK_KHR_swapchain" number="2" supported="vulkan">
        <require>
            <enum value="70" name="VK_KHR_SWAPCHAIN_SPEC_VERSION"/>
            <enum offset="4" extends="VkResult" name="VK_SUBOPTIMAL_KHR"/>
            <enum offset="0" extends="VkResult" dir="-" name="VK_ERROR_OUT_OF_DATE_KHR"/>
            <type name="VkSwapchainKHR"/>
            <command name="vkCreateSwapchainKHR"/>
        </require>
    </extension>
    <extension name="VK_EXT_display_surface_counter" number="91" supported="vulkan">
        <require>
            <enum bitpos="0" extends="VkSurfaceCounterFlagBitsEXT" name="VK_SURFACE_COUNTER_VBLANK_EXT"/>
            <enum alias="VK_SURFACE_COUNTER_VBLANK_EXT" extends="VkSurfaceCounterFlagBitsEXT" name="VK_SURFACE_COUNTER_VBLANK_ALIAS_EXT"/>
        </require>
    </extension>
</extensions>
"""


@pytest.fixture
def sample_registry(make_registry: Callable[[str], vknames.Registry]) -> vknames.Registry:
    return make_registry(SAMPLE_REGISTRY_XML)


@pytest.fixture
def sample_context(sample_registry: vknames.Registry) -> vknames.Context:
    return vknames.build_context(sample_registry)


@pytest.fixture
def sample_vk_xml(write_registry: Callable[[str], Path]) -> Path:
    return write_registry(SAMPLE_REGISTRY_XML)
