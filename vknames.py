"""Vulkan registry indexing and enum name derivation.

Indexes the Khronos vk.xml registry (tags, types, enum groups, extensions),
aggregates extension enumerants onto the enum groups they extend, and derives
the short identifier names a code emitter uses for enum types and variants.

Usage:
    python vknames.py --vk-xml path/to/vk.xml
    python vknames.py --list-enums --filter format
    python vknames.py --info VkSurfaceCounterFlagBitsEXT
"""

import argparse
import sys
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from itertools import chain, repeat
from pathlib import Path
from types import MappingProxyType
from typing import TypeVar

PROJECT_ROOT = Path(__file__).parent
DEFAULT_VK_XML = PROJECT_ROOT / "thoughts" / "repos" / "Vulkan-Docs" / "xml" / "vk.xml"

TYPE_PREFIX = "Vk"
FLAG_BITS = "FlagBits"
FLAGS = "Flags"
BIT_SUFFIX = "BIT"


# ===--- CLI config contracts ---=== #


@dataclass(frozen=True)
class DiscoveryConfig:
    command: str
    filter_text: str | None
    info_enum: str | None
    vk_xml: Path


VALID_ERROR_CODES = {
    "FILTER_WITHOUT_LIST",
    "PATH_NOT_FOUND",
}


class ConfigError(Exception):
    def __init__(self, code: str, message: str, suggestion: str | None = None):
        if code not in VALID_ERROR_CODES:
            raise ValueError(f"Unknown config error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion


def validate_path_exists(
    path: Path | None, flag: str, suggestion: str | None = None
) -> Path:
    if path is None:
        raise ConfigError(
            "PATH_NOT_FOUND",
            f"{flag} is required: no path provided.",
            suggestion or f"Pass the path explicitly: {flag} /path/to/resource",
        )
    if path.exists():
        return path
    raise ConfigError(
        "PATH_NOT_FOUND",
        f"Path for {flag} does not exist: {path}",
        suggestion or "Provide an existing path for this flag.",
    )


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Index vk.xml and derive Vulkan enum type and variant names"
    )

    parser.add_argument("--vk-xml", type=Path, default=DEFAULT_VK_XML)

    command_group = parser.add_mutually_exclusive_group()
    command_group.add_argument("--list-enums", action="store_true", default=False)
    command_group.add_argument("--info", type=str, default=None)

    parser.add_argument("--filter", type=str, default=None)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_argument_parser()
    return parser.parse_args(argv)


def validate_config(args: argparse.Namespace) -> DiscoveryConfig:
    if args.filter and not args.list_enums:
        raise ConfigError(
            "FILTER_WITHOUT_LIST",
            "--filter requires --list-enums.",
            "Add --list-enums or remove --filter.",
        )

    vk_xml = validate_path_exists(
        args.vk_xml,
        "--vk-xml",
        "Clone Vulkan-Docs:\n"
        "  git clone https://github.com/KhronosGroup/Vulkan-Docs.git thoughts/repos/Vulkan-Docs\n"
        "Or pass a custom path: --vk-xml /your/path/to/vk.xml",
    )

    if args.list_enums:
        command = "list-enums"
    elif args.info is not None:
        command = "info"
    else:
        command = "summary"

    return DiscoveryConfig(
        command=command,
        filter_text=args.filter,
        info_enum=args.info,
        vk_xml=vk_xml,
    )


def build_config(argv: list[str] | None = None) -> DiscoveryConfig:
    return validate_config(parse_args(argv))


# ===--- Registry errors ---=== #

VALID_REGISTRY_ERROR_CODES = {
    "UNKNOWN_ENUM_KIND",
    "MISSING_ENUM_NAME",
}


class RegistryError(Exception):
    """Fatal problem with registry content that stops the Context build.

    Raised for input the indexer cannot interpret safely: an enum group with no
    name, or an enum group kind marker that has not been taught to
    classify_enum_kind yet. Never caught inside the indexer.
    """

    def __init__(self, code: str, message: str, suggestion: str | None = None):
        if code not in VALID_REGISTRY_ERROR_CODES:
            raise ValueError(f"Unknown registry error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion


# ===--- Registry tree ---=== #


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Tag:
    name: str
    author: str = ""
    contact: str = ""


@dataclass(frozen=True)
class Tags:
    children: tuple[Tag, ...]


@dataclass(frozen=True)
class TypeDef:
    name: str | None
    category: str = ""
    alias: str | None = None


@dataclass(frozen=True)
class Types:
    children: tuple[TypeDef, ...]


@dataclass(frozen=True)
class ValueSpec:
    value: str
    extends: str | None = None


@dataclass(frozen=True)
class BitposSpec:
    bitpos: int
    extends: str | None = None


@dataclass(frozen=True)
class OffsetSpec:
    offset: int
    extends: str
    extnumber: int | None = None
    dir: str = ""


@dataclass(frozen=True)
class AliasSpec:
    alias: str
    extends: str | None = None


@dataclass(frozen=True)
class NoSpec:
    pass


EnumSpec = ValueSpec | BitposSpec | OffsetSpec | AliasSpec | NoSpec


@dataclass(frozen=True)
class Enumerant:
    name: str
    spec: EnumSpec


@dataclass(frozen=True)
class Enums:
    """Raw <enums> group node. name is None only in malformed registries."""

    name: str | None
    kind: str | None
    children: tuple[Enumerant, ...]


@dataclass(frozen=True)
class TypeRef:
    name: str


@dataclass(frozen=True)
class CommandRef:
    name: str


InterfaceItem = Enumerant | TypeRef | CommandRef | Comment


@dataclass(frozen=True)
class Require:
    items: tuple[InterfaceItem, ...]
    depends: str = ""


@dataclass(frozen=True)
class Remove:
    items: tuple[InterfaceItem, ...]


ExtensionChild = Require | Remove


@dataclass(frozen=True)
class Extension:
    name: str
    children: tuple[ExtensionChild, ...]
    number: int | None = None
    supported: str = ""


@dataclass(frozen=True)
class Extensions:
    children: tuple[Extension, ...]


RegistryChild = Tags | Types | Enums | Extensions | Comment


@dataclass(frozen=True)
class Registry:
    children: tuple[RegistryChild, ...]


# ===--- XML loading ---=== #


def _optional_int(raw: str | None) -> int | None:
    if raw is None or raw == "":
        return None
    return int(raw)


def parse_enumerant(el: ET.Element) -> Enumerant:
    """Map one <enum> element onto an Enumerant, picking its payload variant.

    Payload attributes are checked in the order value, bitpos, offset, alias.
    An element carrying none of them (a bare reference inside a require block)
    gets NoSpec.
    """
    name = el.get("name", "")
    extends = el.get("extends")
    value = el.get("value")
    bitpos = el.get("bitpos")
    offset = el.get("offset")
    alias = el.get("alias")

    spec: EnumSpec
    if value is not None:
        spec = ValueSpec(value=value, extends=extends)
    elif bitpos is not None:
        spec = BitposSpec(bitpos=int(bitpos), extends=extends)
    elif offset is not None:
        spec = OffsetSpec(
            offset=int(offset),
            extends=extends or "",
            extnumber=_optional_int(el.get("extnumber")),
            dir=el.get("dir", ""),
        )
    elif alias is not None:
        spec = AliasSpec(alias=alias, extends=extends)
    else:
        spec = NoSpec()
    return Enumerant(name=name, spec=spec)


def _parse_interface_items(block: ET.Element) -> tuple[InterfaceItem, ...]:
    items: list[InterfaceItem] = []
    for child in block:
        if child.tag == "enum":
            items.append(parse_enumerant(child))
        elif child.tag == "type":
            items.append(TypeRef(name=child.get("name", "")))
        elif child.tag == "command":
            items.append(CommandRef(name=child.get("name", "")))
        elif child.tag == "comment":
            items.append(Comment(text=child.text or ""))
    return tuple(items)


def _parse_extension(ext: ET.Element) -> Extension:
    children: list[ExtensionChild] = []
    for block in ext:
        if block.tag == "require":
            children.append(
                Require(
                    items=_parse_interface_items(block),
                    depends=block.get("depends", ""),
                )
            )
        elif block.tag == "remove":
            children.append(Remove(items=_parse_interface_items(block)))
    return Extension(
        name=ext.get("name", ""),
        children=tuple(children),
        number=_optional_int(ext.get("number")),
        supported=ext.get("supported", ""),
    )


def _parse_type(t: ET.Element) -> TypeDef:
    name = t.get("name")
    if not name:
        name_el = t.find("name")
        if name_el is not None:
            name = name_el.text
    if not name and t.get("category") == "funcpointer":
        proto_name = t.find("proto/name")
        if proto_name is not None:
            name = proto_name.text
    return TypeDef(name=name, category=t.get("category", ""), alias=t.get("alias"))


def registry_from_element(root: ET.Element) -> Registry:
    """Build the typed registry tree from a parsed vk.xml root element.

    Only the sections the indexer reads are mapped: tags, types, enums,
    extensions and top-level comments. Everything else (commands, features,
    formats, sync tables) is skipped. No validation happens here; a nameless
    <enums> block is carried through so build_context can reject it.

    Args:
        root: Registry XML root element.

    Returns:
        Registry whose children preserve document order.
    """
    children: list[RegistryChild] = []
    for el in root:
        if el.tag == "tags":
            children.append(
                Tags(
                    children=tuple(
                        Tag(
                            name=tag.get("name", ""),
                            author=tag.get("author", ""),
                            contact=tag.get("contact", ""),
                        )
                        for tag in el.findall("tag")
                    )
                )
            )
        elif el.tag == "types":
            children.append(
                Types(children=tuple(_parse_type(t) for t in el.findall("type")))
            )
        elif el.tag == "enums":
            children.append(
                Enums(
                    name=el.get("name"),
                    kind=el.get("type"),
                    children=tuple(parse_enumerant(e) for e in el.findall("enum")),
                )
            )
        elif el.tag == "extensions":
            children.append(
                Extensions(
                    children=tuple(
                        _parse_extension(ext) for ext in el.findall("extension")
                    )
                )
            )
        elif el.tag == "comment":
            children.append(Comment(text=el.text or ""))
    return Registry(children=tuple(children))


def load_registry(path: Path) -> Registry:
    return registry_from_element(ET.parse(path).getroot())


# ===--- Enum kinds ---=== #


class EnumKind(Enum):
    FLAG_SET = "flag set"
    ENUMERATION = "enumeration"
    CONSTANT_GROUP = "constant group"


_ENUM_KIND_MARKERS = {
    "bitmask": EnumKind.FLAG_SET,
    "enum": EnumKind.ENUMERATION,
}


def classify_enum_kind(marker: str | None) -> EnumKind:
    """Return the EnumKind for an <enums type="..."> marker.

    A missing marker means a loose constant group. Any marker outside the
    known set raises instead of defaulting: a misclassified group would get
    wrong names for every one of its variants.

    Raises:
        RegistryError: UNKNOWN_ENUM_KIND for an unrecognized marker.
    """
    if not marker:
        return EnumKind.CONSTANT_GROUP
    kind = _ENUM_KIND_MARKERS.get(marker)
    if kind is None:
        raise RegistryError(
            "UNKNOWN_ENUM_KIND",
            f"Unknown enum kind marker: '{marker}'",
            f"Add '{marker}' to the enum kind markers in vknames.py.",
        )
    return kind


@dataclass(frozen=True)
class EnumGroup:
    name: str
    kind: EnumKind
    node: Enums

    @property
    def enumerants(self) -> tuple[Enumerant, ...]:
        return self.node.children


# ===--- Index construction ---=== #

KeyT = TypeVar("KeyT")
ValueT = TypeVar("ValueT")


def _sorted_index(entries: dict[KeyT, ValueT]) -> Mapping[KeyT, ValueT]:
    return MappingProxyType(dict(sorted(entries.items())))


def collect_tags(registry: Registry) -> frozenset[str]:
    tags: set[str] = set()
    for child in registry.children:
        if isinstance(child, Tags):
            for tag in child.children:
                tags.add(tag.name)
    return frozenset(tags)


def collect_extensions(registry: Registry) -> Mapping[str, Extension]:
    extensions: dict[str, Extension] = {}
    for child in registry.children:
        if isinstance(child, Extensions):
            for ext in child.children:
                extensions[ext.name] = ext
    return _sorted_index(extensions)


def collect_types(registry: Registry) -> Mapping[str, TypeDef]:
    types: dict[str, TypeDef] = {}
    for child in registry.children:
        if isinstance(child, Types):
            for t in child.children:
                if t.name:
                    types[t.name] = t
    return _sorted_index(types)


def collect_enums(registry: Registry) -> Mapping[str, EnumGroup]:
    """Index every <enums> group by name, classified by kind.

    Raises:
        RegistryError: MISSING_ENUM_NAME for a group without a name,
            UNKNOWN_ENUM_KIND from classify_enum_kind.
    """
    groups: dict[str, EnumGroup] = {}
    for child in registry.children:
        if isinstance(child, Enums):
            if not child.name:
                raise RegistryError(
                    "MISSING_ENUM_NAME",
                    "Missing enum name on an <enums> block",
                    "Every <enums> block in vk.xml must carry a name attribute.",
                )
            groups[child.name] = EnumGroup(
                name=child.name,
                kind=classify_enum_kind(child.kind),
                node=child,
            )
    return _sorted_index(groups)


# ===--- Extension enums ---=== #


@dataclass(frozen=True)
class ExtensionEnumEntry:
    extension: str
    enum: Enumerant


@dataclass(frozen=True)
class ExtensionEnum:
    """Every extension enumerant that extends one enum group.

    extension is the first contributor seen while walking the sorted extension
    index. It is informational only and plays no part in naming.
    """

    extension: str
    entries: tuple[ExtensionEnumEntry, ...]

    @property
    def enums(self) -> tuple[Enumerant, ...]:
        return tuple(entry.enum for entry in self.entries)


def get_extends_from_enum(enum: Enumerant) -> str | None:
    spec = enum.spec
    if isinstance(spec, OffsetSpec):
        return spec.extends
    if isinstance(spec, (ValueSpec, BitposSpec, AliasSpec)):
        return spec.extends
    return None


def collect_extension_enums(
    extension_by_name: Mapping[str, Extension],
) -> Mapping[str, ExtensionEnum]:
    """Group extension enumerants by the enum group they extend.

    Walks extensions in index order, then require blocks and their enum items
    in declaration order. Remove blocks never contribute.

    Args:
        extension_by_name: Sorted extension index from collect_extensions.

    Returns:
        Read-only mapping of extended group name -> ExtensionEnum, sorted by
        group name. Entry order within each aggregate follows the walk.
    """
    representatives: dict[str, str] = {}
    entries: dict[str, list[ExtensionEnumEntry]] = {}

    for name, extension in extension_by_name.items():
        for child in extension.children:
            if not isinstance(child, Require):
                continue
            for item in child.items:
                if not isinstance(item, Enumerant):
                    continue
                extends = get_extends_from_enum(item)
                if extends is None:
                    continue
                if extends not in entries:
                    representatives[extends] = name
                    entries[extends] = []
                entries[extends].append(ExtensionEnumEntry(extension=name, enum=item))

    return _sorted_index(
        {
            target: ExtensionEnum(
                extension=representatives[target], entries=tuple(group)
            )
            for target, group in entries.items()
        }
    )


# ===--- Name derivation ---=== #


def _split_words(name: str) -> list[str]:
    # Digits take the case of the letter before them, so "R8G8" stays one word.
    words: list[str] = []
    for chunk in "".join(c if c.isalnum() else " " for c in name).split():
        start = 0
        mode: str | None = None
        for i, c in enumerate(chunk[:-1]):
            nxt = chunk[i + 1]
            if c.islower():
                next_mode = "lower"
            elif c.isupper():
                next_mode = "upper"
            else:
                next_mode = mode
            if next_mode == "lower" and nxt.isupper():
                words.append(chunk[start : i + 1])
                start = i + 1
                mode = None
            elif mode == "upper" and c.isupper() and nxt.islower():
                words.append(chunk[start:i])
                start = i
                mode = None
            else:
                mode = next_mode
        words.append(chunk[start:])
    return words


def to_shouty_snake_case(name: str) -> str:
    return "_".join(word.upper() for word in _split_words(name))


def derive_type_name(name: str) -> str:
    while name.startswith(TYPE_PREFIX):
        name = name.removeprefix(TYPE_PREFIX)
    return name


def derive_flag_set_type_name(name: str) -> str:
    return derive_type_name(name).replace(FLAG_BITS, FLAGS)


def derive_variant_name(
    enum_name: str, variant_name: str, tags: Iterable[str]
) -> str:
    """Return the short variant identifier for an enumerant of enum_name.

    The owner name is converted to SHOUTY_SNAKE_CASE and compared token by
    token with the enumerant name. Tokens equal at the same position are
    dropped, so VK_IMAGE_TYPE_2D under VkImageType becomes 2D. Then a trailing
    vendor tag (only when another token remains) and a trailing BIT are
    removed, once each, in that order.

    Args:
        enum_name: Owning enum group name, e.g. "VkImageType".
        variant_name: Raw enumerant name, e.g. "VK_IMAGE_TYPE_2D".
        tags: Known vendor tags, e.g. {"KHR", "EXT", "NV"}.

    Returns:
        Underscore-joined remaining tokens; may be empty.
    """
    prefix = to_shouty_snake_case(enum_name).split("_")
    tokens = [
        value
        for left, value in zip(chain(prefix, repeat("")), variant_name.split("_"))
        if left != value
    ]

    if len(tokens) > 1 and tokens[-1] in tags:
        tokens.pop()
    if tokens and tokens[-1] == BIT_SUFFIX:
        tokens.pop()
    return "_".join(tokens)


# ===--- Context ---=== #


@dataclass(frozen=True)
class Context:
    """Indexed view of one registry, built once by build_context.

    Every mapping is read-only and iterates in key order, so output derived
    from it does not depend on element order in vk.xml.
    """

    registry: Registry
    tags: frozenset[str]
    extension_by_name: Mapping[str, Extension]
    type_by_name: Mapping[str, TypeDef]
    enums_by_name: Mapping[str, EnumGroup]
    extension_enums: Mapping[str, ExtensionEnum]

    def sorted_tags(self) -> list[str]:
        return sorted(self.tags)

    def type_name(self, name: str) -> str:
        return derive_type_name(name)

    def flag_set_type_name(self, name: str) -> str:
        return derive_flag_set_type_name(name)

    def variant_name(self, enum_name: str, variant_name: str) -> str:
        return derive_variant_name(enum_name, variant_name, self.tags)


def build_context(registry: Registry) -> Context:
    """Index a registry tree into a Context.

    Raises:
        RegistryError: Propagated from collect_enums; no partial Context is
            returned.
    """
    tags = collect_tags(registry)
    extension_by_name = collect_extensions(registry)
    type_by_name = collect_types(registry)
    enums_by_name = collect_enums(registry)
    extension_enums = collect_extension_enums(extension_by_name)
    return Context(
        registry=registry,
        tags=tags,
        extension_by_name=extension_by_name,
        type_by_name=type_by_name,
        enums_by_name=enums_by_name,
        extension_enums=extension_enums,
    )


def generate(path: Path) -> Context:
    print(f"Parsing: {path}")
    registry = load_registry(path)
    ctx = build_context(registry)
    print(
        f"  Registry: {len(ctx.tags)} tags, {len(ctx.type_by_name)} types, "
        f"{len(ctx.enums_by_name)} enum groups, {len(ctx.extension_by_name)} extensions"
    )
    print(f"  Extension enums: {len(ctx.extension_enums)} groups extended")
    return ctx


# ===--- Enum listing ---=== #


@dataclass(frozen=True)
class EnumVariant:
    """One emitted variant.

    Attributes:
        raw_name: Enumerant name as written in vk.xml.
        name: Derived variant identifier.
        extension: Contributing extension, or None for the group's own values.
        is_alias: True when the enumerant is an alias of another one.
    """

    raw_name: str
    name: str
    extension: str | None
    is_alias: bool


@dataclass(frozen=True)
class EnumSummary:
    name: str
    kind: EnumKind
    type_name: str
    variants: tuple[EnumVariant, ...]
    representative_extension: str | None

    @property
    def base_count(self) -> int:
        return sum(1 for v in self.variants if v.extension is None)

    @property
    def extension_count(self) -> int:
        return len(self.variants) - self.base_count


def gather_enum_summary(ctx: Context, enum_name: str) -> EnumSummary | None:
    """Return derived names for one enum group, or None if it is not indexed.

    Variants list the group's own enumerants in declaration order, then the
    extension enumerants in aggregate order.
    """
    group = ctx.enums_by_name.get(enum_name)
    if group is None:
        return None

    if group.kind is EnumKind.FLAG_SET:
        type_name = ctx.flag_set_type_name(group.name)
    else:
        type_name = ctx.type_name(group.name)

    variants = [
        EnumVariant(
            raw_name=e.name,
            name=ctx.variant_name(group.name, e.name),
            extension=None,
            is_alias=isinstance(e.spec, AliasSpec),
        )
        for e in group.enumerants
    ]

    ext_enum = ctx.extension_enums.get(group.name)
    if ext_enum is not None:
        variants.extend(
            EnumVariant(
                raw_name=entry.enum.name,
                name=ctx.variant_name(group.name, entry.enum.name),
                extension=entry.extension,
                is_alias=isinstance(entry.enum.spec, AliasSpec),
            )
            for entry in ext_enum.entries
        )

    return EnumSummary(
        name=group.name,
        kind=group.kind,
        type_name=type_name,
        variants=tuple(variants),
        representative_extension=ext_enum.extension if ext_enum else None,
    )


def gather_enum_summaries(ctx: Context) -> list[EnumSummary]:
    summaries = []
    for name in ctx.enums_by_name:
        summary = gather_enum_summary(ctx, name)
        assert summary is not None
        summaries.append(summary)
    return summaries


def filter_enums_by_text(
    summaries: list[EnumSummary], filter_text: str
) -> list[EnumSummary]:
    if not filter_text:
        return list(summaries)
    needle = filter_text.lower()
    return [s for s in summaries if needle in s.name.lower()]


# ===--- Formatters ---=== #


def format_enums_table(summaries: list[EnumSummary], source: str) -> str:
    """Return the complete --list-enums output as a single string.

    Output format:

        {N} enum groups in {source}:

          VkFormat    enumeration  Format    185 values  +130 ext  VK_EXT_4444_formats
          ...

    The trailing representative extension column is omitted for groups no
    extension extends.
    """
    lines = [f"{len(summaries)} enum groups in {source}:", ""]

    if not summaries:
        lines.append("")
        return "\n".join(lines)

    name_width = max(len(s.name) for s in summaries)
    kind_width = max(len(s.kind.value) for s in summaries)
    type_width = max(len(s.type_name) for s in summaries)

    for s in summaries:
        values_col = f"{s.base_count} values"
        ext_col = f"+{s.extension_count} ext"
        row = (
            f"  {s.name.ljust(name_width)}  {s.kind.value.ljust(kind_width)}"
            f"  {s.type_name.ljust(type_width)}  {values_col:<11} {ext_col:<9}"
        )
        if s.representative_extension is not None:
            row = row.rstrip() + f"  {s.representative_extension}"
        lines.append(row.rstrip())

    lines.append("")
    return "\n".join(lines)


def format_enum_detail(summary: EnumSummary) -> str:
    """Return the complete --info output for one enum group.

    Output format:

        VkSurfaceCounterFlagBitsEXT (flag set)
          Type name:   SurfaceCounterFlagsEXT
          Extended by: VK_EXT_display_surface_counter

          Variants (1):
            VK_SURFACE_COUNTER_VBLANK_BIT_EXT  VBLANK
    """
    s = summary
    lines = [f"{s.name} ({s.kind.value})"]
    lines.append(f"  Type name:   {s.type_name}")
    lines.append(f"  Extended by: {s.representative_extension or 'none'}")

    lines.append("")
    lines.append(f"  Variants ({len(s.variants)}):")
    raw_width = max((len(v.raw_name) for v in s.variants), default=0)
    name_width = max((len(v.name) for v in s.variants), default=0)
    for v in s.variants:
        notes = []
        if v.extension is not None:
            notes.append(v.extension)
        if v.is_alias:
            notes.append("alias")
        row = f"    {v.raw_name.ljust(raw_width)}  {v.name.ljust(name_width)}"
        if notes:
            row += f"  [{', '.join(notes)}]"
        lines.append(row.rstrip())

    lines.append("")
    return "\n".join(lines)


# ===--- Dispatch ---=== #


def run_discovery(config: DiscoveryConfig) -> None:
    """Execute the command in config and print its output.

    dispatch table:
      "summary"    -> generate (progress lines only)
      "list-enums" -> gather_enum_summaries -> [filter] -> format_enums_table
      "info"       -> gather_enum_summary -> [None check] -> format_enum_detail

    Raises:
        SystemExit(1): When config.command == "info" and the enum group is not
            in the registry.
        RegistryError: From build_context.
    """
    if config.command == "summary":
        generate(config.vk_xml)
        return

    ctx = build_context(load_registry(config.vk_xml))
    source = config.vk_xml.name

    if config.command == "list-enums":
        summaries = gather_enum_summaries(ctx)
        if config.filter_text is not None:
            summaries = filter_enums_by_text(summaries, config.filter_text)
        print(format_enums_table(summaries, source), end="")

    elif config.command == "info":
        assert config.info_enum is not None
        summary = gather_enum_summary(ctx, config.info_enum)
        if summary is None:
            print(
                f"Error: enum group '{config.info_enum}' not found in {source}",
                file=sys.stderr,
            )
            raise SystemExit(1)
        print(format_enum_detail(summary), end="")


# ===--- Main ---=== #


def main(argv: list[str] | None = None):
    try:
        config = build_config(argv)
    except ConfigError as err:
        print(f"Config error [{err.code}]: {err.message}")
        if err.suggestion:
            print(f"Hint: {err.suggestion}")
        raise SystemExit(1) from err

    try:
        run_discovery(config)
    except RegistryError as err:
        print(f"Registry error [{err.code}]: {err.message}")
        if err.suggestion:
            print(f"Hint: {err.suggestion}")
        raise SystemExit(1) from err
    except (OSError, ET.ParseError) as err:
        print(f"Error: {err}")
        raise SystemExit(1) from err


if __name__ == "__main__":
    main()
