"""Recover the implemented API surface of the crate from its rustdoc index."""

import logging
from dataclasses import dataclass, field

from endpoint_overview.doc_item import (
    DataTypeKind,
    DocItem,
    ModuleKind,
    ReExportKind,
    is_module,
)
from endpoint_overview.errors import NotAModule, NotAStruct
from endpoint_overview.reference_resolver import (
    collect_method_names,
    duplicate_names,
    find_named,
    iter_names,
    resolve_reexport,
)
from endpoint_overview.rustdoc_index import RustdocIndex

logger = logging.getLogger(__name__)


@dataclass
class ApiSurface:
    """What the crate implements, as seen by the overview."""

    helix_methods: set[str] = field(default_factory=set)
    helix_modules: dict[str, set[str]] = field(default_factory=dict)
    eventsub_types: dict[str, set[str]] = field(default_factory=dict)


def _module_items(item: DocItem | None, path: str) -> tuple[str, ...]:
    if item is None or not isinstance(item.kind, ModuleKind):
        raise NotAModule(item.name if item is not None and item.name else path)
    return item.kind.items


def find_helix_methods(index: RustdocIndex) -> set[str]:
    """Names of the inherent methods of `helix::HelixClient`."""
    helix = index.get_link(index.root, "helix")
    client = resolve_reexport(index, _module_items(helix, "helix"), "client")
    client_items = _module_items(client, "helix::client")

    helix_client = find_named(index, client_items, "HelixClient")
    if helix_client is None or not isinstance(helix_client.kind, DataTypeKind):
        raise NotAStruct("helix::client::HelixClient")
    return collect_method_names(index, helix_client.kind.impl_ids)


def find_helix_endpoints(index: RustdocIndex) -> dict[str, set[str]]:
    """Map each endpoint category module to its request modules."""
    helix = index.get_link(index.root, "helix")
    endpoints = resolve_reexport(index, _module_items(helix, "helix"), "endpoints")
    endpoint_ids = _module_items(endpoints, "helix::endpoints")

    for name in sorted(duplicate_names(index, endpoint_ids)):
        logger.warning("helix::endpoints has more than one item named %s", name)

    mods: dict[str, set[str]] = {}
    for mod_id in endpoint_ids:
        mod = index.get(mod_id, "helix::endpoints")
        if not isinstance(mod.kind, ModuleKind) or not mod.name:
            raise NotAModule(mod.name or mod.id)
        mods[mod.name] = set(iter_names(index, mod.kind.items, is_module))
    return mods


def find_eventsub_types(index: RustdocIndex) -> dict[str, set[str]]:
    """Map each eventsub category module to the names it re-exports."""
    eventsub = index.get_link(index.root, "eventsub")
    types: dict[str, set[str]] = {}
    for mod_id in _module_items(eventsub, "eventsub"):
        mod = index.get(mod_id, "eventsub")
        if not isinstance(mod.kind, ModuleKind) or not mod.name:
            continue
        names: set[str] = set()
        for item_id in mod.kind.items:
            item = index.get(item_id, mod.name)
            if isinstance(item.kind, ReExportKind):
                names.add(item.kind.target_name)
        types[mod.name] = names
    return types


def extract_api_surface(index: RustdocIndex) -> ApiSurface:
    """Run all extractors over the index."""
    surface = ApiSurface(
        helix_methods=find_helix_methods(index),
        helix_modules=find_helix_endpoints(index),
        eventsub_types=find_eventsub_types(index),
    )
    logger.info(
        "Found %d HelixClient methods, %d helix categories, %d eventsub categories",
        len(surface.helix_methods),
        len(surface.helix_modules),
        len(surface.eventsub_types),
    )
    return surface
