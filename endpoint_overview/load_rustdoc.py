"""Logic for loading a rustdoc JSON index into a RustdocIndex."""

import json
import logging
from pathlib import Path
from typing import Any

from endpoint_overview.doc_item import (
    DataTypeKind,
    DocItem,
    ImplBlockKind,
    ItemKind,
    ModuleKind,
    OtherKind,
    ReExportKind,
    TraitRef,
)
from endpoint_overview.errors import InvalidRustdoc, RustdocNotFound
from endpoint_overview.rustdoc_index import RustdocIndex

logger = logging.getLogger(__name__)

# Newer rustdoc calls re-exports "use", older versions "import".
REEXPORT_TAGS = ("use", "import")


def _id(value: Any) -> str | None:
    # Format versions >= 36 use integer ids, older ones strings.
    if value is None:
        return None
    return str(value)


def _ids(values: Any) -> tuple[str, ...]:
    return tuple(str(v) for v in values or [])


def _split_inner(raw: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Return the kind tag and its payload for both rustdoc JSON layouts."""
    inner = raw.get("inner")
    if not isinstance(inner, dict):
        inner = {}
    # Old layout: {"kind": "module", "inner": {...}}
    if "kind" in raw:
        return str(raw["kind"]), inner
    if len(inner) != 1:
        return "unknown", {}
    ((tag, payload),) = inner.items()
    return str(tag), payload if isinstance(payload, dict) else {}


def parse_kind(raw: dict[str, Any]) -> ItemKind:
    """Translate the rustdoc `inner` payload into an ItemKind."""
    tag, payload = _split_inner(raw)
    if tag == "module":
        return ModuleKind(items=_ids(payload.get("items")))
    if tag in REEXPORT_TAGS:
        return ReExportKind(
            target_name=str(payload.get("name") or ""),
            target_id=_id(payload.get("id")),
        )
    if tag == "struct":
        return DataTypeKind(impl_ids=_ids(payload.get("impls")))
    if tag == "impl":
        trait = payload.get("trait")
        trait_ref = None
        if trait:
            trait_ref = TraitRef(
                name=str(trait.get("name") or trait.get("path") or ""),
                id=_id(trait.get("id")),
            )
        return ImplBlockKind(member_ids=_ids(payload.get("items")), trait_ref=trait_ref)
    return OtherKind(tag=tag)


def parse_rustdoc(doc: dict[str, Any]) -> RustdocIndex:
    """Build the index from an already decoded rustdoc JSON document."""
    items: dict[str, DocItem] = {}
    for key, raw in (doc.get("index") or {}).items():
        item_id = str(key)
        name = raw.get("name")
        items[item_id] = DocItem(
            id=item_id,
            name=str(name) if name else None,
            kind=parse_kind(raw),
            links={str(k): str(v) for k, v in (raw.get("links") or {}).items()},
        )
    root_id = _id(doc.get("root"))
    logger.debug("Parsed %d rustdoc items (root %s)", len(items), root_id)
    return RustdocIndex(root_id or "", items)


def load_rustdoc(path: Path) -> RustdocIndex:
    """Load and parse the rustdoc JSON file at `path`."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RustdocNotFound(path) from exc
    try:
        doc = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidRustdoc(path, str(exc)) from exc
    if not isinstance(doc, dict):
        raise InvalidRustdoc(path, f"expected an object, got {type(doc).__name__}")
    return parse_rustdoc(doc)
