"""Traversal helpers over the rustdoc graph.

All lookups go through the index by id; the graph may contain forward
references and cycles through re-exports, so nothing here follows links
recursively. Name lookups return the first match in item order.
"""

from collections import Counter
from collections.abc import Callable, Iterable, Iterator

from endpoint_overview.doc_item import DocItem, ImplBlockKind, ItemKind, ReExportKind
from endpoint_overview.errors import NotAnImplBlock
from endpoint_overview.rustdoc_index import RustdocIndex


def resolve_reexport(
    index: RustdocIndex, ids: Iterable[str], name: str
) -> DocItem | None:
    """Resolve the re-export exported as `name` to the item it points at."""
    for item_id in ids:
        item = index.get(item_id)
        if isinstance(item.kind, ReExportKind) and item.kind.target_name == name:
            return index.get(item.kind.target_id, f"re-export of {name}")
    return None


def find_named(index: RustdocIndex, ids: Iterable[str], name: str) -> DocItem | None:
    """Return the first item called `name`."""
    for item_id in ids:
        item = index.get(item_id)
        if item.name == name:
            return item
    return None


def iter_names(
    index: RustdocIndex,
    ids: Iterable[str],
    predicate: Callable[[ItemKind], bool] = lambda _kind: True,
) -> Iterator[str]:
    """Yield the names of the items whose kind satisfies `predicate`."""
    for item_id in ids:
        item = index.get(item_id)
        if not item.name or not predicate(item.kind):
            continue
        yield item.name


def collect_method_names(index: RustdocIndex, impl_ids: Iterable[str]) -> set[str]:
    """Collect the names defined in the inherent impl blocks of a type.

    Trait impls are skipped: only methods callable without importing a
    trait count as helpers.
    """
    methods: set[str] = set()
    for impl_id in impl_ids:
        impl = index.get(impl_id)
        if not isinstance(impl.kind, ImplBlockKind):
            raise NotAnImplBlock(impl.name or impl.id)
        if impl.kind.trait_ref is not None:
            continue
        methods.update(iter_names(index, impl.kind.member_ids))
    return methods


def duplicate_names(index: RustdocIndex, ids: Iterable[str]) -> set[str]:
    """Names that more than one item in `ids` carries."""
    counts = Counter(iter_names(index, ids))
    return {name for name, n in counts.items() if n > 1}
