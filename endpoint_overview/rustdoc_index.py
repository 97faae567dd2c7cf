"""Read-only id lookup over a parsed rustdoc JSON document."""

from endpoint_overview.doc_item import DocItem
from endpoint_overview.errors import MissingItem


class RustdocIndex:
    """Maps item ids to DocItems and follows the links between them."""

    def __init__(self, root_id: str, items: dict[str, DocItem]):
        self.root_id = root_id
        self.items = items

    def get(self, item_id: str | None, context: str = "") -> DocItem:
        """Returns the item with the given id, failing on dangling references."""
        item = self.items.get(item_id) if item_id is not None else None
        if item is None:
            raise MissingItem(str(item_id), context)
        return item

    @property
    def root(self) -> DocItem:
        """The crate root module."""
        return self.get(self.root_id, "crate root")

    def get_link(self, item: DocItem, name: str) -> DocItem:
        """Follows an intra-doc link of `item` by its link text."""
        target = item.links.get(name)
        if target is None:
            raise MissingItem(name, f"no link '{name}' on {item.name or item.id}")
        return self.get(target, f"link '{name}' of {item.name or item.id}")
