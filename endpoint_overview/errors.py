"""Exceptions raised while building the endpoint overview."""

from pathlib import Path

REGENERATE_HINT = (
    "Generate with: RUSTDOCFLAGS='-Zunstable-options --output-format json' "
    "cargo doc --no-deps -F _all"
)


class OverviewError(Exception):
    """Base class for every fatal error of an overview run."""


class MissingItem(OverviewError):
    """An id referenced by the rustdoc graph is not present in its index."""

    def __init__(self, item_id: str, context: str = "") -> None:
        self.item_id = item_id
        self.context = context
        msg = f"Item {item_id!r} not found in rustdoc index"
        if context:
            msg += f" ({context})"
        super().__init__(msg)


class UnexpectedShape(OverviewError):
    """A rustdoc item does not have the kind the extractor relies on."""

    expected = "item"

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"{name or '<unnamed>'} isn't a {self.expected}")


class NotAModule(UnexpectedShape):
    expected = "module"


class NotAnImplBlock(UnexpectedShape):
    expected = "impl block"


class NotAStruct(UnexpectedShape):
    expected = "struct"


class TableNotFound(OverviewError):
    """The reference page has no table next to the expected anchor."""

    def __init__(self, table_id: str) -> None:
        self.table_id = table_id
        super().__init__(f"Failed to find table '#{table_id}'")


class InvalidRow(OverviewError):
    """A scraped table row is missing one of its expected elements."""

    def __init__(self, index: int, detail: str) -> None:
        self.index = index
        self.detail = detail
        super().__init__(f"Invalid row {index}: {detail}")


class MarkerNotFound(OverviewError):
    """A target document does not contain an overview marker."""

    def __init__(self, path: Path, marker: str) -> None:
        self.path = path
        self.marker = marker
        super().__init__(f"Failed to find '{marker}' in {path}")


class RustdocNotFound(OverviewError):
    """The rustdoc JSON index has not been generated."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Failed to read {path}. Forgot to generate documentation?\n"
            + REGENERATE_HINT
        )


class InvalidRustdoc(OverviewError):
    """The rustdoc JSON index exists but cannot be decoded."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(
            f"Failed to parse {path} ({detail}). Was the build interrupted?\n"
            + REGENERATE_HINT
        )


class UnmatchedReferenceItems(OverviewError):
    """Strict mode: some catalog rows have no counterpart in the library."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            f"{len(missing)} reference items are not implemented: " + ", ".join(missing)
        )
