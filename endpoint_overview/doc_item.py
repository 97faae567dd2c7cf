"""Data models for items of a rustdoc JSON index."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TraitRef:
    """The trait implemented by an impl block."""

    name: str
    id: str | None


@dataclass(frozen=True)
class ModuleKind:
    items: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReExportKind:
    """A `pub use` entry: `target_name` is the name it is exported under."""

    target_name: str
    target_id: str | None


@dataclass(frozen=True)
class DataTypeKind:
    impl_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImplBlockKind:
    member_ids: tuple[str, ...] = ()
    trait_ref: TraitRef | None = None


@dataclass(frozen=True)
class OtherKind:
    """Any item kind the overview does not look into (fn, enum, const...)."""

    tag: str


ItemKind = ModuleKind | ReExportKind | DataTypeKind | ImplBlockKind | OtherKind


@dataclass(frozen=True)
class DocItem:
    """Represents one documented item of the crate."""

    id: str
    name: str | None
    kind: ItemKind
    links: dict[str, str] = field(default_factory=dict, hash=False)


def is_module(kind: ItemKind) -> bool:
    """Check if the kind is a module."""
    return isinstance(kind, ModuleKind)
