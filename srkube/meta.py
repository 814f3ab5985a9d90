"""Object metadata and the rules for merging old metadata into new."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OwnerReference:
    """Reference from a dependent object to the object that owns it."""

    name: str = ""
    kind: str = ""
    api_version: str = ""
    uid: str = ""
    controller: bool | None = None
    block_owner_deletion: bool | None = None


@dataclass
class ObjectMeta:
    """Identity and bookkeeping fields shared by every resource."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)
    owner_references: list[OwnerReference] = field(default_factory=list)
    resource_version: str = ""


def merge_slices(new: Iterable[str], old: Iterable[str]) -> list[str]:
    """Return ``new`` followed by the entries of ``old`` not already in ``new``."""
    merged = list(new)
    seen = set(merged)
    for item in old:
        if item not in seen:
            merged.append(item)
    return merged


def merge_maps(
    new_map: Mapping[str, str] | None, old_map: Mapping[str, str] | None
) -> dict[str, str]:
    """Merge two maps; where a key is in both, the value from ``new_map`` wins."""
    return {**(old_map or {}), **(new_map or {})}


def merge_owner_references(
    new: Iterable[OwnerReference], old: Iterable[OwnerReference]
) -> list[OwnerReference]:
    """Return ``new`` followed by the references of ``old`` not already in ``new``."""
    merged = list(new)
    existing = set(merged)
    merged.extend(ref for ref in old if ref not in existing)
    return merged


def merge_metadata(new_meta: ObjectMeta, old_meta: ObjectMeta) -> None:
    """Merge ``old_meta`` into ``new_meta`` in place.

    Labels, annotations, finalizers and owner references from both are kept,
    with ``new_meta`` winning on conflicts. The resource version is taken from
    ``old_meta`` so that an update does not conflict.
    """
    new_meta.resource_version = old_meta.resource_version
    new_meta.finalizers = merge_slices(new_meta.finalizers, old_meta.finalizers)
    new_meta.labels = merge_maps(new_meta.labels, old_meta.labels)
    new_meta.annotations = merge_maps(new_meta.annotations, old_meta.annotations)
    new_meta.owner_references = merge_owner_references(
        new_meta.owner_references, old_meta.owner_references
    )