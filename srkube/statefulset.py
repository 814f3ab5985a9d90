"""StatefulSet objects and their change detection by hash."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from srkube.components import StatefulSetUpdateStrategy
from srkube.hashing import hash_object
from srkube.load import COMPONENT_RESOURCE_HASH
from srkube.meta import ObjectMeta, merge_metadata


@dataclass
class StatefulSet:
    """The parts of a StatefulSet that the operator manages."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    replicas: int | None = None
    selector: dict[str, Any] | None = None
    template: dict[str, Any] = field(default_factory=dict)
    service_name: str = ""
    volume_claim_templates: list[dict[str, Any]] = field(default_factory=list)
    update_strategy: StatefulSetUpdateStrategy = field(
        default_factory=StatefulSetUpdateStrategy
    )


@dataclass
class _StatefulSetHashObject:
    name: str
    namespace: str
    labels: dict[str, str]
    finalizers: list[str]
    selector: dict[str, Any]
    pod_template: dict[str, Any]
    service_name: str
    volume_claim_templates: list[dict[str, Any]]
    replicas: int
    update_strategy: StatefulSetUpdateStrategy


def _hash_object_of(sts: StatefulSet, exclude_replicas: bool) -> _StatefulSetHashObject:
    replicas = -1
    if not exclude_replicas and sts.replicas is not None:
        replicas = sts.replicas
    return _StatefulSetHashObject(
        name=sts.metadata.name,
        namespace=sts.metadata.namespace,
        labels=sts.metadata.labels,
        finalizers=sts.metadata.finalizers,
        selector=sts.selector if sts.selector is not None else {},
        pod_template=sts.template,
        service_name=sts.service_name,
        volume_claim_templates=sts.volume_claim_templates,
        replicas=replicas,
        update_strategy=sts.update_strategy,
    )


def statefulset_deep_equal(
    new: StatefulSet, old: StatefulSet, exclude_replicas: bool
) -> bool:
    """Tell whether two StatefulSets match, comparing their resource hashes.

    A hash recorded in the annotations is preferred over one computed, since
    the cluster may alter a StatefulSet after it is stored. The hash of
    ``new`` is written into its annotations.
    """
    new_hash = new.metadata.annotations.get(COMPONENT_RESOURCE_HASH)
    if new_hash is None:
        new_hash = hash_object(_hash_object_of(new, exclude_replicas))

    old_hash = old.metadata.annotations.get(COMPONENT_RESOURCE_HASH)
    if old_hash is None:
        old_hash = hash_object(_hash_object_of(old, exclude_replicas))

    new.metadata.annotations = {
        **new.metadata.annotations,
        COMPONENT_RESOURCE_HASH: new_hash,
    }
    return new_hash == old_hash and new.metadata.namespace == old.metadata.namespace


def merge_statefulsets(new: StatefulSet, old: StatefulSet) -> None:
    """Merge the metadata of the stored ``old`` StatefulSet into ``new``."""
    merge_metadata(new.metadata, old.metadata)