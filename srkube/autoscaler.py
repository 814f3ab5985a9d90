"""Building HorizontalPodAutoscaler objects for a component's StatefulSet."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from srkube.autoscale import (
    AUTOSCALER_KIND,
    AutoScalerVersion,
    AutoScalingPolicy,
    complete_version,
)
from srkube.meta import OwnerReference

STATEFULSET_KIND = "StatefulSet"
SERVICE_KIND = "Service"
STATEFULSET_API_VERSION = "apps/v1"


@dataclass
class PodAutoscalerParams:
    """What is needed to build the autoscaler of one StatefulSet."""

    name: str
    namespace: str
    target_name: str
    scaler_policy: AutoScalingPolicy | None = None
    autoscaler_type: AutoScalerVersion | None = None
    labels: dict[str, str] = field(default_factory=dict)
    owner_references: list[OwnerReference] = field(default_factory=list)


def _owner_reference_dict(ref: OwnerReference) -> dict[str, Any]:
    result: dict[str, Any] = {
        "apiVersion": ref.api_version,
        "kind": ref.kind,
        "name": ref.name,
        "uid": ref.uid,
    }
    if ref.controller is not None:
        result["controller"] = ref.controller
    if ref.block_owner_deletion is not None:
        result["blockOwnerDeletion"] = ref.block_owner_deletion
    return result


def build_horizontal_pod_autoscaler(
    params: PodAutoscalerParams,
    version: AutoScalerVersion | str | None = None,
    major: str = "",
    minor: str = "",
) -> dict[str, Any]:
    """Return a HorizontalPodAutoscaler object that scales the target StatefulSet.

    Without an explicit ``version`` the autoscaler type of ``params`` is used,
    or one suited to the Kubernetes version ``major``.``minor``. The v1 API
    carries no metrics or behaviour; v2 and v2beta2 carry both from the policy.
    """
    policy = params.scaler_policy
    if policy is None:
        raise ValueError("an autoscaling policy is required to build a HorizontalPodAutoscaler")

    if version:
        chosen = AutoScalerVersion(version)
    else:
        chosen = complete_version(params.autoscaler_type, major, minor)

    metadata: dict[str, Any] = {
        "name": params.name,
        "namespace": params.namespace,
        "labels": dict(params.labels),
        "ownerReferences": [_owner_reference_dict(ref) for ref in params.owner_references],
    }

    spec: dict[str, Any] = {
        "scaleTargetRef": {
            "name": params.target_name,
            "kind": STATEFULSET_KIND,
            "apiVersion": STATEFULSET_API_VERSION,
        },
        "maxReplicas": policy.max_replicas,
    }
    if policy.min_replicas is not None:
        spec["minReplicas"] = policy.min_replicas

    if chosen is not AutoScalerVersion.V1 and policy.hpa_policy is not None:
        if policy.hpa_policy.metrics:
            spec["metrics"] = copy.deepcopy(policy.hpa_policy.metrics)
        if policy.hpa_policy.behavior is not None:
            spec["behavior"] = copy.deepcopy(policy.hpa_policy.behavior)

    return {
        "apiVersion": chosen.api_version,
        "kind": AUTOSCALER_KIND,
        "metadata": metadata,
        "spec": spec,
    }