"""Horizontal pod autoscaling policy and API version selection."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

AUTOSCALER_KIND = "HorizontalPodAutoscaler"

# From this Kubernetes minor version on, autoscaling/v2 is used by default.
_V2_MINIMUM_MINOR = 26
_INTEGER = re.compile(r"[+-]?[0-9]+")


class AutoScalerVersion(str, Enum):
    """Supported HorizontalPodAutoscaler API versions."""

    V1 = "v1"
    V2BETA2 = "v2beta2"
    V2 = "v2"

    @property
    def api_version(self) -> str:
        """The full API version, e.g. ``autoscaling/v2``."""
        return f"autoscaling/{self.value}"


@dataclass
class HPAPolicy:
    """Metrics and scaling behaviour in the autoscaling/v2beta2 layout."""

    metrics: list[dict[str, Any]] = field(default_factory=list)
    behavior: dict[str, Any] | None = None


@dataclass
class AutoScalingPolicy:
    """How a component is scaled automatically."""

    max_replicas: int = 0
    min_replicas: int | None = None
    version: AutoScalerVersion | None = None
    hpa_policy: HPAPolicy | None = None


def complete_version(
    version: AutoScalerVersion | str | None, major: str, minor: str
) -> AutoScalerVersion:
    """Return ``version``, or pick one suited to the Kubernetes version if unset.

    Kubernetes 1.26 and later get v2, earlier 1.x releases v2beta2. An
    unparsable minor version gives v2beta2, any other major version v2.
    """
    if version:
        return AutoScalerVersion(version)
    if major == "1":
        if not _INTEGER.fullmatch(minor):
            return AutoScalerVersion.V2BETA2
        if int(minor) >= _V2_MINIMUM_MINOR:
            return AutoScalerVersion.V2
        return AutoScalerVersion.V2BETA2
    return AutoScalerVersion.V2


def empty_hpa(
    version: AutoScalerVersion | str | None, major: str, minor: str
) -> dict[str, Any]:
    """Return an empty HorizontalPodAutoscaler object of the chosen version."""
    filled = complete_version(version, major, minor)
    return {
        "apiVersion": filled.api_version,
        "kind": AUTOSCALER_KIND,
        "metadata": {},
        "spec": {},
    }