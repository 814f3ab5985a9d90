"""Workload settings shared by every StarRocks component, and the label keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Label and annotation keys
COMPONENT_LABEL_KEY = "app.kubernetes.io/component"
OWNER_REFERENCE = "app.starrocks.ownerreference/name"
COMPONENT_RESOURCE_HASH = "app.starrocks.components/hash"

# Default workload names of the components
DEFAULT_FE = "fe"
DEFAULT_BE = "be"
DEFAULT_CN = "cn"
DEFAULT_FE_PROXY = "fe-proxy"

# Container environment variable names
COMPONENT_NAME = "COMPONENT_NAME"
FE_SERVICE_NAME = "FE_SERVICE_NAME"

# Storage class names that select a volume type instead of a real claim
EMPTY_DIR = "emptyDir"
HOST_PATH = "hostPath"

PULL_IF_NOT_PRESENT = "IfNotPresent"


class HostPathRequiredError(ValueError):
    """A hostPath storage volume lacks its host path."""

    def __init__(self) -> None:
        super().__init__(
            "if storageClassName is hostPath, hostPath and hostPath.path is required"
        )


@dataclass
class HostPathVolume:
    """A directory on the node mapped into a pod."""

    path: str = ""
    type: str | None = None


@dataclass
class StorageVolume:
    """Extra storage for a component: a claim template, emptyDir or hostPath."""

    name: str
    mount_path: str
    storage_class_name: str | None = None
    storage_size: str = ""
    host_path: HostPathVolume | None = None
    sub_path: str = ""

    def validate(self) -> None:
        """Raise HostPathRequiredError if a host path is needed but missing."""
        if self.storage_class_name is not None:
            if self.storage_class_name == HOST_PATH and (
                self.host_path is None or not self.host_path.path
            ):
                raise HostPathRequiredError()
        elif self.host_path is not None and not self.host_path.path:
            raise HostPathRequiredError()


@dataclass
class StarRocksServicePort:
    """A port exposed by a component's external service.

    Ports given by the user override the defaults; a match on container port
    takes precedence over a match on name.
    """

    name: str = ""
    port: int = 0
    container_port: int = 0
    node_port: int = 0


@dataclass
class StarRocksService:
    """Template for the external service of a component."""

    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    type: str = ""
    load_balancer_ip: str = ""
    ports: list[StarRocksServicePort] = field(default_factory=list)
    load_balancer_source_ranges: list[str] | None = None


@dataclass
class StarRocksProbe:
    """How the main container is probed for liveness."""

    type: str
    initial_delay_seconds: int | None = None
    period_seconds: int | None = None


@dataclass
class ConfigMapInfo:
    """The config map holding a component's start-up configuration file."""

    config_map_name: str = ""
    resolve_key: str = ""


@dataclass
class StarRocksLoadSpec:
    """Scheduling, image, storage and probe settings of a component's pods."""

    requests: dict[str, Any] = field(default_factory=dict)
    limits: dict[str, Any] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    pod_labels: dict[str, str] = field(default_factory=dict)
    replicas: int | None = None
    image: str = ""
    image_pull_policy: str = ""
    image_pull_secrets: list[str] = field(default_factory=list)
    scheduler_name: str = ""
    node_selector: dict[str, str] = field(default_factory=dict)
    affinity: dict[str, Any] | None = None
    tolerations: list[dict[str, Any]] = field(default_factory=list)
    topology_spread_constraints: list[dict[str, Any]] = field(default_factory=list)
    service: StarRocksService | None = None
    storage_volumes: list[StorageVolume] = field(default_factory=list)
    service_account: str = ""
    config_map_info: ConfigMapInfo = field(default_factory=ConfigMapInfo)
    startup_probe_failure_seconds: int | None = None
    liveness_probe_failure_seconds: int | None = None
    readiness_probe_failure_seconds: int | None = None
    lifecycle: dict[str, Any] | None = None
    share_process_namespace: bool | None = None

    def effective_image_pull_policy(self) -> str:
        """Return the pull policy, ``IfNotPresent`` when none is set."""
        return self.image_pull_policy or PULL_IF_NOT_PRESENT