"""Settings and status common to the FE, BE and CN components."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from srkube.load import StarRocksLoadSpec

ROLLING_UPDATE = "RollingUpdate"
ON_DELETE = "OnDelete"

DEFAULT_TERMINATION_GRACE_PERIOD_SECONDS = 120
NON_ROOT_USER_ID = 1000
NON_ROOT_GROUP_ID = 1000


class InvalidUpdateStrategyError(ValueError):
    """A StatefulSet update strategy carries an unusable value."""


class ComponentPhase(str, Enum):
    """Phase of a single component of a cluster or warehouse."""

    RECONCILING = "reconciling"
    FAILED = "failed"
    RUNNING = "running"


@dataclass
class MountInfo:
    """A config map or secret mounted into the component's container."""

    name: str = ""
    mount_path: str = ""
    sub_path: str = ""


@dataclass
class RollingUpdateStatefulSetStrategy:
    """Parameters of a rolling update; max_unavailable is a count or a percentage."""

    partition: int | None = None
    max_unavailable: int | str | None = None


@dataclass
class StatefulSetUpdateStrategy:
    """How pods of a StatefulSet are replaced when its template changes."""

    type: str = ""
    rolling_update: RollingUpdateStatefulSetStrategy | None = None


@dataclass
class StarRocksComponentSpec(StarRocksLoadSpec):
    """Pod and container settings of an FE, BE or CN component."""

    run_as_non_root: bool | None = None
    capabilities: dict[str, Any] | None = None
    config_maps: list[MountInfo] = field(default_factory=list)
    secrets: list[MountInfo] = field(default_factory=list)
    host_aliases: list[dict[str, Any]] = field(default_factory=list)
    termination_grace_period_seconds: int | None = None
    sidecars: list[dict[str, Any]] = field(default_factory=list)
    init_containers: list[dict[str, Any]] = field(default_factory=list)
    command: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    update_strategy: StatefulSetUpdateStrategy | None = None
    read_only_root_filesystem: bool | None = None
    sysctls: list[dict[str, Any]] = field(default_factory=list)

    def run_as_ids(self) -> tuple[int | None, int | None]:
        """Return the (user, group) ids to run as, or (None, None) to run as root."""
        if not self.run_as_non_root:
            return None, None
        return NON_ROOT_USER_ID, NON_ROOT_GROUP_ID

    def effective_termination_grace_period_seconds(self) -> int:
        """Return the grace period, 120 seconds when none is set."""
        if self.termination_grace_period_seconds is None:
            return DEFAULT_TERMINATION_GRACE_PERIOD_SECONDS
        return self.termination_grace_period_seconds

    def effective_update_strategy(self) -> StatefulSetUpdateStrategy:
        """Return the update strategy, a rolling update from pod 0 when none is set."""
        if self.update_strategy is None:
            return StatefulSetUpdateStrategy(
                type=ROLLING_UPDATE,
                rolling_update=RollingUpdateStatefulSetStrategy(partition=0),
            )
        return self.update_strategy

    def read_only_root_filesystem_enabled(self) -> bool:
        """Return whether the root filesystem is mounted read-only."""
        return bool(self.read_only_root_filesystem)


@dataclass
class StarRocksComponentStatus:
    """Observed state of a component's pods."""

    service_name: str = ""
    failed_instances: list[str] = field(default_factory=list)
    creating_instances: list[str] = field(default_factory=list)
    running_instances: list[str] = field(default_factory=list)
    resource_names: list[str] = field(default_factory=list)
    phase: ComponentPhase | None = None
    reason: str = ""


@dataclass
class DisasterRecovery:
    """Request to enter disaster recovery; raise the generation to trigger it again."""

    enabled: bool = False
    generation: int = 0


class DRPhase(str, Enum):
    """Progress of a disaster recovery."""

    TODO = "todo"
    DOING = "doing"
    DONE = "done"


@dataclass
class DisasterRecoveryStatus:
    """Observed state of a disaster recovery."""

    phase: DRPhase | None = None
    reason: str = ""
    start_timestamp: int = 0
    end_timestamp: int = 0
    observed_generation: int = 0


def new_disaster_recovery_status(generation: int) -> DisasterRecoveryStatus:
    """Start a disaster recovery status in the todo phase, stamped with the current time."""
    return DisasterRecoveryStatus(
        phase=DRPhase.TODO,
        start_timestamp=int(time.time()),
        observed_generation=generation,
    )


def validate_update_strategy(update_strategy: StatefulSetUpdateStrategy | None) -> None:
    """Raise InvalidUpdateStrategyError if a rolling update allows no unavailable pod."""
    if update_strategy is None:
        return
    if update_strategy.type not in ("", ROLLING_UPDATE):
        return
    rolling_update = update_strategy.rolling_update
    if rolling_update is None or rolling_update.max_unavailable is None:
        return
    if str(rolling_update.max_unavailable).startswith("0"):
        raise InvalidUpdateStrategyError("maxUnavailable field should > 0")