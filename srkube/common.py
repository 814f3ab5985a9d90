"""Small shared helpers and logging keys."""

from __future__ import annotations

DEBUG_LEVEL = 4

ACTION_KEY = "action"

ACTION_SYNC_CLUSTER = "SyncCluster"
ACTION_UPDATE_CLUSTER_STATUS = "UpdateClusterStatus"
ACTION_CLEAR_RESOURCES = "ClearResources"

ACTION_SYNC_WAREHOUSE = "SyncWarehouse"
ACTION_CLEAR_WAREHOUSE = "ClearWarehouse"


def equals_ignore_case(a: str, b: str) -> bool:
    """Compare two strings without regard to letter case."""
    return a.lower() == b.lower()