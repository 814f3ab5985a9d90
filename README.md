# srkube

`srkube` holds the building blocks for managing StarRocks FE, BE, CN and
FE-proxy components on Kubernetes: spec and status models with their defaults,
port lookup from component configuration files, a stable object hash for
change detection, metadata merging, StatefulSet comparison and
HorizontalPodAutoscaler construction.

It is a plain library with no dependencies beyond the standard library.

## Installing

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

- `srkube.config` – `OperatorConfig` (`dns_domain_suffix`, default
  `cluster.local`; `volume_name_with_hash`, default `True`).
  `service_domain_suffix()` returns `svc.<dns_domain_suffix>`.
- `srkube.common` – `equals_ignore_case(a, b)` and the log action names
  (`ACTION_SYNC_CLUSTER`, `ACTION_SYNC_WAREHOUSE` and so on).
- `srkube.hashing` – `Fnv1a32`, an incremental 32-bit FNV-1a hash;
  `dump_object`, a deterministic text dump of dataclasses, enums, mappings,
  sets, lists, tuples and scalars (type names included, keys sorted);
  `write_hash_object` and `hash_object`, which returns the hash of the dump as
  decimal text.
- `srkube.meta` – `ObjectMeta`, `OwnerReference`, and the merge helpers
  `merge_slices`, `merge_maps`, `merge_owner_references` and
  `merge_metadata`. `merge_metadata(new, old)` keeps entries from both, the
  new object winning on conflicts, and copies the resource version from the
  old one.
- `srkube.ports` – `get_port(config, key)` reads a port from a parsed
  configuration map. Non-integer or zero values count as unset; an unset
  `thrift_port` falls back to `be_port`, an unset `webserver_port` to
  `be_http_port`, and then the built-in default in `DEFAULT_PORTS`. Unknown
  keys give 0; non-string values raise `TypeError`.
- `srkube.autoscale` – `AutoScalerVersion` (`V1`, `V2BETA2`, `V2`),
  `HPAPolicy`, `AutoScalingPolicy`, `complete_version` (v2 on Kubernetes 1.26
  and later, v2beta2 on earlier 1.x or an unparsable minor, v2 for any other
  major) and `empty_hpa`.
- `srkube.load` – the label and annotation keys (`COMPONENT_RESOURCE_HASH`
  and others), `StorageVolume` with `validate()` raising
  `HostPathRequiredError`, `StarRocksService`, `StarRocksServicePort`,
  `StarRocksProbe`, `ConfigMapInfo` and `StarRocksLoadSpec`, whose
  `effective_image_pull_policy()` defaults to `IfNotPresent`.
- `srkube.components` – `StarRocksComponentSpec` (with `run_as_ids()`,
  `effective_termination_grace_period_seconds()` defaulting to 120,
  `effective_update_strategy()` defaulting to a rolling update from pod 0,
  and `read_only_root_filesystem_enabled()`), `StarRocksComponentStatus`,
  `ComponentPhase`, `MountInfo`, the update-strategy types,
  `validate_update_strategy` (raises `InvalidUpdateStrategyError` when
  `max_unavailable` starts with `0`), `DisasterRecovery`, `DRPhase`,
  `DisasterRecoveryStatus` and `new_disaster_recovery_status`.
- `srkube.statefulset` – `StatefulSet`, `statefulset_deep_equal(new, old,
  exclude_replicas)`, which compares resource hashes (preferring a hash
  already in the annotations) and namespaces and writes the new hash into the
  new object's annotations, and `merge_statefulsets`.
- `srkube.autoscaler` – `PodAutoscalerParams` and
  `build_horizontal_pod_autoscaler(params, version, major, minor)`, which
  returns the autoscaler as a plain dict targeting the StatefulSet. Metrics
  and behaviour are carried for v2 and v2beta2, not for v1; a missing scaling
  policy raises `ValueError`.

## Example

```python
from srkube.autoscale import complete_version
from srkube.hashing import hash_object
from srkube.components import MountInfo
from srkube.ports import get_port

complete_version(None, "1", "26")              # AutoScalerVersion.V2
get_port({"http_port": "8031"}, "http_port")   # 8031
get_port({}, "query_port")                     # 9030
hash_object(MountInfo(name="conf", mount_path="/etc/conf"))  # decimal string
```

## What it does not do

The package does not talk to a Kubernetes API server and has no reconcile
loop, no command to run and no models for the top-level cluster or warehouse
resources. It does not build external Service objects. Those are left to the
code that uses these building blocks.

## Running the tests

```
pytest
```