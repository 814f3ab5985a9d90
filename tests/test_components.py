from unittest import mock

import pytest

from srkube.components import (
    ON_DELETE,
    ROLLING_UPDATE,
    ComponentPhase,
    DisasterRecoveryStatus,
    DRPhase,
    InvalidUpdateStrategyError,
    RollingUpdateStatefulSetStrategy,
    StarRocksComponentSpec,
    StarRocksComponentStatus,
    StatefulSetUpdateStrategy,
    new_disaster_recovery_status,
    validate_update_strategy,
)


def _strategy(max_unavailable, type_=""):
    return StatefulSetUpdateStrategy(
        type=type_,
        rolling_update=RollingUpdateStatefulSetStrategy(max_unavailable=max_unavailable),
    )


def test_valid_max_unavailable_then_zero_is_rejected():
    strategy = _strategy(1)
    validate_update_strategy(strategy)
    strategy.rolling_update.max_unavailable = 0
    with pytest.raises(InvalidUpdateStrategyError, match="maxUnavailable"):
        validate_update_strategy(strategy)


@pytest.mark.parametrize("value", [0, "0%"])
def test_zero_max_unavailable_is_rejected(value):
    with pytest.raises(InvalidUpdateStrategyError):
        validate_update_strategy(_strategy(value))


def test_explicit_rolling_update_type_is_checked():
    with pytest.raises(InvalidUpdateStrategyError):
        validate_update_strategy(_strategy("0%", ROLLING_UPDATE))


def test_on_delete_strategy_is_not_checked_but_rolling_is():
    strategy = _strategy(0, ON_DELETE)
    validate_update_strategy(strategy)
    strategy.type = ROLLING_UPDATE
    with pytest.raises(InvalidUpdateStrategyError):
        validate_update_strategy(strategy)


def test_run_as_ids():
    assert StarRocksComponentSpec().run_as_ids() == (None, None)
    assert StarRocksComponentSpec(run_as_non_root=False).run_as_ids() == (None, None)
    assert StarRocksComponentSpec(run_as_non_root=True).run_as_ids() == (1000, 1000)


def test_termination_grace_period_default_and_override():
    assert StarRocksComponentSpec().effective_termination_grace_period_seconds() == 120
    spec = StarRocksComponentSpec(termination_grace_period_seconds=30)
    assert spec.effective_termination_grace_period_seconds() == 30
    spec = StarRocksComponentSpec(termination_grace_period_seconds=0)
    assert spec.effective_termination_grace_period_seconds() == 0


def test_default_update_strategy():
    strategy = StarRocksComponentSpec().effective_update_strategy()
    assert strategy == StatefulSetUpdateStrategy(
        type=ROLLING_UPDATE,
        rolling_update=RollingUpdateStatefulSetStrategy(partition=0),
    )


def test_given_update_strategy_is_kept():
    given = StatefulSetUpdateStrategy(type=ON_DELETE)
    assert StarRocksComponentSpec(update_strategy=given).effective_update_strategy() is given


def test_read_only_root_filesystem():
    assert StarRocksComponentSpec().read_only_root_filesystem_enabled() is False
    spec = StarRocksComponentSpec(read_only_root_filesystem=True)
    assert spec.read_only_root_filesystem_enabled() is True


def test_component_spec_keeps_load_settings():
    spec = StarRocksComponentSpec(image="starrocks/fe:3.1", replicas=3)
    assert spec.image == "starrocks/fe:3.1"
    assert spec.replicas == 3
    assert spec.effective_image_pull_policy() == "IfNotPresent"


def test_new_disaster_recovery_status():
    with mock.patch("srkube.components.time.time", return_value=1700000000.9):
        status = new_disaster_recovery_status(7)
    assert status == DisasterRecoveryStatus(
        phase=DRPhase.TODO, start_timestamp=1700000000, observed_generation=7
    )


def test_phase_values():
    assert ComponentPhase("reconciling") is ComponentPhase.RECONCILING
    assert DRPhase.DONE.value == "done"
    status = StarRocksComponentStatus(phase=ComponentPhase.FAILED, reason="boom")
    assert status.phase == "failed"