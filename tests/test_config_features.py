from __future__ import annotations

import pytest

from lucky_greeter import __init__conf__
from lucky_greeter import config as greeter_config
from lucky_greeter.domain import FeatureFlags


def test_build_defaults_apply_without_environment() -> None:
    expected = FeatureFlags.from_mapping(__init__conf__.FEATURES)
    assert greeter_config.resolve_features({}) == expected


def test_shipped_build_prints_plain_greeting() -> None:
    assert greeter_config.resolve_features({}) == FeatureFlags(print_alt=False, enable_random=False)


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_truthy_values_enable_a_feature(raw: str) -> None:
    flags = greeter_config.resolve_features({greeter_config.PRINT_42_ENV_VAR: raw})
    assert flags.print_alt is True


@pytest.mark.parametrize("raw", ["0", "false", "off", "nope"])
def test_other_values_disable_a_feature(raw: str) -> None:
    flags = greeter_config.resolve_features(
        {greeter_config.LUCKY_NUMBER_ENV_VAR: raw},
        defaults={"print-42": False, "lucky-number": True},
    )
    assert flags.enable_random is False


def test_blank_value_keeps_build_default() -> None:
    flags = greeter_config.resolve_features(
        {greeter_config.LUCKY_NUMBER_ENV_VAR: "  "},
        defaults={"print-42": True, "lucky-number": True},
    )
    assert flags == FeatureFlags(print_alt=True, enable_random=True)


def test_toggles_are_independent() -> None:
    flags = greeter_config.resolve_features({greeter_config.LUCKY_NUMBER_ENV_VAR: "1"})
    assert flags == FeatureFlags(print_alt=False, enable_random=True)


def test_process_environment_is_used_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(greeter_config.PRINT_42_ENV_VAR, "1")
    monkeypatch.setenv(greeter_config.LUCKY_NUMBER_ENV_VAR, "1")
    assert greeter_config.resolve_features() == FeatureFlags(print_alt=True, enable_random=True)


def test_unknown_build_feature_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown feature"):
        greeter_config.resolve_features({}, defaults={"print-24": True})
