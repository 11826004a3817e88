"""
Tests for argument parsing and RunConfig validation
"""
import pytest

from wss.cli.cli import USAGE, build_run_config, parse_wss_args, wants_usage
from wss.consts.SampleMode import SampleMode
from wss.exceptions import ConfigurationError
from wss.models.run_config import UNBOUNDED_TOTAL_SECS


def config_from(argv):
    return build_run_config(parse_wss_args(argv))


def test_single_shot_defaults():
    config = config_from(["181", "0.01"])

    assert config.pid == 181
    assert config.duration == 0.01
    assert config.mode == SampleMode.SINGLE
    assert config.total_secs == UNBOUNDED_TOTAL_SECS
    assert not config.repeats


def test_bundled_cumulative_and_total_duration():
    config = config_from(["-Cd", "10", "181", "1"])

    assert config.mode == SampleMode.CUMULATIVE
    assert config.total_secs == 10


def test_long_options():
    config = config_from(["--snapshot=0", "--duration=30", "181", "1"])

    assert config.mode == SampleMode.SNAPSHOT
    assert config.pause == 0
    assert config.total_secs == 30
    assert config.resets_every_iteration


def test_profile_steps():
    config = config_from(["-P", "10", "181", "0.01"])

    assert config.mode == SampleMode.PROFILE
    assert config.profile_steps == 10
    assert config.profile_durations()[:3] == [0.01, 0.02, 0.04]
    assert len(config.profile_durations()) == 10


@pytest.mark.parametrize("argv", [
    ["-C", "-s", "1", "181", "1"],
    ["-C", "-P", "3", "181", "1"],
    ["-s", "0", "-P", "3", "181", "1"],
])
def test_modes_are_mutually_exclusive(argv):
    with pytest.raises(ConfigurationError, match="Can't combine"):
        config_from(argv)


def test_minimum_duration_boundary():
    with pytest.raises(ConfigurationError, match="Duration too short"):
        config_from(["181", "0.0009"])

    assert config_from(["181", "0.001"]).duration == 0.001


@pytest.mark.parametrize("argv", [
    ["abc", "1"],
    ["181", "soon"],
    ["-s", "-1", "181", "1"],
    ["-P", "0", "181", "1"],
    ["-P", "two", "181", "1"],
    ["181", "inf"],
    ["181", "nan"],
    ["-s", "nan", "181", "1"],
    ["-s", "inf", "181", "1"],
    ["-C", "-d", "nan", "181", "1"],
    ["--bogus", "181", "1"],
])
def test_malformed_arguments(argv):
    with pytest.raises(ConfigurationError):
        config_from(argv)


@pytest.mark.parametrize("argv", [[], ["181"], ["-h"], ["--help", "181", "1"]])
def test_usage_requested(argv):
    assert wants_usage(parse_wss_args(argv))


def test_usage_lists_examples():
    assert "wss -Cd 10 181 1   # PID 181 growth each second for 10 seconds total" in USAGE
    assert "wss -P 10 181 0.01 # 10 step power-of-2 profile, starting with 0.01s" in USAGE


def test_infinite_total_duration_means_unbounded():
    config = config_from(["-C", "-d", "inf", "181", "1"])

    assert config.total_secs == float("inf")
