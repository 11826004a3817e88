"""
Command-line parsing for wss.

    wss [options] PID duration(s)
"""
import argparse
import math
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from wss.consts.SampleMode import SampleMode
from wss.exceptions import ConfigurationError
from wss.models.run_config import MIN_DURATION, UNBOUNDED_TOTAL_SECS, RunConfig

USAGE = """\
USAGE: wss [options] PID duration(s)
	-C         # show cumulative output every duration(s)
	-s secs    # take duration(s) snapshots after secs pauses
	-d secs    # total duration of measurement (for -s or -C)
	-P steps   # profile run (cumulative), from duration(s)
	-v         # log progress to stderr (-vv for debug)
	--env name         # also load config_<name>.yaml settings
	--config-dir path  # directory holding config.yaml
   eg,
	wss 181 0.01       # measure PID 181 WSS for 10 milliseconds
	wss 181 5          # measure PID 181 WSS for 5 seconds (same overhead)
	wss -C 181 5       # show PID 181 growth every 5 seconds
	wss -Cd 10 181 1   # PID 181 growth each second for 10 seconds total
	wss -s 1 181 0.01  # show a 10 ms WSS snapshot every 1 second
	wss -s 0 181 1     # measure WSS every 1 second (not cumulative)
	wss -P 10 181 0.01 # 10 step power-of-2 profile, starting with 0.01s
"""


class WssArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigurationError instead of exiting."""

    def error(self, message):
        raise ConfigurationError(message)


def build_wss_parser() -> argparse.ArgumentParser:
    ap = WssArgumentParser(prog="wss", add_help=False,
                           description="Estimate the working set size of a process")
    ap.add_argument("-h", "--help", action="store_true", dest="help")
    ap.add_argument("-C", "--cumulative", action="store_true",
                    help="Show cumulative output every duration(s)")
    ap.add_argument("-s", "--snapshot", type=float, default=None, metavar="SECS",
                    help="Take duration(s) snapshots after SECS pauses")
    ap.add_argument("-d", "--duration", type=float, default=UNBOUNDED_TOTAL_SECS,
                    dest="total_secs", metavar="SECS",
                    help="Total duration of measurement (for -s or -C)")
    ap.add_argument("-P", "--profile", type=int, default=None, metavar="STEPS",
                    help="Profile run (cumulative), from duration(s)")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="Log progress to stderr; repeat for debug output")
    ap.add_argument("--env", type=str, default=None,
                    help="Environment name; loads config_<env>.yaml in addition to config.yaml")
    ap.add_argument("--config-dir", type=Path, default=None,
                    help="Directory containing config.yaml")
    ap.add_argument("pid", nargs="?", default=None)
    ap.add_argument("seconds", nargs="?", default=None)
    return ap


def wants_usage(args: argparse.Namespace) -> bool:
    return args.help or args.pid is None or args.seconds is None


def print_usage(stream: Optional[TextIO] = None) -> None:
    (stream or sys.stdout).write(USAGE)


def _selected_mode(args: argparse.Namespace) -> SampleMode:
    selected = []
    if args.cumulative:
        selected.append(SampleMode.CUMULATIVE)
    if args.snapshot is not None:
        selected.append(SampleMode.SNAPSHOT)
    if args.profile is not None:
        selected.append(SampleMode.PROFILE)
    if len(selected) > 1:
        raise ConfigurationError("Can't combine -C, -s, and -P. Exiting.")
    return selected[0] if selected else SampleMode.SINGLE


def build_run_config(args: argparse.Namespace) -> RunConfig:
    """
    Validate parsed arguments and turn them into a RunConfig.

    Raises:
        ConfigurationError: On conflicting modes or out-of-range values
    """
    mode = _selected_mode(args)

    try:
        pid = int(args.pid)
    except ValueError:
        raise ConfigurationError(f"PID must be an integer, got {args.pid!r}")
    if pid <= 0:
        raise ConfigurationError(f"PID must be positive, got {pid}")

    try:
        duration = float(args.seconds)
    except ValueError:
        raise ConfigurationError(f"duration must be a number of seconds, got {args.seconds!r}")
    if not math.isfinite(duration):
        raise ConfigurationError(f"duration must be a finite number of seconds, got {args.seconds!r}")
    if not duration >= MIN_DURATION:
        raise ConfigurationError("Duration too short. Exiting.")

    if args.snapshot is not None:
        if not math.isfinite(args.snapshot):
            raise ConfigurationError("-s pause must be a finite number of seconds")
        if args.snapshot < 0:
            raise ConfigurationError("-s pause can't be negative")
    # inf is allowed for -d and means unbounded
    if math.isnan(args.total_secs):
        raise ConfigurationError("-d total duration must be a number of seconds")
    if args.total_secs < 0:
        raise ConfigurationError("-d total duration can't be negative")
    if args.profile is not None and args.profile <= 0:
        raise ConfigurationError("-P steps must be a positive integer")

    return RunConfig(
        pid=pid,
        duration=duration,
        mode=mode,
        pause=args.snapshot if args.snapshot is not None else 0.0,
        total_secs=args.total_secs,
        profile_steps=args.profile or 0,
    )


def parse_wss_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_wss_parser().parse_args(argv)
