#!/usr/bin/env python3
"""
wss - Estimate the working set size (WSS) of a process on Linux.

Resets the target's referenced page flags through /proc/PID/clear_refs,
waits for the requested duration, then sums Rss, Pss and Referenced from
/proc/PID/smaps. Referenced is the working set size metric.

WARNING: clear_refs and smaps make the kernel walk the target's page
structures, which raises its latency while they run (over a second for
processes above ~100 Gbytes). Resetting the referenced flags can also
mislead page reclaim while swapping is active. Try it in a lab first.
"""
import logging
import sys
from typing import List, Optional

from wss.cli.cli import build_run_config, parse_wss_args, print_usage, wants_usage
from wss.config.config_loader import ConfigLoader
from wss.exceptions import ConfigurationError, TargetUnavailableError
from wss.monitor.sampler import WssSampler
from wss.monitor.target import describe_target
from wss.util.log_config import configure_package_loggers, resolve_level, setup_logger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

logger = setup_logger("wss.run_wss")


def effective_log_level(configured: str, verbose: int) -> int:
    level = resolve_level(configured)
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return min(level, logging.INFO)
    return level


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the wss command.

    Returns:
        Process exit status
    """
    try:
        args = parse_wss_args(argv)
        if wants_usage(args):
            print_usage()
            return EXIT_OK
        run_config = build_run_config(args)
        settings = ConfigLoader(args.config_dir, env=args.env).settings
        try:
            configure_package_loggers(effective_log_level(settings.log_level, args.verbose), settings.log_file)
        except OSError as e:
            raise ConfigurationError(f"can't open log file {settings.log_file}: {e.strerror or e}") from e
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug(f"Loaded {run_config}")
    logger.debug(f"Using proc root {settings.proc_root}")

    try:
        if settings.check_target:
            describe_target(run_config.pid, settings.proc_root)
        WssSampler(run_config, proc_root=settings.proc_root).run()
    except TargetUnavailableError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
