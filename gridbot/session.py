"""
Session driver: reads the three input lines, runs parser and simulator, and
reports exactly one outcome per run.

Input order:
1. room size           "x y"
2. start pose          "x y direction"
3. command string      e.g. "FFRFF"

Each line is read only after the previous one validated.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from gridbot import config
from gridbot.commands.base import ExecutionStatus
from gridbot.parser import parse_size, parse_start
from gridbot.simulation import Simulator, TraceObserver
from gridbot.types import Pose, TraceEvent
from gridbot.utils.errors import GridbotError

logger = logging.getLogger("gridbot.session")

LineReader = Callable[[], str]


def format_report(pose: Pose) -> str:
    """Final report text, e.g. "3 0 E"."""
    return str(pose)


class Session:
    """
    One simulation run driven by a line reader.

    Args:
        read_line: Callable returning the next input line (without newline)
        trace: Forward per-command TraceEvents to observer
        observer: Trace consumer; ignored unless trace is set
    """

    def __init__(
        self,
        read_line: LineReader,
        trace: bool = False,
        observer: TraceObserver | None = None,
    ):
        self.read_line = read_line
        self.trace = trace
        self.observer = observer

    def run(self) -> ExecutionStatus:
        try:
            size = parse_size(self.read_line())
            logger.debug("Room size: %s", size)

            pose = parse_start(self.read_line(), size)
            logger.debug("Start pose: %s", pose)

            simulator = Simulator(size, pose, observer=self.observer if self.trace else None)
            commands = self.read_line()
        except GridbotError as e:
            logger.info("Startup failed: %s", e)
            return ExecutionStatus.failed(str(e), error=e)

        logger.debug("Running %d commands", len(commands))
        status = simulator.run(commands)
        if status.ok:
            logger.debug("Final pose: %s", status.pose)
        else:
            logger.info("Run failed: %s", status.message)
        return status


def run_session(
    size_text: str,
    pose_text: str,
    commands_text: str,
    trace: bool = False,
    observer: TraceObserver | None = None,
) -> ExecutionStatus:
    """Run a session over three already available lines."""
    lines = iter((size_text, pose_text, commands_text))
    return Session(lambda: next(lines), trace=trace, observer=observer).run()


# ---------------------------------------------------------------------------
# Console front-end
# ---------------------------------------------------------------------------

def read_stdin_line() -> str:
    """Read one line from stdin; end of input counts as an empty line."""
    line = sys.stdin.readline()
    return line.rstrip("\r\n")


def print_trace(event: TraceEvent) -> None:
    prefix = config.MOVE_PREFIX if event.kind == "move" else config.TURN_PREFIX
    print(prefix + format_report(event.pose))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate a robot in a rectangular room. Reads size, start pose "
        "and commands from stdin, one per line."
    )
    parser.add_argument('-t', '--trace', action=argparse.BooleanOptionalAction, default=config.TRACE_ENABLED,
                        help='Print position after every command')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Enable quiet logging (WARNING level)')
    parser.add_argument('--log-level', choices=list(config.LOG_LEVEL_CHOICES),
                        help='Set specific log level')
    return parser


def main(argv: list[str] | None = None, read_line: LineReader | None = None) -> int:
    """Main entry point for the console session."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=config.resolve_log_level(args.log_level, args.verbose, args.quiet),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
        stream=sys.stderr,
    )

    # Undecodable bytes become U+FFFD and then fail validation like any other bad character
    if read_line is None and hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")

    if args.trace:
        print("Trace activated")

    session = Session(read_line or read_stdin_line, trace=args.trace, observer=print_trace)
    status = session.run()

    if status.ok:
        print(config.REPORT_PREFIX + status.report)
        return 0
    print(config.ERROR_PREFIX + status.message)
    return 1


if __name__ == '__main__':
    sys.exit(main())
