#!/usr/bin/env python3
"""
ezff CLI
Trim media files with ffmpeg without remembering its flags.

Usage:
    python main.py trim-start clip.mp4 5
    python main.py trim-end clip.mp4 10 --output short.mp4
    python main.py trim-mid clip.mp4 30 40
    python main.py trim clip.mp4 5 10 --dry-run
"""

import argparse
import logging
import sys
import time
from typing import List, NoReturn, Optional

from application.dto.trim_dto import TrimRequestDTO
from infrastructure.ffmpeg.ffprobe_prober import FFprobeProber
from infrastructure.ffmpeg.subprocess_runner import SubprocessRunner
from trimmer.core import check_ffmpeg, trim_media
from trimmer.errors import ExecutionError, TrimError, UsageError
from trimmer.planner import MODE_REGISTRY, CommandPlanner
from trimmer.printer import OutputPrinter
from trimmer.utils import get_ffmpeg_name, get_ffprobe_name, parse_seconds

COMMANDS_HELP: str = """
Commands:
  trim-start <input> <seconds> [--output <output>]
  trim-end <input> <seconds> [--output <output>]
  trim-mid <input> <start_cut> <end_cut> [--output <output>]
  trim <input> <trim_start> <trim_end> [--output <output>]

Examples:
  ezff trim-start clip.mp4 5              # clip_trim.mp4 starts at 0:05
  ezff trim-end clip.mp4 10               # drop the last 10 seconds
  ezff trim-mid clip.mp4 30 40            # remove 0:30-0:40 (re-encodes)
  ezff trim clip.mp4 5 10 -o out.mp4      # drop 5s at the start, 10s at the end

Environment:
  EZFF_FFMPEG / EZFF_FFPROBE  override the ffmpeg / ffprobe executables
  NO_COLOR                    disable colored output
"""


class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        usage: str = self.format_usage()
        if self.epilog:
            usage += self.epilog
        raise UsageError(message, usage=usage)


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = CliArgumentParser(
        prog="ezff",
        usage="ezff <command> [args]",
        description="Trim the start, end, or middle of a media file with ffmpeg.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=COMMANDS_HELP,
    )

    # Options shared by every command
    common: argparse.ArgumentParser = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--output",
        "-o",
        metavar="OUTPUT",
        default=None,
        help="Output path, used as-is (default: <input>_trim.<ext>, never overwriting).",
    )
    out_group = common.add_argument_group("Output Options")
    out_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the ffmpeg command instead of running it.",
    )
    out_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress all output except errors.",
    )
    out_group.add_argument(
        "--no-color",
        "-n",
        action="store_true",
        help="Disable colored output (also auto-disabled when NO_COLOR env var is set).",
    )
    out_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log the probe and ffmpeg commands.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>", prog="ezff")
    subparsers.required = True

    for mode in MODE_REGISTRY.values():
        sub = subparsers.add_parser(
            mode.mode_id,
            parents=[common],
            help=mode.summary,
            description=mode.summary,
        )
        sub.add_argument("input", metavar="INPUT", help="Path to the input media file.")
        for name in mode.param_names:
            sub.add_argument(name, metavar=name.upper(), help=f"{name} in seconds.")

    return parser


def command_usage(mode_id: str) -> str:
    """Return the one-line usage of a single command, e.g. for trim-end."""
    mode = MODE_REGISTRY[mode_id]
    names: str = " ".join(f"<{name}>" for name in mode.param_names)
    return f"Usage: ezff {mode.mode_id} <input> {names} [--output <output>]"


def order_positionals(argv: List[str]) -> List[str]:
    """
    Put a command's fixed positionals behind '--' so argparse never reads
    them as options, and hand the rest of the line to argparse as flags.

    Example: trim-start -clip.mp4 5 -o out.mp4  →  trim-start -o out.mp4 -- -clip.mp4 5

    Lines too short to hold every positional, or asking for help, are left
    alone so argparse reports them as usual.
    """
    if not argv or argv[0] not in MODE_REGISTRY:
        return list(argv)

    count: int = 1 + len(MODE_REGISTRY[argv[0]].param_names)
    positionals: List[str] = list(argv[1:1 + count])
    if len(positionals) < count:
        return list(argv)
    if any(token in ("-h", "--help", "--") for token in positionals):
        return list(argv)
    return [argv[0], *argv[1 + count:], "--", *positionals]


def execution_hint(exc: ExecutionError) -> str:
    if exc.hint:
        return exc.hint
    if exc.returncode is None:
        return "Install FFmpeg or point EZFF_FFMPEG at the binary."
    return f"ffmpeg exited with status {exc.returncode}; its output above shows why."


def build_request(args: argparse.Namespace) -> TrimRequestDTO:
    """Turn parsed arguments into a TrimRequestDTO, validating the numbers."""
    mode = MODE_REGISTRY[args.command]
    parameters = tuple(parse_seconds(getattr(args, name), name) for name in mode.param_names)
    return TrimRequestDTO(
        mode=mode.mode_id,
        input_path=args.input,
        parameters=parameters,
        output_path=args.output or None,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser: argparse.ArgumentParser = build_parser()

    try:
        args: argparse.Namespace = parser.parse_args(
            order_positionals(sys.argv[1:] if argv is None else argv)
        )
    except UsageError as exc:
        printer = OutputPrinter()
        printer.error(str(exc), hint=exc.hint)
        if exc.usage:
            printer.usage(exc.usage)
        sys.exit(1)

    configure_logging(args.verbose)
    printer: OutputPrinter = OutputPrinter(quiet=args.quiet, no_color=args.no_color)

    ffmpeg: str = get_ffmpeg_name()
    if not check_ffmpeg(ffmpeg):
        printer.warning(
            "ffmpeg not installed or not in PATH. Commands will not work.",
            hint="Install FFmpeg or set EZFF_FFMPEG to its path.",
        )

    start_time = time.time()
    try:
        request: TrimRequestDTO = build_request(args)
        planner = CommandPlanner(prober=FFprobeProber(get_ffprobe_name()), ffmpeg=ffmpeg)
        command = trim_media(
            request,
            planner=planner,
            runner=SubprocessRunner(),
            dry_run=args.dry_run,
        )
    except UsageError as exc:
        printer.error(str(exc), hint=exc.hint)
        printer.usage(command_usage(args.command))
        sys.exit(1)
    except ExecutionError as exc:
        printer.error(str(exc), hint=execution_hint(exc))
        sys.exit(1)
    except TrimError as exc:
        printer.error(str(exc), hint=exc.hint)
        sys.exit(1)
    except KeyboardInterrupt:
        printer.warning("Trim cancelled.", hint="The output file may be incomplete.")
        sys.exit(130)

    if args.dry_run:
        printer.command(command.argv)
        printer.info("Dry run: ffmpeg was not started.")
        return

    elapsed: float = time.time() - start_time
    printer.success(
        title=command.output_path,
        details={
            "Mode": MODE_REGISTRY[request.mode].display_name,
            "Time": f"{elapsed:.1f}s",
        },
    )


if __name__ == "__main__":
    main()
