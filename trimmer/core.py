import logging
import subprocess
from typing import Optional

from application.dto.trim_dto import ExternalCommandDTO, TrimRequestDTO
from application.ports.command_runner_port import ICommandRunner
from infrastructure.ffmpeg.ffprobe_prober import FFprobeProber
from infrastructure.ffmpeg.subprocess_runner import SubprocessRunner
from trimmer.planner import CommandPlanner
from trimmer.utils import get_ffmpeg_name

logger = logging.getLogger("ezff")


def check_ffmpeg(ffmpeg: Optional[str] = None) -> bool:
    """
    Return True when `ffmpeg -version` runs successfully.

    Callers decide what a missing ffmpeg means; nothing is raised here.
    """
    program: str = ffmpeg or get_ffmpeg_name()
    try:
        subprocess.run(
            [program, "-version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("%s -version failed: %s", program, exc)
        return False
    return True


def trim_media(
    request     : TrimRequestDTO,
    planner     : Optional[CommandPlanner] = None,
    runner      : Optional[ICommandRunner] = None,
    dry_run     : bool = False,
) -> ExternalCommandDTO:
    """
    Full pipeline: validate → probe duration → resolve output → run ffmpeg.

    Args:
        request: Parsed trim request.
        planner: Command planner; defaults to one backed by ffprobe.
        runner:  Command runner; defaults to a foreground subprocess.
        dry_run: Plan only, do not run ffmpeg.

    Returns:
        The planned (and, unless dry_run, executed) command.

    Raises:
        UsageError, ValidationError, ProbeError: nothing was run.
        ExecutionError: ffmpeg failed to start or exited non-zero.
    """
    planner = planner or CommandPlanner(prober=FFprobeProber())
    command: ExternalCommandDTO = planner.plan(request)

    if dry_run:
        logger.info("dry run, not executing: %s", command.argv)
        return command

    runner = runner or SubprocessRunner()
    runner.run(command)
    return command
