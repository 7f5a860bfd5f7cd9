# infrastructure/ffmpeg/subprocess_runner.py
# Implementation of ICommandRunner using subprocess with inherited stdio.

import logging
import subprocess

from application.dto.trim_dto import ExternalCommandDTO
from application.ports.command_runner_port import ICommandRunner
from trimmer.errors import ExecutionError

logger = logging.getLogger("ezff")


class SubprocessRunner(ICommandRunner):
    """Run the command in the foreground; its stdout/stderr go straight to ours."""

    def run(self, command: ExternalCommandDTO) -> None:
        logger.debug("running: %s", command.argv)
        try:
            completed = subprocess.run(command.argv, check=False)
        except OSError as exc:
            # returncode stays None: the process never started
            raise ExecutionError(f"Error running {command.program}: {exc}") from exc

        if completed.returncode != 0:
            raise ExecutionError(
                f"Error running {command.program}: exit status {completed.returncode}",
                returncode=completed.returncode,
            )
        logger.debug("%s finished successfully", command.program)
