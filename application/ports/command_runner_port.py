# application/ports/command_runner_port.py
# Port interface for executing a planned external command.

from abc import ABC, abstractmethod

from application.dto.trim_dto import ExternalCommandDTO


class ICommandRunner(ABC):
    """Abstract base class for command runners."""

    @abstractmethod
    def run(self, command: ExternalCommandDTO) -> None:
        """
        Run `command` to completion, forwarding its stdout/stderr.

        Raises:
            ExecutionError: the command could not start or exited non-zero.
        """
        ...
