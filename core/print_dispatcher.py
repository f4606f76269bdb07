"""
Print Dispatcher - hands written files to the platform's print handler
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from core.constants import ErrorMessages, PrintConstants
from core.exceptions import PrintDispatchError, PrintNotSupportedError

logger = logging.getLogger(__name__)


class PrintDispatcher:
    """
    Sends image files to the default printer.

    Only Windows has a print handler (Paint's `/p` switch); every other
    platform reports PrintNotSupportedError.
    """

    def __init__(
        self,
        platform: Optional[str] = None,
        timeout: float = PrintConstants.PRINT_TIMEOUT_SECONDS,
    ):
        """
        Initialize Print Dispatcher

        Args:
            platform: Platform identifier (defaults to sys.platform)
            timeout: Seconds to wait for the print handler
        """
        self.platform = platform if platform is not None else sys.platform
        self.timeout = timeout

    @property
    def is_supported(self) -> bool:
        return self.platform.startswith(PrintConstants.WINDOWS_PLATFORM_PREFIX)

    def command_for(self, path: Union[str, Path]) -> Sequence[str]:
        """Build the print command line for a file."""
        if not self.is_supported:
            raise PrintNotSupportedError(self.platform)
        return [*PrintConstants.WINDOWS_PRINT_COMMAND, str(path)]

    def dispatch(self, path: Union[str, Path]) -> None:
        """
        Print a file through the platform handler and wait for it.

        Args:
            path: File to print

        Raises:
            PrintNotSupportedError: If the platform has no print handler
            PrintDispatchError: If the handler could not be run or failed
        """
        command = self.command_for(path)
        logger.info(f"Printing {path}")

        try:
            subprocess.run(command, check=True, capture_output=True, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            raise PrintDispatchError(
                ErrorMessages.PRINT_FAILED.format(path=path, command=command[0])
            ) from e
