"""
Shell command execution for status components
"""
import logging
import subprocess

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """A shell command exited with a non-zero status"""

    def __init__(self, command, returncode, stderr=''):
        self.command = command
        self.returncode = returncode
        self.stderr = (stderr or '').strip()
        message = f'Command failed: {command}'
        if self.stderr:
            message = f'{message}\n{self.stderr}'
        super().__init__(message)


def run_command(command):
    """Run a shell command and return its stdout

    The command goes through /bin/sh so pipelines and redirections work.
    Raises CommandError on a non-zero exit status.
    """
    logger.debug('Running command: %s', command)
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    if result.returncode != 0:
        raise CommandError(command, result.returncode, result.stderr)
    return result.stdout
