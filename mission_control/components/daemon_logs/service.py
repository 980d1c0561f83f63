"""
Daemon Logs Service

Two interchangeable log sources exist: the systemd user journal and a flat
log file. A deployment uses exactly one of them (LOG_SOURCE). They do not
agree on totalLines: the journal reports the number of lines returned, the
file reports every non-blank line in the file.
"""
import logging

from ...core.shell import run_command

logger = logging.getLogger(__name__)

MAX_LOG_LINES = 15


def tail_lines(text, limit=MAX_LOG_LINES):
    """Split text into non-blank lines and return (last `limit` lines, total)"""
    all_lines = [line for line in text.split('\n') if line.strip()]
    return all_lines[-limit:], len(all_lines)


class JournalLogService:
    """Tail the gateway service's systemd journal"""

    source = 'journalctl'

    def __init__(self, service_name, limit=MAX_LOG_LINES, runner=run_command):
        self.service_name = service_name
        self.limit = limit
        self.runner = runner

    def get_logs(self):
        try:
            output = self.runner(
                f'journalctl --user -u {self.service_name} --no-pager '
                f'-n {self.limit} --output=short-iso 2>/dev/null'
            )
        except Exception as e:
            logger.warning('Reading journal for %s failed: %s', self.service_name, e)
            return {
                'lines': [],
                'totalLines': 0,
                'error': str(e),
                'source': self.source,
            }

        lines, _ = tail_lines(output, self.limit)
        return {
            'lines': lines,
            'totalLines': len(lines),
            'source': self.source,
        }


class FileLogService:
    """Tail a flat log file"""

    def __init__(self, path, limit=MAX_LOG_LINES):
        self.path = str(path)
        self.limit = limit

    def get_logs(self):
        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
                content = f.read()
        except Exception as e:
            logger.warning('Reading log file %s failed: %s', self.path, e)
            return {
                'lines': [],
                'totalLines': 0,
                'error': str(e),
                'path': self.path,
            }

        lines, total = tail_lines(content, self.limit)
        return {
            'lines': lines,
            'totalLines': total,
            'path': self.path,
        }


def create_log_service(config, runner=None):
    """Build the log service selected by config['LOG_SOURCE']"""
    source = config.get('LOG_SOURCE', 'journal')
    limit = config.get('MAX_LOG_LINES', MAX_LOG_LINES)

    if source == 'journal':
        kwargs = {'runner': runner} if runner else {}
        return JournalLogService(config['SERVICE_NAME'], limit=limit, **kwargs)
    if source == 'file':
        return FileLogService(config['LOG_FILE_PATH'], limit=limit)

    raise ValueError(f"Unknown LOG_SOURCE: {source!r} (expected 'journal' or 'file')")
