"""
Gateway Health Service
Queries systemd for the gateway service state and start time
"""
import logging

from ...core.shell import run_command

logger = logging.getLogger(__name__)


class GatewayHealthService:
    """Service for Gateway Health component"""

    def __init__(self, service_name, runner=run_command):
        self.service_name = service_name
        self.runner = runner

    def get_health(self):
        """Get the gateway service status

        Any failure of the is-active query reports the service as inactive
        with the error attached. The uptime lookup is best-effort.
        """
        try:
            raw = self.runner(f'systemctl --user is-active {self.service_name}').strip()
        except Exception as e:
            logger.warning('Health check for %s failed: %s', self.service_name, e)
            return {
                'status': 'inactive',
                'raw': 'error',
                'error': str(e),
            }

        return {
            'status': 'active' if raw == 'active' else 'inactive',
            'raw': raw,
            'uptime': self._get_start_timestamp(),
        }

    def _get_start_timestamp(self):
        """Get ActiveEnterTimestamp, or '' if it cannot be read"""
        try:
            return self.runner(
                f'systemctl --user show {self.service_name} '
                '--property=ActiveEnterTimestamp --value'
            ).strip()
        except Exception as e:
            logger.debug('Uptime lookup for %s failed: %s', self.service_name, e)
            return ''
