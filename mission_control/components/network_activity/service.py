"""
Network Activity Service
"""
import logging

from ...core.shell import run_command

logger = logging.getLogger(__name__)


class NetworkActivityService:
    """Service for Network Activity component

    Uses ss(8) to see whether the gateway port is listening and how many
    TCP connections reference it.
    """

    def __init__(self, port, protocol='WebSocket', runner=run_command):
        self.port = port
        self.protocol = protocol
        self.runner = runner

    def get_network_status(self):
        """Get listener state and connection count for the gateway port"""
        try:
            details = self.runner(f'ss -tlnp 2>/dev/null | grep {self.port} || true').strip()
        except Exception as e:
            logger.warning('Port scan for %s failed: %s', self.port, e)
            return {
                'listening': False,
                'port': self.port,
                'error': str(e),
            }

        listening = len(details) > 0 and str(self.port) in details
        connections = self._count_connections() if listening else 0

        return {
            'listening': listening,
            'port': self.port,
            'protocol': self.protocol,
            'connections': connections,
            'details': details or None,
        }

    def _count_connections(self):
        """Count sockets on the port; 0 when the count cannot be read"""
        try:
            output = self.runner(f'ss -tnp 2>/dev/null | grep {self.port} | wc -l')
            return int(output.strip())
        except Exception as e:
            logger.debug('Connection count for %s failed: %s', self.port, e)
            return 0
