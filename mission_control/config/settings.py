"""
Dashboard configuration settings
"""
import os


class DashboardConfig:
    """Centralized configuration for dashboard"""

    # Server settings - loopback only, there is no authentication
    HOST = os.environ.get('MISSION_CONTROL_HOST', '127.0.0.1')
    PORT = int(os.environ.get('MISSION_CONTROL_PORT', 8081))
    LOG_LEVEL = os.environ.get('MISSION_CONTROL_LOG_LEVEL', 'INFO')

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "300 per minute"

    # Monitored gateway service
    SERVICE_NAME = os.environ.get('MISSION_CONTROL_SERVICE', 'openclaw-gateway.service')
    GATEWAY_PORT = int(os.environ.get('MISSION_CONTROL_GATEWAY_PORT', 18789))
    GATEWAY_PROTOCOL = 'WebSocket'
    GATEWAY_BIND = os.environ.get('MISSION_CONTROL_GATEWAY_BIND', '127.0.0.1')

    # Configuration file read by the Active Configuration panel
    OPENCLAW_CONFIG_PATH = os.path.expanduser(
        os.environ.get('MISSION_CONTROL_CONFIG_PATH', '~/.openclaw/openclaw.json')
    )

    # Log source: 'journal' (journalctl) or 'file' (flat log file)
    LOG_SOURCE = os.environ.get('MISSION_CONTROL_LOG_SOURCE', 'journal')
    LOG_FILE_PATH = os.path.expanduser(
        os.environ.get('MISSION_CONTROL_LOG_FILE', '~/.openclaw/logs/gateway.log')
    )
    MAX_LOG_LINES = 15

    # Panel refresh intervals in milliseconds
    POLLING_INTERVALS = {
        'health': 5000,
        'network': 5000,
        'logs': 3000,
        'config': 30000,
    }

    # Endpoint paths polled by the panels
    PANEL_ENDPOINTS = {
        'health': '/api/health',
        'network': '/api/network',
        'logs': '/api/logs',
        'config': '/api/config',
    }

    @classmethod
    def get_polling_interval(cls, panel):
        """Get a panel's refresh interval in seconds"""
        return cls.POLLING_INTERVALS[panel] / 1000.0
