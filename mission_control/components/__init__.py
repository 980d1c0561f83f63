"""
Dashboard components

Each component owns one status endpoint: a service class that performs the
read and a blueprint registered by its init_* function.
"""
from .active_config import init_active_config
from .daemon_logs import init_daemon_logs
from .gateway_health import init_gateway_health
from .network_activity import init_network_activity

__all__ = [
    'init_active_config',
    'init_daemon_logs',
    'init_gateway_health',
    'init_network_activity',
]
