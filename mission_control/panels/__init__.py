"""
Presentation panels
"""
from .formatting import format_uptime, parse_timestamp, time_ago
from .text import (
    render_config_panel,
    render_health_panel,
    render_logs_panel,
    render_network_panel,
)

__all__ = [
    'format_uptime',
    'parse_timestamp',
    'time_ago',
    'render_config_panel',
    'render_health_panel',
    'render_logs_panel',
    'render_network_panel',
]
