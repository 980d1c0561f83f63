"""
Daemon Logs Component
"""
from .routes import daemon_logs_bp, init_daemon_logs
from .service import FileLogService, JournalLogService, create_log_service

__all__ = [
    'daemon_logs_bp',
    'init_daemon_logs',
    'FileLogService',
    'JournalLogService',
    'create_log_service',
]
