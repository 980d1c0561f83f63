"""
Daemon Logs Routes
"""

from flask import Blueprint, current_app, jsonify

from .service import create_log_service

daemon_logs_bp = Blueprint('daemon_logs', __name__)


@daemon_logs_bp.route('/api/logs')
@daemon_logs_bp.route('/logs')
def api_logs():
    """Get the most recent gateway log lines"""
    service = current_app.extensions['daemon_logs']
    return jsonify(service.get_logs())


def init_daemon_logs(app, runner=None):
    """Initialize Daemon Logs component with Flask app"""
    service = create_log_service(app.config, runner=runner)
    app.extensions['daemon_logs'] = service
    app.register_blueprint(daemon_logs_bp)
    return service
