"""
Active Configuration Routes
"""

from flask import Blueprint, current_app, jsonify

from .service import ActiveConfigService

active_config_bp = Blueprint('active_config', __name__)


@active_config_bp.route('/api/config')
@active_config_bp.route('/config')
def api_config():
    """Get the active gateway configuration"""
    service = current_app.extensions['active_config']
    return jsonify(service.get_config())


def init_active_config(app):
    """Initialize Active Configuration component with Flask app"""
    service = ActiveConfigService(app.config['OPENCLAW_CONFIG_PATH'])
    app.extensions['active_config'] = service
    app.register_blueprint(active_config_bp)
    return service
