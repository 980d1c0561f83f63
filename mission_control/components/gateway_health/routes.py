"""
Gateway Health Routes
"""

from flask import Blueprint, current_app, jsonify

from .service import GatewayHealthService

gateway_health_bp = Blueprint('gateway_health', __name__)


@gateway_health_bp.route('/api/health')
@gateway_health_bp.route('/health')
def api_health():
    """Get gateway service health"""
    service = current_app.extensions['gateway_health']
    return jsonify(service.get_health())


def init_gateway_health(app, runner=None):
    """Initialize Gateway Health component with Flask app"""
    kwargs = {'runner': runner} if runner else {}
    service = GatewayHealthService(app.config['SERVICE_NAME'], **kwargs)
    app.extensions['gateway_health'] = service
    app.register_blueprint(gateway_health_bp)
    return service
