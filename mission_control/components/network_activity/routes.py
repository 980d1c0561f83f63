"""
Network Activity Routes
"""

from flask import Blueprint, current_app, jsonify

from .service import NetworkActivityService

network_activity_bp = Blueprint('network_activity', __name__)


@network_activity_bp.route('/api/network')
@network_activity_bp.route('/network')
def api_network():
    """Get gateway port listener state"""
    service = current_app.extensions['network_activity']
    return jsonify(service.get_network_status())


def init_network_activity(app, runner=None):
    """Initialize Network Activity component with Flask app"""
    kwargs = {'runner': runner} if runner else {}
    service = NetworkActivityService(
        app.config['GATEWAY_PORT'],
        protocol=app.config['GATEWAY_PROTOCOL'],
        **kwargs
    )
    app.extensions['network_activity'] = service
    app.register_blueprint(network_activity_bp)
    return service
