"""
Main page routes for dashboard
"""
from datetime import datetime

from flask import Blueprint, current_app, render_template

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def dashboard():
    """Main dashboard page"""
    config = current_app.config
    intervals = config['POLLING_INTERVALS']
    panels = {
        name: {'url': config['PANEL_ENDPOINTS'][name], 'interval': intervals[name]}
        for name in intervals
    }

    return render_template('dashboard.html',
                           panels=panels,
                           service_name=config['SERVICE_NAME'],
                           gateway_port=config['GATEWAY_PORT'],
                           gateway_bind=config['GATEWAY_BIND'],
                           current_time=datetime.now())
