"""
Network Activity Component
"""
from .routes import network_activity_bp, init_network_activity
from .service import NetworkActivityService

__all__ = ['network_activity_bp', 'init_network_activity', 'NetworkActivityService']
