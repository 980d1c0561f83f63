"""
Gateway Health Component
Reports whether the gateway systemd service is active and since when
"""
from .routes import gateway_health_bp, init_gateway_health
from .service import GatewayHealthService

__all__ = ['gateway_health_bp', 'init_gateway_health', 'GatewayHealthService']
