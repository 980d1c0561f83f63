"""
Active Configuration Component
"""
from .routes import active_config_bp, init_active_config
from .service import ActiveConfigService, project_config

__all__ = ['active_config_bp', 'init_active_config', 'ActiveConfigService', 'project_config']
