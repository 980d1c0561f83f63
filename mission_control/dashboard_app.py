"""
Mission Control Dashboard
Flask application assembling the status components
"""
import logging
import os

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .components.active_config import active_config_bp, init_active_config
from .components.daemon_logs import daemon_logs_bp, init_daemon_logs
from .components.gateway_health import gateway_health_bp, init_gateway_health
from .components.network_activity import init_network_activity, network_activity_bp
from .config.settings import DashboardConfig
from .core.logging_config import setup_logging
from .routes.main_routes import main_bp

logger = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class DashboardApp:
    """Main dashboard application class"""

    def __init__(self):
        self.app = None
        self.limiter = None

    def create_app(self, overrides=None, runner=None):
        """Create and configure Flask application

        `overrides` is applied on top of DashboardConfig. `runner` replaces
        the shell command runner of the command-based components.
        """
        self.app = Flask(
            __name__,
            template_folder=os.path.join(PACKAGE_DIR, 'templates'),
            static_folder=os.path.join(PACKAGE_DIR, 'static'),
        )

        # Load configuration
        self.app.config.from_object(DashboardConfig)
        if overrides:
            self.app.config.update(overrides)

        # No authentication: the dashboard binds to loopback only
        self.limiter = Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI'],
        )

        # Initialize components
        init_gateway_health(self.app, runner=runner)
        init_network_activity(self.app, runner=runner)
        init_daemon_logs(self.app, runner=runner)
        init_active_config(self.app)

        # Status endpoints always answer 200; only the page is rate limited
        for blueprint in (gateway_health_bp, network_activity_bp, daemon_logs_bp, active_config_bp):
            self.limiter.exempt(blueprint)

        self.app.register_blueprint(main_bp)

        return self.app

    def run(self):
        """Start the dashboard application"""
        config = self.app.config
        logger.info("Mission Control dashboard on http://%s:%s", config['HOST'], config['PORT'])
        logger.info("Watching %s (port %s), log source: %s",
                    config['SERVICE_NAME'], config['GATEWAY_PORT'], config['LOG_SOURCE'])
        self.app.run(host=config['HOST'], port=config['PORT'], debug=False)


def create_app(overrides=None, runner=None):
    """Application factory"""
    return DashboardApp().create_app(overrides=overrides, runner=runner)


def main():
    """Main entry point"""
    setup_logging('dashboard', level=DashboardConfig.LOG_LEVEL)
    dashboard = DashboardApp()
    dashboard.create_app()
    dashboard.run()


if __name__ == '__main__':
    main()
