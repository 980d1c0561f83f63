"""
Terminal view of a running Mission Control dashboard

Polls the dashboard's status endpoints with one PollingClient per panel and
redraws the text panels until interrupted.
"""
import argparse
import logging
import sys
import time

from .config.settings import DashboardConfig
from .core.logging_config import setup_logging
from .core.polling import PollingClient
from .panels.text import (
    render_config_panel,
    render_health_panel,
    render_logs_panel,
    render_network_panel,
)

logger = logging.getLogger(__name__)

CLEAR_SCREEN = '\033[2J\033[H'


def build_clients(base_url, session=None):
    """Create one independent PollingClient per panel"""
    base_url = base_url.rstrip('/')
    return {
        panel: PollingClient(
            base_url + path,
            DashboardConfig.get_polling_interval(panel),
            session=session,
        )
        for panel, path in DashboardConfig.PANEL_ENDPOINTS.items()
    }


def render_frame(clients, service_name=DashboardConfig.SERVICE_NAME, now=None):
    """Render all panels from the clients' current states"""
    sections = [
        render_health_panel(clients['health'].state, service_name=service_name, now=now),
        render_network_panel(clients['network'].state, bind=DashboardConfig.GATEWAY_BIND, now=now),
        render_logs_panel(clients['logs'].state, now=now),
        render_config_panel(clients['config'].state),
    ]
    return '\n\n'.join('\n'.join(lines) for lines in sections)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='mission-control-watch',
        description='Show the Mission Control panels in a terminal.',
    )
    parser.add_argument('--base-url',
                        default=f'http://{DashboardConfig.HOST}:{DashboardConfig.PORT}',
                        help='Dashboard base URL (default: %(default)s)')
    parser.add_argument('--refresh', type=float, default=1.0,
                        help='Seconds between redraws (default: %(default)s)')
    parser.add_argument('--once', action='store_true',
                        help='Poll every endpoint once, print one frame and exit')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level for the watcher (default: %(default)s)')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging('watch', level=args.log_level)
    clients = build_clients(args.base_url)

    if args.once:
        for client in clients.values():
            client.poll_once()
        print(render_frame(clients))
        return 0

    for client in clients.values():
        client.start()
    try:
        while True:
            sys.stdout.write(CLEAR_SCREEN + render_frame(clients) + '\n')
            sys.stdout.flush()
            time.sleep(args.refresh)
    except KeyboardInterrupt:
        logger.info('Stopping watch')
    finally:
        for client in clients.values():
            client.stop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
