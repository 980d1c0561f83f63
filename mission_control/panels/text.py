"""
Plain-text panel renderers

Each renderer turns one endpoint's PollState into a list of lines. They
mirror the browser panels and carry no logic beyond formatting.
"""
from .formatting import format_uptime, time_ago

DEFAULT_GATEWAY_PORT = 18789
DEFAULT_GATEWAY_BIND = '127.0.0.1'


def _header(title, state, now=None, extra=None):
    """Title on the left, time since the last update (plus `extra`) on the right"""
    right = time_ago(state.last_update, now=now)
    if extra:
        right = f'{extra}  {right}'
    return f'{title:<40}{right:>20}'


def render_health_panel(state, service_name='openclaw-gateway.service', now=None):
    """Service state, raw systemd status and uptime"""
    lines = [_header('⬡ Gateway Health', state, now)]
    if state.loading:
        lines.append('  Checking service...')
        return lines

    data = state.data or {}
    active = data.get('status') == 'active'
    lines.append(f"  {'ONLINE' if active else 'OFFLINE'}  {service_name}")
    lines.append(f"  Status: {data.get('raw') or 'unknown'}")
    lines.append(f"  Uptime: {format_uptime(data.get('uptime'), now=now)}")
    if data.get('error'):
        lines.append(f"  ⚠ {data['error']}")
    return lines


def render_network_panel(state, bind=DEFAULT_GATEWAY_BIND, now=None):
    """Listener state, port, protocol, connection count and bind address"""
    lines = [_header('◈ Network Activity', state, now)]
    if state.loading:
        lines.append('  Scanning port...')
        return lines

    data = state.data or {}
    listening = bool(data.get('listening'))
    port = data.get('port') or DEFAULT_GATEWAY_PORT
    protocol = data.get('protocol') or 'TCP'
    lines.append(f"  {'LISTENING' if listening else 'CLOSED'}  Port {port} • {protocol}")
    connections = data.get('connections')
    lines.append(f"  Connections: {connections if connections is not None else 0}")
    lines.append(f"  Bind: {bind}")
    return lines


def render_logs_panel(state, now=None):
    """Recent log lines, numbered relative to totalLines"""
    data = state.data or {}
    total = data.get('totalLines') or 0
    lines = [_header('▣ Live Daemon Log', state, now, extra=f'{total} lines')]
    if state.loading:
        lines.append('  Loading logs...')
        return lines

    log_lines = data.get('lines') or []
    if not log_lines:
        error = data.get('error')
        lines.append(f'  ⚠ {error}' if error else '  No log entries found')
        return lines

    first_number = total - len(log_lines) + 1
    width = len(str(first_number + len(log_lines) - 1))
    for offset, line in enumerate(log_lines):
        lines.append(f'  {first_number + offset:>{width}}  {line}')
    return lines


def render_config_panel(state):
    """Primary model, channels, gateway settings and plugins

    A snapshot carrying `error` renders only that error.
    """
    data = state.data or {}
    version = (data.get('meta') or {}).get('lastTouchedVersion')
    title = '◉ Active Configuration'
    lines = [f"{title:<40}{f'v{version}' if version else '':>20}"]
    if state.loading:
        lines.append('  Reading config...')
        return lines
    if data.get('error'):
        lines.append(f"  ⚠ {data['error']}")
        return lines

    lines.append(f"  Primary model: {(data.get('models') or {}).get('primary') or 'unknown'}")

    channels = data.get('channels') or {}
    rendered = [f"{name}{' ON' if ch.get('enabled') else ''}" for name, ch in channels.items()]
    lines.append(f"  Channels: {', '.join(rendered) if rendered else '-'}")

    gateway = data.get('gateway') or {}
    lines.append(
        f"  Gateway: :{gateway.get('port')}  {gateway.get('mode')}  {gateway.get('bind')}"
    )

    plugins = data.get('plugins') or {}
    if plugins:
        rendered = [f"{name} {'ON' if enabled else 'OFF'}" for name, enabled in plugins.items()]
        lines.append(f"  Plugins: {', '.join(rendered)}")
    return lines
