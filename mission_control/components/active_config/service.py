"""
Active Configuration Service
Projects the fields the dashboard shows out of openclaw.json
"""
import json
import logging

logger = logging.getLogger(__name__)


def _dig(data, *keys):
    """Follow nested dict keys, returning None where the path breaks"""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


class ActiveConfigService:
    """Service for Active Configuration component"""

    def __init__(self, config_path):
        self.config_path = str(config_path)

    def get_config(self):
        """Read the config file and return its dashboard projection

        Any failure returns only {'error': ...}; there is no partial result.
        """
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            if not isinstance(config, dict):
                raise ValueError('Configuration root must be a JSON object')
        except Exception as e:
            logger.warning('Reading %s failed: %s', self.config_path, e)
            return {'error': str(e)}

        return project_config(config)


def project_config(config):
    """Extract models, channels, gateway, plugins and meta from a config dict"""
    models = {
        'primary': _dig(config, 'agents', 'defaults', 'model', 'primary') or 'unknown',
    }

    channels = {}
    raw_channels = config.get('channels')
    if isinstance(raw_channels, dict):
        for name, channel in raw_channels.items():
            if not isinstance(channel, dict):
                continue
            entry = {'enabled': bool(channel.get('enabled'))}
            if channel.get('streamMode'):
                entry['mode'] = channel['streamMode']
            channels[name] = entry

    gateway = {
        'port': _dig(config, 'gateway', 'port') or None,
        'mode': _dig(config, 'gateway', 'mode') or None,
        'bind': _dig(config, 'gateway', 'bind') or None,
    }

    plugins = {}
    entries = _dig(config, 'plugins', 'entries')
    if isinstance(entries, dict):
        for name, plugin in entries.items():
            plugins[name] = bool(plugin.get('enabled')) if isinstance(plugin, dict) else False

    meta = config.get('meta')
    if not isinstance(meta, dict):
        meta = {}

    return {
        'models': models,
        'channels': channels,
        'gateway': gateway,
        'plugins': plugins,
        'meta': meta,
    }
