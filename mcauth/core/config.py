import yaml

from mcauth.core.logging import set_level

DEFAULTS = {
    'session-server': 'https://sessionserver.mojang.com',
    'auth-server': 'https://authserver.mojang.com',
    'api-server': 'https://api.mojang.com',
    'timeout': 10
}


class Config:
    """Configuration manager from external ``yaml`` files, layered over the built-in endpoint defaults."""

    def __init__(self, path: str = None):
        self.config = dict(DEFAULTS)

        if path is not None:
            with open(path, 'r') as f:
                # An empty file loads as `None`
                self.config.update(yaml.safe_load(f.read()) or {})

        if 'log-level' in self.config:
            set_level(self.config['log-level'])

    def get(self, prop: str):
        return self.config[prop]

    def url(self, server: str, path: str):
        """Join one of the configured server base URLs with an endpoint path."""

        return self.get(server).rstrip('/') + path


def resolve(config: Config = None):
    """Fall back to the default configuration when none is given."""

    return Config() if config is None else config
