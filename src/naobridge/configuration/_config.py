import copy
import json
from pathlib import Path

import jmespath  # http://jmespath.org/tutorial.html

from naobridge import constants, labels
from naobridge.logger import Logger

log = Logger().setup_logger('Configuration')

DEFAULT_CONFIG_PATH = Path.home() / 'naobridge' / 'naobridge.json'

DEFAULT_VALUES = {
    'server': {
        'host': constants.DEFAULT_HOST,
        'port': constants.DEFAULT_PORT,
    },
    'agent': {
        'id': '1',
        'team': 'myT',
        'beam': {'x': -1.0, 'y': 0.0, 'rotation': 0.0},
    },
    'motion': {
        'keyframes_directory': constants.DEFAULT_KEYFRAMES_DIRECTORY,
    },
    'logging': {
        'console': False,
    },
}


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Agent configuration: built-in defaults overridden by an optional JSON file."""

    SERVER_HOST = 'server.host'
    SERVER_PORT = 'server.port'

    AGENT_ID = 'agent.id'
    AGENT_TEAM = 'agent.team'
    AGENT_BEAM_X = 'agent.beam.x'
    AGENT_BEAM_Y = 'agent.beam.y'
    AGENT_BEAM_ROTATION = 'agent.beam.rotation'

    MOTION_KEYFRAMES_DIRECTORY = 'motion.keyframes_directory'

    LOGGING_CONSOLE = 'logging.console'

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
        self.values = copy.deepcopy(DEFAULT_VALUES)
        self.load_config()

    def load_config(self) -> None:
        if not self.path.exists():
            log.info(labels.CONFIG_USING_DEFAULTS.format(self.path))
            return

        try:
            with open(self.path, encoding='utf-8') as json_file:
                user_values = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            log.error(labels.CONFIG_INVALID_FILE.format(self.path, e))
            return

        if not isinstance(user_values, dict):
            log.error(labels.CONFIG_INVALID_FILE.format(self.path, 'top level is not an object'))
            return

        _merge(self.values, user_values)
        log.info(labels.CONFIG_LOADED.format(self.path, ', '.join(user_values.keys())))

    def save_config(self, path: Path | str | None = None) -> None:
        target = Path(path) if path is not None else self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, 'w', encoding='utf-8') as outfile:
            json.dump(self.values, outfile, indent=4)

    def get(self, search_pattern):
        value = jmespath.search(search_pattern, self.values)
        log.debug(search_pattern + ': ' + str(value))
        return value

    @property
    def server_address(self) -> tuple[str, int]:
        return str(self.get(self.SERVER_HOST)), int(self.get(self.SERVER_PORT))

    @property
    def beam(self) -> tuple[float, float, float]:
        return (
            float(self.get(self.AGENT_BEAM_X)),
            float(self.get(self.AGENT_BEAM_Y)),
            float(self.get(self.AGENT_BEAM_ROTATION)),
        )
