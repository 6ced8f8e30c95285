"""
Tests for the JSON configuration.
"""

import json

from naobridge import constants
from naobridge.configuration import Config, JointName, PlayMode


class TestConfig:
    def test_defaults_without_file(self, tmp_path):
        config = Config(tmp_path / 'missing.json')

        assert config.get(Config.SERVER_HOST) == constants.DEFAULT_HOST
        assert config.get(Config.SERVER_PORT) == constants.DEFAULT_PORT
        assert config.server_address == ('127.0.0.1', 3100)
        assert config.beam == (-1.0, 0.0, 0.0)

    def test_file_overrides_single_keys(self, tmp_path):
        path = tmp_path / 'naobridge.json'
        path.write_text(json.dumps({'agent': {'team': 'robo', 'beam': {'x': -4.5}}}), encoding='utf-8')

        config = Config(path)

        assert config.get(Config.AGENT_TEAM) == 'robo'
        assert config.get(Config.AGENT_ID) == '1'
        assert config.get(Config.AGENT_BEAM_X) == -4.5
        assert config.get(Config.AGENT_BEAM_Y) == 0.0

    def test_invalid_file_uses_defaults(self, tmp_path):
        path = tmp_path / 'naobridge.json'
        path.write_text('{not json', encoding='utf-8')

        config = Config(path)

        assert config.get(Config.AGENT_TEAM) == 'myT'

    def test_save_and_load(self, tmp_path):
        config = Config(tmp_path / 'missing.json')
        config.values['motion']['keyframes_directory'] = '/opt/keyframes'
        config.save_config(tmp_path / 'saved.json')

        assert Config(tmp_path / 'saved.json').get(Config.MOTION_KEYFRAMES_DIRECTORY) == '/opt/keyframes'


class TestEnumerations:
    def test_joint_table(self):
        joints = list(JointName)

        assert len(joints) == constants.JOINT_COUNT
        assert joints[0].perceptor_id == 'hj1'
        assert joints[21].effector_id == 'rae4'
        assert JointName.from_perceptor_id('llj4') is JointName.LEFT_KNEE_PITCH
        assert JointName.LEFT_KNEE_PITCH.index == 9
        assert (JointName.LEFT_KNEE_PITCH.min_angle, JointName.LEFT_KNEE_PITCH.max_angle) == (-130.0, 1.0)

    def test_play_modes(self):
        assert PlayMode.from_server_string('KickOff_Left') is PlayMode.KICK_OFF_LEFT
        assert PlayMode.from_server_string('GameOver') is PlayMode.GAME_OVER
        assert PlayMode.from_server_string('Whatever') is PlayMode.UNKNOWN
