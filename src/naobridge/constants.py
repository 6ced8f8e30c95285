### Simulation cycle ###
# Length of one server cycle in milliseconds
TICK_LENGTH_MS = 20
# Number of empty cycles after the handshake, the gyrometer and accelerometer need them to even out
SETTLE_CYCLES = 100

### Robot ###
JOINT_COUNT = 22
# Accelerometer z value (m/s^2) below which the robot is considered lying on the ground
LYING_DOWN_ACC_Z = 7.0

### Server connection ###
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 3100
# Length prefix: 32 bit unsigned integer in network order
FRAME_HEADER_SIZE = 4
FRAME_HEADER_FORMAT = '!I'
MESSAGE_ENCODING = 'utf-8'

### Agent messages ###
SYNC_TOKEN = '(syn)'
SCENE_PATH = 'rsg/agent/nao/nao.rsg'
SAY_MAX_LENGTH = 20

### Keyframe files ###
KEYFRAME_FILE_SUFFIX = '.txt'
KEYFRAME_COMMENT_PREFIX = '//'
DEFAULT_KEYFRAMES_DIRECTORY = 'keyframes'

__all__ = [
    'TICK_LENGTH_MS',
    'SETTLE_CYCLES',
    'JOINT_COUNT',
    'LYING_DOWN_ACC_Z',
    'DEFAULT_HOST',
    'DEFAULT_PORT',
    'FRAME_HEADER_SIZE',
    'FRAME_HEADER_FORMAT',
    'MESSAGE_ENCODING',
    'SYNC_TOKEN',
    'SCENE_PATH',
    'SAY_MAX_LENGTH',
    'KEYFRAME_FILE_SUFFIX',
    'KEYFRAME_COMMENT_PREFIX',
    'DEFAULT_KEYFRAMES_DIRECTORY',
]
