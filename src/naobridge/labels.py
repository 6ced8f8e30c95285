"""
Message strings used by the naobridge agent.

All log and error message texts are kept here.
"""

# Symbol parser
PARSER_EMPTY_INPUT = "Symbolic text is empty"
PARSER_NOT_ENCLOSED = "Symbolic text is not enclosed in parentheses: {}"
PARSER_UNEXPECTED_CLOSE = "Closing parenthesis without partner at position {}"
PARSER_UNCLOSED = "{} parenthesis(es) never closed"

# Perception decoder
DECODER_MESSAGE_REJECTED = "Server message could not be parsed, the connection is out of sync: {}"
DECODER_FRAGMENT_SKIPPED = "Skipped perceptor '{}': {}"
DECODER_DETECTION_SKIPPED = "Skipped vision detection '{}': {}"
DECODER_MALFORMED_NODE = "Malformed node: {}"
DECODER_EXPECTED_SUBNODE = "Expected sub node '{}' in {}"
DECODER_NOT_A_NUMBER = "Not a number: {}"
DECODER_UNKNOWN_JOINT = "Unknown hinge joint perceptor: {}"
DECODER_UNKNOWN_FOOT = "Unknown foot, lf or rf expected: {}"
DECODER_UNKNOWN_LANDMARK = "Unknown landmark: {}"

# Transport
TRANSPORT_CONNECTING = "Connecting to server {}:{}"
TRANSPORT_CONNECTED = "Connected to server {}:{}"
TRANSPORT_CONNECT_FAILED = "Could not connect to server {}:{}: {}"
TRANSPORT_NOT_CONNECTED = "Not connected to the server"
TRANSPORT_SEND_FAILED = "Sending to the server failed: {}"
TRANSPORT_RECEIVE_FAILED = "Receiving from the server failed: {}"
TRANSPORT_CLOSED_BY_PEER = "Connection closed by the server"
TRANSPORT_CLOSED = "Connection closed"
TRANSPORT_SENDING = "Sending: {}"
TRANSPORT_HANDSHAKE_SCENE = "Handshake: selecting scene {}"
TRANSPORT_HANDSHAKE_INIT = "Handshake: registering player {} of team {}"
TRANSPORT_HANDSHAKE_BEAM = "Handshake: beaming to x={} y={} rotation={}"
TRANSPORT_HANDSHAKE_DONE = "Handshake done after {} settling cycles"

# Effector output
EFFECTOR_SAY_TRUNCATED = "Say message '{}' is longer than {} characters, truncated"
EFFECTOR_WRONG_VECTOR_SIZE = "Expected {} joint velocities, got shape {}"

# Keyframe files
KEYFRAME_EMPTY_LINE = "Empty keyframe line"
KEYFRAME_BAD_DURATION = "Keyframe duration is not an integer: {}"
KEYFRAME_BAD_ANGLE = "Keyframe angle is not a number: {}"
KEYFRAME_FILE_BAD_LINE = "{}, line {}: {}"
KEYFRAME_FILE_MISSING = "Keyframe file not found: {}"
KEYFRAME_FILE_LOADED = "Loaded motion {} with {} keyframes from {}"

# Motion
CATALOGUE_LOADING = "Loading motions from {}"
CATALOGUE_MISSING_MOTION = "Motion {} is not in the catalogue"
MOTION_SELECTED = "Motion {} selected, {} keyframes"
MOTION_SELECT_WHILE_BUSY = "Cannot select motion {} while the interpolator is {}"
MOTION_GAIT_IMPOSSIBLE = "Cannot {} from gait phase {}"
MOTION_FINISHED = "Motion {} finished"
MOTION_KEYFRAME_STARTED = "Keyframe started: {} ms, {} ticks"
MOTION_TICK = "Tick done, {} ticks left, state {}, max velocity {:.4f} rad/s"

# Configuration
CONFIG_USING_DEFAULTS = "No configuration file at {}, using defaults"
CONFIG_LOADED = "Configuration loaded from {}: {}"
CONFIG_INVALID_FILE = "Invalid configuration file {}, using defaults: {}"

# Runtime
RUNTIME_STARTING = "Starting agent {} of team {}"
RUNTIME_READY = "Agent ready, entering control loop"
RUNTIME_DESYNCHRONIZED = "Stopping, server message could not be parsed: {}"
RUNTIME_TRANSPORT_FAILED = "Stopping, connection to the server failed: {}"
RUNTIME_CYCLES_DONE = "Stopping after {} cycles"
RUNTIME_INTERRUPTED = "Stopping, interrupted by user"

# Keyframe developer behaviour
BEHAVIOUR_PLAY_TEST = "Playing test motion"
BEHAVIOUR_STAND_UP = "Robot is lying down, standing up"
