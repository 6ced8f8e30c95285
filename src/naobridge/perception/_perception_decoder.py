import math

import numpy as np

from naobridge import constants, labels
from naobridge.configuration import FlagId, FootId, GoalPostId, JointName, PlayMode
from naobridge.exceptions import MalformedInputError, PerceptorConversionError, TransportError
from naobridge.logger import Logger
from naobridge.perception._snapshot import (
    ForceResistance,
    GameState,
    HearMessage,
    LineDetection,
    PlayerDetection,
    Polar,
    SensorSnapshot,
)
from naobridge.perception._symbol_tree import SymbolNode, parse_message

log = Logger().setup_logger('Perception')

UNNAMED_BODY_PART = 'body'
SELF_SPEAKER = 'self'


def _to_float(value) -> float:
    """Convert an atom into a finite float, the server sometimes sends "nan"."""
    if not isinstance(value, str):
        raise PerceptorConversionError(labels.DECODER_NOT_A_NUMBER.format(value))
    try:
        number = float(value)
    except ValueError:
        raise PerceptorConversionError(labels.DECODER_NOT_A_NUMBER.format(value))
    if not math.isfinite(number):
        raise PerceptorConversionError(labels.DECODER_NOT_A_NUMBER.format(value))
    return number


def _child_node(node: SymbolNode, index: int, tag: str) -> SymbolNode:
    """Return the child at index, which must be a node starting with the given tag."""
    if index >= len(node) or not isinstance(node[index], SymbolNode) or node[index].tag != tag:
        raise PerceptorConversionError(labels.DECODER_EXPECTED_SUBNODE.format(tag, node))
    return node[index]


def _vector(node: SymbolNode) -> np.ndarray:
    """Convert a node like (rt 0.1 0.2 0.3) into a vector of three floats."""
    if len(node) != 4:
        raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))
    return np.array([_to_float(value) for value in node[1:]])


def _polar(node) -> Polar:
    """Convert a node like (pol 5.2 -30.0 2.1), with angles in degrees, into a Polar in radians."""
    if not isinstance(node, SymbolNode) or node.tag != 'pol' or len(node) != 4:
        raise PerceptorConversionError(labels.DECODER_EXPECTED_SUBNODE.format('pol', node))
    return Polar(
        distance=_to_float(node[1]),
        azimuth=math.radians(_to_float(node[2])),
        elevation=math.radians(_to_float(node[3])),
    )


class PerceptionDecoder:
    """
    Converts the messages of the simulation server into SensorSnapshot objects.

    Each top level fragment of a message is handed to a parser selected by its tag. A fragment that cannot be
    converted is logged and leaves its field absent, the rest of the message is still decoded. Fragments with
    an unknown tag are ignored.
    """

    def __init__(self, transport=None, own_team: str | None = None, own_id: str | None = None):
        """
        Args:
            transport: Object offering receive_frame(), used by update(). Only needed for update().
            own_team (str, optional): Team name of this agent, used to drop detections of itself.
            own_id (str, optional): Player number of this agent, used to drop detections of itself.
        """
        self._transport = transport
        self._own_team = own_team
        self._own_id = own_id
        self._snapshot = SensorSnapshot()

        self._fragment_parsers = {
            'time': self._parse_time,
            'HJ': self._parse_hinge_joint,
            'GYR': self._parse_gyro,
            'ACC': self._parse_acc,
            'FRP': self._parse_force_resistance,
            'See': self._parse_vision,
            'hear': self._parse_hear,
            'GS': self._parse_game_state,
        }

    @property
    def snapshot(self) -> SensorSnapshot:
        """The snapshot decoded by the last call of update()."""
        return self._snapshot

    def update(self) -> SensorSnapshot:
        """
        Receive the next message from the transport and decode it.

        This blocks until the server sends the message of the next cycle.

        Raises:
            TransportError: If the server closed the connection.
        """
        frame = self._transport.receive_frame()
        if frame is None:
            raise TransportError(labels.TRANSPORT_CLOSED_BY_PEER)

        self._snapshot = self.decode(frame, self._snapshot)
        return self._snapshot

    def decode(self, raw_message, previous: SensorSnapshot | None = None) -> SensorSnapshot:
        """
        Decode one server message. Never raises.

        Args:
            raw_message (bytes | str | None): The payload of one frame.
            previous (SensorSnapshot, optional): Snapshot of the last cycle, its joint angles are the starting
                point since joints missing in this message keep their last known value.

        Returns:
            SensorSnapshot: A new snapshot. If the message as a whole could not be parsed, parse_error is set.
        """
        snapshot = SensorSnapshot()
        if previous is not None:
            snapshot.joint_angles = previous.joint_angles.copy()

        if raw_message is None:
            return snapshot

        if isinstance(raw_message, (bytes, bytearray)):
            try:
                raw_message = raw_message.decode(constants.MESSAGE_ENCODING)
            except UnicodeDecodeError as e:
                snapshot.parse_error = str(e)
                log.error(labels.DECODER_MESSAGE_REJECTED.format(e))
                return snapshot

        try:
            root = parse_message(raw_message)
        except MalformedInputError as e:
            snapshot.parse_error = str(e)
            log.error(labels.DECODER_MESSAGE_REJECTED.format(e))
            return snapshot

        for fragment in root:
            fragment_parser = self._fragment_parsers.get(fragment.tag)
            if fragment_parser is None:
                continue
            try:
                fragment_parser(fragment, snapshot)
            except PerceptorConversionError as e:
                log.warning(labels.DECODER_FRAGMENT_SKIPPED.format(fragment.tag, e))

        return snapshot

    def _parse_time(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (time (now 12.34))
        now = _child_node(node, 1, 'now')
        if len(now) != 2:
            raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))
        snapshot.time = _to_float(now[1])

    def _parse_hinge_joint(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (HJ (n hj1) (ax -0.00))
        name = _child_node(node, 1, 'n')
        axis = _child_node(node, 2, 'ax')
        if len(name) != 2 or len(axis) != 2:
            raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))

        try:
            joint = JointName.from_perceptor_id(name[1])
        except KeyError:
            raise PerceptorConversionError(labels.DECODER_UNKNOWN_JOINT.format(name[1]))

        snapshot.joint_angles[joint.index] = math.radians(_to_float(axis[1]))

    def _parse_gyro(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (GYR (n torso) (rt 0.01 0.07 0.46))
        snapshot.gyro = _vector(_child_node(node, 2, 'rt'))

    def _parse_acc(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (ACC (n torso) (a 0.00 0.00 9.81))
        snapshot.acc = _vector(_child_node(node, 2, 'a'))

    def _parse_force_resistance(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (FRP (n lf) (c -0.14 0.08 -0.05) (f 1.12 -0.26 13.07))
        name = _child_node(node, 1, 'n')
        reading = ForceResistance(origin=_vector(_child_node(node, 2, 'c')), force=_vector(_child_node(node, 3, 'f')))

        if len(name) != 2:
            raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))
        if name[1] == FootId.LEFT.value:
            snapshot.foot_left = reading
        elif name[1] == FootId.RIGHT.value:
            snapshot.foot_right = reading
        else:
            raise PerceptorConversionError(labels.DECODER_UNKNOWN_FOOT.format(name[1]))

    def _parse_vision(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (See (G1L (pol 9.5 -33.1 1.9)) (B (pol 2.1 5.0 -12.3)) (L (pol ..) (pol ..)) (P (team A) (id 2) (head (pol ..))))
        for detection in node[1:]:
            if not isinstance(detection, SymbolNode) or detection.tag is None:
                raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))

            # every detection is decoded on its own, a "nan" in one of them only hides that one
            try:
                self._parse_detection(detection, snapshot)
            except PerceptorConversionError as e:
                log.warning(labels.DECODER_DETECTION_SKIPPED.format(detection.tag, e))

    def _parse_detection(self, detection: SymbolNode, snapshot: SensorSnapshot) -> None:
        tag = detection.tag

        if tag == 'B':
            snapshot.ball = _polar(detection[1] if len(detection) > 1 else None)
        elif tag == 'L':
            if len(detection) != 3:
                raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(detection))
            snapshot.lines.append(LineDetection(start=_polar(detection[1]), end=_polar(detection[2])))
        elif tag == 'P':
            player = self._parse_player(detection)
            if not self._is_self(player):
                snapshot.players.append(player)
        elif tag.startswith('G'):
            try:
                goal_post = GoalPostId(tag)
            except ValueError:
                raise PerceptorConversionError(labels.DECODER_UNKNOWN_LANDMARK.format(tag))
            snapshot.goal_posts[goal_post] = _polar(detection[1] if len(detection) > 1 else None)
        elif tag.startswith('F'):
            try:
                flag = FlagId(tag)
            except ValueError:
                raise PerceptorConversionError(labels.DECODER_UNKNOWN_LANDMARK.format(tag))
            snapshot.flags[flag] = _polar(detection[1] if len(detection) > 1 else None)

    def _parse_player(self, node: SymbolNode) -> PlayerDetection:
        player = PlayerDetection()

        for parameter in node[1:]:
            if not isinstance(parameter, SymbolNode) or parameter.tag is None:
                raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))

            if parameter.tag in ('team', 'id'):
                if len(parameter) != 2 or not isinstance(parameter[1], str):
                    raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(parameter))
                if parameter.tag == 'team':
                    player.team = parameter[1]
                else:
                    player.id = parameter[1]
            elif parameter.tag == 'pol':
                player.body_parts[UNNAMED_BODY_PART] = _polar(parameter)
            elif len(parameter) == 2:
                player.body_parts[parameter.tag] = _polar(parameter[1])
            else:
                raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(parameter))

        return player

    def _is_self(self, player: PlayerDetection) -> bool:
        if self._own_team is None or self._own_id is None:
            return False
        if player.team is None or player.id is None:
            return False
        return player.team + player.id == self._own_team + self._own_id

    def _parse_hear(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (hear 12.3 -30.5 hello world) or (hear 12.3 self hello)
        if len(node) < 4:
            raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))
        if node[2] == SELF_SPEAKER:
            return

        words = node[3:]
        if not all(isinstance(word, str) for word in words):
            raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))

        snapshot.hears.append(
            HearMessage(time=_to_float(node[1]), direction=math.radians(_to_float(node[2])), text=' '.join(words))
        )

    def _parse_game_state(self, node: SymbolNode, snapshot: SensorSnapshot) -> None:
        # (GS (t 0.00) (pm BeforeKickOff)), with (unum 1) and (team left) in the first message
        game_time = 0.0
        play_mode = PlayMode.NONE
        unum = None
        team = None

        for entry in node[1:]:
            if not isinstance(entry, SymbolNode) or len(entry) != 2 or not isinstance(entry[1], str):
                raise PerceptorConversionError(labels.DECODER_MALFORMED_NODE.format(node))

            if entry.tag == 't':
                game_time = _to_float(entry[1])
            elif entry.tag == 'pm':
                play_mode = PlayMode.from_server_string(entry[1])
            elif entry.tag == 'unum':
                try:
                    unum = int(entry[1])
                except ValueError:
                    raise PerceptorConversionError(labels.DECODER_NOT_A_NUMBER.format(entry[1]))
            elif entry.tag == 'team':
                team = entry[1]

        snapshot.game_state = GameState(play_mode=play_mode, game_time=game_time, unum=unum, team=team)
