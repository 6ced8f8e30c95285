import numpy as np

from naobridge import constants, labels
from naobridge.configuration import JointName
from naobridge.logger import Logger

log = Logger().setup_logger('Effector')


class EffectorOutput:
    """
    Collects the actuator commands of one cycle and sends them as a single message.

    The message holds one (<effector id> <rad/s>) fragment per commanded joint in joint order, an optional
    (say <text>) fragment and always ends with the acknowledgement token. Commands are cleared after every flush.
    """

    def __init__(self, transport=None):
        self._transport = transport
        self._joint_commands: dict[JointName, float] = {}
        self._say_message: str | None = None

    def set_joint_command(self, joint: JointName, velocity: float) -> None:
        """Set the angular velocity of one joint, in radians per second."""
        self._joint_commands[joint] = float(velocity)

    def set_all_joint_commands(self, velocities) -> None:
        """Set the angular velocities of all joints from a vector in joint order."""
        velocities = np.asarray(velocities, dtype=float)
        if velocities.shape != (constants.JOINT_COUNT,):
            raise ValueError(labels.EFFECTOR_WRONG_VECTOR_SIZE.format(constants.JOINT_COUNT, velocities.shape))

        for joint, velocity in zip(JointName, velocities):
            self._joint_commands[joint] = float(velocity)

    def set_say_message(self, text: str | None) -> None:
        if text is not None and len(text) > constants.SAY_MAX_LENGTH:
            log.warning(labels.EFFECTOR_SAY_TRUNCATED.format(text, constants.SAY_MAX_LENGTH))
            text = text[: constants.SAY_MAX_LENGTH]
        self._say_message = text

    def build_message(self) -> str:
        fragments = [
            f'({joint.effector_id} {self._joint_commands[joint]!r})' for joint in JointName if joint in self._joint_commands
        ]
        if self._say_message:
            fragments.append(f'(say {self._say_message})')
        fragments.append(constants.SYNC_TOKEN)
        return ''.join(fragments)

    def clear(self) -> None:
        self._joint_commands.clear()
        self._say_message = None

    def flush(self) -> str:
        """
        Send the collected commands to the server and clear them.

        Returns:
            str: The message that was sent.

        Raises:
            TransportError: If sending fails.
        """
        message = self.build_message()
        self._transport.send_message(message)
        self.clear()
        return message
