from enum import Enum


class JointName(Enum):
    """Enum for all 22 hinge joints of the simulated Nao.

    The declaration order is the joint order used in every joint vector and every keyframe file.
    Each member carries the perceptor id, the effector id and the angle limits in degrees.
    """

    NECK_YAW = ('hj1', 'he1', -120.0, 120.0)
    NECK_PITCH = ('hj2', 'he2', -45.0, 45.0)
    LEFT_SHOULDER_PITCH = ('laj1', 'lae1', -120.0, 120.0)
    LEFT_SHOULDER_YAW = ('laj2', 'lae2', -1.0, 95.0)
    LEFT_ARM_ROLL = ('laj3', 'lae3', -120.0, 120.0)
    LEFT_ARM_YAW = ('laj4', 'lae4', -90.0, 1.0)
    LEFT_HIP_YAW_PITCH = ('llj1', 'lle1', -90.0, 1.0)
    LEFT_HIP_ROLL = ('llj2', 'lle2', -25.0, 45.0)
    LEFT_HIP_PITCH = ('llj3', 'lle3', -25.0, 100.0)
    LEFT_KNEE_PITCH = ('llj4', 'lle4', -130.0, 1.0)
    LEFT_FOOT_PITCH = ('llj5', 'lle5', -45.0, 75.0)
    LEFT_FOOT_ROLL = ('llj6', 'lle6', -45.0, 25.0)
    RIGHT_HIP_YAW_PITCH = ('rlj1', 'rle1', -90.0, 1.0)
    RIGHT_HIP_ROLL = ('rlj2', 'rle2', -45.0, 25.0)
    RIGHT_HIP_PITCH = ('rlj3', 'rle3', -25.0, 100.0)
    RIGHT_KNEE_PITCH = ('rlj4', 'rle4', -130.0, 1.0)
    RIGHT_FOOT_PITCH = ('rlj5', 'rle5', -45.0, 75.0)
    RIGHT_FOOT_ROLL = ('rlj6', 'rle6', -25.0, 45.0)
    RIGHT_SHOULDER_PITCH = ('raj1', 'rae1', -120.0, 120.0)
    RIGHT_SHOULDER_YAW = ('raj2', 'rae2', -95.0, 1.0)
    RIGHT_ARM_ROLL = ('raj3', 'rae3', -120.0, 120.0)
    RIGHT_ARM_YAW = ('raj4', 'rae4', -1.0, 90.0)

    def __init__(self, perceptor_id: str, effector_id: str, min_angle: float, max_angle: float):
        self.perceptor_id = perceptor_id
        self.effector_id = effector_id
        self.min_angle = min_angle
        self.max_angle = max_angle

    @property
    def index(self) -> int:
        """Position of the joint inside joint vectors and keyframes."""
        return _JOINT_INDEX[self]

    @staticmethod
    def from_perceptor_id(perceptor_id: str) -> "JointName":
        """
        Determine the joint from the id used in hinge joint perceptor messages, like "hj2".

        Raises:
            KeyError: If the id is not a hinge joint perceptor of the Nao.
        """
        return _BY_PERCEPTOR_ID[perceptor_id]


_JOINT_INDEX = {joint: index for index, joint in enumerate(JointName)}
_BY_PERCEPTOR_ID = {joint.perceptor_id: joint for joint in JointName}
