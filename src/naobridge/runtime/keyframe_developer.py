from naobridge import constants, labels
from naobridge.logger import Logger
from naobridge.motion import MotionInterpolator, MotionName

log = Logger().setup_logger('Keyframe developer')


class KeyframeDeveloper:
    """
    Behaviour for developing keyframe motions.

    Plays the TEST motion, waits SETTLE_CYCLES cycles to show whether the final pose is stable, and plays it
    again. Since the TEST motion is read from its file on every selection, the file can be edited in between.
    A robot found lying down is put back on its feet first.
    """

    def __init__(self, motion: MotionInterpolator, perception, wait_cycles: int = constants.SETTLE_CYCLES):
        self._motion = motion
        self._perception = perception
        self._wait_cycles = wait_cycles
        self._waiting = 0
        self._play_next = True

    def decide(self) -> None:
        if not self._motion.ready():
            return

        if self._perception.snapshot.is_lying_down:
            log.info(labels.BEHAVIOUR_STAND_UP)
            self._motion.stand_up()
            self._play_next = True
            return

        if self._play_next:
            log.info(labels.BEHAVIOUR_PLAY_TEST)
            self._motion.select_motion(MotionName.TEST)
            self._play_next = False
            self._waiting = self._wait_cycles
        elif self._waiting == 0:
            self._play_next = True
        else:
            self._waiting -= 1
