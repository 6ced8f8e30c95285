from ._config import Config
from ._field_ids import BodyPartName, FlagId, FootId, GoalPostId
from ._joint_name import JointName
from ._play_mode import PlayMode

__all__ = ["Config", "JointName", "PlayMode", "GoalPostId", "FlagId", "BodyPartName", "FootId"]
