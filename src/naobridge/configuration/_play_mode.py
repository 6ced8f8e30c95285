from enum import Enum


class PlayMode(Enum):
    """Play modes sent by the game state perceptor."""

    BEFORE_KICK_OFF = 'beforekickoff'
    KICK_OFF_LEFT = 'kickoff_left'
    KICK_OFF_RIGHT = 'kickoff_right'
    PLAY_ON = 'playon'
    KICK_IN_LEFT = 'kickin_left'
    KICK_IN_RIGHT = 'kickin_right'
    CORNER_KICK_LEFT = 'corner_kick_left'
    CORNER_KICK_RIGHT = 'corner_kick_right'
    GOAL_KICK_LEFT = 'goal_kick_left'
    GOAL_KICK_RIGHT = 'goal_kick_right'
    OFFSIDE_LEFT = 'offside_left'
    OFFSIDE_RIGHT = 'offside_right'
    GAME_OVER = 'gameover'
    GOAL_LEFT = 'goal_left'
    GOAL_RIGHT = 'goal_right'
    FREE_KICK_LEFT = 'free_kick_left'
    FREE_KICK_RIGHT = 'free_kick_right'
    NONE = 'none'
    UNKNOWN = 'unknown'

    @staticmethod
    def from_server_string(mode: str) -> "PlayMode":
        """
        Map a play mode string of the server, like "BeforeKickOff", to the enum.

        The comparison ignores the case. Unknown modes map to PlayMode.UNKNOWN.
        """
        try:
            return PlayMode(mode.lower())
        except ValueError:
            return PlayMode.UNKNOWN
