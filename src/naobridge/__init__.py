"""
naobridge - real-time bridge between an agent program and a simulated Nao robot.

Main classes:
    - ServerConnection: length-prefixed TCP transport, one frame per simulation cycle
    - PerceptionDecoder: turns a server message into a SensorSnapshot
    - EffectorOutput: collects joint velocity commands and acknowledges the cycle
    - MotionInterpolator: replays keyframe sequences as joint velocity commands
"""

__version__ = '0.1.0'
