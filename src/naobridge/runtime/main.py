#!/usr/bin/env python3

import argparse
import logging
import sys

from naobridge import labels
from naobridge.configuration import Config
from naobridge.effector import EffectorOutput
from naobridge.exceptions import TransportError
from naobridge.logger import Logger
from naobridge.motion import MotionCatalogue, MotionInterpolator
from naobridge.perception import PerceptionDecoder
from naobridge.runtime.keyframe_developer import KeyframeDeveloper
from naobridge.transport import ServerConnection

log = Logger().setup_logger()


class Agent:
    """Wires the components together and runs the sense, think, act cycle in lockstep with the server."""

    def __init__(self, connection: ServerConnection, agent_id: str, team: str, catalogue: MotionCatalogue):
        self.connection = connection
        self.agent_id = agent_id
        self.team = team

        self.perception = PerceptionDecoder(connection, own_team=team, own_id=agent_id)
        self.effector = EffectorOutput(connection)
        self.motion = MotionInterpolator(self.perception, self.effector, catalogue)
        self.behaviour = KeyframeDeveloper(self.motion, self.perception)

    def sense(self) -> bool:
        snapshot = self.perception.update()
        if snapshot.has_error:
            log.error(labels.RUNTIME_DESYNCHRONIZED.format(snapshot.parse_error))
            return False
        return True

    def think(self) -> None:
        self.behaviour.decide()

    def act(self) -> None:
        self.motion.advance()
        self.effector.flush()

    def run(self, cycles: int | None = None) -> int:
        """
        Run the control loop until the server connection ends, a message cannot be parsed or the cycle
        limit is reached.

        Returns:
            int: The number of completed cycles.
        """
        completed = 0
        log.info(labels.RUNTIME_READY)

        try:
            while cycles is None or completed < cycles:
                if not self.sense():
                    break
                self.think()
                self.act()
                completed += 1
            else:
                log.info(labels.RUNTIME_CYCLES_DONE.format(completed))
        except TransportError as e:
            log.error(labels.RUNTIME_TRANSPORT_FAILED.format(e))

        return completed


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description='NaoBridge agent for the simulated Nao robot')
    parser.add_argument('--config', help='Path of the JSON configuration file')
    parser.add_argument('--host', help='Simulation server host')
    parser.add_argument('--port', type=int, help='Simulation server port')
    parser.add_argument('--id', dest='agent_id', help='Player number')
    parser.add_argument('--team', help='Team name')
    parser.add_argument('--cycles', type=int, help='Stop after this many cycles')
    parser.add_argument('--debug', action='store_true', help='Log every motion tick')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)
    config = Config(args.config)

    if config.get(Config.LOGGING_CONSOLE):
        Logger().enable_console()
    if args.debug:
        Logger().set_level(logging.DEBUG)

    host, port = config.server_address
    host = args.host or host
    port = args.port or port
    agent_id = str(args.agent_id or config.get(Config.AGENT_ID))
    team = args.team or config.get(Config.AGENT_TEAM)
    x, y, rotation = config.beam

    log.info(labels.RUNTIME_STARTING.format(agent_id, team))
    catalogue = MotionCatalogue.from_directory(config.get(Config.MOTION_KEYFRAMES_DIRECTORY))

    connection = ServerConnection()
    try:
        connection.connect(host, port)
        connection.initialize_robot(agent_id, team, x, y, rotation)
    except TransportError:
        connection.close()
        return 1

    with connection:
        agent = Agent(connection, agent_id, team, catalogue)
        try:
            agent.run(args.cycles)
        except KeyboardInterrupt:
            log.info(labels.RUNTIME_INTERRUPTED)

    return 0


if __name__ == '__main__':
    sys.exit(main())
