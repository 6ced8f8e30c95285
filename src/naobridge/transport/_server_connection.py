import socket
import struct

from naobridge import constants, labels
from naobridge.exceptions import TransportError
from naobridge.logger import Logger

log = Logger().setup_logger('Transport')


class ServerConnection:
    """
    TCP connection to the simulation server.

    Every message in both directions is a frame: the payload length as a 4 byte big-endian unsigned integer,
    followed by the payload. receive_frame() is the only blocking call of the agent, the server paces the
    whole control loop with it.
    """

    def __init__(self, sock: socket.socket | None = None):
        """
        Args:
            sock (socket.socket, optional): An already connected socket. When omitted, call connect().
        """
        self._socket = sock

    @property
    def connected(self) -> bool:
        return self._socket is not None

    def connect(self, host: str = constants.DEFAULT_HOST, port: int = constants.DEFAULT_PORT) -> None:
        """
        Open the TCP connection.

        Raises:
            TransportError: If the server cannot be reached.
        """
        log.info(labels.TRANSPORT_CONNECTING.format(host, port))
        try:
            self._socket = socket.create_connection((host, port))
            self._socket.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        except OSError as e:
            log.error(labels.TRANSPORT_CONNECT_FAILED.format(host, port, e))
            raise TransportError(labels.TRANSPORT_CONNECT_FAILED.format(host, port, e)) from e
        log.info(labels.TRANSPORT_CONNECTED.format(host, port))

    def close(self) -> None:
        if self._socket is None:
            return
        try:
            self._socket.close()
        finally:
            self._socket = None
            log.info(labels.TRANSPORT_CLOSED)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def send_frame(self, payload: bytes) -> None:
        """
        Send one frame.

        Raises:
            TransportError: If the socket is closed or the write fails.
        """
        if self._socket is None:
            raise TransportError(labels.TRANSPORT_NOT_CONNECTED)

        header = struct.pack(constants.FRAME_HEADER_FORMAT, len(payload))
        try:
            self._socket.sendall(header + payload)
        except OSError as e:
            log.error(labels.TRANSPORT_SEND_FAILED.format(e))
            raise TransportError(labels.TRANSPORT_SEND_FAILED.format(e)) from e

    def send_message(self, message: str) -> None:
        log.debug(labels.TRANSPORT_SENDING.format(message))
        self.send_frame(message.encode(constants.MESSAGE_ENCODING))

    def receive_frame(self) -> bytes | None:
        """
        Block until a complete frame has arrived.

        Returns:
            bytes: The payload, or None if the server closed the connection.

        Raises:
            TransportError: If reading from the socket fails.
        """
        if self._socket is None:
            raise TransportError(labels.TRANSPORT_NOT_CONNECTED)

        header = self._receive_exactly(constants.FRAME_HEADER_SIZE)
        if header is None:
            return None

        (length,) = struct.unpack(constants.FRAME_HEADER_FORMAT, header)
        return self._receive_exactly(length)

    def receive_message(self) -> str | None:
        payload = self.receive_frame()
        if payload is None:
            return None
        return payload.decode(constants.MESSAGE_ENCODING)

    def _receive_exactly(self, size: int) -> bytes | None:
        chunks = []
        remaining = size

        while remaining > 0:
            try:
                chunk = self._socket.recv(remaining)
            except OSError as e:
                log.error(labels.TRANSPORT_RECEIVE_FAILED.format(e))
                raise TransportError(labels.TRANSPORT_RECEIVE_FAILED.format(e)) from e

            if not chunk:
                log.warning(labels.TRANSPORT_CLOSED_BY_PEER)
                return None

            chunks.append(chunk)
            remaining -= len(chunk)

        return b''.join(chunks)

    def initialize_robot(self, agent_id, team: str, x: float, y: float, rotation: float) -> None:
        """
        Register the agent at the server and place it on the field.

        The scene, the identity and the starting pose are sent in turn, each followed by the acknowledgement
        token. Afterwards the server is given SETTLE_CYCLES empty cycles to let the inertial sensors settle.

        Args:
            agent_id: Player number of the agent.
            team (str): Team name.
            x (float): Starting position on the field, in meters.
            y (float): Starting position on the field, in meters.
            rotation (float): Starting orientation, in degrees.

        Raises:
            TransportError: If the connection fails during the handshake.
        """
        log.info(labels.TRANSPORT_HANDSHAKE_SCENE.format(constants.SCENE_PATH))
        self.send_message(f'(scene {constants.SCENE_PATH}){constants.SYNC_TOKEN}')
        self._expect_frame()

        log.info(labels.TRANSPORT_HANDSHAKE_INIT.format(agent_id, team))
        self.send_message(f'(init (unum {agent_id})(teamname {team})){constants.SYNC_TOKEN}')
        self._expect_frame()

        log.info(labels.TRANSPORT_HANDSHAKE_BEAM.format(x, y, rotation))
        self.send_message(f'(beam {x} {y} {rotation}){constants.SYNC_TOKEN}')

        for _ in range(constants.SETTLE_CYCLES):
            self._expect_frame()
            self.send_message(constants.SYNC_TOKEN)

        log.info(labels.TRANSPORT_HANDSHAKE_DONE.format(constants.SETTLE_CYCLES))

    def _expect_frame(self) -> bytes:
        frame = self.receive_frame()
        if frame is None:
            raise TransportError(labels.TRANSPORT_CLOSED_BY_PEER)
        return frame
