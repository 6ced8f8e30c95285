"""
Reading and writing keyframe sequences as text files.

One line per keyframe: the transition duration in milliseconds followed by one angle in degrees per joint, in
joint order, separated by whitespace. Blank lines and lines starting with // are skipped.
"""

from pathlib import Path

from naobridge import constants, labels
from naobridge.exceptions import KeyframeFormatError
from naobridge.logger import Logger
from naobridge.motion.models import Keyframe, KeyframeSequence

log = Logger().setup_logger('Keyframe file')


def parse_keyframe_line(line: str) -> Keyframe:
    """
    Convert one line of a keyframe file.

    Values beyond the 22nd angle are ignored, missing angles are 0.0.

    Raises:
        KeyframeFormatError: If the duration is not an integer or an angle is not a number.
    """
    values = line.split()
    if not values:
        raise KeyframeFormatError(labels.KEYFRAME_EMPTY_LINE)

    try:
        duration_ms = int(values[0])
    except ValueError as e:
        raise KeyframeFormatError(labels.KEYFRAME_BAD_DURATION.format(values[0])) from e

    try:
        angles = [float(value) for value in values[1 : constants.JOINT_COUNT + 1]]
    except ValueError as e:
        raise KeyframeFormatError(labels.KEYFRAME_BAD_ANGLE.format(line.strip())) from e

    return Keyframe(duration_ms, angles)


def format_keyframe_line(keyframe: Keyframe) -> str:
    return ' '.join([str(keyframe.duration_ms)] + [repr(float(angle)) for angle in keyframe.angles])


def read_sequence(path: Path | str, name: str | None = None) -> KeyframeSequence:
    """
    Load a keyframe sequence.

    Args:
        path: The keyframe file.
        name (str, optional): Name of the sequence, defaults to the file stem.

    Returns:
        KeyframeSequence: The loaded sequence, empty if the file does not exist.

    Raises:
        KeyframeFormatError: If a line cannot be converted. The message names the file and line number.
    """
    path = Path(path)
    name = name if name is not None else path.stem

    if not path.is_file():
        log.error(labels.KEYFRAME_FILE_MISSING.format(path))
        return KeyframeSequence(name=name)

    frames = []
    with open(path, encoding='utf-8') as keyframe_file:
        for line_number, line in enumerate(keyframe_file, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(constants.KEYFRAME_COMMENT_PREFIX):
                continue
            try:
                frames.append(parse_keyframe_line(stripped))
            except KeyframeFormatError as e:
                raise KeyframeFormatError(labels.KEYFRAME_FILE_BAD_LINE.format(path, line_number, e)) from e

    log.debug(labels.KEYFRAME_FILE_LOADED.format(name, len(frames), path))
    return KeyframeSequence(frames, name=name)


def write_sequence(path: Path | str, sequence) -> None:
    """Write a keyframe sequence, or any iterable of keyframes, in the format read_sequence() understands."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as keyframe_file:
        for keyframe in sequence:
            keyframe_file.write(format_keyframe_line(keyframe) + '\n')
