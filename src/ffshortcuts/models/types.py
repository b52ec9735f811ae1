"""Operation kinds and output defaults."""

from enum import Enum

DEFAULT_OUTPUT_VIDEO = "video.mp4"  #: Default output path for video-producing operations.
DEFAULT_OUTPUT_AUDIO = "audio.mp3"  #: Default output path for audio-producing operations.


class Operation(str, Enum):
    """Supported operations, named after their CLI subcommands."""

    CLIP = "clip"
    TO_MP4 = "tomp4"
    AUDIO = "audio"
    NO_AUDIO = "noaudio"
    IMG_TO_VIDEO = "imgtovideo"
    AUDIO_TO_VIDEO = "audiotovideo"
    LOOP = "loop"
    REVERSE = "reverse"
    SCALE = "scale"
    RESIZE = "resize"
    FPS = "fps"
    SPEED = "speed"
    SPEED_VIDEO = "speedvideo"
    SPEED_AUDIO = "speedaudio"
    GRAYSCALE = "grayscale"
    INVERT = "invert"
    CONTRAST = "contrast"

    @property
    def produces_audio(self) -> bool:
        """Whether the operation writes an audio-only file."""
        return self in AUDIO_OPERATIONS

    @property
    def default_output(self) -> str:
        """Output file used when ``--output`` is not given."""
        return DEFAULT_OUTPUT_AUDIO if self.produces_audio else DEFAULT_OUTPUT_VIDEO


AUDIO_OPERATIONS: set[Operation] = {Operation.AUDIO, Operation.SPEED_AUDIO}


__all__ = [
    "AUDIO_OPERATIONS",
    "DEFAULT_OUTPUT_AUDIO",
    "DEFAULT_OUTPUT_VIDEO",
    "Operation",
]
