"""Common FFmpeg command arguments."""

INPUT_FLAG: tuple[str, ...] = ("-i",)  #: Introduce an input file path.
OVERWRITE_OUTPUT: tuple[str, ...] = ("-y",)  #: Overwrite existing files.
SHORTEST: tuple[str, ...] = ("-shortest",)  #: Stop when the shortest input ends.
COPY_ALL: tuple[str, ...] = ("-c", "copy")  #: Pass every stream through without re-encoding.
