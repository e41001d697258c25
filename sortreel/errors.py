"""Exceptions raised by the frame pipeline."""


class SortReelError(Exception):
    """Base class for sortreel errors."""
    pass


class FrameRenderError(SortReelError):
    """A spawned render/encode/write task failed.

    Attributes:
        frame: Frame number of the failed task
        original: Exception raised inside the task
    """

    def __init__(self, frame: int, original: BaseException):
        super().__init__(f"Frame {frame} failed: {original!r}")
        self.frame = frame
        self.original = original


class ConfigLoadError(SortReelError):
    """Error loading a render configuration file."""
    pass
