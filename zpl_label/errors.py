"""
ZPL Label Errors
================
"""


class LabelError(Exception):
    """Base class for label generation errors."""


class ImageDecodeError(LabelError):
    """An image element could not be loaded or decoded."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f'Cannot decode image {source}: {reason}')
