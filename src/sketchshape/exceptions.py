"""Exception hierarchy for Sketchshape."""


class SketchShapeError(Exception):
    """Base exception for all Sketchshape errors."""

    pass


class ImageError(SketchShapeError):
    """Errors related to image loading or pixel buffers."""

    pass


class ImageLoadError(ImageError):
    """Error loading an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ImageFormatError(ImageError):
    """Pixel data does not match the declared dimensions or layout."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid pixel buffer: {details}")


class RenderError(SketchShapeError):
    """Debug overlay could not be rendered."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Debug overlay rendering failed: {reason}")


class ProcessingCancelledError(SketchShapeError):
    """Batch classification was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
