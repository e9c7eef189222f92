class ImageProcessingError(Exception):
    """Pixel data could not be read or scanned."""


class ImageLoadError(ImageProcessingError):
    """The uploaded file could not be decoded into an image."""
