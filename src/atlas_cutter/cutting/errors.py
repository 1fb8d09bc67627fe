"""Exceptions raised while cutting an atlas image into parts."""


class CutError(Exception):
    """Error cutting the atlas image."""
    pass


class SizeMismatchError(CutError):
    """Declared atlas size differs from the decoded image size."""
    pass


class CropBoundsError(CutError):
    """A part's crop rectangle does not fit inside the image."""
    pass
