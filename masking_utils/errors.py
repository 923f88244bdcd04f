# masking_utils/errors.py


class MaskingError(Exception):
    """Base class for every error raised by the masking core."""


class MaskIndexError(MaskingError, IndexError):
    """A row, column or collection index outside its valid range."""


class EmptyCollectionError(MaskingError, IndexError):
    """first/last/pop-style access on an empty MaskCollection."""


class OutOfBoundsError(MaskingError, ValueError):
    """A selected mask cell maps outside the source image."""


class MalformedMaskError(MaskingError, ValueError):
    """A mask grid that is empty or not rectangular."""
