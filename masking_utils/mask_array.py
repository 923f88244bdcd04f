# masking_utils/mask_array.py
from typing import Iterator, List

from .errors import EmptyCollectionError, MaskIndexError
from .mask import Mask


class MaskCollection:
    """Ordered set of masks defined over one image. Duplicates are allowed."""

    def __init__(self, masks=None):
        self.masks: List[Mask] = list(masks) if masks is not None else []

    def __len__(self):
        return len(self.masks)

    def __iter__(self) -> Iterator[Mask]:
        return iter(self.masks)

    def __getitem__(self, idx: int) -> Mask:
        return self.get(idx)

    @property
    def is_empty(self) -> bool:
        return not self.masks

    def _check_index(self, idx):
        if not (0 <= idx < len(self.masks)):
            raise MaskIndexError(f"Index {idx} outside collection of {len(self.masks)}")

    def _check_not_empty(self):
        if not self.masks:
            raise EmptyCollectionError("Mask collection is empty")

    # ======================================================
    # Insert / remove
    # ======================================================
    def add(self, m: Mask):
        self.masks.append(m)

    def remove(self, m: Mask) -> bool:
        """Remove the first entry that *is* `m`. Returns False if absent."""
        for i, cur in enumerate(self.masks):
            if cur is m:
                del self.masks[i]
                return True
        return False

    def remove_at(self, idx: int) -> Mask:
        self._check_index(idx)
        return self.masks.pop(idx)

    def remove_last(self) -> Mask:
        self._check_not_empty()
        return self.masks.pop()

    def remove_first(self) -> Mask:
        self._check_not_empty()
        return self.masks.pop(0)

    def clear(self):
        self.masks.clear()

    # ======================================================
    # Access
    # ======================================================
    def get(self, idx: int) -> Mask:
        self._check_index(idx)
        return self.masks[idx]

    def first(self) -> Mask:
        self._check_not_empty()
        return self.masks[0]

    def last(self) -> Mask:
        self._check_not_empty()
        return self.masks[-1]
