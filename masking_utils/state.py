# masking_utils/state.py
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from app_utils.config import CrunchConfig, load_config
from app_utils.guarded_value import GuardedValue
from app_utils.logging_utils import setup_logging
from .io_ops import export_masks, load_image
from .mask import Mask
from .mask_array import MaskCollection
from .node_ops import GeneratorType, generate_nodes

logger = logging.getLogger(__name__)


class MaskingState:
    """Editing session for one image. Passed explicitly to whatever needs it."""

    def __init__(self, config: Optional[CrunchConfig] = None):
        self.config: CrunchConfig = config or CrunchConfig()

        self.path: Optional[Path] = None
        self.image_np: Optional[np.ndarray] = None
        self.masks: MaskCollection = MaskCollection()

        # writes made during regenerate() apply to the next one
        self.generator: GuardedValue[GeneratorType] = GuardedValue(self.config.generator)

        self.undo: List[Mask] = []

    def apply_config(self, config: CrunchConfig):
        self.config = config
        self.generator.write(config.generator)

    def load(self, path):
        self.path = Path(path)
        self.image_np = load_image(self.path)
        self.masks.clear()
        self.undo = []

    def _require_image(self):
        if self.image_np is None:
            raise RuntimeError("No image loaded")

    def regenerate(self, config: Optional[CrunchConfig] = None) -> MaskCollection:
        self._require_image()
        if config is not None:
            self.apply_config(config)

        gen = self.generator.read()
        with self.generator.held():
            self.masks = generate_nodes(
                gen, self.image_np.shape, self.config.grid_rows, self.config.grid_cols
            )
        self.undo = []
        logger.info(f"Generated {len(self.masks)} nodes ({gen.value})")
        return self.masks

    def remove_node(self, idx: int) -> Mask:
        m = self.masks.remove_at(idx)
        self.undo.append(m)
        return m

    def undo_remove(self) -> Optional[Mask]:
        if not self.undo:
            return None
        m = self.undo.pop()
        self.masks.add(m)
        return m

    def export(self, config: Optional[CrunchConfig] = None) -> List[Path]:
        self._require_image()
        config = config or self.config
        if self.masks.is_empty:
            logger.warning("Nothing to export.")
            return []
        return export_masks(self.image_np, self.masks, config.output_dir, config.output_prefix)


def start_session(config_path=None) -> MaskingState:
    """Load the config, set up logging at its level and open an empty session."""
    config = load_config(config_path)
    setup_logging(config.log_level)
    return MaskingState(config)
