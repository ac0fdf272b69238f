"""
Seed geometry and tuning constants for curve paths.
"""

import numpy as np

# Unit offsets in the path's local 2D frame
LEFT = np.array([-1.0, 0.0])
RIGHT = np.array([1.0, 0.0])
UP = np.array([0.0, 1.0])

# Seeded controls sit halfway along (side ± up)
SEED_CONTROL_SCALE = 0.5

# Auto-set places each control at this fraction of the distance to its neighbor anchor
AUTO_SET_HANDLE_SCALE = 0.5

# Vectors shorter than this normalize to zero
NORMALIZE_EPSILON = 1e-5

# Rendering / editing defaults
DEFAULT_SAMPLES_PER_SEGMENT = 20
DEFAULT_HISTORY_LIMIT = 100

# Points per segment group (anchor, control, control)
POINTS_PER_GROUP = 3
