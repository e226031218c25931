"""
Simplicial Operators Source Code
================================

Modules:
    simplicial_ops - adjacency matrices and subset algebra on triangle meshes
    tests          - Test suite

Requirements:
    Python >= 3.9
    numpy >= 1.20
    scipy >= 1.8
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"simplicial_ops requires Python >= 3.9, got {sys.version}")

# scipy version check (sparse array API: csr_array)
import scipy
_scipy_version = tuple(int(p) for p in scipy.__version__.split('.')[:2] if p.isdigit())
if _scipy_version < (1, 8):
    raise ImportError(f"simplicial_ops requires scipy >= 1.8, got {scipy.__version__}")

# numpy version check
import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"simplicial_ops requires numpy >= 1.20, got {np.__version__}")
