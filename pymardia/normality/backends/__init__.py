"""
Computational backends for Mardia's test.

Available backends:
    cpu: NumPy/SciPy reference implementation ('gram' and 'pairwise' methods)
"""

from pymardia.normality.backends.cpu import CPUMardiaBackend

__all__ = ["CPUMardiaBackend"]
