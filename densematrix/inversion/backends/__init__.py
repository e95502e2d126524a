"""
Inversion backends.

    cpu: CPUGaussJordanBackend (NumPy)
"""

from densematrix.inversion.backends.cpu import CPUGaussJordanBackend

__all__ = ["CPUGaussJordanBackend"]
