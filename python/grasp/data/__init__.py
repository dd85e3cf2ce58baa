"""Readers and writers for SPMF sequence and pattern files."""

from grasp.data.spmf import SPMFParser, SPMFPatternWriter

__all__ = ["SPMFParser", "SPMFPatternWriter"]
