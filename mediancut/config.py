from __future__ import annotations
from dataclasses import dataclass
import argparse
import logging
import numpy as np

from .factory import VectorPointFactory
from .point import domain_bounds

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class QuantizeOptions:
    """Settings for one command line quantization run."""
    levels: int = 1
    dimensions: int = 1
    dtype: str = "float32"
    log_level: str = "INFO"

    def __post_init__(self):
        self.levels = int(self.levels)
        self.dimensions = int(self.dimensions)
        if self.dimensions < 1:
            raise ValueError(f"dimensions must be >= 1, got {self.dimensions}")
        try:
            domain_bounds(np.dtype(self.dtype))
        except TypeError as exc:
            raise ValueError(f"unsupported dtype: {self.dtype}") from exc
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "QuantizeOptions":
        return cls(
            levels=args.levels,
            dimensions=args.dimensions,
            dtype=args.dtype,
            log_level=args.log_level,
        )

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)

    def factory(self) -> VectorPointFactory:
        return VectorPointFactory(self.dimensions, np.dtype(self.dtype))
