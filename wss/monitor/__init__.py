"""Proc access, smaps parsing and the sampler loop."""

from .sampler import WssSampler
from .smaps_parser import parse_smaps

__all__ = ["WssSampler", "parse_smaps"]
