"""
Core pipeline machinery for fieldext.

This module contains the extender contract, the pipeline composer and the
shared pipeline configuration.
"""

from .config import PipelineConfig
from .extender import BindFn, FieldExtender, FunctionExtender, as_extender
from .pipeline import Pipeline, bind_extender, compose

__all__ = [
    "PipelineConfig",
    "FieldExtender",
    "FunctionExtender",
    "BindFn",
    "as_extender",
    "Pipeline",
    "bind_extender",
    "compose",
]
