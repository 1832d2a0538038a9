"""Pydantic schemas for the hmpi engine.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig, ParamConfig, UserConfig : class
    Runtime, expert-default and user-facing configuration
SampleMeta, SampleInput : class
    Sample metadata and sparse concentration set
IndexValues, Classification, Result : class
    Engine output
QualityLevel, IndexName, Metal, MetalCategory : class
    Shared enumerations and the registry entry model
"""

from hmpi.schemas.resolve import resolve_config
from hmpi.schemas.internal import InternalConfig
from hmpi.schemas.param import ParamConfig
from hmpi.schemas.user import UserConfig
from hmpi.schemas.sample import SampleMeta, SampleInput
from hmpi.schemas.result import IndexValues, Classification, Result
from hmpi.schemas.levels import QualityLevel, IndexName
from hmpi.schemas.metal import Metal, MetalCategory

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'SampleMeta',
    'SampleInput',
    'IndexValues',
    'Classification',
    'Result',
    'QualityLevel',
    'IndexName',
    'Metal',
    'MetalCategory',
]
