"""
anyglb - Convert 3D models (OBJ, DAE, glTF, STL, FBX, ...) to binary GLB

A small library and CLI that validates its arguments, hands the model to a
conversion backend, and reports each step as a structured notice.
"""

__version__ = "0.0.1"

from anyglb.exceptions import (
    AnyGlbError,
    ArgumentError,
    BlenderNotFoundError,
    ConversionError,
    OptionsError,
    PathError,
)
from anyglb.formats import INPUT_FORMATS, InputFormat
from anyglb.gateway import ConversionGateway, ModelConverter
from anyglb.notices import Notice, NoticeCode, NoticeLog, PipelineResult
from anyglb.options import ConversionOptions, resolve_options
from anyglb.pipeline import ConversionPipeline, run_conversion
from anyglb.storage import CallableStorage, LocalStorage, Storage

__all__ = [
    "run_conversion",
    "ConversionPipeline",
    "ConversionGateway",
    "ModelConverter",
    "ConversionOptions",
    "resolve_options",
    "Notice",
    "NoticeCode",
    "NoticeLog",
    "PipelineResult",
    "INPUT_FORMATS",
    "InputFormat",
    "Storage",
    "LocalStorage",
    "CallableStorage",
    "AnyGlbError",
    "ArgumentError",
    "PathError",
    "OptionsError",
    "ConversionError",
    "BlenderNotFoundError",
]
