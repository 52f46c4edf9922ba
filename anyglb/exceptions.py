"""Custom exceptions for model conversion"""

from typing import Optional


class AnyGlbError(Exception):
    """Base exception for anyglb errors"""
    pass


class ArgumentError(AnyGlbError, ValueError):
    """Invalid argument passed by the caller (bad path, bad options)"""
    pass


class PathError(ArgumentError):
    """Input or output path failed validation"""
    pass


class OptionsError(ArgumentError):
    """Options argument or one of its properties is invalid"""
    pass


class ConversionError(AnyGlbError):
    """The conversion backend could not produce a GLB"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class BlenderNotFoundError(ConversionError):
    """Blender is required for this format but could not be located"""
    pass
