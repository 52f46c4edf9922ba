"""
Conversion gateway

ModelConverter is the handle to the conversion backends. Create one at
startup (or per test) and pass it to the pipeline; it holds no per-run
state, so one instance can serve any number of conversions.
"""

import logging
from typing import Mapping, Optional, Protocol

from anyglb.exceptions import ArgumentError, ConversionError
from anyglb.formats import BLENDER, INPUT_FORMATS, TRIMESH, InputFormat
from anyglb.gateway.blender_backend import convert_with_blender, find_blender
from anyglb.gateway.glb_utils import check_glb
from anyglb.gateway.trimesh_backend import convert_with_trimesh
from anyglb.validation import extension_of, validate_filename

logger = logging.getLogger(__name__)


class ConversionGateway(Protocol):
    """Anything that turns (filename, model bytes) into GLB bytes"""

    def convert(self, filename: str, data: bytes) -> bytes:
        ...


class ModelConverter:
    """
    Converts model file content to GLB version 2.

    Examples:
        >>> converter = ModelConverter()
        >>> glb = converter.convert("cube.obj", Path("cube.obj").read_bytes())

        Custom format table:
        >>> ModelConverter(input_formats={"obj": InputFormat("obj", "OBJ", "trimesh")})
    """

    def __init__(
        self,
        input_formats: Mapping[str, InputFormat] = INPUT_FORMATS,
        blender_path: Optional[str] = None,
    ):
        """
        Args:
            input_formats: Supported input formats and their backends
            blender_path: Blender executable; located on first use if None
        """
        self.input_formats = input_formats
        self._blender_path = blender_path
        self._blender_searched = blender_path is not None

    @property
    def blender_path(self) -> Optional[str]:
        if not self._blender_searched:
            self._blender_path = find_blender()
            self._blender_searched = True
        return self._blender_path

    def convert(self, filename: str, data: bytes) -> bytes:
        """
        Convert one model file to GLB.

        Args:
            filename: Bare filename with extension, e.g. 'cube.obj'
            data: Raw file content

        Returns:
            bytes: GLB content, exactly as the backend produced it

        Raises:
            ArgumentError: If filename or data is invalid
            ConversionError: If the backend fails or its output is not GLB v2
        """
        validate_filename("convert", filename, self.input_formats)
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise ArgumentError(
                f"convert(): Invalid data argument type '{type(data).__name__}', should be 'bytes'"
            )
        data = bytes(data)

        ext = extension_of(filename)
        backend = self.input_formats[ext].backend
        logger.debug(f"Converting {filename} with the {backend} backend")
        if backend == TRIMESH:
            glb = convert_with_trimesh(filename, data, ext)
        elif backend == BLENDER:
            glb = convert_with_blender(filename, data, self.blender_path)
        else:
            raise ConversionError(f"Unknown conversion backend '{backend}' for .{ext}", code="BAD_BACKEND")

        check_glb(glb)
        return glb
