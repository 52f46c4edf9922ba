"""
Conversion backend using trimesh

Loads the model from memory and re-exports the whole scene as GLB.
"""

import io
import logging

import trimesh

from anyglb.exceptions import ConversionError

logger = logging.getLogger(__name__)


def convert_with_trimesh(filename: str, data: bytes, extension: str) -> bytes:
    """
    Convert model bytes to GLB bytes with trimesh.

    Args:
        filename: Bare filename, used in messages
        data: Raw file content
        extension: Lower-cased file extension naming the input format

    Returns:
        bytes: GLB version 2 content

    Raises:
        ConversionError: If the model cannot be loaded, is empty, or fails to export
    """
    logger.debug(f"Loading {filename} ({len(data)} bytes) as {extension}")
    try:
        scene = trimesh.load(io.BytesIO(data), file_type=extension, force="scene")
    except Exception as e:
        raise ConversionError(f"Could not load {filename}: {e}", code="LOAD_FAILED") from e

    if scene.is_empty:
        raise ConversionError(f"No geometry found in {filename}", code="EMPTY_SCENE")

    try:
        glb = scene.export(file_type="glb")
    except Exception as e:
        raise ConversionError(f"Could not export {filename} to GLB: {e}", code="EXPORT_FAILED") from e

    if not glb:
        raise ConversionError(f"Export of {filename} produced no output", code="NO_OUTPUT")

    logger.debug(f"Exported {len(scene.geometry)} geometries from {filename}")
    return bytes(glb)
