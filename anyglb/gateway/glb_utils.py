"""Checks on GLB output bytes"""

import struct

from pygltflib import GLTF2

from anyglb.exceptions import ConversionError

GLB_MAGIC = b"glTF"
GLB_VERSION = 2
_HEADER = struct.Struct("<4sII")  # magic, version, total length


def check_glb(data: bytes) -> None:
    """
    Raise ConversionError unless data is a well-formed GLB version 2 container.

    Checks the 12-byte header and that the JSON chunk parses as a glTF 2.0
    asset. Geometry is not inspected.
    """
    if len(data) < _HEADER.size:
        raise ConversionError(f"Output is {len(data)} bytes, too short for a GLB header", code="BAD_OUTPUT")
    magic, version, length = _HEADER.unpack_from(data)
    if magic != GLB_MAGIC:
        raise ConversionError(f"Output does not start with GLB magic {GLB_MAGIC!r}", code="BAD_OUTPUT")
    if version != GLB_VERSION:
        raise ConversionError(f"Output is GLB version {version}, expected {GLB_VERSION}", code="BAD_OUTPUT")
    if length != len(data):
        raise ConversionError(f"GLB header declares {length} bytes but output has {len(data)}", code="BAD_OUTPUT")

    try:
        gltf = GLTF2.load_from_bytes(data)
    except Exception as e:
        raise ConversionError(f"Output GLB could not be parsed: {e}", code="BAD_OUTPUT") from e
    if gltf.asset is None or not str(gltf.asset.version).startswith("2."):
        raise ConversionError("Output GLB asset is not glTF 2.x", code="BAD_OUTPUT")
