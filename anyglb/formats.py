"""
Supported input formats

Maps each input file extension to the conversion backend that handles it.
Adding a format means adding a row here; validation and routing read the
table rather than hardcoding extensions.
"""

from dataclasses import dataclass
from typing import Dict, Mapping

OUTPUT_EXTENSION = "glb"

TRIMESH = "trimesh"
BLENDER = "blender"


@dataclass(frozen=True)
class InputFormat:
    """A supported input format"""
    extension: str
    description: str
    backend: str


def _table(*formats: InputFormat) -> Dict[str, InputFormat]:
    return {f.extension: f for f in formats}


INPUT_FORMATS: Mapping[str, InputFormat] = _table(
    InputFormat("dae", "COLLADA", TRIMESH),
    InputFormat("fbx", "Autodesk FBX", BLENDER),
    InputFormat("glb", "glTF binary", TRIMESH),
    InputFormat("gltf", "glTF", TRIMESH),
    InputFormat("obj", "Wavefront OBJ", TRIMESH),
    InputFormat("off", "Object File Format", TRIMESH),
    InputFormat("ply", "Stanford PLY", TRIMESH),
    InputFormat("stl", "STL", TRIMESH),
)


def supported_extensions(formats: Mapping[str, InputFormat] = INPUT_FORMATS) -> list:
    """Sorted list of supported input extensions"""
    return sorted(formats)
