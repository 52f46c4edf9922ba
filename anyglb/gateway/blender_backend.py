"""
Conversion backend using Blender

Runs Blender in background mode with blender_script.py, for formats that
trimesh cannot read (FBX).
"""

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

from anyglb.exceptions import BlenderNotFoundError, ConversionError

logger = logging.getLogger(__name__)

SCRIPT_PATH = Path(__file__).parent / "blender_script.py"

INSTALL_LOCATIONS = (
    "/Applications/Blender.app/Contents/MacOS/Blender",
    "/usr/bin/blender",
    "/usr/local/bin/blender",
    "/snap/bin/blender",
)


def _candidates() -> List[Tuple[str, str]]:
    """(source, executable) pairs in lookup order, without duplicates"""
    found = []
    env_path = os.getenv("BLENDER_PATH")
    if env_path:
        found.append(("BLENDER_PATH", env_path))
    on_path = shutil.which("blender")
    if on_path:
        found.append(("PATH", on_path))
    found.extend(("install location", p) for p in INSTALL_LOCATIONS if Path(p).is_file())

    seen = set()
    unique = []
    for source, path in found:
        if path not in seen:
            seen.add(path)
            unique.append((source, path))
    return unique


def _blender_version(path: str) -> Optional[str]:
    """First line of `blender --version`, or None if path is not a working Blender"""
    try:
        result = subprocess.run([path, "--version"], capture_output=True, text=True)
    except OSError as e:
        logger.debug(f"Cannot run {path}: {e}")
        return None
    if result.returncode != 0:
        return None
    lines = result.stdout.strip().splitlines()
    return lines[0] if lines else "Blender"


def find_blender() -> Optional[str]:
    """
    Find a working Blender executable.

    Looks at BLENDER_PATH, then PATH, then common install locations, and
    returns the first candidate that answers `--version`.
    """
    for source, path in _candidates():
        version = _blender_version(path)
        if version:
            logger.info(f"Found {version} at {path} (from {source})")
            return path
        if source == "BLENDER_PATH":
            logger.warning(f"BLENDER_PATH={path} is not a working Blender, searching elsewhere")

    logger.debug("Blender not found")
    return None


def convert_with_blender(filename: str, data: bytes, blender_path: Optional[str]) -> bytes:
    """
    Convert model bytes to GLB bytes with Blender.

    The input is written to a scratch directory under its own filename so
    Blender picks the importer from the extension.

    Raises:
        BlenderNotFoundError: If blender_path is None
        ConversionError: If Blender exits with an error or writes no output
    """
    if not blender_path:
        raise BlenderNotFoundError(
            f"Blender is required to convert {filename}. "
            "Install from https://www.blender.org/download/ "
            "or set the BLENDER_PATH environment variable.",
            code="NO_BLENDER",
        )

    with tempfile.TemporaryDirectory(prefix="anyglb-") as tmpdir:
        input_path = Path(tmpdir) / filename
        output_path = Path(tmpdir) / "output.glb"
        input_path.write_bytes(data)

        cmd = [
            blender_path,
            "--background",
            "--factory-startup",
            "--python", str(SCRIPT_PATH),
            "--",
            "--input", str(input_path),
            "--output", str(output_path),
        ]
        logger.debug(f"Running: {' '.join(cmd)}")
        result = subprocess.run(cmd, capture_output=True, text=True)

        if result.returncode != 0:
            raise ConversionError(
                f"Blender failed to convert {filename}: {result.stderr.strip() or result.stdout.strip()}",
                code=f"BLENDER_EXIT_{result.returncode}",
            )
        if not output_path.exists():
            raise ConversionError(f"Blender wrote no output for {filename}", code="NO_OUTPUT")

        return output_path.read_bytes()
