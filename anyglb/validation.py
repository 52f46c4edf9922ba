"""
Argument validation for file paths

Error messages follow one pattern so callers (and tests) can match on them:
"<function>(): Invalid <argument> argument ...", then the rule that failed.
"""

import re
from typing import Any, Mapping

from anyglb.exceptions import PathError
from anyglb.formats import INPUT_FORMATS, OUTPUT_EXTENSION, InputFormat

MAX_PATH_LENGTH = 1000

INPUT = "input"
OUTPUT = "output"

# exFAT disallows < > : " / \ | ? * plus control characters U+0000 to U+001F.
# Separators are allowed in paths, only bare filenames reject them.
_INVALID_CHARS = re.compile(r'[<>:"|?*\x00-\x1f]')
_EXTENSION = re.compile(r"\.([A-Za-z0-9]{1,9})$")


def validate_path(
    fn_name: str,
    arg_name: str,
    path: Any,
    role: str,
    input_formats: Mapping[str, InputFormat] = INPUT_FORMATS,
) -> None:
    """
    Validate a file path argument.

    Args:
        fn_name: Name of the public function being validated, used in messages
        arg_name: Name of the argument being validated, e.g. 'input_path'
        path: The value to check
        role: 'input' (any supported model format) or 'output' (must be .glb)
        input_formats: Table of supported input formats

    Raises:
        PathError: If any rule is violated
    """
    xpx = f"{fn_name}(): Invalid {arg_name} argument"

    if role not in (INPUT, OUTPUT):
        raise ValueError(f"Unknown path role: {role!r}")

    # Should be a string, non-empty, max length 1000.
    if not isinstance(path, str):
        raise PathError(f"{xpx} type '{type(path).__name__}', should be 'str'")
    if len(path) == 0:
        raise PathError(f"{xpx} is an empty string, should be a valid file path")
    if len(path) > MAX_PATH_LENGTH:
        raise PathError(
            f"{xpx} length {len(path)} exceeds maximum of {MAX_PATH_LENGTH} characters"
        )

    if _INVALID_CHARS.search(path):
        raise PathError(f"{xpx} '{path}' contains invalid characters for file paths")

    ext = extension_of(path)
    if ext is None:
        raise PathError(f"{xpx} has no valid file extension")

    if role == OUTPUT and ext != OUTPUT_EXTENSION:
        raise PathError(
            f"{xpx} extension '.{ext}' is not supported, should be '.{OUTPUT_EXTENSION}'"
        )
    if role == INPUT and ext not in input_formats:
        raise PathError(f"{xpx} extension '.{ext}' is not a supported 3D model format")


def validate_filename(
    fn_name: str,
    filename: Any,
    input_formats: Mapping[str, InputFormat] = INPUT_FORMATS,
) -> None:
    """Validate a bare model filename, which must not contain path separators"""
    validate_path(fn_name, "filename", filename, INPUT, input_formats)
    if "/" in filename or "\\" in filename:
        raise PathError(
            f"{fn_name}(): Invalid filename argument '{filename}' "
            f"should not include path separators \"/\" or \"\\\""
        )


def extension_of(path: str):
    """Lower-cased extension of path without the dot, or None"""
    match = _EXTENSION.search(path)
    if not match:
        return None
    return match.group(1).lower()


def basename(path: str) -> str:
    """Filename part of path, treating "/" and "\\" the same"""
    return re.split(r"[/\\]", path)[-1] or path
