"""
Conversion pipeline

Runs one conversion strictly in order: validate arguments, read the input,
convert it, write the output. Argument errors raise immediately. Any failure
after that is recorded as a single error notice and ends the run.
"""

import logging
import time
from typing import Any, Callable, Optional

from anyglb.formats import INPUT_FORMATS
from anyglb.gateway import ConversionGateway, ModelConverter
from anyglb.notices import NoticeCode, NoticeLog, PipelineResult
from anyglb.options import resolve_options
from anyglb.storage import CallableStorage, LocalStorage, ReadFile, Storage, WriteFile
from anyglb.validation import INPUT, OUTPUT, basename, validate_path

logger = logging.getLogger(__name__)

Timer = Callable[[], float]


def _milliseconds() -> float:
    return time.perf_counter() * 1000.0


class ConversionPipeline:
    """
    Converts model files to GLB through a converter and a storage.

    Examples:
        >>> pipeline = ConversionPipeline()
        >>> result = pipeline.run("cube.obj", "cube.glb", {"notice_level": 2})
        >>> result.did_succeed
        True
    """

    fn_name = "run_conversion"

    def __init__(
        self,
        converter: Optional[ConversionGateway] = None,
        storage: Optional[Storage] = None,
        timer: Optional[Timer] = None,
    ):
        """
        Args:
            converter: Conversion gateway (default: a new ModelConverter)
            storage: Where files are read from and written to (default: local filesystem)
            timer: Returns the current time in milliseconds, used to time conversion
        """
        self.converter = converter if converter is not None else ModelConverter()
        self.storage = storage if storage is not None else LocalStorage()
        self.timer = timer or _milliseconds

    @property
    def input_formats(self):
        return getattr(self.converter, "input_formats", INPUT_FORMATS)

    def run(self, input_path: str, output_path: str, options: Any = None) -> PipelineResult:
        """
        Convert input_path to GLB at output_path.

        Args:
            input_path: Location of the input 3D model file
            output_path: Location to write the output GLB file
            options: Mapping of options, e.g. {"notice_level": 1}; None for defaults

        Returns:
            PipelineResult: did_succeed is False if any error notice was recorded

        Raises:
            PathError: If either path is invalid
            OptionsError: If options is invalid
        """
        fn = self.fn_name

        # Validate the input and output paths, and the options.
        validate_path(fn, "input_path", input_path, INPUT, self.input_formats)
        validate_path(fn, "output_path", output_path, OUTPUT)
        resolved = resolve_options(fn, {} if options is None else options)

        log = NoticeLog(resolved.notice_level)
        logger.info(f"Converting {input_path} -> {output_path}")

        # Read the input file.
        log.add(NoticeCode.READING, f"Reading input file {input_path}")
        try:
            input_data = self.storage.read(input_path)
        except Exception as e:
            log.add(NoticeCode.READ_FAILED, f"Error reading file at {input_path}", str(e))
            return self._finish(log)

        filename = basename(input_path)

        # Convert the model to GLB.
        log.add(NoticeCode.CONVERTING, f"Converting {filename}")
        time_before = self.timer()
        try:
            output_data = self.converter.convert(filename, bytes(input_data))
        except Exception as e:
            log.add(
                NoticeCode.CONVERT_FAILED,
                f"Error converting model {input_path} to GLB format",
                _describe(e),
            )
            return self._finish(log)
        time_ms = self.timer() - time_before
        log.add(NoticeCode.CONVERTED, f"Converted model in {time_ms:.1f} ms")

        # Write the output file.
        log.add(NoticeCode.WRITING, f"Writing output file {output_path}")
        try:
            self.storage.write(output_path, output_data)
        except Exception as e:
            log.add(
                NoticeCode.WRITE_FAILED,
                f"Error writing {len(output_data)} bytes to {output_path}",
                str(e),
            )
            return self._finish(log)

        log.add(NoticeCode.WROTE, f"Wrote {len(output_data)} bytes")
        return self._finish(log)

    @staticmethod
    def _finish(log: NoticeLog) -> PipelineResult:
        return PipelineResult(did_succeed=not log.has_errors, notices=log.notices)


def _describe(error: Exception) -> str:
    code = getattr(error, "code", None)
    if code:
        return f"{error} (error code: {code})"
    return str(error)


def run_conversion(
    input_path: str,
    output_path: str,
    options: Any = None,
    read_file: Optional[ReadFile] = None,
    write_file: Optional[WriteFile] = None,
    *,
    converter: Optional[ConversionGateway] = None,
    timer: Optional[Timer] = None,
) -> PipelineResult:
    """
    Convert a 3D model file to GLB.

    Args:
        input_path: Location of the input 3D model file
        output_path: Location to write the output GLB file
        options: Configures the conversion, e.g. {"notice_level": 1}
        read_file: Optional function to read a file, useful for testing
        write_file: Optional function to write a file, useful for testing
        converter: Conversion gateway to reuse across calls
        timer: Optional function returning the current time in milliseconds

    Returns:
        PipelineResult with did_succeed and the recorded notices

    Examples:
        >>> result = run_conversion("cube.obj", "cube.glb")
        >>> for notice in result.notices:
        ...     print(notice)
    """
    pipeline = ConversionPipeline(
        converter=converter,
        storage=CallableStorage(read_file, write_file),
        timer=timer,
    )
    return pipeline.run(input_path, output_path, options)
