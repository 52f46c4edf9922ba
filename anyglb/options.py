"""Conversion options: defaults, merging and validation"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

from anyglb.exceptions import OptionsError

DEFAULT_NOTICE_LEVEL = 2  # info, warnings and errors
NOTICE_LEVELS = (1, 2, 3, 4)


class ConversionOptions(BaseModel):
    """
    Resolved options for one conversion run.

    notice_level controls which notices are reported:
        1: debug, info, warnings and errors
        2: info, warnings and errors (default)
        3: warnings and errors
        4: errors only
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    notice_level: int = Field(DEFAULT_NOTICE_LEVEL, description="Minimum notice tier to report (1-4).")


DEFAULTS: Dict[str, Any] = ConversionOptions().model_dump()


def resolve_options(fn_name: str, options: Any) -> ConversionOptions:
    """
    Merge caller options over the defaults and validate the result.

    Args:
        fn_name: Name of the public function being validated, used in messages
        options: A mapping of option names to values, or a ConversionOptions

    Returns:
        ConversionOptions: The validated, defaulted options

    Raises:
        OptionsError: If options is not a mapping, or any property is invalid
    """
    if isinstance(options, ConversionOptions):
        return options

    _validate_options_object(fn_name, options)
    defaulted = {**DEFAULTS, **options}
    _validate_options_props(fn_name, defaulted)
    return ConversionOptions(**defaulted)


def _validate_options_object(fn_name: str, options: Any) -> None:
    """Just the object itself, not its properties"""
    xpx = f"{fn_name}(): Invalid"

    if options is None:
        raise OptionsError(f"{xpx} options argument is None, should be a mapping")
    if isinstance(options, (list, tuple)):
        raise OptionsError(f"{xpx} options argument is a {type(options).__name__}, should be a mapping")
    if not isinstance(options, Mapping):
        raise OptionsError(
            f"{xpx} options argument type '{type(options).__name__}', should be a mapping"
        )


def _validate_options_props(fn_name: str, defaulted: Mapping[str, Any]) -> None:
    xpx = f"{fn_name}():"

    # Only accept known option names
    for name in defaulted:
        if name not in ConversionOptions.model_fields:
            raise OptionsError(f"{xpx} options.{name} is not a recognised option name")

    notice_level = defaulted["notice_level"]
    # bool is an int subclass, but True is not a notice level
    if isinstance(notice_level, bool) or not isinstance(notice_level, int):
        raise OptionsError(
            f"{xpx} Invalid options.notice_level type '{type(notice_level).__name__}', should be 'int'"
        )
    if notice_level not in NOTICE_LEVELS:
        raise OptionsError(f"{xpx} Invalid options.notice_level should be 1, 2, 3, or 4")
