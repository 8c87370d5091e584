"""resultkit: explicit, typed failure propagation with a two-variant Result.

Public API:
    - Result: Ok-or-Error value type with map/bind/zip, extraction and async combinators
    - ok(), error(), try_call(), try_call_async(): constructors
    - traverse helpers: get_ok_values, get_error_values, choose_result,
      to_single_result, to_single_result_with_all_errors
    - ResultCodec / codec_for: tagged JSON encoding, configured by CodecConfig
"""

from __future__ import annotations

import logging

from resultkit.codec import STATUS_ERROR, STATUS_OK, ResultCodec, codec_for
from resultkit.config import CodecConfig
from resultkit.errors import (
    ConfigurationError,
    InvalidCastError,
    InvalidResultError,
    ResultError,
    ResultFormatError,
)
from resultkit.extraction import Deconstructed
from resultkit.result import Result, Success, error, ok, try_call, try_call_async
from resultkit.traverse import (
    choose_result,
    get_error_values,
    get_ok_values,
    to_single_result,
    to_single_result_with_all_errors,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "STATUS_ERROR",
    "STATUS_OK",
    "CodecConfig",
    "ConfigurationError",
    "Deconstructed",
    "InvalidCastError",
    "InvalidResultError",
    "Result",
    "ResultCodec",
    "ResultError",
    "ResultFormatError",
    "Success",
    "choose_result",
    "codec_for",
    "error",
    "get_error_values",
    "get_ok_values",
    "ok",
    "to_single_result",
    "to_single_result_with_all_errors",
    "try_call",
    "try_call_async",
]
