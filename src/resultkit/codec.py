"""Tagged JSON codec for results.

A result is encoded as a two-field object::

    {"status": "ok", "value": 42}
    {"status": "error", "value": "not found"}

Payloads go through pydantic ``TypeAdapter``s built for the Ok and Error payload
types, so any type pydantic can validate and dump works as a payload. Field
names follow ``CodecConfig``; the status tokens never change.
"""

from __future__ import annotations

from collections.abc import Mapping
import functools
import json
import logging
from typing import TYPE_CHECKING, Any, Final, Literal, get_args

from pydantic import TypeAdapter, ValidationError
from pydantic_core import core_schema

from resultkit.config import CodecConfig
from resultkit.errors import ResultFormatError
from resultkit.result import Result

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

log = logging.getLogger(__name__)

STATUS_OK: Final[str] = "ok"
STATUS_ERROR: Final[str] = "error"

DumpMode = Literal["json", "python"]


class ResultCodec[TOk, TError]:
    """Encode and decode ``Result[TOk, TError]`` as a tagged object.

    Example:
        codec = ResultCodec(int, str)
        codec.dumps(Result.ok(42))  # '{"status":"ok","value":42}'
        codec.loads('{"status":"error","value":"boom"}')  # Error('boom')
    """

    def __init__(
        self,
        ok_type: Any,
        error_type: Any,
        config: CodecConfig | None = None,
    ) -> None:
        self.ok_type = ok_type
        self.error_type = error_type
        self.config = config if config is not None else CodecConfig()
        self._ok_adapter: TypeAdapter[TOk] = TypeAdapter(ok_type)
        self._error_adapter: TypeAdapter[TError] = TypeAdapter(error_type)
        self._status_key, self._value_key = self.config.field_names()

    def encode(
        self, result: Result[TOk, TError], *, mode: DumpMode = "json"
    ) -> dict[str, Any]:
        """Return the tagged object for ``result``.

        ``mode="json"`` yields JSON-compatible payloads; ``"python"`` keeps
        pydantic's Python-mode dump.
        """
        if result.is_ok:
            status = STATUS_OK
            payload = self._ok_adapter.dump_python(result.value, mode=mode)
        else:
            status = STATUS_ERROR
            payload = self._error_adapter.dump_python(result.value, mode=mode)
        return {self._status_key: status, self._value_key: payload}

    def decode(self, data: Any) -> Result[TOk, TError]:
        """Build a result from a tagged object.

        Raises:
            ResultFormatError: If ``data`` is not a mapping, a field is missing,
                the status is unknown, or the payload fails validation.
        """
        if not isinstance(data, Mapping):
            raise ResultFormatError(
                f"Expected a tagged object, got {type(data).__name__}: {data!r}",
                hint=f"Encode results as {{{self._status_key!r}: ..., {self._value_key!r}: ...}}.",
            )
        if self._status_key not in data:
            raise ResultFormatError(
                f"Invalid status property: missing {self._status_key!r} in {dict(data)!r}"
            )
        if self._value_key not in data:
            raise ResultFormatError(
                f"Invalid value property: missing {self._value_key!r} in {dict(data)!r}"
            )

        status = data[self._status_key]
        raw = data[self._value_key]
        if status == STATUS_OK:
            return Result.ok(self._validate(self._ok_adapter, raw, STATUS_OK))
        if status == STATUS_ERROR:
            return Result.error(self._validate(self._error_adapter, raw, STATUS_ERROR))
        raise ResultFormatError(
            f"Invalid status {status!r}",
            hint=f"Expected {STATUS_OK!r} or {STATUS_ERROR!r}.",
        )

    def dumps(self, result: Result[TOk, TError]) -> str:
        """Encode ``result`` as compact JSON text."""
        return json.dumps(self.encode(result, mode="json"), separators=(",", ":"))

    def loads(self, text: str | bytes) -> Result[TOk, TError]:
        """Parse JSON text and decode it."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ResultFormatError(f"Invalid JSON: {exc.msg} at position {exc.pos}") from exc
        except UnicodeDecodeError as exc:
            raise ResultFormatError(
                f"Invalid JSON: {exc.reason} at position {exc.start}",
                hint="JSON bytes must be UTF-8, UTF-16 or UTF-32 encoded.",
            ) from exc
        return self.decode(data)

    def _validate(self, adapter: TypeAdapter[Any], raw: Any, side: str) -> Any:
        try:
            return adapter.validate_python(raw)
        except ValidationError as exc:
            log.debug("Rejected %s payload %r: %s", side, raw, exc)
            raise ResultFormatError(
                f"Invalid {side} payload {raw!r}: {exc.error_count()} validation error(s)",
                hint=str(exc),
            ) from exc

    def __repr__(self) -> str:
        return (
            f"ResultCodec(ok_type={self.ok_type!r}, error_type={self.error_type!r}, "
            f"fields={(self._status_key, self._value_key)!r})"
        )


@functools.lru_cache(maxsize=256)
def codec_for(
    ok_type: Any, error_type: Any, config: CodecConfig | None = None
) -> ResultCodec[Any, Any]:
    """Return the codec for a payload-type pair, building it on first use.

    Codecs are immutable, so one instance per ``(ok_type, error_type, config)``
    is shared by every caller.
    """
    log.debug("Building result codec for (%r, %r)", ok_type, error_type)
    return ResultCodec(ok_type, error_type, config)


def result_core_schema(
    source: Any, handler: GetCoreSchemaHandler
) -> core_schema.CoreSchema:
    """Pydantic core schema for ``Result[TOk, TError]`` fields and adapters.

    Payload types come from the subscripted generic; a bare ``Result`` treats
    both payloads as ``Any``.
    """
    del handler
    args = get_args(source)
    ok_type, error_type = args if len(args) == 2 else (Any, Any)
    codec = codec_for(ok_type, error_type)

    def validate(data: Any) -> Result[Any, Any]:
        if isinstance(data, Result):
            return data
        return codec.decode(data)

    def serialize(
        result: Result[Any, Any], info: core_schema.SerializationInfo
    ) -> dict[str, Any]:
        return codec.encode(result, mode="json" if info.mode_is_json() else "python")

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            serialize, info_arg=True
        ),
    )
