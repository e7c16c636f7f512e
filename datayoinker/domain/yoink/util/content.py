"""Content codec: typed inference for raw parameters and the JSON document format.

Each raw parameter value becomes exactly one of three kinds, tried in order:

1. A finite decimal floating-point literal. Integral values are written the
   way a round-trip-minimal decimal formatter writes them, i.e. without a
   fractional part, so ``7``, ``007``, ``7.0`` and ``1e5`` are integers.
2. A 64-bit decimal integer.
3. The raw string, untouched.

Anything that is not plain decimal notation (surrounding whitespace, hex,
digit separators, ``inf``/``nan`` words) is kept as a string.
"""

import json
import math
import re
from typing import Any

from datayoinker.domain.shared.error import ContentDecodeError, MalformedContentError
from datayoinker.domain.yoink.model.value import ContentValue

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def _parse_float(raw: str) -> float | None:
    if not _DECIMAL_RE.fullmatch(raw):
        return None
    number = float(raw)
    # Overflow to infinity counts as a failed parse
    return number if math.isfinite(number) else None


def parse_int64(raw: str) -> int | None:
    """Parse plain decimal integer notation within the signed 64-bit range."""
    if not _INTEGER_RE.fullmatch(raw):
        return None
    number = int(raw, 10)
    return number if _fits_int64(number) else None


def infer_value(raw: str) -> ContentValue:
    """Infer the typed value for a single raw parameter."""
    number = _parse_float(raw)
    if number is not None:
        if not number.is_integer():
            return number
        # Integral: prefer the exact integer spelled out in the input
        exact = parse_int64(raw)
        if exact is not None:
            return exact
        as_int = int(number)
        return as_int if _fits_int64(as_int) else number

    integer = parse_int64(raw)
    if integer is not None:
        return integer

    return raw


def infer_content(params: dict[str, str]) -> dict[str, ContentValue]:
    """Infer typed values for a whole single-valued parameter mapping."""
    return {name: infer_value(raw) for name, raw in params.items()}


def encode_content(content: dict[str, ContentValue]) -> str:
    """Serialize typed content to a JSON document.

    Raises:
        MalformedContentError: If the mapping cannot form a valid document.
    """
    try:
        return json.dumps(content, allow_nan=False, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise MalformedContentError(str(e)) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def decode_content(document: str) -> dict[str, ContentValue]:
    """Parse a stored JSON document back into typed content.

    Raises:
        ContentDecodeError: If the document is not a JSON object of
            integers, floats and strings.
    """
    try:
        content = json.loads(document, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise ContentDecodeError(str(e)) from e

    if not isinstance(content, dict):
        raise ContentDecodeError(f"Expected a JSON object, got {type(content).__name__}")

    for name, value in content.items():
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ContentDecodeError(
                f"Unsupported value for '{name}': {type(value).__name__}"
            )

    return content
