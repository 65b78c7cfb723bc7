# sdk/resolver.py
"""
Turns a raw products response into a ParsedResult.

Accepted payloads, checked in this order:

    [ {...}, {...} ]                       legacy bare array
    {"data": [...], "count": n}            current wrapper
    {"products": [...]} / {"items": [...]} tolerated aliases

Elements that fail validation are skipped; the rest of the list survives.
Nothing here raises or logs, so it is safe to call from any request.
"""
import json
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from .models import INT32_MAX, ErrorKind, Failure, ParsedResult, Product, Success

WRAPPER_KEYS = ("data", "products", "items")
TIMEOUT_MESSAGE = "request was cancelled due to timeout"

# past this magnitude a number cannot be a price or an int32 field
MAX_DECIMAL_EXPONENT = 28


def timeout_failure() -> Failure:
    return Failure(kind=ErrorKind.TIMEOUT, message=TIMEOUT_MESSAGE)


def _fold_keys(obj: Any) -> Any:
    # case-insensitive property matching: lower every key, nested objects included
    if isinstance(obj, dict):
        return {
            (k.lower() if isinstance(k, str) else k): _fold_keys(v)
            for k, v in obj.items()
        }
    return obj


def _parse_float(text: str) -> Any:
    number = Decimal(text)
    if number.is_finite() and number.adjusted() > MAX_DECIMAL_EXPONENT:
        # keeps 1e9999999 from turning into a ten-million-digit int downstream
        return float(text)
    return number


def _reported_count(value: Any, fallback: int) -> int:
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value if 0 <= value <= INT32_MAX else fallback
    if isinstance(value, (Decimal, str)):
        try:
            number = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            return fallback
        if not number.is_finite() or not 0 <= number <= INT32_MAX:
            return fallback
        if number == number.to_integral_value():
            return int(number)
    return fallback


def parse_products(elements: List[Any]) -> Tuple[Tuple[Product, ...], int]:
    """Validate each element; returns (products, number skipped)."""
    products = []
    skipped = 0
    for element in elements:
        if not isinstance(element, dict):
            skipped += 1
            continue
        try:
            products.append(Product.model_validate(_fold_keys(element)))
        except ValidationError:
            skipped += 1
    return tuple(products), skipped


class ResponseResolver:
    def __init__(self, preview_chars: int = 200):
        self.preview_chars = preview_chars

    def classify_status(self, http_status: int) -> Optional[Failure]:
        if 200 <= http_status < 300:
            return None
        if http_status == 404:
            return Failure(kind=ErrorKind.NOT_FOUND, message="no products available")
        if http_status == 408:
            return timeout_failure()
        if 500 <= http_status < 600:
            return Failure(
                kind=ErrorKind.SERVER_ERROR,
                message=f"{http_status}: server reported an internal error",
            )
        return Failure(kind=ErrorKind.HTTP_ERROR, message=f"unexpected status {http_status}")

    def resolve(self, raw_body: Union[str, bytes, None], http_status: int) -> ParsedResult:
        failure = self.classify_status(http_status)
        if failure is not None:
            return failure

        if raw_body is None:
            text = ""
        elif isinstance(raw_body, bytes):
            text = raw_body.decode("utf-8", errors="replace")
        else:
            text = raw_body

        try:
            document = json.loads(text, parse_float=_parse_float)
        except (ValueError, RecursionError) as exc:
            return Failure(
                kind=ErrorKind.MALFORMED_JSON,
                message=f"{exc} | received: {text[:self.preview_chars]}",
            )

        if isinstance(document, list):
            items, skipped = parse_products(document)
            return Success(items=items, count=len(items), skipped=skipped)

        if isinstance(document, dict):
            return self._resolve_wrapper(_top_level(document))

        return Failure(kind=ErrorKind.UNRECOGNIZED_SHAPE, message="unexpected JSON root type")

    def _resolve_wrapper(self, document: Dict[str, Any]) -> ParsedResult:
        for key in WRAPPER_KEYS:
            elements = document.get(key)
            if isinstance(elements, list):
                items, skipped = parse_products(elements)
                count = _reported_count(document.get("count"), len(items))
                return Success(items=items, count=count, skipped=skipped)
        return Failure(
            kind=ErrorKind.UNRECOGNIZED_SHAPE,
            message="object response had none of: " + ", ".join(WRAPPER_KEYS),
        )


def _top_level(document: Dict[str, Any]) -> Dict[str, Any]:
    # only the wrapper's own keys are folded here; elements are folded one by one
    return {(k.lower() if isinstance(k, str) else k): v for k, v in document.items()}


_default = ResponseResolver()


def resolve(raw_body: Union[str, bytes, None], http_status: int) -> ParsedResult:
    return _default.resolve(raw_body, http_status)
