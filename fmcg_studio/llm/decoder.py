import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union, overload

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from fmcg_studio.app.utils.exceptions import DecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@overload
def decode(raw_text: str, feature_label: str) -> Dict[str, Any]: ...
@overload
def decode(raw_text: str, feature_label: str, schema: Type[M]) -> M: ...


def decode(
    raw_text: str,
    feature_label: str,
    schema: Optional[Type[M]] = None,
) -> Union[Dict[str, Any], M]:
    """
    Parse model output into a JSON object, optionally validated against a schema.

    Empty text, invalid JSON, a non-object top level and a shape the schema
    rejects all raise DecodeError carrying the feature label and raw text.
    """
    if not (raw_text or "").strip():
        logger.error("Empty AI response for %s", feature_label)
        raise DecodeError(feature_label, raw_text or "")

    try:
        payload = json.loads(raw_text)
    except (ValueError, RecursionError) as e:
        logger.error("Failed to parse AI JSON for %s: %r (%s)", feature_label, raw_text[:500], e)
        raise DecodeError(feature_label, raw_text) from e

    if not isinstance(payload, dict):
        logger.error("AI JSON for %s is not an object: %r", feature_label, raw_text[:500])
        raise DecodeError(feature_label, raw_text)

    if schema is None:
        return payload

    try:
        return schema.model_validate(payload)
    except SchemaValidationError as e:
        logger.error("AI JSON for %s does not match %s: %s", feature_label, schema.__name__, e)
        raise DecodeError(feature_label, raw_text, details=e.errors(include_url=False)) from e
