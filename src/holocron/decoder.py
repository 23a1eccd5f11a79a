"""Typed decoding of normalized records into entity models.

Decoding is field by field through the target Pydantic model: upstream
snake_case names map directly onto model fields, unknown fields are ignored
and missing optional fields default to ``None``. A batch decode keeps every
record that decodes and drops the rest, so one malformed record never costs
its siblings.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import FieldDecodeError
from .log_config import logger

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode(record: Any, model: type[ModelT]) -> ModelT:
    """Decode one flat record into ``model``.

    Raises:
        FieldDecodeError: If the record is not a mapping or fails validation.
    """
    if not isinstance(record, Mapping):
        raise FieldDecodeError(
            f"Cannot decode {type(record).__name__} into {model.__name__}: expected a mapping",
            model_name=model.__name__,
            record=record,
        )
    try:
        return model.model_validate(record)
    except PydanticValidationError as e:
        raise FieldDecodeError(
            f"Record does not match {model.__name__}: {e.error_count()} invalid field(s)",
            model_name=model.__name__,
            record=record,
        ) from e


def decode_many(records: Iterable[Any], model: type[ModelT]) -> list[ModelT]:
    """Decode a batch, dropping (and logging) records that fail."""
    decoded: list[ModelT] = []
    dropped = 0
    for index, record in enumerate(records):
        try:
            decoded.append(decode(record, model))
        except FieldDecodeError as e:
            dropped += 1
            cause = e.__cause__ if e.__cause__ is not None else e
            uid = record.get("uid") if isinstance(record, Mapping) else None
            logger.warning(
                f"Dropping record #{index} (uid={uid}) that failed to decode as "
                f"{model.__name__}: {cause}"
            )
    if dropped:
        logger.info(f"Decoded {len(decoded)} {model.__name__} record(s), dropped {dropped}.")
    return decoded
