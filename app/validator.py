# app/validator.py

import json
from typing import Any

from pydantic import ValidationError

from app.exceptions import MalformedBodyError
from app.models import Accepted, ProductUpdated, Rejected, ValidationResult

NOT_AN_OBJECT = "Body must be a JSON object."

# Reported in this order, one message per failing field
FIELD_ERRORS = {
  "id": "id must be a non-empty string",
  "name": "name must be a non-empty string",
  "pricePence": "pricePence must be a non-negative integer",
  "description": "description must be a string",
  "updatedAt": "updatedAt must be an ISO 8601 string (YYYY-MM-DDTHH:MM:SS.sssZ)",
}

_ALIASES = {name: field.alias or name for name, field in ProductUpdated.model_fields.items()}


def _reject_constant(token: str):
  raise ValueError(f"{token} is not valid JSON")


def decode_body(raw: bytes) -> Any:
  """
  Decode a request body as UTF-8 JSON.

  Raises:
    MalformedBodyError: empty body, invalid UTF-8, invalid JSON or NaN/Infinity tokens.
  """
  try:
    return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
  except (ValueError, RecursionError) as e:
    raise MalformedBodyError() from e


def validate_payload(body: Any) -> ValidationResult:
  """
  Check a decoded body against the ProductUpdated contract.

  A non-object body is rejected with a single message. Otherwise every field is checked
  and all failures are reported together, in FIELD_ERRORS order.
  Accepted events carry the submitted values untouched.
  """
  if not isinstance(body, dict):
    return Rejected(errors=[NOT_AN_OBJECT])

  try:
    event = ProductUpdated.model_validate(body)
  except ValidationError as e:
    failed = set()
    for error in e.errors():
      field = error["loc"][0] if error["loc"] else None
      failed.add(_ALIASES.get(field, field))
    return Rejected(errors=[message for field, message in FIELD_ERRORS.items() if field in failed])

  return Accepted(event=event)
