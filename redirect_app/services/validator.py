"""
Payload validation for aliases and URLs.

A ValidationRules object names which checks apply to a field; validate()
runs them against the raw input and returns one message per failed rule.
Nothing here touches storage.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from redirect_app.services.exceptions import ValidationFailed

ALIAS_MAX_LENGTH = 50
URL_MAX_LENGTH = 2048

ERR_EMPTY = "can not be empty"
ERR_MAX_LENGTH = "max length is"
ERR_CHARACTERS = "allowed characters are alphanumeric and hyphens"
ERR_URL_SCHEMA = (
    "has to start with 'http://' or 'https://' "
    "and does not contain any whitespaces"
)

_VALID_CHARACTERS = re.compile(r"[A-Za-z0-9_-]*")
_URL_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class ValidationRules:
    """Which checks apply to a value. Checks run in field order."""
    not_empty: bool = False
    max_length: Optional[int] = None
    valid_characters: bool = False
    has_url_schema: bool = False


ALIAS_RULES = ValidationRules(
    not_empty=True,
    max_length=ALIAS_MAX_LENGTH,
    valid_characters=True,
)

URL_RULES = ValidationRules(
    not_empty=True,
    max_length=URL_MAX_LENGTH,
    has_url_schema=True,
)


def _url_schema_ok(value: str) -> bool:
    # Prefix check short-circuits, so the message is reported at most once
    if not value.startswith(_URL_PREFIXES):
        return False
    return not any(c.isspace() for c in value)


def validate(value: str, rules: ValidationRules) -> List[str]:
    """
    Check value against rules.
    
    Returns:
        Violation messages in rule order; empty if the value is valid
    """
    errors = []
    
    if rules.not_empty and len(value) == 0:
        errors.append(ERR_EMPTY)
    
    if rules.max_length is not None and len(value) > rules.max_length:
        errors.append(f"{ERR_MAX_LENGTH} {rules.max_length}")
    
    if rules.valid_characters and not _VALID_CHARACTERS.fullmatch(value):
        errors.append(ERR_CHARACTERS)
    
    if rules.has_url_schema and not _url_schema_ok(value):
        errors.append(ERR_URL_SCHEMA)
    
    return errors


def ensure_valid(field: str, value: str, rules: ValidationRules) -> None:
    """Raise ValidationFailed listing every violated rule for field"""
    errors = validate(value, rules)
    if errors:
        raise ValidationFailed(field, errors)
