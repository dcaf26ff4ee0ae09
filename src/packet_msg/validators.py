"""
Field validators.

Each validator takes the field and the message it belongs to (which may be
None) and returns "" or a problem description. Validators never change the
value; an empty value is accepted by every validator here, since emptiness
is governed by the field's required flag.
"""

import re
from datetime import datetime
from typing import Any, Callable

# The date, time, number and phone patterns are the ones PackItForms uses.
DATE_RE = re.compile(r"^(0[1-9]|1[012])/(0[1-9]|1[0-9]|2[0-9]|3[01])/[1-2][0-9][0-9][0-9]$")
TIME_RE = re.compile(r"^(?:([01][0-9]|2[0-3]):?[0-5][0-9]|2400|24:00)$")
PHONE_NUMBER_RE = re.compile(r"^[a-zA-Z ]*([+][0-9]+ )?[0-9][0-9 -]*([xX][0-9]+)?$")
MESSAGE_NUMBER_RE = re.compile(r"^(?:[0-9][A-Z]{2}|[A-Z][A-Z0-9]{2})-(?:[1-9][0-9]{3,}|[0-9]{3})[MPR]?$")
FCC_CALL_SIGN_RE = re.compile(r"^[AKNW][A-Z]?[0-9][A-Z]{1,3}$")
TACTICAL_CALL_SIGN_RE = re.compile(r"^[A-Z][A-Z0-9]{2,5}$")

DATE_FORMAT = "%m/%d/%Y"
TIME_FORMAT = "%H:%M"


def _invalid(field: Any, kind: str) -> str:
    return f"{field.value!r} is not a valid {kind} value for the {field.label!r} field."


def validate_date(field: Any, _message: Any = None) -> str:
    if field.value and not DATE_RE.match(field.value):
        return _invalid(field, "date")
    return ""


def validate_time(field: Any, _message: Any = None) -> str:
    if field.value and not TIME_RE.match(field.value):
        return _invalid(field, "time")
    return ""


def validate_phone_number(field: Any, _message: Any = None) -> str:
    if field.value and not PHONE_NUMBER_RE.match(field.value):
        return _invalid(field, "phone number")
    return ""


def validate_message_number(field: Any, _message: Any = None) -> str:
    """Message numbers look like XXX-###S: a three-character prefix, a
    sequence number of three or more digits, and an optional M, P or R."""
    if field.value and not MESSAGE_NUMBER_RE.match(field.value):
        return _invalid(field, "message number")
    return ""


def validate_fcc_call_sign(field: Any, _message: Any = None) -> str:
    if field.value and not FCC_CALL_SIGN_RE.match(field.value):
        return _invalid(field, "FCC call sign")
    return ""


def validate_call_sign(field: Any, _message: Any = None) -> str:
    """Accept an FCC call sign or a tactical call sign."""
    if field.value and not (FCC_CALL_SIGN_RE.match(field.value) or TACTICAL_CALL_SIGN_RE.match(field.value)):
        return _invalid(field, "call sign")
    return ""


def validate_choices(field: Any, _message: Any = None) -> str:
    choices = field.definition.choices
    if field.value and choices is not None and field.value not in choices:
        return f"{field.value!r} is not one of the allowed values for the {field.label!r} field."
    return ""


def validate_unknown_field(field: Any, message: Any = None) -> str:
    if message is None:
        return f"The form has a value for an unknown field {field.tag!r}."
    return f"This form has a field {field.tag!r}, which is not defined for {message.message_type.tag} forms."


def both_or_neither(other_tag: str) -> Callable[[Any, Any], str]:
    """Validator requiring this field and other_tag to be both set or both empty."""

    def validate(field: Any, message: Any = None) -> str:
        if message is None:
            return ""
        other = message.field(other_tag)
        if other is None or (other.value == "") == (field.value == ""):
            return ""
        if field.value:
            return f"The {field.label!r} field is set but the {other.label!r} field is not."
        return f"The {other.label!r} field is set but the {field.label!r} field is not."

    return validate


def default_date() -> str:
    return datetime.now().strftime(DATE_FORMAT)


def default_time() -> str:
    return datetime.now().strftime(TIME_FORMAT)


def default_timestamp() -> str:
    return datetime.now().strftime(f"{DATE_FORMAT} {TIME_FORMAT}")
