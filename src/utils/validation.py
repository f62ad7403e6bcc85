"""
Validation of submitted person form fields
"""

import re
from typing import Any, List, Mapping, Optional, Tuple

from models.enums import Gender
from models.person import PersonFields

NAME_REQUIRED = "Name is required"
AGE_REQUIRED = "Valid age is required"
GENDER_REQUIRED = "Gender is required"
MOBILE_NUMBER_REQUIRED = "Mobile number is required"

# Digits with an optional fractional part, surrounding whitespace allowed
AGE_PATTERN = re.compile(r"\s*([0-9]+)(?:\.[0-9]*)?\s*")


def _text(value: Any) -> Optional[str]:
    """Submitted value as text; None when absent"""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def parse_age(value: Any) -> Optional[int]:
    """
    Parse a submitted age.

    Accepts plain decimal numbers ("42", "12.7", " 7 "), keeping the integer
    part. Signs, exponents, digit separators and hex are rejected, as are
    missing or blank values.
    """
    text = _text(value)
    if text is None:
        return None
    match = AGE_PATTERN.fullmatch(text)
    if match is None:
        return None
    return int(match.group(1))


def validate_person_form(form: Mapping[str, Any]) -> Tuple[Optional[PersonFields], List[str]]:
    """
    Validate submitted person fields.

    Errors are collected in a fixed order: name, age, gender, mobile number.

    Returns:
        (fields, errors) - fields is None whenever errors is non-empty
    """
    errors = []

    name = _text(form.get("name"))
    if name is None or not name.strip():
        errors.append(NAME_REQUIRED)

    age = parse_age(form.get("age"))
    if age is None:
        errors.append(AGE_REQUIRED)

    gender = _text(form.get("gender"))
    if gender not in Gender.values():
        errors.append(GENDER_REQUIRED)

    mobile_number = _text(form.get("mobileNumber"))
    if mobile_number is None or not mobile_number.strip():
        errors.append(MOBILE_NUMBER_REQUIRED)

    if errors:
        return None, errors

    return PersonFields(
        name=name.strip(),
        age=age,
        gender=Gender(gender),
        mobile_number=mobile_number.strip(),
    ), []
