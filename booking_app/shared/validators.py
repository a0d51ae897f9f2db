"""Shared validation utilities"""

import re
from typing import Optional


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate and normalize a phone number.

    Spaces, dashes, dots and parentheses are stripped; an optional leading
    "+" is kept.

    Args:
        phone: Phone number string in various formats

    Returns:
        Normalized phone number (e.g. +905321234567 or 05321234567)

    Raises:
        ValueError: If phone number is invalid
    """
    if not phone:
        return phone

    phone = phone.strip()
    prefix = "+" if phone.startswith("+") else ""
    digits = re.sub(r"[\s\-().]", "", phone.lstrip("+"))

    if not digits.isdigit():
        raise ValueError("Phone number may only contain digits and separators")

    # Column is 20 chars wide; E.164 caps at 15 digits
    if not 7 <= len(digits) <= 15:
        raise ValueError("Phone number must be between 7 and 15 digits")

    return f"{prefix}{digits}"


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_required_text(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace and reject empty strings"""
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Field cannot be empty")
    return value


def validate_choice(value: Optional[str], choices: tuple[str, ...], field: str) -> Optional[str]:
    """Ensure value is one of the allowed choices"""
    if value is None:
        return value
    if value not in choices:
        raise ValueError(f"{field} must be one of: {', '.join(choices)}")
    return value
