"""
Shared Validators

Common validation utilities for the application.
"""

import re


class ValidationError(Exception):
    """Validation error with field information."""

    def __init__(self, message: str, field: str | None = None, code: str | None = None):
        self.message = message
        self.field = field
        self.code = code or "validation_error"
        super().__init__(message)


class CPFValidator:
    """Brazilian CPF (individual taxpayer number) validation."""

    CPF_PATTERN = re.compile(r"^(\d{3}\.\d{3}\.\d{3}-\d{2}|\d{11})$")

    @classmethod
    def validate(cls, cpf: str, field_name: str = "cpf") -> str:
        """
        Validate CPF format and check digits.

        Accepts either the formatted (000.000.000-00) or the bare 11 digit form
        and returns the formatted form, so both spellings store the same value.
        """
        if cpf is None or not cpf.strip():
            raise ValidationError(f"{field_name} is required", field=field_name, code="required")

        if not cls.CPF_PATTERN.match(cpf):
            raise ValidationError("Invalid CPF format", field=field_name, code="invalid_cpf_format")

        digits = re.sub(r"\D", "", cpf)

        # 000.000.000-00, 111.111.111-11, ... pass the checksum but are not issued
        if len(set(digits)) == 1:
            raise ValidationError("Invalid CPF", field=field_name, code="invalid_cpf")

        if not cls._validate_check_digits(digits):
            raise ValidationError("Invalid CPF check digit", field=field_name, code="invalid_cpf_check")

        return cls.format(digits)

    @staticmethod
    def format(digits: str) -> str:
        """Format 11 CPF digits as 000.000.000-00."""
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"

    @classmethod
    def is_valid(cls, cpf: str) -> bool:
        """Check if CPF is valid without raising."""
        try:
            cls.validate(cpf)
            return True
        except ValidationError:
            return False

    @staticmethod
    def _check_digit(digits: str) -> int:
        weight = len(digits) + 1
        total = sum(int(digit) * (weight - i) for i, digit in enumerate(digits))
        remainder = total % 11
        return 0 if remainder < 2 else 11 - remainder

    @classmethod
    def _validate_check_digits(cls, cpf: str) -> bool:
        """Validate both CPF check digits."""
        first = cls._check_digit(cpf[:9])
        second = cls._check_digit(cpf[:9] + str(first))
        return cpf[9:] == f"{first}{second}"
