"""Input validation utilities."""

import re

# Upper bound for the commonName attribute (RFC 5280 ub-common-name)
MAX_COMMON_NAME_LENGTH = 64


def validate_common_name(cn: str) -> None:
    """
    Validate common name format.

    Args:
        cn: Common name to validate

    Raises:
        ValueError: If common name is invalid
    """
    if not cn or len(cn.strip()) == 0:
        raise ValueError("Common name cannot be empty")

    if len(cn) > MAX_COMMON_NAME_LENGTH:
        raise ValueError(f"Common name too long (max {MAX_COMMON_NAME_LENGTH} characters): {cn}")


def validate_country_code(country: str) -> None:
    """
    Validate ISO 3166-1 alpha-2 country code.

    Args:
        country: Country code to validate

    Raises:
        ValueError: If country code is invalid
    """
    if not re.match(r"^[A-Z]{2}$", country):
        raise ValueError(f"Country code must be 2 uppercase letters (ISO 3166-1 alpha-2): {country}")


def validate_domain(domain: str) -> None:
    """
    Validate domain name format.

    Args:
        domain: Domain name to validate

    Raises:
        ValueError: If domain is invalid
    """
    # Allow wildcards and single-label names such as "localhost"
    domain_pattern = r"^(\*\.)?([a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)*[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$"

    if not re.match(domain_pattern, domain):
        raise ValueError(f"Invalid domain format: {domain}")
