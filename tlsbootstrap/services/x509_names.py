"""Conversion of subject models into X.509 structures."""

from typing import List

from cryptography import x509
from cryptography.x509.oid import NameOID

from tlsbootstrap.models.subject import Subject


def build_name(subject: Subject) -> x509.Name:
    """
    Build an X.509 distinguished name from a subject.

    Attributes are emitted as C, ST, L, O, OU, CN with one attribute per
    value, in the order the values were given.

    Args:
        subject: Subject model

    Returns:
        X.509 name (empty when no attribute is set)
    """
    attributes = []
    for oid, values in (
        (NameOID.COUNTRY_NAME, subject.country),
        (NameOID.STATE_OR_PROVINCE_NAME, subject.province),
        (NameOID.LOCALITY_NAME, subject.locality),
        (NameOID.ORGANIZATION_NAME, subject.organization),
        (NameOID.ORGANIZATIONAL_UNIT_NAME, subject.organizational_unit),
    ):
        attributes.extend(x509.NameAttribute(oid, value) for value in values)

    if subject.common_name:
        attributes.append(x509.NameAttribute(NameOID.COMMON_NAME, subject.common_name))

    return x509.Name(attributes)


def build_san(dns_names: List[str]) -> x509.SubjectAlternativeName:
    """Build a SubjectAlternativeName extension listing the DNS names."""
    return x509.SubjectAlternativeName([x509.DNSName(name) for name in dns_names])
