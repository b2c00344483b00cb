"""
Domain Validator Module

Decides whether an email address points at a domain that accepts mail.
"""

import logging
from typing import Optional, Dict, Any
from dataclasses import dataclass

from .dns_service import DNSService

logger = logging.getLogger(__name__)

NO_EMAIL_ERROR = "No email provided"
SERVER_ERROR = "Server error"


@dataclass
class ValidationResult:
    """
    Represents the result of a domain validation.

    Attributes:
        valid: Whether the email's domain has MX records
        error: Reason the request could not be processed (None otherwise)
    """
    valid: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary format, omitting an absent error."""
        data = {'valid': self.valid}
        if self.error is not None:
            data['error'] = self.error
        return data


class DomainValidator:
    """
    Validates email addresses by looking up the MX records of their domain.

    No syntax checks are made on the address itself: the domain is whatever
    follows the first '@'. A domain without MX records and a domain that
    fails to resolve both produce an invalid result.

    Example:
        >>> from email_domain_validator.dns_service import MockDNSService
        >>> validator = DomainValidator(MockDNSService({'example.com': True}))
        >>> validator.validate('user@example.com').valid
        True
    """

    def __init__(self, dns_service=None):
        """
        Initialize the DomainValidator.

        Args:
            dns_service: DNS service used for MX lookups, defaults to DNSService
        """
        self.dns_service = dns_service if dns_service is not None else DNSService()

    @staticmethod
    def extract_domain(email: str) -> Optional[str]:
        """
        Return the part of the email between the first '@' and the next one.

        Args:
            email: The email address

        Returns:
            The domain, or None if there is no '@' or nothing follows it
        """
        parts = email.split('@')
        if len(parts) < 2 or not parts[1]:
            return None
        return parts[1]

    def validate(self, email: str) -> ValidationResult:
        """
        Validate the domain of an email address.

        Args:
            email: The email address to validate

        Returns:
            ValidationResult with valid set to True when MX records exist
        """
        domain = self.extract_domain(email)
        if domain is None:
            return ValidationResult(valid=False)

        valid = self.dns_service.check_mx_record(domain)
        logger.debug("Domain %s valid=%s", domain, valid)
        return ValidationResult(valid=valid)
