"""
Email Domain Validator Package

Checks whether an email address's domain publishes DNS MX records.
"""

from .validator import DomainValidator, ValidationResult
from .dns_service import DNSService, DNSLookupError

__all__ = ['DomainValidator', 'ValidationResult', 'DNSService', 'DNSLookupError']
__version__ = '1.0.0'
