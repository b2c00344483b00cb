"""
DNS Service Module

Provides the DNS lookup capability used to verify email domains.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, List

import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)


class DNSLookupError(Exception):
    """Raised when a DNS query cannot be answered."""

    def __init__(self, domain: str, record_type: str, reason: str = ''):
        self.domain = domain
        self.record_type = record_type
        self.reason = reason
        message = f"{record_type} lookup for {domain!r} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DNSServiceBase(ABC):
    """Abstract base class for DNS services."""

    @abstractmethod
    def resolve(self, domain: str, record_type: str) -> list:
        """
        Resolve records of a given type for a domain.

        Args:
            domain: The domain to query
            record_type: DNS record type, e.g. 'MX'

        Returns:
            List of records, empty if the name has none of that type

        Raises:
            DNSLookupError: If the query fails
        """
        pass

    def get_mx_records(self, domain: str) -> List[tuple]:
        """
        Get all MX records for a domain.

        Args:
            domain: The domain to check

        Returns:
            List of (priority, server) tuples sorted by priority

        Raises:
            DNSLookupError: If the query fails
        """
        return sorted(self.resolve(domain, 'MX'), key=lambda x: x[0])

    def check_mx_record(self, domain: str) -> bool:
        """
        Check if MX record exists for a domain.

        A failed lookup counts the same as a domain without MX records.

        Args:
            domain: The domain to check

        Returns:
            True if MX record exists, False otherwise
        """
        try:
            return len(self.get_mx_records(domain)) > 0
        except DNSLookupError as e:
            logger.debug("MX check for %s failed: %s", domain, e)
            return False


class DNSService(DNSServiceBase):
    """
    Real DNS service that performs actual DNS lookups.

    Uses the dns.resolver library for DNS queries. Answers are neither
    cached nor retried.
    """

    def __init__(self, timeout: float = 5):
        """
        Initialize the DNS service.

        Args:
            timeout: DNS query timeout in seconds
        """
        self.timeout = timeout
        self._resolver = None

    @property
    def resolver(self) -> dns.resolver.Resolver:
        """Resolver built from the system configuration on first use."""
        if self._resolver is None:
            resolver = dns.resolver.Resolver()
            resolver.timeout = self.timeout
            resolver.lifetime = self.timeout
            resolver.cache = None
            self._resolver = resolver
        return self._resolver

    def resolve(self, domain: str, record_type: str) -> list:
        try:
            answers = self.resolver.resolve(domain, record_type)
        except dns.resolver.NoAnswer:
            # Name exists but has no records of this type
            return []
        except dns.resolver.NXDOMAIN:
            raise DNSLookupError(domain, record_type, 'domain does not exist')
        except dns.resolver.NoNameservers:
            raise DNSLookupError(domain, record_type, 'no nameservers available')
        except dns.exception.Timeout:
            raise DNSLookupError(domain, record_type, 'query timed out')
        except dns.exception.DNSException as e:
            raise DNSLookupError(domain, record_type, type(e).__name__)

        if record_type.upper() == 'MX':
            return [
                (rdata.preference, str(rdata.exchange).rstrip('.'))
                for rdata in answers
            ]
        return [rdata.to_text() for rdata in answers]


class MockDNSService(DNSServiceBase):
    """
    Mock DNS service for testing purposes.

    Allows configuring predefined responses for specific domains.
    """

    def __init__(self, responses: Optional[dict] = None):
        """
        Initialize the mock DNS service.

        Args:
            responses: Dictionary mapping domains to their MX configuration.
                      A value may be a bool (one synthetic record or none),
                      a list of (priority, server) tuples, or an exception
                      instance to raise, e.g.
                      {'gmail.com': True, 'invalid.fake': False}
        """
        self.responses = responses or {}
        self.call_history = []

    def set_response(self, domain: str, response):
        """
        Set the response for a specific domain.

        Args:
            domain: The domain to configure
            response: bool, list of records, or exception instance
        """
        self.responses[domain] = response

    def resolve(self, domain: str, record_type: str) -> list:
        self.call_history.append(('resolve', domain, record_type))
        response = self.responses.get(domain, False)

        if isinstance(response, BaseException):
            raise response
        if response is True:
            return [(10, f'mail.{domain}')]
        if response is False:
            return []
        return list(response)

    def reset_history(self):
        """Reset the call history."""
        self.call_history = []
