"""
Unit Tests for DomainValidator

Covers domain extraction, MX verdicts with a mocked DNS service,
and result serialization.
"""

import pytest
from unittest.mock import MagicMock, patch
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from email_domain_validator.validator import DomainValidator, ValidationResult
from email_domain_validator.dns_service import DNSService, MockDNSService, DNSLookupError


class TestExtractDomain:
    """Tests for the naive '@' split."""

    @pytest.mark.parametrize("email,expected", [
        ("user@example.com", "example.com"),
        ("user@sub.domain.example.com", "sub.domain.example.com"),
        ("@example.com", "example.com"),
        ("user@domain", "domain"),
        ("user@.com", ".com"),
        ("user@a@b.com", "a"),
        ("user@@double-at.com", None),
        ("user@", None),
        ("nodomain", None),
        ("", None),
    ])
    def test_extract_domain(self, email, expected):
        """Test the domain is the segment after the first '@'."""
        assert DomainValidator.extract_domain(email) == expected


class TestDomainValidator:
    """Tests for DomainValidator.validate with mocked DNS."""

    def setup_method(self):
        """Set up test fixtures."""
        self.dns = MockDNSService({
            'gmail.com': True,
            'example.com': [(10, 'mx1.example.com'), (20, 'mx2.example.com')],
            'no-mx.com': False,
            'thisdomaindoesnotexist1234567.invalid': DNSLookupError(
                'thisdomaindoesnotexist1234567.invalid', 'MX', 'domain does not exist'
            ),
        })
        self.validator = DomainValidator(dns_service=self.dns)

    def test_domain_with_mx_records(self):
        """Test an address at a domain with MX records is valid."""
        result = self.validator.validate("user@gmail.com")
        assert result.valid is True
        assert result.error is None

    def test_domain_with_several_mx_records(self):
        """Test several records still give a plain valid verdict."""
        assert self.validator.validate("user@example.com").valid is True

    def test_domain_without_mx_records(self):
        """Test zero MX records give an invalid verdict."""
        result = self.validator.validate("user@no-mx.com")
        assert result.valid is False
        assert result.error is None

    def test_nonexistent_domain(self):
        """Test a resolution failure collapses to invalid without an error."""
        result = self.validator.validate("user@thisdomaindoesnotexist1234567.invalid")
        assert result.valid is False
        assert result.error is None

    def test_unconfigured_domain(self):
        """Test an unknown domain is invalid."""
        assert self.validator.validate("user@unknown.org").valid is False

    @pytest.mark.parametrize("email", ["nodomain", "user@", "user@@gmail.com"])
    def test_missing_domain_skips_lookup(self, email):
        """Test no DNS query is made when there is no domain."""
        result = self.validator.validate(email)
        assert result.valid is False
        assert self.dns.call_history == []

    def test_one_lookup_per_call(self):
        """Test each validation issues exactly one MX query."""
        self.validator.validate("user@gmail.com")
        self.validator.validate("user@gmail.com")
        assert self.dns.call_history == [
            ('resolve', 'gmail.com', 'MX'),
            ('resolve', 'gmail.com', 'MX'),
        ]

    def test_multiple_at_uses_first_segment(self):
        """Test the segment after the first '@' is looked up."""
        result = self.validator.validate("user@gmail.com@no-mx.com")
        assert result.valid is True
        assert self.dns.call_history == [('resolve', 'gmail.com', 'MX')]

    def test_unexpected_error_propagates(self):
        """Test errors other than lookup failures reach the caller."""
        self.dns.set_response('boom.com', RuntimeError('resolver crashed'))

        with pytest.raises(RuntimeError):
            self.validator.validate("user@boom.com")

    def test_repeated_calls_are_independent(self):
        """Test that changing DNS answers are picked up on the next call."""
        assert self.validator.validate("user@no-mx.com").valid is False
        self.dns.set_response('no-mx.com', True)
        assert self.validator.validate("user@no-mx.com").valid is True


class TestDomainValidatorDefaults:
    """Tests for DomainValidator construction."""

    def test_default_dns_service(self):
        """Test a real DNSService is used when none is given."""
        validator = DomainValidator()
        assert isinstance(validator.dns_service, DNSService)

    def test_custom_dns_service(self):
        """Test the given DNS service is kept."""
        dns_service = MagicMock()
        validator = DomainValidator(dns_service=dns_service)
        assert validator.dns_service is dns_service

    def test_real_service_nxdomain(self):
        """Test the real service path with a patched resolver."""
        import dns.resolver

        service = DNSService(timeout=1)
        with patch.object(DNSService, 'resolver') as resolver:
            resolver.resolve.side_effect = dns.resolver.NXDOMAIN()
            validator = DomainValidator(dns_service=service)
            assert validator.validate("user@nope.invalid").valid is False


class TestValidationResult:
    """Tests for ValidationResult serialization."""

    def test_to_dict_valid(self):
        assert ValidationResult(valid=True).to_dict() == {'valid': True}

    def test_to_dict_invalid_without_error(self):
        assert ValidationResult(valid=False).to_dict() == {'valid': False}

    def test_to_dict_with_error(self):
        result = ValidationResult(valid=False, error="No email provided")
        assert result.to_dict() == {'valid': False, 'error': "No email provided"}


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
