#!/usr/bin/env python3
"""
Performance Benchmark for Email Domain Validator

Measures RPS of the validator and of the Flask endpoint using a mocked DNS
service, so the numbers exclude network latency.
"""

import time
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app import create_app
from email_domain_validator import DomainValidator
from email_domain_validator.dns_service import MockDNSService

# Test emails
VALID_EMAILS = [
    "user@example.com",
    "john.doe@company.org",
    "alice123@gmail.com",
    "bob_smith@yahoo.com",
    "charlie.brown@outlook.com",
]

INVALID_EMAILS = [
    "plainaddress",
    "missing-domain@",
    "user@no-mx.com",
    "user@@domain.com",
    "user@thisdomaindoesnotexist1234567.invalid",
]

ALL_EMAILS = VALID_EMAILS + INVALID_EMAILS

MX_DOMAINS = {email.split('@')[1]: True for email in VALID_EMAILS}


def run(call, emails, iterations):
    """Call `call` for every email, `iterations` times, and return statistics."""
    start_time = time.perf_counter()

    for _ in range(iterations):
        for email in emails:
            call(email)

    end_time = time.perf_counter()
    total_time = end_time - start_time
    total_requests = iterations * len(emails)

    return {
        'total_time': total_time,
        'total_requests': total_requests,
        'rps': total_requests / total_time,
        'avg_time_ms': (total_time / total_requests) * 1000
    }


def report(title, result):
    print(f"\n{title}")
    print(f"  Total time: {result['total_time']:.3f}s")
    print(f"  Total requests: {result['total_requests']}")
    print(f"  RPS: {result['rps']:,.0f} requests/second")
    print(f"  Avg time: {result['avg_time_ms']:.4f}ms")


def main():
    print("=" * 60)
    print("Email Domain Validator Performance Benchmark")
    print("=" * 60)

    validator = DomainValidator(dns_service=MockDNSService(dict(MX_DOMAINS)))
    client = create_app(dns_service=MockDNSService(dict(MX_DOMAINS))).test_client()

    def post(email):
        client.post('/validate-email-domain', json={'email': email})

    # Warmup
    print("\n[Warmup] Running 1000 iterations...")
    run(validator.validate, ALL_EMAILS, iterations=1000)

    report("[Benchmark 1] Validator, valid emails (10,000 iterations)",
           run(validator.validate, VALID_EMAILS, iterations=10000))
    report("[Benchmark 2] Validator, invalid emails (10,000 iterations)",
           run(validator.validate, INVALID_EMAILS, iterations=10000))
    report("[Benchmark 3] Validator, mixed emails (10,000 iterations)",
           run(validator.validate, ALL_EMAILS, iterations=10000))

    result = run(post, ALL_EMAILS, iterations=500)
    report("[Benchmark 4] Flask test client, mixed emails (500 iterations)", result)

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print(f"Flask overhead ceiling: ~{result['rps']:,.0f} requests/second")
    print("(Real throughput is bounded by DNS latency, see locustfile.py)")
    print("=" * 60)


if __name__ == "__main__":
    main()
