"""
Locust Load Testing File for Email Domain Validator API

Run with:
    locust -f locustfile.py --host=http://localhost:5000

Then open http://localhost:8089 in your browser to control the test.
Every validation performs a live MX lookup, so results depend on the
resolver the server uses.
"""

import random
from locust import HttpUser, task, between, events
from locust.runners import MasterRunner, WorkerRunner

ENDPOINT = "/validate-email-domain"

CORS_REQUEST_HEADERS = {
    "Origin": "https://shop.example",
    "Access-Control-Request-Method": "POST",
    "Access-Control-Request-Headers": "authorization, x-client-info, apikey, content-type",
}

# Domains that publish MX records
MX_EMAILS = [
    "alice123@gmail.com",
    "bob_smith@yahoo.com",
    "charlie.brown@outlook.com",
    "david+tag@proton.me",
    "eve@icloud.com",
]

# Addresses that must come back {"valid": false}
NO_MX_EMAILS = [
    "plainaddress",
    "missing-domain@",
    "user@@double-at.com",
    "user@thisdomaindoesnotexist1234567.invalid",
    "user@example.invalid",
]

# Bodies that must come back 400
BAD_BODIES = [
    {},
    {"email": ""},
    {"email": 12345},
    {"mail": "user@gmail.com"},
]

MIXED_EMAILS = MX_EMAILS + NO_MX_EMAILS


class EmailDomainValidatorUser(HttpUser):
    """
    Simulates a storefront page calling the validator.
    """

    # Wait between 0.5 and 2 seconds between requests
    wait_time = between(0.5, 2)

    def _validate(self, body, expected_status, expected_valid, name):
        with self.client.post(ENDPOINT, json=body, name=name, catch_response=True) as response:
            if response.status_code != expected_status:
                response.failure(f"status {response.status_code}, expected {expected_status}")
            elif response.json().get("valid") is not expected_valid:
                response.failure(f"unexpected body {response.text}")

    @task(10)
    def validate_mx_email(self):
        """Validate an address at a domain with MX records."""
        email = random.choice(MX_EMAILS)
        self._validate({"email": email}, 200, True, f"{ENDPOINT} [mx]")

    @task(3)
    def validate_no_mx_email(self):
        """Validate an address whose domain cannot receive mail."""
        email = random.choice(NO_MX_EMAILS)
        self._validate({"email": email}, 200, False, f"{ENDPOINT} [no mx]")

    @task(1)
    def validate_bad_body(self):
        """Send a body without a usable email."""
        body = random.choice(BAD_BODIES)
        self._validate(body, 400, False, f"{ENDPOINT} [bad body]")

    @task(3)
    def preflight(self):
        """Browser pre-flight before a cross-origin call."""
        self.client.options(ENDPOINT, headers=CORS_REQUEST_HEADERS, name=f"{ENDPOINT} [preflight]")

    @task(1)
    def health_check(self):
        """Health check endpoint."""
        self.client.get("/health", name="/health")


class StressTestUser(HttpUser):
    """
    Stress test user with minimal wait time.
    Used to test maximum throughput.
    """

    wait_time = between(0.01, 0.1)

    @task
    def rapid_validation(self):
        """Rapid-fire validation requests."""
        email = random.choice(MIXED_EMAILS)
        self.client.post(ENDPOINT, json={"email": email})


# Event handlers for custom statistics
@events.request.add_listener
def on_request(request_type, name, response_time, response_length, exception, **kwargs):
    """Log request details for analysis."""
    if exception:
        print(f"Request failed: {name} - {exception}")
    elif response_time > 1000:  # Log slow requests (>1s)
        print(f"Slow request: {name} took {response_time:.2f}ms")


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """Called when test starts."""
    print("=" * 50)
    print("Email Domain Validator Load Test Starting")
    print("=" * 50)
    if isinstance(environment.runner, MasterRunner):
        print("Running in distributed mode (master)")
    elif isinstance(environment.runner, WorkerRunner):
        print("Running in distributed mode (worker)")
    else:
        print("Running in standalone mode")


@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    """Called when test stops."""
    print("=" * 50)
    print("Email Domain Validator Load Test Complete")
    print("=" * 50)

    stats = environment.stats
    print(f"\nTotal Requests: {stats.total.num_requests}")
    print(f"Total Failures: {stats.total.num_failures}")
    print(f"Average Response Time: {stats.total.avg_response_time:.2f}ms")
    print(f"Median Response Time: {stats.total.median_response_time:.2f}ms")
    print(f"95th Percentile: {stats.total.get_response_time_percentile(0.95):.2f}ms")
    print(f"Requests/sec: {stats.total.total_rps:.2f}")
