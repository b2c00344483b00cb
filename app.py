"""
Flask Application for Email Domain Validation API

Provides the REST endpoint that checks an email's domain for MX records.
"""

import logging
import os
from flask import Flask, request, jsonify
from flask_cors import CORS

from email_domain_validator import DomainValidator, DNSService, ValidationResult
from email_domain_validator.validator import NO_EMAIL_ERROR, SERVER_ERROR

logger = logging.getLogger(__name__)

# Configuration
DNS_TIMEOUT = float(os.environ.get('DNS_TIMEOUT', '5'))

CORS_ALLOW_HEADERS = ['authorization', 'x-client-info', 'apikey', 'content-type']


def create_app(dns_service=None):
    """
    Build the Flask application.

    Args:
        dns_service: Optional DNS service, defaults to a real DNSService

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    # after_request hooks run in reverse order: this one runs after
    # Flask-CORS and replaces its echoed subset with the full list
    @app.after_request
    def add_allow_headers(response):
        response.headers['Access-Control-Allow-Headers'] = ', '.join(CORS_ALLOW_HEADERS)
        return response

    CORS(app, origins='*', send_wildcard=True, allow_headers=CORS_ALLOW_HEADERS)

    if dns_service is None:
        dns_service = DNSService(timeout=DNS_TIMEOUT)
    validator = DomainValidator(dns_service=dns_service)

    @app.route('/health', methods=['GET'])
    def health_check():
        """
        Health check endpoint.

        Returns:
            JSON response with status
        """
        return jsonify({
            'status': 'healthy',
            'service': 'email-domain-validator',
            'dns_timeout': DNS_TIMEOUT
        }), 200

    @app.route('/validate-email-domain', methods=['POST'])
    def validate_email_domain():
        """
        Check whether an email's domain publishes MX records.

        OPTIONS pre-flight requests are answered by Flask-CORS with an
        empty body before this view runs.

        Request Body:
            {
                "email": "user@example.com"
            }

        Returns:
            {"valid": true} or {"valid": false}, status 200.
            {"valid": false, "error": "No email provided"}, status 400.
            {"valid": false, "error": "Server error"}, status 500.
        """
        try:
            # Body is parsed as JSON whatever the Content-Type says
            data = request.get_json(force=True, silent=True)
            email = data.get('email') if isinstance(data, dict) else None

            if not email or not isinstance(email, str):
                return jsonify(ValidationResult(valid=False, error=NO_EMAIL_ERROR).to_dict()), 400

            result = validator.validate(email)
            return jsonify(result.to_dict()), 200
        except Exception:
            logger.exception("Email domain validation failed")
            return jsonify(ValidationResult(valid=False, error=SERVER_ERROR).to_dict()), 500

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify(ValidationResult(valid=False, error='Endpoint not found').to_dict()), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 errors."""
        return jsonify(ValidationResult(valid=False, error='Method not allowed').to_dict()), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        return jsonify(ValidationResult(valid=False, error=SERVER_ERROR).to_dict()), 500

    return app


app = create_app()


if __name__ == '__main__':
    # Get port from environment or use default
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'

    logging.basicConfig(
        level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    logger.info("Starting Email Domain Validator API on port %d", port)
    logger.info("DNS timeout: %ss", DNS_TIMEOUT)

    app.run(host='0.0.0.0', port=port, debug=debug)
