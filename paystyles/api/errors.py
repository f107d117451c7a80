"""
Standardized API Error Responses

Every JSON endpoint returns errors as:
{"error": "code", "message": "human readable message"}
"""
from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException


def api_error(code: str, message: str, status_code: int = 400):
    """
    Create a standardized API error response.

    Args:
        code: Machine-readable error code (e.g., 'form_not_found')
        message: Human-readable error message
        status_code: HTTP status code (default 400)

    Example:
        return api_error('form_not_found', 'The requested form does not exist.', 404)
    """
    response = jsonify({
        'error': code,
        'message': message
    })
    response.status_code = status_code
    return response


def register_error_handlers(blueprint):
    """
    Register error handlers for a JSON blueprint.
    Ensures all errors return JSON, not HTML.
    """

    @blueprint.errorhandler(400)
    def bad_request(e):
        message = str(e.description) if hasattr(e, 'description') else 'Bad request'
        return api_error('bad_request', message, 400)

    @blueprint.errorhandler(404)
    def not_found(e):
        message = str(e.description) if hasattr(e, 'description') else 'Resource not found'
        return api_error('not_found', message, 404)

    @blueprint.errorhandler(405)
    def method_not_allowed(e):
        return api_error('method_not_allowed', 'This method is not allowed for the endpoint.', 405)

    @blueprint.errorhandler(500)
    def internal_error(e):
        current_app.logger.error(f'API Internal Error: {e}')
        return api_error(
            'internal_error',
            'An internal error occurred. Please try again later.',
            500
        )

    @blueprint.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle any other HTTP exceptions with JSON response."""
        return api_error(
            e.name.lower().replace(' ', '_'),
            e.description or str(e),
            e.code
        )


# Common error codes for documentation
ERROR_CODES = {
    'form_not_found': 'The requested form does not exist.',
    'form_off_site': 'The form is displayed off-site and cannot be styled.',
    'theme_not_found': 'No theme preset exists with this id.',
    'invalid_config': 'The widget configuration must be a JSON object.',
    'invalid_form': 'The form fields failed validation.',
    'invalid_theme': 'The theme id is missing or too long.',
    'save_failed': 'The change could not be saved.',
    'delete_failed': 'The form could not be deleted.',
    'bad_request': 'The request was malformed or missing required parameters.',
    'not_found': 'The requested resource does not exist.',
    'method_not_allowed': 'This method is not allowed for the endpoint.',
    'internal_error': 'An internal server error occurred.',
}
