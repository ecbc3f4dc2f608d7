"""
Common utility functions for API responses
"""
from rest_framework.response import Response
from rest_framework import status


def error_response(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Standard error response format: {"code": <status>, "msg": <message>}
    """
    response_data = {
        "code": status_code,
        "msg": message
    }
    if errors:
        response_data["errors"] = errors
    return Response(response_data, status=status_code)


def not_found_response(message="Resource not found"):
    return error_response(message, status_code=status.HTTP_404_NOT_FOUND)


def conflict_response(message="Conflict"):
    return error_response(message, status_code=status.HTTP_409_CONFLICT)


def first_error_message(errors, default="Invalid request"):
    """
    Flatten serializer errors into a single human readable message.
    """
    if isinstance(errors, dict):
        for field, value in errors.items():
            message = first_error_message(value, default)
            if field == 'non_field_errors':
                return message
            return f"{field}: {message}"
    if isinstance(errors, (list, tuple)) and errors:
        return first_error_message(errors[0], default)
    return str(errors) if errors else default


def get_client_ip(request):
    """Get client IP address"""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')
