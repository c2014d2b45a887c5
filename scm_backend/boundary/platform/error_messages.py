"""User-facing messages for platform API error codes."""

ERROR_MESSAGES: dict[str, str] = {
    "INVALID_CREDENTIALS": "Invalid email or password",
    "USER_NOT_FOUND": "User not found",
    "EMAIL_EXISTS": "Email already exists",
    "INVALID_TOKEN": "Your session has expired, please log in again",
    "SERVER_ERROR": "Something went wrong, please try again later",
    "RATE_LIMIT": "Too many attempts, please try again later",
    "INVALID_INPUT": "Please fill in all required fields",
    "INVALID_EMAIL": "Please enter a valid email address",
    "WEAK_PASSWORD": "Password is too weak",
    "PASSWORDS_DONT_MATCH": "Passwords do not match",
    "NO_TOKEN": "Authentication required",
    "INVALID_PASSWORD": "Current password is incorrect",
    "INVALID_CODE": "Invalid or expired reset code",
    "INVALID_UPDATE": "No valid fields to update",
    "SUCCESS": "Operation completed successfully",
    "EMAIL_SEND_ERROR": "Failed to send reset email. Please try again later.",
    "NOT_FOUND": "Requested resource not found",
    "INVALID_STATUS": "Invalid status provided",
    "ONBOARDING_COMPLETE": "Onboarding already completed",
    "INVALID_TYPE": "Invalid notification type",
    "NO_RECIPIENTS": "No users match the notification criteria",
    "NOTIFICATION_NOT_FOUND": "Notification not found",
    "FORBIDDEN_NOTIFICATION": "You don't have permission to access this notification",
}

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


def error_message_for(body: object) -> str:
    """
    Resolve the message for an error response body.

    The code (default SERVER_ERROR) is looked up first, then the server
    supplied message, then a generic fallback.
    """
    code = None
    message = None
    if isinstance(body, dict):
        code = body.get("code")
        message = body.get("message")
    return ERROR_MESSAGES.get(code or "SERVER_ERROR") or message or DEFAULT_ERROR_MESSAGE
