class PortalError(Exception):
    """
    Base for every error a route handler turns into an HTTP response.
    `message` is safe to show to the client, `detail` is the internal cause
    and is only exposed outside production.
    """
    status_code = 500
    default_message = "Something went wrong. Please try again."

    def __init__(self, message: str = None, detail: str = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class ValidationError(PortalError):
    status_code = 400
    default_message = "Invalid request."


class InvalidOrExpired(ValidationError):
    default_message = "Invalid or expired OTP. Please request a new one."


class AuthRequired(PortalError):
    status_code = 401
    default_message = "Not authenticated. Please log in."


class NotFound(PortalError):
    status_code = 404
    default_message = "Not found."


class RateLimited(PortalError):
    status_code = 429
    default_message = "Too many OTP requests. Please try again after 15 minutes."


class Unexpected(PortalError):
    status_code = 500
