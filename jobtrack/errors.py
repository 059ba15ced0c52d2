"""
JobTrack - Error taxonomy.

Every failure the API reports maps to one of these classes. Handlers in
main.py turn them into a JSON body of the form {"error": "<message>"}.

    ValidationError  400  missing or malformed fields
    AuthError        401  missing/invalid/expired token, bad credentials
    NotFoundError    404  absent records and records owned by someone else
    ConflictError    409  duplicate registration email
"""


class JobTrackError(Exception):
    """Base class for errors that carry an HTTP status code."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(JobTrackError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(JobTrackError):
    status_code = 401
    default_message = "Invalid or expired token"


class InvalidToken(AuthError):
    """Signature mismatch, malformed token or missing claims."""


class ExpiredToken(AuthError):
    """Token signature is fine but its exp claim has passed."""


class InvalidCredentials(AuthError):
    # Same message for unknown email and wrong password
    default_message = "Invalid email or password"


class NotFoundError(JobTrackError):
    status_code = 404
    default_message = "Not found"


class ConflictError(JobTrackError):
    status_code = 409
    default_message = "Conflict"


class DuplicateEmail(ConflictError):
    default_message = "Email already in use"
