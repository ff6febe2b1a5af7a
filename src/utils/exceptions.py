"""Service-level exceptions surfaced to API clients as error responses."""


class CatalogServiceError(Exception):
    """Base error carrying the HTTP status and short label it maps to."""

    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogServiceError):
    """Payload fails field-level or business-rule checks."""

    status_code = 400
    error = "Bad Request"


class NotFoundError(CatalogServiceError):
    status_code = 404
    error = "Not Found"

    def __init__(self, resource: str, field: str, value):
        super().__init__(f"{resource} not found with {field}: '{value}'")
        self.resource = resource
        self.field = field
        self.value = value


class AlreadyExistsError(CatalogServiceError):
    status_code = 409
    error = "Conflict"

    def __init__(self, resource: str, field: str, value):
        super().__init__(f"{resource} already exists with {field}: '{value}'")
        self.resource = resource
        self.field = field
        self.value = value


class AuthenticationError(CatalogServiceError):
    """Bad credentials or token. The message never says which part was wrong."""

    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)
