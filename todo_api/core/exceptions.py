"""
Application exceptions
Service errors carry the short message sent to clients; the underlying
store or parser error is chained as __cause__ and only ever logged
"""


class StartupError(Exception):
    """
    Raised when the service cannot be brought up (database unreachable,
    schema provisioning failed). Always fatal.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TodoServiceError(Exception):
    """
    Base class for errors turned into plain-text HTTP responses
    """
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TodoRetrievalError(TodoServiceError):
    """Listing todos failed in the store"""
    default_message = "Failed to fetch todos"


class TodoCreationError(TodoServiceError):
    """Inserting a todo failed in the store"""
    default_message = "Failed to create todo"


class TodoEncodingError(TodoServiceError):
    """A response payload could not be serialized"""
    default_message = "Failed to encode todos"


class InvalidRequestBodyError(TodoServiceError):
    """Request body is not JSON of the expected shape"""
    status_code = 400
    default_message = "Invalid request body"


class RequestBodyTooLargeError(TodoServiceError):
    """Request body exceeded MAX_BODY_BYTES"""
    status_code = 413
    default_message = "Request body too large"


class ClientDisconnectedError(TodoServiceError):
    """The client went away while the request was being served"""
    # nginx's "client closed request"
    status_code = 499
    default_message = "Client closed request"
