from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    # Message shown to callers; base_error.message stays server-side
    public_message = "Internal server error"

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ValidationError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_400_BAD_REQUEST)


class AuthError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_401_UNAUTHORIZED)


class NotFoundError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_404_NOT_FOUND)


class ConflictError(ClientError):
    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_409_CONFLICT)


class InternalError(ServerError):
    pass


class UpstreamError(ServerError):
    public_message = "Failed to fetch repositories"

    def __init__(self, base_error: Error):
        super().__init__(base_error, status_code=status.HTTP_502_BAD_GATEWAY)
