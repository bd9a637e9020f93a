from workboard.constants.messages import AuthErrorMessages


class BaseAuthException(Exception):
    code: str | None = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TokenExpiredError(BaseAuthException):
    code = "token_expired"

    def __init__(self, message: str = AuthErrorMessages.TOKEN_EXPIRED):
        super().__init__(message)


class TokenMissingError(BaseAuthException):
    code = "token_missing"

    def __init__(self, message: str = AuthErrorMessages.TOKEN_MISSING):
        super().__init__(message)


class TokenInvalidError(BaseAuthException):
    code = "token_invalid"

    def __init__(self, message: str = AuthErrorMessages.TOKEN_INVALID):
        super().__init__(message)


class RefreshTokenExpiredError(BaseAuthException):
    code = "refresh_token_expired"

    def __init__(self, message: str = AuthErrorMessages.REFRESH_TOKEN_EXPIRED):
        super().__init__(message)


class ProfileNotFoundError(BaseAuthException):
    code = "profile_not_found"

    def __init__(self, message: str = AuthErrorMessages.PROFILE_NOT_FOUND):
        super().__init__(message)


class AccountTerminatedError(BaseAuthException):
    code = "account_terminated"

    def __init__(self, message: str = AuthErrorMessages.ACCOUNT_TERMINATED):
        super().__init__(message)
