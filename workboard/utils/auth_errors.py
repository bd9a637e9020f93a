AUTH_ERROR_MESSAGES = {
    "token_missing": "Please sign in to continue.",
    "token_expired": "Your session has expired. Please sign in again.",
    "token_invalid": "Your session is no longer valid. Please sign in again.",
    "refresh_token_expired": "Your session has expired. Please sign in again.",
    "profile_not_found": "No team profile is linked to this account. Please contact an administrator.",
    "account_terminated": "This account has been deactivated. Please contact an administrator.",
    "auth/user-not-found": "No account found with this email address.",
    "auth/wrong-password": "Incorrect password. Please try again.",
    "auth/invalid-email": "Please enter a valid email address.",
    "auth/user-disabled": "This account has been disabled.",
    "auth/too-many-requests": "Too many failed attempts. Please try again later.",
    "auth/network-request-failed": "Network error. Please check your connection and try again.",
}


def translate_auth_error(code: str | None, message: str) -> str:
    """Friendly text for a known authentication error code, else the raw message."""
    if not code:
        return message
    return AUTH_ERROR_MESSAGES.get(code, message)
