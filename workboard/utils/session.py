import secrets
import string
import threading
import time

_BASE36_ALPHABET = string.digits + string.ascii_lowercase

_process_session_id: str | None = None
_lock = threading.Lock()


def generate_session_id() -> str:
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(9))
    return f"session_{int(time.time() * 1000)}_{suffix}"


def get_process_session_id() -> str:
    """Session id shared by every audit record written without a request session."""
    global _process_session_id
    with _lock:
        if _process_session_id is None:
            _process_session_id = generate_session_id()
        return _process_session_id
