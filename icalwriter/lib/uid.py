"""
Default identifier and clock capabilities.  Components take these as
constructor arguments, so tests can pass deterministic replacements.
"""
import uuid
from datetime import datetime
from datetime import timezone
from typing import Callable

UidGenerator = Callable[[], str]
Clock = Callable[[], datetime]


def generate_uid() -> str:
    """
    Generate a unique identifier for a calendar object.

    Returns:
        A UUID string suitable for use as a calendar object UID
    """
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)
