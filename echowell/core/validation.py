from typing import Annotated

from pydantic import AfterValidator


def require_utf8(value: str) -> str:
    # JSON allows lone surrogate escapes such as "\ud800"; those cannot be hashed or stored.
    try:
        value.encode('utf-8')
    except UnicodeEncodeError as exc:
        raise ValueError('Text must be valid UTF-8.') from exc
    return value


Utf8Str = Annotated[str, AfterValidator(require_utf8)]
