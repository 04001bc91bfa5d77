"""
Request schema for a single passphrase
"""

from pydantic import BaseModel, Field, ValidationError

from xkcdphrase.errors import InvalidArgument

DEFAULT_WORDS = 4
WEAK_WORD_COUNT = 3


class PassphraseRequest(BaseModel):
    """Parameters of one generation call"""
    words: int = Field(default=DEFAULT_WORDS, ge=1, strict=True)
    digits: int = Field(default=0, ge=0, strict=True)

    @property
    def is_weak(self) -> bool:
        return self.words < WEAK_WORD_COUNT


def parse_request(words=DEFAULT_WORDS, digits=None) -> PassphraseRequest:
    """
    Build a PassphraseRequest, digits=None meaning no suffix

    Raises:
      InvalidArgument for the first invalid field
    """
    try:
        return PassphraseRequest(words=words, digits=0 if digits is None else digits)
    except ValidationError as e:
        error = e.errors()[0]
        field = error["loc"][0] if error["loc"] else "request"
        raise InvalidArgument(str(field), error.get("input"), error["msg"]) from e
