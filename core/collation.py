"""
Text encoding and collation context.

The context is built once from settings and passed to the series extractor,
so the status comparison can be exercised with alternate locales in tests
without touching process-wide state outside of a single comparison.
"""

import locale
import threading
import unicodedata
from contextlib import contextmanager
from typing import Iterator, Optional

from pydantic import BaseModel, Field, validator

from core.exceptions import ConfigurationError

# Reference value of the status attribute for a series that is still airing
AIRING_STATUS = "снимается"

_LOCALE_LOCK = threading.Lock()


@contextmanager
def collation_locale(locale_name: str) -> Iterator[None]:
    """Temporarily switch LC_COLLATE, restoring the previous value on exit."""
    with _LOCALE_LOCK:
        previous = locale.setlocale(locale.LC_COLLATE)
        try:
            locale.setlocale(locale.LC_COLLATE, locale_name)
        except locale.Error as e:
            raise ConfigurationError(
                f"Unsupported collation locale: {locale_name}",
                context={"locale": locale_name},
                original_exception=e
            )
        try:
            yield
        finally:
            locale.setlocale(locale.LC_COLLATE, previous)


class CollationContext(BaseModel):
    """
    Encoding and culture-sensitive comparison rules for the fixtures.

    Strings are NFC-normalised before comparison, so canonically equivalent
    spellings are equal while case and accents remain significant. With a
    ``locale_name`` the ordering follows that locale's collation table.
    """

    encoding: str = Field(default="utf-8", min_length=1)
    locale_name: Optional[str] = None
    airing_status: str = AIRING_STATUS

    @validator("locale_name")
    def check_locale(cls, v):
        """Fail early on a locale the platform cannot load"""
        if v:
            with collation_locale(v):
                pass
        return v or None

    class Config:
        frozen = True

    def compare(self, left: str, right: str) -> int:
        """Three-way comparison: negative, zero or positive."""
        left = unicodedata.normalize("NFC", left)
        right = unicodedata.normalize("NFC", right)

        if self.locale_name:
            with collation_locale(self.locale_name):
                left_key = locale.strxfrm(left)
                right_key = locale.strxfrm(right)
        else:
            left_key, right_key = left, right

        return (left_key > right_key) - (left_key < right_key)

    def equals(self, left: str, right: str) -> bool:
        return self.compare(left, right) == 0

    def is_airing(self, status: Optional[str]) -> bool:
        """True when the status attribute matches the airing reference string"""
        if status is None:
            return False
        return self.equals(self.airing_status, status)
