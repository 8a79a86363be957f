"""
Sensitive word management (legacy protocol).
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from rongcloud_sdk.errors import ClientValidationError, ErrorOrigin
from rongcloud_sdk.models.sensitive import SensitiveType, SensitiveWord
from rongcloud_sdk.transport.envelope import tolerant_list
from rongcloud_sdk.transport.http import HttpClient
from rongcloud_sdk.validation import (
    MAX_SENSITIVE_REMOVE,
    MAX_SENSITIVE_WORD_LENGTH,
    check_choice,
    check_count,
    check_length,
    require,
)

_LEGACY = ErrorOrigin.LEGACY


class SensitiveAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def add(
        self, keyword: str, replace: str = "", sensitive_type: Union[SensitiveType, int] = SensitiveType.REPLACE,
    ) -> None:
        """Add a sensitive word.

        REPLACE rewrites the word to `replace` in delivered messages; BLOCK
        drops the message entirely and takes no replacement.
        """
        require(_LEGACY, keyword=keyword)
        check_length(_LEGACY, "keyword", keyword, MAX_SENSITIVE_WORD_LENGTH)
        check_choice(_LEGACY, "sensitive_type", sensitive_type, set(SensitiveType))
        params = {"word": keyword}
        if sensitive_type == SensitiveType.REPLACE:
            require(_LEGACY, replace=replace)
            check_length(_LEGACY, "replace", replace, MAX_SENSITIVE_WORD_LENGTH)
            params["replaceWord"] = replace
        await self._http.post_form("/sensitiveword/add", params)

    async def list(self, sensitive_type: Optional[Union[SensitiveType, int]] = None) -> list[SensitiveWord]:
        """List sensitive words, optionally only one type."""
        if sensitive_type is not None:
            check_choice(_LEGACY, "sensitive_type", sensitive_type, set(SensitiveType))
            sensitive_type = int(sensitive_type)
        result = await self._http.post_form("/sensitiveword/list", {"type": sensitive_type})
        return tolerant_list(SensitiveWord, result, "words")

    async def remove(self, keywords: Sequence[str]) -> None:
        """Remove up to 50 sensitive words; takes effect within two hours."""
        check_count(_LEGACY, "keywords", keywords, MAX_SENSITIVE_REMOVE)
        if any(not k for k in keywords):
            raise ClientValidationError("param 'keywords' contains an empty word", _LEGACY)
        await self._http.post_form("/sensitiveword/batch/delete", {"words": list(keywords)})
