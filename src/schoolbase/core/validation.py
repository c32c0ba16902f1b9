"""
Shared validation types.

Constrained field types reused across request schemas. Request bodies are
validated by FastAPI against Pydantic models; every failing field is
reported (see ``schoolbase.core.errors.validation_error_handler``).
"""

from typing import Annotated

from pydantic import Field, HttpUrl, PlainSerializer

# Valid http(s) URL, dumped as a plain string for the store
UrlStr = Annotated[HttpUrl, PlainSerializer(lambda url: str(url), return_type=str)]

NonEmptyStr = Annotated[str, Field(min_length=1)]

__all__ = ["NonEmptyStr", "UrlStr"]
