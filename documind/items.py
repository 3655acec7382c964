"""Pydantic models for extracted documents and pipeline responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

# ---------------------------------------------------------------------------
# Document parts
# ---------------------------------------------------------------------------

_FROZEN = {"frozen": True, "populate_by_name": True}


class CodeBlock(BaseModel):
    """A source-code fragment found in the page."""

    model_config = _FROZEN

    language: str = "text"
    code: str
    context: str = "Code example"
    element: str = ""  # selector pattern that matched


class Section(BaseModel):
    model_config = _FROZEN

    heading: str
    content: str
    level: int = Field(ge=1, le=6)


class StructuredContent(BaseModel):
    model_config = _FROZEN

    sections: list[Section] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class Document(BaseModel):
    """Canonical output of the extraction pipeline.

    Field names are snake_case in Python; ``model_dump(by_alias=True)``
    produces the camelCase wire shape (``structuredContent``, ``codeBlocks``).
    """

    model_config = _FROZEN

    title: str
    content: str = ""
    structured_content: StructuredContent = Field(
        default_factory=StructuredContent, alias="structuredContent",
    )
    code_blocks: list[CodeBlock] = Field(default_factory=list, alias="codeBlocks")
    url: str = ""
    insights: list[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @property
    def sections(self) -> list[Section]:
        return self.structured_content.sections

    def to_context(self) -> str:
        """Render this document as assistant grounding context.

        Delegates to :func:`documind.grounding.build_document_context`.
        """
        from documind.grounding import build_document_context
        return build_document_context(self)


# ---------------------------------------------------------------------------
# Pipeline boundary
# ---------------------------------------------------------------------------

class ErrorResponse(BaseModel):
    error: str


class ParseResponse(BaseModel):
    """Outcome of one parse request: either a document or an error, never both."""

    status: int
    document: Document | None = None
    error: ErrorResponse | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None

    def body(self) -> dict[str, Any]:
        """Return the JSON-serialisable response body."""
        if self.document is not None:
            return self.document.model_dump(by_alias=True)
        assert self.error is not None  # a response always carries one of the two
        return self.error.model_dump()
