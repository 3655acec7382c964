"""Boundary helpers for the chat assistant that answers from a Document.

The model call itself lives outside this package.  What lives here is
everything on either side of it: rendering a :class:`~documind.items.Document`
into grounding context, mapping chat turns to model messages, and turning the
model's (often sloppy) JSON reply back into an :class:`AssistantReply`.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from documind.items import Document

logger = logging.getLogger(__name__)

_DEFAULT_DESCRIPTION = "I found information in the document that addresses your question."
_FALLBACK_DESCRIPTION = "I found relevant information in the document."
_FALLBACK_CODE_DESCRIPTION = "Code from document"
_FALLBACK_TEXT_CHARS = 500
_FALLBACK_CODE_BLOCKS = 2

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ChatTurn(BaseModel):
    type: Literal["user", "assistant"]
    content: str


class AssistantCodeBlock(BaseModel):
    model_config = {"populate_by_name": True}

    language: str = "text"
    code: str
    description: str = ""


class AssistantReply(BaseModel):
    """Structured answer returned by the assistant for one turn."""

    model_config = {"populate_by_name": True}

    description: str
    steps: list[str] | None = None
    code_blocks: list[AssistantCodeBlock] = Field(default_factory=list, alias="codeBlocks")
    exact_match: bool = Field(default=False, alias="exactMatch")
    not_found: bool = Field(default=False, alias="notFound")


# ---------------------------------------------------------------------------
# Prompt side
# ---------------------------------------------------------------------------

def build_document_context(document: Document) -> str:
    """Flatten *document* into the text block the assistant is grounded on."""
    context = f"DOCUMENT TITLE: {document.title}\n\n"
    context += f"DOCUMENT CONTENT:\n{document.content}\n\n"

    if document.code_blocks:
        context += "CODE EXAMPLES:\n"
        for index, block in enumerate(document.code_blocks, start=1):
            context += f"Code {index} ({block.language}):\n{block.code}\n\n"

    return context


_SYSTEM_PROMPT_TEMPLATE = """\
You are DocuMind, an AI assistant that analyzes documents. Answer questions \
based ONLY on the provided document content.

DOCUMENT:
{context}

INSTRUCTIONS:
1. Answer only from the document content
2. Be helpful and accurate
3. Include code examples if relevant
4. Provide step-by-step instructions if asked

RESPONSE FORMAT - Return ONLY valid JSON:
{{
  "description": "Your detailed answer based on the document",
  "steps": ["Include only if user asks for how-to or steps"],
  "codeBlocks": [
    {{
      "language": "javascript",
      "code": "actual code from document",
      "description": "what this code does"
    }}
  ],
  "exactMatch": true,
  "notFound": false
}}

If information is not found, set "notFound": true and provide the closest \
relevant information."""


def build_system_prompt(document: Document) -> str:
    return _SYSTEM_PROMPT_TEMPLATE.format(context=build_document_context(document))


def to_model_messages(turns: Iterable[ChatTurn]) -> list[dict[str, str]]:
    """Map chat turns to ``{"role", "content"}`` messages for a chat-completion API."""
    return [
        {"role": "user" if turn.type == "user" else "assistant", "content": turn.content}
        for turn in turns
    ]


# ---------------------------------------------------------------------------
# Reply side
# ---------------------------------------------------------------------------

def _json_candidate(text: str) -> str:
    """Narrow a raw model reply down to the part most likely to be the JSON object."""
    candidate = text.strip()
    if "```" in candidate:
        m = _FENCE_RE.search(candidate)
        if m:
            candidate = m.group(1).strip()

    start = candidate.find("{")
    end = candidate.rfind("}")
    if start != -1 and end != -1:
        candidate = candidate[start : end + 1]
    return candidate


def _fallback_reply(text: str, document: Document | None) -> AssistantReply:
    if text:
        description = text[:_FALLBACK_TEXT_CHARS] + "..."
    else:
        description = _FALLBACK_DESCRIPTION

    code_blocks: list[AssistantCodeBlock] = []
    if document is not None:
        code_blocks = [
            AssistantCodeBlock(
                language=block.language or "text",
                code=block.code,
                description=block.context or _FALLBACK_CODE_DESCRIPTION,
            )
            for block in document.code_blocks[:_FALLBACK_CODE_BLOCKS]
        ]
    return AssistantReply(
        description=description,
        code_blocks=code_blocks,
        exact_match=False,
        not_found=False,
    )


def _repair(data: dict[str, Any]) -> dict[str, Any]:
    data = dict(data)
    if not data.get("description"):
        data["description"] = _DEFAULT_DESCRIPTION
    if not isinstance(data.get("codeBlocks"), list):
        data["codeBlocks"] = []
    if data.get("steps") and not isinstance(data["steps"], list):
        data["steps"] = []
    return data


def parse_assistant_reply(text: str, document: Document | None = None) -> AssistantReply:
    """Parse the model's raw reply into an :class:`AssistantReply`.

    Tolerates code fences and chatter around the JSON object and fills in
    missing fields.  When no usable JSON can be recovered the raw text
    becomes the description and the document's first code blocks are
    attached instead.
    """
    try:
        data = json.loads(_json_candidate(text))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return AssistantReply.model_validate(_repair(data))
    except (ValueError, ValidationError) as exc:
        logger.warning("Assistant reply is not valid JSON, using raw text: %s", exc)
        return _fallback_reply(text, document)
