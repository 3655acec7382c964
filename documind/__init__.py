"""documind - turn any web page into a bounded, structured document for LLM grounding.

Quick single-URL usage::

    from documind import fetch_document

    doc = fetch_document("https://example.com/docs/install")
    print(doc.title)
    print(doc.insights)

Grounding an assistant::

    from documind import build_system_prompt, parse_assistant_reply

    system = build_system_prompt(doc)
    reply = parse_assistant_reply(model_output, doc)
"""

from documind.errors import DocumindError, ExtractionError, FetchError, InputValidationError
from documind.grounding import (
    AssistantReply,
    ChatTurn,
    build_document_context,
    build_system_prompt,
    parse_assistant_reply,
)
from documind.items import CodeBlock, Document, ParseResponse, Section
from documind.parser import DocumentParser
from documind.query import (
    extract,
    fetch_document,
    fetch_document_async,
    fetch_html,
    handle_parse_request,
)

__version__ = "0.1.0"
__all__ = [
    "AssistantReply",
    "ChatTurn",
    "CodeBlock",
    "Document",
    "DocumentParser",
    "DocumindError",
    "ExtractionError",
    "FetchError",
    "InputValidationError",
    "ParseResponse",
    "Section",
    "build_document_context",
    "build_system_prompt",
    "extract",
    "fetch_document",
    "fetch_document_async",
    "fetch_html",
    "handle_parse_request",
    "parse_assistant_reply",
]
