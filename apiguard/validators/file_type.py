"""
File type validation against the file purpose.

The file type may be given as a MIME type (``image/png``) or as a filename
(``report.PDF``), in which case the extension is mapped to a MIME type.

Formats by purpose:

- assistants: documents (PDF, TXT, DOCX, MD, HTML), code (JS, TS, PY, JAVA,
  C, CPP) and data (JSON, JSONL, CSV, XML)
- vision: images (PNG, JPEG, GIF, WEBP)
- batch, fine-tune, evals: JSONL only
- user_data: everything assistants accepts plus Excel and octet-stream
"""

from typing import Any, Dict, List, Optional, Tuple

from apiguard.validators.common import type_name
from apiguard.validators.purpose import VALID_PURPOSES, is_valid_purpose
from apiguard.validators.rules import Category, Rule

JSONL = "application/jsonl"

_ASSISTANTS_TYPES: List[str] = [
    # Documents
    "application/pdf",
    "text/plain",
    "text/markdown",
    "text/html",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    # Code
    "application/javascript",
    "application/typescript",
    "text/x-python",
    "text/x-java",
    "text/x-c",
    "text/x-c++",
    # Data
    "application/json",
    JSONL,
    "text/csv",
    "application/xml",
    "text/xml",
]

ALLOWED_MIME_TYPES: Dict[str, List[str]] = {
    "assistants": _ASSISTANTS_TYPES,
    "vision": [
        "image/png",
        "image/jpeg",
        "image/jpg",
        "image/gif",
        "image/webp",
    ],
    "batch": [JSONL],
    "fine-tune": [JSONL],
    "user_data": _ASSISTANTS_TYPES
    + [
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/octet-stream",
    ],
    "evals": [JSONL],
}

EXTENSION_TO_MIME: Dict[str, str] = {
    "pdf": "application/pdf",
    "txt": "text/plain",
    "md": "text/markdown",
    "html": "text/html",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "js": "application/javascript",
    "ts": "application/typescript",
    "py": "text/x-python",
    "java": "text/x-java",
    "c": "text/x-c",
    "cpp": "text/x-c++",
    "json": "application/json",
    "jsonl": JSONL,
    "csv": "text/csv",
    "xml": "application/xml",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

_JSONL_ONLY = ("batch", "fine-tune", "evals")


def normalize_mime_type(file_type: str) -> str:
    """Resolve a MIME type or filename to a lowercase MIME type."""
    if "/" in file_type:
        return file_type.lower()

    extension = file_type.rsplit(".", 1)[-1].lower()
    return EXTENSION_TO_MIME.get(extension, file_type.lower())


def is_valid_file_type(file_type: Any, purpose: Any) -> bool:
    """True if file_type resolves to a MIME type allowed for purpose."""
    if not isinstance(file_type, str):
        return False
    if not isinstance(purpose, str) or purpose not in ALLOWED_MIME_TYPES:
        return False
    return normalize_mime_type(file_type) in ALLOWED_MIME_TYPES[purpose]


def _describe_allowed(purpose: str) -> str:
    if purpose == "assistants":
        return (
            "  - Documents: PDF, TXT, DOCX, MD, HTML\n"
            "  - Code: JS, TS, PY, JAVA, C, CPP\n"
            "  - Data: JSON, JSONL, CSV, XML"
        )
    if purpose == "vision":
        return "  - Images: PNG, JPEG, GIF, WEBP"
    if purpose in _JSONL_ONLY:
        return f"  - JSONL only ({JSONL})"
    if purpose == "user_data":
        return (
            "  - All assistants formats (PDF, TXT, DOCX, etc.)\n"
            "  - Excel: XLS, XLSX\n"
            "  - Binary formats (octet-stream)"
        )
    return "\n".join(f"  - {mime}" for mime in ALLOWED_MIME_TYPES[purpose])


def common_fixes(mime_type: str, purpose: str) -> List[str]:
    """Concrete suggestions for the usual purpose / format mix-ups."""
    fixes = []

    if mime_type == "application/json" and purpose in _JSONL_ONLY:
        fixes.append("Use JSONL format instead of JSON (one object per line, no array wrapper)")
        fixes.append("Rename file extension from .json to .jsonl")

    if mime_type.startswith("image/") and purpose != "vision":
        fixes.append('Change purpose to "vision" for image files')
        fixes.append(f'Or convert image to supported format for "{purpose}" purpose')

    if mime_type == "application/pdf" and purpose == "vision":
        fixes.append('Change purpose to "assistants" for PDF files')
        fixes.append("Or extract images from PDF for vision analysis")

    return fixes


def file_type_error_message(file_type: Any, purpose: Any) -> str:
    if not isinstance(file_type, str):
        return (
            "File type must be a string (MIME type or filename). "
            f"Received: {type_name(file_type)}"
        )

    if not purpose or not isinstance(purpose, str):
        return f"Cannot validate file type without a valid purpose. Received purpose: {purpose!r}"

    if purpose not in ALLOWED_MIME_TYPES:
        return (
            f'Unknown file purpose "{purpose}". Cannot determine allowed file types. '
            f"Valid purposes: {', '.join(VALID_PURPOSES)}"
        )

    mime_type = normalize_mime_type(file_type)
    fixes = common_fixes(mime_type, purpose) or [
        "Check that file format matches purpose requirements",
        'Consider using purpose "user_data" for general files',
    ]
    fix_lines = "\n".join(f"  - {fix}" for fix in fixes)

    return (
        f'File type "{mime_type}" is not allowed for purpose "{purpose}".\n\n'
        f'Allowed file types for "{purpose}":\n'
        f"{_describe_allowed(purpose)}\n\n"
        f"Your file type: {mime_type}\n\n"
        f"Common fixes:\n{fix_lines}"
    )


def file_type_suggestion(file_type: Any, purpose: Any) -> Optional[str]:
    """First common fix for a rejected file type, if one applies."""
    if not is_valid_purpose(purpose) or not isinstance(file_type, str):
        return None
    fixes = common_fixes(normalize_mime_type(file_type), purpose)
    return fixes[0] if fixes else None


def _category(pair: Tuple[Any, Any]) -> Category:
    return "type_mismatch" if not isinstance(pair[0], str) else "cross_field_inconsistency"


# Checked against (file_type, purpose) pairs since the rule spans two fields
FILE_TYPE_RULE = Rule(
    predicate=lambda pair: is_valid_file_type(*pair),
    message=lambda pair: file_type_error_message(*pair),
    category=_category,
    suggest=lambda pair: file_type_suggestion(*pair),
)
