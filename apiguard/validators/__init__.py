"""
Field and cross-field validators.

Each validator is a pure predicate over decoded JSON plus a message builder
for its failures. Request models attach them through ``rules.enforce``.
"""

from apiguard.validators.file_size import is_valid_file_size, file_size_error_message
from apiguard.validators.file_type import (
    is_valid_file_type,
    file_type_error_message,
    normalize_mime_type,
)
from apiguard.validators.metadata import is_valid_metadata, metadata_error_message
from apiguard.validators.prompt import is_valid_prompt, prompt_error_message
from apiguard.validators.purpose import (
    is_valid_purpose,
    purpose_error_message,
    suggest_purpose,
)
from apiguard.validators.rules import Rule, RuleViolation, enforce
from apiguard.validators.tools import (
    check_tools,
    is_valid_code_interpreter_tools,
    is_valid_file_search_tools,
)
