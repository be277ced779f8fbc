"""
Validation for hosted tool configurations in a ``tools`` array.

Tools are a tagged union keyed by ``type``. Only ``file_search`` and
``code_interpreter`` have enforced shapes; every other tool type (``function``,
``web_search``, ...) passes through untouched so new upstream tools are not
blocked here.

Array shape itself is checked by the model field type, so the scanners below
treat anything that is not a list as valid.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from apiguard.config import settings
from apiguard.validators.common import (
    is_integer,
    is_non_empty_list,
    is_number,
    type_name,
    validate_id_format,
)
from apiguard.validators.rules import Category, Rule, RuleViolation

RANKERS = ("auto", "default-2024-11-15")

Problem = Optional[Tuple[str, Category]]


def is_valid_file_id(value: Any) -> bool:
    return validate_id_format(value, "file-", settings.FILE_ID_MIN_SUFFIX)


## file_search


def is_valid_vector_store_ids(vector_store_ids: Any) -> bool:
    if not is_non_empty_list(vector_store_ids):
        return False
    return all(isinstance(vs_id, str) and vs_id.startswith("vs_") for vs_id in vector_store_ids)


def is_valid_max_num_results(max_num_results: Any) -> bool:
    return (
        is_integer(max_num_results)
        and 1 <= max_num_results <= settings.FILE_SEARCH_MAX_NUM_RESULTS
    )


def is_valid_ranking_options(ranking_options: Any) -> bool:
    if not isinstance(ranking_options, dict):
        return False

    if "ranker" in ranking_options and ranking_options["ranker"] not in RANKERS:
        return False

    if "score_threshold" in ranking_options:
        score_threshold = ranking_options["score_threshold"]
        if not is_number(score_threshold) or not 0 <= score_threshold <= 1:
            return False

    return True


def file_search_problem(tool: Dict[str, Any]) -> Problem:
    """Describe the first thing wrong with a file_search tool, or None."""
    if "vector_store_ids" not in tool:
        return "vector_store_ids is required", "structural_violation"

    vector_store_ids = tool["vector_store_ids"]
    if not isinstance(vector_store_ids, list):
        return f"vector_store_ids must be an array (received: {type_name(vector_store_ids)})", "type_mismatch"
    if not is_valid_vector_store_ids(vector_store_ids):
        return 'vector_store_ids must be a non-empty array of strings starting with "vs_"', "domain_violation"

    max_num_results = tool.get("max_num_results")
    if "max_num_results" in tool and not is_valid_max_num_results(max_num_results):
        return (
            f"max_num_results must be an integer between 1 and "
            f"{settings.FILE_SEARCH_MAX_NUM_RESULTS} (received: {max_num_results!r})",
            "domain_violation",
        )

    ranking_options = tool.get("ranking_options")
    if "ranking_options" in tool and not is_valid_ranking_options(ranking_options):
        if not isinstance(ranking_options, dict):
            return f"ranking_options must be an object (received: {type_name(ranking_options)})", "type_mismatch"
        return (
            'ranking_options.ranker must be "auto" or "default-2024-11-15" and '
            "ranking_options.score_threshold must be a number between 0 and 1",
            "domain_violation",
        )

    return None


def is_valid_file_search_tool(tool: Dict[str, Any]) -> bool:
    return file_search_problem(tool) is None


def file_search_error_message(tool: Any) -> str:
    problem = file_search_problem(tool) if isinstance(tool, dict) else None
    reason = f": {problem[0]}" if problem else ""
    return (
        f"Invalid file_search tool configuration{reason}.\n"
        "Requirements:\n"
        '  - vector_store_ids: must be non-empty array of strings starting with "vs_"\n'
        f"  - max_num_results: must be integer between 1-{settings.FILE_SEARCH_MAX_NUM_RESULTS} (optional)\n"
        '  - ranking_options.ranker: must be "auto" or "default-2024-11-15" (optional)\n'
        "  - ranking_options.score_threshold: must be number between 0-1 (optional)"
    )


## code_interpreter


def is_valid_container(container: Any) -> bool:
    """A container is a non-empty id string or an ``{"type": "auto"}`` object."""
    if isinstance(container, str):
        # Upstream ids look like container_..., any non-empty id is accepted
        return len(container) > 0

    if not isinstance(container, dict):
        return False

    if container.get("type") != "auto":
        return False

    if "file_ids" in container:
        file_ids = container["file_ids"]
        if not is_non_empty_list(file_ids):
            return False
        if not all(is_valid_file_id(file_id) for file_id in file_ids):
            return False

    return True


def code_interpreter_problem(tool: Dict[str, Any]) -> Problem:
    """Describe the first thing wrong with a code_interpreter tool, or None."""
    if "container" not in tool:
        return None

    container = tool["container"]
    if is_valid_container(container):
        return None

    if isinstance(container, str):
        return "container id must be a non-empty string", "domain_violation"
    if not isinstance(container, dict):
        return (
            f"container must be a string or an object (received: {type_name(container)})",
            "type_mismatch",
        )
    if "type" not in container:
        return "container.type is required", "structural_violation"
    if container["type"] != "auto":
        return f'container.type must be "auto" (received: {container["type"]!r})', "domain_violation"
    return (
        'container.file_ids must be a non-empty array of file ids starting with "file-"',
        "domain_violation",
    )


def is_valid_code_interpreter_tool(tool: Dict[str, Any]) -> bool:
    return code_interpreter_problem(tool) is None


def code_interpreter_error_message(tool: Any) -> str:
    problem = code_interpreter_problem(tool) if isinstance(tool, dict) else None
    reason = f": {problem[0]}" if problem else ""
    return (
        f"Invalid code_interpreter tool configuration{reason}.\n"
        "Requirements:\n"
        "  - container: optional string (container ID) or object (auto configuration)\n"
        '  - container (string): non-empty string, preferably starting with "container_"\n'
        '  - container (object).type: must be "auto" (required if container is object)\n'
        '  - container (object).file_ids: must be non-empty array of strings starting with "file-" (optional)\n\n'
        "Examples:\n"
        '  - {"type": "code_interpreter"}\n'
        '  - {"type": "code_interpreter", "container": "container_abc123"}\n'
        '  - {"type": "code_interpreter", "container": {"type": "auto", "file_ids": ["file-abc123"]}}'
    )


## dispatch


def _problem_category(problem_of: Callable[[Dict[str, Any]], Problem]) -> Callable[[Any], Category]:
    def category(tool: Any) -> Category:
        problem = problem_of(tool) if isinstance(tool, dict) else None
        return problem[1] if problem else "structural_violation"

    return category


TOOL_RULES: Dict[str, Rule] = {
    "file_search": Rule(
        predicate=is_valid_file_search_tool,
        message=file_search_error_message,
        category=_problem_category(file_search_problem),
    ),
    "code_interpreter": Rule(
        predicate=is_valid_code_interpreter_tool,
        message=code_interpreter_error_message,
        category=_problem_category(code_interpreter_problem),
    ),
}


def _scan(tools: Any, tool_type: str) -> bool:
    if not isinstance(tools, list):
        return True
    rule = TOOL_RULES[tool_type]
    return all(
        rule.predicate(tool)
        for tool in tools
        if isinstance(tool, dict) and tool.get("type") == tool_type
    )


def is_valid_file_search_tools(tools: Any) -> bool:
    """True unless some file_search entry in tools is malformed."""
    return _scan(tools, "file_search")


def is_valid_code_interpreter_tools(tools: Any) -> bool:
    """True unless some code_interpreter entry in tools is malformed."""
    return _scan(tools, "code_interpreter")


def check_tools(tools: Any) -> Optional[RuleViolation]:
    """Return the violation for the first malformed tool, located by index."""
    if not isinstance(tools, list):
        return None

    for index, tool in enumerate(tools):
        if not isinstance(tool, dict):
            continue
        tool_type = tool.get("type")
        rule = TOOL_RULES.get(tool_type) if isinstance(tool_type, str) else None
        if rule is None:
            continue
        violation = rule.check(tool)
        if violation is not None:
            violation.location = (index,)
            return violation

    return None


def enforce_tools(tools: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    """Pydantic after-validator for a ``tools`` field."""
    violation = check_tools(tools)
    if violation is not None:
        raise violation
    return tools
