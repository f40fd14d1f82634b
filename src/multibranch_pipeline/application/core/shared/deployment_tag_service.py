import re

from multibranch_pipeline.application.core.services.branch_classifier_service import (
    normalize_branch_name,
)

_UNSAFE_TAG_CHARS = re.compile(r"[^A-Za-z0-9.-]")


def _slugify(text: str) -> str:
    # One hyphen per unsafe character, no collapsing, so "a/_b" -> "a--b".
    return _UNSAFE_TAG_CHARS.sub("-", text).lower()


def sanitize_tag(branch_name: str | None, run_number: int | str) -> str:
    """
    Builds a deployment tag from a branch name and a run number.
    - Every character outside [A-Za-z0-9.-] becomes '-'
    - Lowercase
    - '-<run_number>' appended
    Not collision-free: 'feature/A' and 'feature_A' share a prefix.
    """
    return f"{_slugify(normalize_branch_name(branch_name))}-{_slugify(str(run_number))}"
