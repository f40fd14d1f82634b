import re

import pytest

from multibranch_pipeline.application.core.services.branch_classifier_service import UNKNOWN_BRANCH
from multibranch_pipeline.application.core.shared.deployment_tag_service import sanitize_tag

TAG_PATTERN = re.compile(r"^[a-z0-9.-]+$")


def test_sanitize_tag_replaces_each_unsafe_character():
    assert sanitize_tag("feature/My_Branch!", 42) == "feature-my-branch--42"


def test_sanitize_tag_keeps_dots_and_hyphens():
    assert sanitize_tag("release/2.0-rc.1", 7) == "release-2.0-rc.1-7"


def test_sanitize_tag_is_not_collision_free():
    assert sanitize_tag("feature/A", 1) == sanitize_tag("feature_A", 1) == "feature-a-1"


def test_sanitize_tag_accepts_string_run_numbers():
    assert sanitize_tag("develop", "108") == "develop-108"


@pytest.mark.parametrize("branch", ["", None])
def test_sanitize_tag_defaults_empty_branch_to_unknown(branch):
    assert sanitize_tag(branch, 3) == "unknown-3"


@pytest.mark.parametrize("branch", ["main", "feature/Ünïcode branch", "hotfix/#12 urgent", "a b\tc"])
def test_sanitize_tag_output_is_identifier_safe(branch):
    assert TAG_PATTERN.match(sanitize_tag(branch, 5))


def test_sanitize_tag_shares_the_classifier_fallback_name():
    assert sanitize_tag("", 1) == sanitize_tag(UNKNOWN_BRANCH, 1)
