"""Functional tests for answer validation and submission preparation."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from surveykit.logic.answer_validation import (
    ANSWER_CHECKERS,
    EMPTY_RESPONSE_MESSAGE,
    prepare_submission,
    validate_answers,
)
from surveykit.logic.answer_values import choice_count, is_empty_answer
from surveykit.logic.survey_parser import parse_survey_config_or_throw
from surveykit.logic.validation import AnswerValidationError
from surveykit.models.question_kind import QUESTION_TYPES


def _valid_answers() -> Dict[str, Any]:
    return {
        "nickname": "ada",
        "bio": "Writes compilers",
        "team": "Platform",
        "tools": ["Python", "SQL"],
        "perks": {"selected": ["Remote"], "otherText": "Books"},
        "happiness": 9,
        "onboarding": 4,
        "stay": "yes",
        "data_stack": "Postgres",
    }


def _messages(issues, name: str) -> list:
    return [i.message for i in issues if i.path == [name]]


@pytest.fixture()
def config(full_survey):
    return parse_survey_config_or_throw(full_survey)


def test_every_question_kind_has_an_answer_checker():
    assert set(ANSWER_CHECKERS) == set(QUESTION_TYPES)


def test_valid_answers_pass(config):
    assert validate_answers(config, _valid_answers()) == []


def test_required_questions_report_label(config):
    issues = validate_answers(config, {})
    assert _messages(issues, "nickname") == ["Nickname is required"]
    assert _messages(issues, "team") == ["Team is required"]
    assert _messages(issues, "stay") == ["Would you stay? is required"]
    assert _messages(issues, "bio") == []


def test_text_length_limits(config):
    answers = _valid_answers()
    answers["nickname"] = "a"
    answers["bio"] = "x" * 41
    issues = validate_answers(config, answers)
    assert _messages(issues, "nickname") == ["Minimum length is 2"]
    assert _messages(issues, "bio") == ["Maximum length is 40"]


def test_text_must_be_a_string(config):
    answers = _valid_answers()
    answers["nickname"] = 42
    assert _messages(validate_answers(config, answers), "nickname") == ["Answer must be text"]


def test_multiple_choice_must_be_a_configured_option(config):
    answers = _valid_answers()
    answers["team"] = "Sales"
    assert _messages(validate_answers(config, answers), "team") == ["'Sales' is not one of the available options"]


def test_multiple_select_choice_counts(config):
    answers = _valid_answers()
    answers["tools"] = ["Python", "Go", "Rust"]
    assert _messages(validate_answers(config, answers), "tools") == ["Please select at most 2 options"]


def test_multiple_select_unknown_option(config):
    answers = _valid_answers()
    answers["tools"] = ["Python", "Cobol"]
    assert _messages(validate_answers(config, answers), "tools") == ["'Cobol' is not one of the available options"]


def test_multiple_select_requires_a_list(config):
    answers = _valid_answers()
    answers["tools"] = "Python"
    assert _messages(validate_answers(config, answers), "tools") == ["Answer must be a list of options"]


def test_other_text_counts_as_a_choice(config):
    answers = _valid_answers()
    answers["perks"] = {"selected": ["Remote", "Gym"], "otherText": "Books"}
    assert _messages(validate_answers(config, answers), "perks") == ["Please select at most 2 options"]
    answers["perks"] = {"selected": [], "otherText": "Books"}
    assert _messages(validate_answers(config, answers), "perks") == []


def test_other_selection_shape(config):
    answers = _valid_answers()
    answers["perks"] = ["Remote"]
    assert _messages(validate_answers(config, answers), "perks") == [
        "Answer must be an object with 'selected' options and optional 'otherText'"
    ]


@pytest.mark.parametrize("value", [0, 11, 2.5, True, "7"])
def test_rating_out_of_scale_or_wrong_type(config, value):
    answers = _valid_answers()
    answers["happiness"] = value
    assert len(_messages(validate_answers(config, answers), "happiness")) == 1


def test_rating_uses_default_scale(config):
    answers = _valid_answers()
    answers["onboarding"] = 6
    assert _messages(validate_answers(config, answers), "onboarding") == ["Rating must be between 1 and 5"]


def test_yes_no_tokens(config):
    answers = _valid_answers()
    answers["stay"] = "maybe"
    assert _messages(validate_answers(config, answers), "stay") == ["Answer must be 'yes' or 'no'"]
    answers["stay"] = True
    assert _messages(validate_answers(config, answers), "stay") == []


def test_hidden_required_question_is_not_enforced(config):
    answers = _valid_answers()
    assert _messages(validate_answers(config, answers), "leave_reason") == []
    answers["stay"] = "no"
    assert _messages(validate_answers(config, answers), "leave_reason") == ["What would make you leave? is required"]


def test_prepare_submission_drops_hidden_answers(config):
    answers = _valid_answers()
    answers["tools"] = ["Go"]
    answers["leave_reason"] = "stale answer"
    accepted = prepare_submission(config, answers)
    assert "data_stack" not in accepted
    assert "leave_reason" not in accepted
    assert list(accepted) == ["nickname", "bio", "team", "tools", "perks", "happiness", "onboarding", "stay"]


def test_prepare_submission_raises_with_issues(config):
    answers = _valid_answers()
    answers["team"] = "Sales"
    with pytest.raises(AnswerValidationError) as excinfo:
        prepare_submission(config, answers)
    assert str(excinfo.value).startswith("Response validation failed: team: ")
    assert [i.path for i in excinfo.value.issues] == [["team"]]


def test_prepare_submission_rejects_empty_response():
    config = parse_survey_config_or_throw({"title": "T", "questions": [{"type": "text", "name": "a", "label": "A"}]})
    with pytest.raises(AnswerValidationError) as excinfo:
        prepare_submission(config, {"a": ""})
    assert str(excinfo.value) == EMPTY_RESPONSE_MESSAGE
    assert excinfo.value.issues == []


def test_answer_value_helpers():
    assert is_empty_answer(None)
    assert is_empty_answer("")
    assert is_empty_answer([])
    assert is_empty_answer({"selected": [], "otherText": ""})
    assert not is_empty_answer(0)
    assert not is_empty_answer(False)
    assert not is_empty_answer(" ")
    assert choice_count(["a", "b"]) == 2
    assert choice_count({"selected": ["a"], "otherText": "z"}) == 2
    assert choice_count("a") == 0
