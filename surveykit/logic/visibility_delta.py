"""Helpers to compute visibility deltas and suppressed answers.

Exposes a single function that compares the visible question names before
and after an answer change and reports which answers are now suppressed.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from surveykit.logic.answer_values import is_empty_answer
from surveykit.logic.visibility_rules import visible_question_names
from surveykit.models.visibility import VisibilityDelta


def compute_visibility_delta(
    questions: Iterable[Any],
    before: Optional[Mapping[str, Any]],
    after: Optional[Mapping[str, Any]],
) -> VisibilityDelta:
    """Compute visibility delta and suppressed answers.

    - now_visible: questions newly visible (visible after but not before)
    - now_hidden: questions newly hidden (visible before but not after)
    - suppressed_answers: subset of now_hidden that still hold a non-empty
      answer in ``after``; callers drop these before submission

    All three lists follow question order.
    """
    questions = list(questions)
    pre = set(visible_question_names(questions, before))
    post = set(visible_question_names(questions, after))

    order: List[str] = []
    for q in questions:
        name = q.get("name") if isinstance(q, Mapping) else q.name
        if name not in order:
            order.append(name)

    now_visible = [n for n in order if n in post and n not in pre]
    now_hidden = [n for n in order if n in pre and n not in post]
    current = after or {}
    suppressed = [n for n in now_hidden if not is_empty_answer(current.get(n))]
    return VisibilityDelta(now_visible=now_visible, now_hidden=now_hidden, suppressed_answers=suppressed)


__all__ = ["compute_visibility_delta"]
