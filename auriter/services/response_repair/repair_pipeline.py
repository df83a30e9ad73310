"""
Response Repair Pipeline Module

This module turns arbitrary text returned by the text generation call into
well-formed domain values. Two shapes are supported: a list of question strings
and the fixed interview analysis structure.

Every public function here is total: any input, however malformed, produces a
value of the expected shape. Parse failures are logged and absorbed into
defaults, never raised to the caller.

The *_result functions return a tagged RepairResult so that callers which need
to act on the outcome (for example, to decide whether to persist generated
questions) can tell a clean parse from a repaired one or a static fallback.
The plain variants return only the value.

Dependencies:
- pydantic: For the AnalysisResult model.
- auriter.helper.extract_json_payload: For locating JSON inside model output.
- auriter.constants: For static question banks, analysis defaults and regex patterns.
- logging: For warning about repaired or discarded output.

"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from auriter.constants.analysis_defaults import (
    ANALYSIS_CATEGORIES,
    DEFAULT_FOCUS_AREAS,
    DEFAULT_SCORE,
    FEEDBACK_PLACEHOLDER,
    MAX_SCORE,
    MIN_SCORE,
)
from auriter.constants.interview_questions import SCHEDULING_FALLBACK_QUESTIONS
from auriter.constants.regex_patterns import QUESTION_KEYWORDS, REGEX_PATTERNS
from auriter.helper.extract_json_payload import extract_json_payload
from auriter.schemas.interview.analysis import AnalysisResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_USABLE_QUESTIONS = 3
MAX_DOCUMENT_QUESTIONS = 5
MIN_DOCUMENT_LINE_LENGTH = 20


class RepairStatus(str, Enum):
    """How a value was obtained from model output."""
    VALID = "valid"          # parsed and already conformed to the shape
    REPAIRED = "repaired"    # parsed, but fields were defaulted or replaced
    FALLBACK = "fallback"    # nothing parseable; static fallback returned


@dataclass
class RepairResult(Generic[T]):
    value: T
    status: RepairStatus
    repairs: List[str] = field(default_factory=list)

    @property
    def is_fallback(self) -> bool:
        return self.status == RepairStatus.FALLBACK


# ---------------------------------------------------------------------------
# Question lists
# ---------------------------------------------------------------------------

def extract_document_questions(document: Optional[str], limit: int = MAX_DOCUMENT_QUESTIONS) -> List[str]:
    """
    Pull numbered questions straight out of a source document.

    A line qualifies when it starts with a numeric marker followed by a capital
    letter ("1. What...", "2) How..."), is longer than 20 characters, and
    mentions one of "how", "what" or "describe". The marker is stripped.

    Args:
        document (Optional[str]): Resume or job description text.
        limit (int): Maximum number of questions to return.

    Returns:
        List[str]: Up to ``limit`` questions in document order.

    Example:
        >>> extract_document_questions("1. What is dependency injection in FastAPI?")
        ['What is dependency injection in FastAPI?']
    """
    if not document or not isinstance(document, str):
        return []

    questions = []
    for line in document.splitlines():
        line = line.strip()
        if not REGEX_PATTERNS['numbered_question'].match(line):
            continue
        if len(line) <= MIN_DOCUMENT_LINE_LENGTH:
            continue
        lowered = line.lower()
        if not any(keyword in lowered for keyword in QUESTION_KEYWORDS):
            continue
        questions.append(REGEX_PATTERNS['numeric_marker'].sub('', line).strip())
        if len(questions) >= limit:
            break
    return questions


def repair_question_list_result(
    content: Any,
    fallback: Sequence[str] = SCHEDULING_FALLBACK_QUESTIONS,
    source_document: Optional[str] = None,
) -> RepairResult[List[str]]:
    """
    Repair model output that should be a JSON array of question strings.

    Args:
        content (Any): Raw text from the generation call.
        fallback (Sequence[str]): Static bank returned when nothing usable is found.
        source_document (Optional[str]): When given, numbered questions are pulled
            from it if the model produced fewer than three usable entries.

    Returns:
        RepairResult[List[str]]: A non-empty list of questions and how it was obtained.
    """
    try:
        payload = extract_json_payload(content, "[")
        if not isinstance(payload, list):
            return RepairResult(list(fallback), RepairStatus.FALLBACK, ["no JSON array found"])

        questions = [item.strip() for item in payload if isinstance(item, str) and item.strip()]
        repairs = []
        if len(questions) != len(payload):
            repairs.append(f"dropped {len(payload) - len(questions)} unusable entries")

        if len(questions) < MIN_USABLE_QUESTIONS and source_document:
            document_questions = extract_document_questions(source_document)
            if document_questions:
                questions = document_questions
                repairs.append("used questions extracted from the source document")

        if not questions:
            return RepairResult(list(fallback), RepairStatus.FALLBACK, repairs + ["no usable questions"])

        status = RepairStatus.REPAIRED if repairs else RepairStatus.VALID
        if repairs:
            logger.warning(f"Question list repaired: {repairs}")
        return RepairResult(questions, status, repairs)
    except Exception as e:
        logger.error(f"Unexpected error repairing question list: {type(e).__name__}: {e}")
        return RepairResult(list(fallback), RepairStatus.FALLBACK, [str(e)])


def repair_question_list(
    content: Any,
    fallback: Sequence[str] = SCHEDULING_FALLBACK_QUESTIONS,
    source_document: Optional[str] = None,
) -> List[str]:
    return repair_question_list_result(content, fallback, source_document).value


# ---------------------------------------------------------------------------
# Analysis structure
# ---------------------------------------------------------------------------

def default_analysis(
    placeholder: str = FEEDBACK_PLACEHOLDER,
    focus_areas: Sequence[str] = DEFAULT_FOCUS_AREAS,
) -> AnalysisResult:
    """Build the fixed analysis returned when nothing can be recovered."""
    return AnalysisResult(
        overallScores={category: DEFAULT_SCORE for category in ANALYSIS_CATEGORIES},
        feedback={
            category: {"strengths": placeholder, "areasOfImprovement": placeholder}
            for category in ANALYSIS_CATEGORIES
        },
        focusAreas=list(focus_areas),
    )


def _coerce_score(value: Any) -> Optional[int]:
    """Return an int score in range, or None when the value is missing, zero or not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return None
    # An unscored category comes back as 0
    if value == 0:
        return None
    return max(MIN_SCORE, min(MAX_SCORE, int(round(value))))


def _usable_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def repair_analysis_result(content: Any) -> RepairResult[AnalysisResult]:
    """
    Repair model output that should be the interview analysis JSON object.

    Missing, zero or non-numeric scores become 5; other numeric scores are
    clamped to 1-10.
    Missing feedback entries get placeholder text in both fields; entries
    missing one field get only that field patched. An absent or empty
    focusAreas list is replaced with the default list.

    Args:
        content (Any): Raw text from the generation call.

    Returns:
        RepairResult[AnalysisResult]: A complete analysis and how it was obtained.

    Example:
        >>> repair_analysis_result("I cannot help with that.").status
        <RepairStatus.FALLBACK: 'fallback'>
    """
    try:
        payload = extract_json_payload(content, "{")
        if not isinstance(payload, dict):
            return RepairResult(default_analysis(), RepairStatus.FALLBACK, ["no JSON object found"])

        repairs = []

        raw_scores = payload.get("overallScores")
        if not isinstance(raw_scores, dict):
            raw_scores = {}
        scores = {}
        for category in ANALYSIS_CATEGORIES:
            raw = raw_scores.get(category)
            score = _coerce_score(raw)
            if score is None:
                score = DEFAULT_SCORE
                repairs.append(f"score {category} defaulted")
            elif score != raw:
                repairs.append(f"score {category} normalised")
            scores[category] = score

        raw_feedback = payload.get("feedback")
        if not isinstance(raw_feedback, dict):
            raw_feedback = {}
        feedback = {}
        for category in ANALYSIS_CATEGORIES:
            entry = raw_feedback.get(category)
            if not isinstance(entry, dict):
                feedback[category] = {
                    "strengths": FEEDBACK_PLACEHOLDER,
                    "areasOfImprovement": FEEDBACK_PLACEHOLDER,
                }
                repairs.append(f"feedback {category} defaulted")
                continue
            patched = {}
            for key in ("strengths", "areasOfImprovement"):
                if _usable_text(entry.get(key)):
                    patched[key] = entry[key]
                else:
                    patched[key] = FEEDBACK_PLACEHOLDER
                    repairs.append(f"feedback {category}.{key} defaulted")
            feedback[category] = patched

        raw_focus = payload.get("focusAreas")
        focus_areas = []
        if isinstance(raw_focus, list):
            focus_areas = [item for item in raw_focus if _usable_text(item)]
            if len(focus_areas) != len(raw_focus):
                repairs.append("focusAreas entries dropped")
        if not focus_areas:
            focus_areas = list(DEFAULT_FOCUS_AREAS)
            repairs.append("focusAreas defaulted")

        analysis = AnalysisResult(overallScores=scores, feedback=feedback, focusAreas=focus_areas)
        if repairs:
            logger.warning(f"Analysis repaired: {repairs}")
            return RepairResult(analysis, RepairStatus.REPAIRED, repairs)
        return RepairResult(analysis, RepairStatus.VALID)
    except Exception as e:
        logger.error(f"Unexpected error repairing analysis: {type(e).__name__}: {e}")
        return RepairResult(default_analysis(), RepairStatus.FALLBACK, [str(e)])


def repair_analysis(content: Any) -> AnalysisResult:
    return repair_analysis_result(content).value
