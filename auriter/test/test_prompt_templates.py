"""
Test Prompt Templates Module

This module tests prompt sanitisation, template rendering and the formatting
of interview data for analysis.

Dependencies:
- pytest: For testing framework
- auriter.core.prompt_templates: The module being tested
"""
import pytest
from auriter.core.prompt_templates import (
    ANALYSIS_PROMPT,
    DOCUMENT_QUESTIONS_PROMPT,
    TECHNICAL_QUESTIONS_PROMPT,
    format_interview_data,
    sanitize_text,
)


class TestSanitizeText:
    """Test sanitisation of text placed into prompts."""

    def test_removes_control_characters(self):
        """Test that control characters are removed and whitespace trimmed."""
        assert sanitize_text("  hello\x00 world\x07 ", escape_html=False) == "hello world"

    def test_escapes_html_by_default(self):
        """Test that HTML is escaped unless disabled."""
        assert sanitize_text("<b>bold</b>") == "&lt;b&gt;bold&lt;/b&gt;"

    def test_truncates(self):
        """Test that text is cut to the maximum length."""
        assert sanitize_text("abcdef", max_length=3) == "abc"

    def test_empty_text(self):
        """Test that empty text raises unless explicitly allowed."""
        with pytest.raises(ValueError):
            sanitize_text("   ")
        assert sanitize_text("   ", allow_empty=True) == ""


class TestTemplates:
    """Test rendering of the prompt templates."""

    def test_technical_prompt_allows_empty_description(self):
        """Test that the technical prompt renders without a job description."""
        prompt = TECHNICAL_QUESTIONS_PROMPT.render(job_title="Backend Engineer", job_description="")
        assert "Generate 5 technical interview questions for a Backend Engineer position." in prompt

    def test_missing_placeholder(self):
        """Test that a missing placeholder value raises."""
        with pytest.raises(ValueError):
            TECHNICAL_QUESTIONS_PROMPT.render(job_title="Backend Engineer")

    def test_document_prompt_asks_for_fifteen_questions(self):
        """Test that braces inside the document are kept literally."""
        prompt = DOCUMENT_QUESTIONS_PROMPT.render(document="Python, FastAPI {not a placeholder}")
        assert "15 high-quality" in prompt
        assert "Python, FastAPI {not a placeholder}" in prompt

    def test_analysis_prompt_keeps_json_braces(self):
        """Test that the JSON example in the analysis prompt survives rendering."""
        prompt = ANALYSIS_PROMPT.render(interview_data="Question 1: Hi\nResponse: Hello")
        assert '"overallScores": {' in prompt
        assert "Question 1: Hi\nResponse: Hello" in prompt


class TestFormatInterviewData:
    """Test formatting of question and answer pairs for analysis."""

    def test_format_interview_data_marks_missing_answers(self):
        """Test that blank answers are marked as missing."""
        data = format_interview_data(["Tell me about yourself.", "Explain a project."], ["I am Asha.", "   "])
        assert data == (
            "Question 1: Tell me about yourself.\nResponse: I am Asha.\n\n"
            "Question 2: Explain a project.\nResponse: (no response)"
        )
