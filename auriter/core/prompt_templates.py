"""
Prompt Templates Module

Prompts for question generation and interview analysis. User-supplied text is
only ever injected through explicit placeholders and is sanitized first, so a
job description or an answer cannot smuggle control characters or unbounded
length into the prompt.

The module contains:
- PromptTemplate: A dataclass for prompt templates with placeholders
- sanitize_text: Utility function for text sanitization
- The prompt templates used by question sourcing and analysis

Dependencies:
- dataclasses: For template data structures
- re: For regex-based sanitization
- html: For HTML entity encoding

"""

from typing import Dict, List, Optional, Sequence
from dataclasses import dataclass, field
from itertools import zip_longest
import re
import html
import logging

logger = logging.getLogger(__name__)

def sanitize_text(text: str, max_length: int = 1000, escape_html: bool = True, allow_empty: bool = False) -> str:
    """
    Sanitize text before it is placed into a prompt.
    
    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting
    5. Normalizes unicode characters
    
    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)
        escape_html (bool): Whether to HTML escape the text (default: True)
        allow_empty (bool): Whether an empty result is acceptable (default: False)
        
    Returns:
        str: The sanitized text
        
    Raises:
        ValueError: If text is None, or empty after sanitization when allow_empty is False
    """
    if text is None:
        raise ValueError("Text cannot be None")
    
    text = str(text)
    
    if escape_html:
        text = html.escape(text)
    
    text = text.strip()
    
    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)
    
    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters")
    
    text = text.encode('utf-8', errors='ignore').decode('utf-8')
    
    if not text and not allow_empty:
        raise ValueError("Text cannot be empty after sanitization")
    
    return text

@dataclass
class PromptTemplate:
    """Prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Dict[str, Dict] = field(default_factory=dict)
    
    def render(self, **kwargs) -> str:
        """
        Render the template with sanitized data.
        
        Args:
            **kwargs: Data to inject into placeholders
            
        Returns:
            str: Rendered prompt
            
        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")
        
        sanitized_data = {}
        for key, value in kwargs.items():
            if key not in self.placeholders:
                logger.warning(f"Unknown placeholder key: {key}")
                continue
            config = self.sanitization_config.get(key, {})
            sanitized_data[key] = sanitize_text(
                str(value),
                max_length=config.get('max_length', 1000),
                escape_html=config.get('escape_html', False),
                allow_empty=config.get('allow_empty', False),
            )
        
        return self.template.format(**sanitized_data)


TECHNICAL_QUESTIONS_PROMPT = PromptTemplate(
    template="""Generate 5 technical interview questions for a {job_title} position.
The job description is: {job_description}.
The questions should assess the candidate's technical skills, problem-solving abilities, and experience.
Return the questions in a strict JSON array format: ["Question 1", "Question 2", "Question 3", "Question 4", "Question 5"]""",
    placeholders={
        "job_title": "Title of the job being interviewed for",
        "job_description": "Description of the job",
    },
    sanitization_config={
        "job_title": {"max_length": 200},
        "job_description": {"max_length": 6000, "allow_empty": True},
    },
)

DOCUMENT_QUESTIONS_PROMPT = PromptTemplate(
    template="""Extract the most relevant interview questions from the following document.
Focus on extracting 15 high-quality, varied questions that cover technical skills, problem-solving, and soft skills:

{document}

Return the questions in a strict JSON array format. Do not include any additional text or explanations. Example format:
[
  "Question 1",
  "Question 2",
  "Question 3",
  "Question 4",
  "Question 5"
]""",
    placeholders={"document": "Resume or job description text"},
    sanitization_config={"document": {"max_length": 12000}},
)

ANALYSIS_PROMPT = PromptTemplate(
    template="""PROVIDE A VALID JSON RESPONSE EXACTLY MATCHING THIS STRUCTURE:
{{
  "overallScores": {{
    "selfIntroduction": 7,
    "projectExplanation": 7,
    "englishCommunication": 7
  }},
  "feedback": {{
    "selfIntroduction": {{
      "strengths": "Detailed feedback on strengths",
      "areasOfImprovement": "Detailed feedback on areas to improve"
    }},
    "projectExplanation": {{
      "strengths": "Detailed feedback on strengths",
      "areasOfImprovement": "Detailed feedback on areas to improve"
    }},
    "englishCommunication": {{
      "strengths": "Detailed feedback on strengths",
      "areasOfImprovement": "Detailed feedback on areas to improve"
    }}
  }},
  "focusAreas": [
    "Key area to focus on for improvement",
    "Another area to focus on for improvement",
    "Third most important area to focus on"
  ]
}}

INTERVIEW DATA:
{interview_data}

INSTRUCTIONS:
- Respond ONLY with the JSON
- Ensure valid JSON syntax
- Scores should be between 1-10
- Evaluate the candidate holistically across all answers
- For Self Introduction: Assess how well they presented their background, skills, and career goals
- For Project Explanation: Evaluate their ability to explain technical projects clearly and highlight their contributions
- For English Communication: Assess overall fluency, grammar, vocabulary, and clarity across all answers
- In focusAreas, list 3-5 specific, actionable improvement areas ordered by priority""",
    placeholders={"interview_data": "Numbered question and response pairs"},
    sanitization_config={"interview_data": {"max_length": 20000}},
)


def format_interview_data(questions: Sequence[str], answers: Sequence[Optional[str]]) -> str:
    """Pair each question with its answer; unanswered questions are marked."""
    blocks: List[str] = []
    for index, (question, answer) in enumerate(zip_longest(questions, answers), start=1):
        if question is None:
            break
        response = answer.strip() if isinstance(answer, str) and answer.strip() else "(no response)"
        blocks.append(f"Question {index}: {question}\nResponse: {response}")
    return "\n\n".join(blocks)
