"""
Description: 
This module contains precompiled regex patterns for pulling structured content out of free-form model output and source documents.

Dependencies:
- re: Python's built-in regular expression module for pattern matching.

"""

import re

# Compile regex patterns once for better performance
REGEX_PATTERNS = {
    'think_block': re.compile(r"<think>.*?</think>", re.DOTALL | re.IGNORECASE),
    'think_tag': re.compile(r"</?think[^>]*>", re.IGNORECASE),
    # "1. What ...", "2) How ...", "3 Describe ..."
    'numbered_question': re.compile(r"^\d+[\).]?\s*[A-Z]"),
    'numeric_marker': re.compile(r"^\d+[\).]?\s*"),
}

QUESTION_KEYWORDS = ("how", "what", "describe")
