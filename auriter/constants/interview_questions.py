"""
Static question banks used when questions cannot be generated.

Each bank is a tuple so that callers copy it into a fresh list instead of
mutating the shared constant.
"""

# Prepended to every question fetch; never persisted.
GENERIC_QUESTIONS = (
    "Tell me about yourself.",
    "What are your strengths and weaknesses?",
    "Why do you want to work for this company?",
    "Where do you see yourself in 5 years?",
    "How do you handle stress and pressure?",
)

# Scheduling time, when the generation call fails or returns nothing usable.
SCHEDULING_FALLBACK_QUESTIONS = (
    "Tell me about yourself and your experience.",
    "What are your strengths and weaknesses?",
    "Describe a challenging project you've worked on.",
    "How do you handle stress and pressure?",
    "Why are you interested in this position?",
)

# Question fetch with a source document, when extraction fails.
DOCUMENT_FALLBACK_QUESTIONS = (
    "Tell me about a challenging technical project you've worked on.",
    "How do you approach problem-solving in software development?",
    "Describe your experience with modern web development technologies.",
    "What strategies do you use to learn and adapt to new technologies?",
    "How do you ensure code quality and maintainability?",
)

# Question fetch with neither stored questions nor a source document.
NO_DOCUMENT_FALLBACK_QUESTIONS = (
    "Tell me about your technical background and experience.",
    "What are your strongest technical skills?",
    "Describe a complex problem you've solved.",
    "How do you approach learning new technologies?",
    "What motivates you in your professional development?",
)
