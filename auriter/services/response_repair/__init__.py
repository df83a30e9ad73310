from .repair_pipeline import (
    RepairStatus,
    RepairResult,
    extract_document_questions,
    repair_question_list_result,
    repair_question_list,
    default_analysis,
    repair_analysis_result,
    repair_analysis
)

__all__ = [
    "RepairStatus",
    "RepairResult",
    "extract_document_questions",
    "repair_question_list_result",
    "repair_question_list",
    "default_analysis",
    "repair_analysis_result",
    "repair_analysis"
]
