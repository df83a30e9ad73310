from .question_sourcing_service import QuestionSourcingService, SourcedQuestions, GENERATION_FAILED_WARNING

__all__ = ["QuestionSourcingService", "SourcedQuestions", "GENERATION_FAILED_WARNING"]
