"""Quiz-related constants shared across UI and core layers."""

QUESTIONS_AMOUNT: int = 10
RATING_THRESHOLD: float = 7.0
ANSWER_FEEDBACK_DELAY_MS: int = 1000
QUESTION_TEXT_TEMPLATE: str = "Is the rating of this movie greater than {threshold:g}?"
RECORD_DATE_FORMAT: str = "%d.%m.%y %H:%M"
