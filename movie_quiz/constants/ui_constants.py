"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "MovieQuiz"
WINDOW_MIN_WIDTH: int = 420
WINDOW_MIN_HEIGHT: int = 720

QUESTION_LABEL_TITLE: str = "Question:"
YES_BUTTON_TEXT: str = "Yes"
NO_BUTTON_TEXT: str = "No"

POSTER_CORNER_RADIUS: int = 20
POSTER_BORDER_WIDTH: int = 8

ROUND_OVER_TITLE: str = "This round is over!"
PLAY_AGAIN_BUTTON: str = "Play again"
NETWORK_ERROR_TITLE: str = "Error"
TRY_AGAIN_BUTTON: str = "Try again"
DEFAULT_NETWORK_ERROR_MESSAGE: str = "Failed to load movies."

ROUND_SUMMARY_TEMPLATE: str = (
    "Your result: {correct}/{total}\n"
    "Number of quizzes played: {games_count}\n"
    "Your record: {best_correct}/{best_total} ({best_date})\n"
    "Average accuracy: {accuracy:.2f}%"
)

STATISTICS_ERROR_TITLE: str = "Result not saved"
STATISTICS_ERROR_MESSAGE: str = "Your result: {correct}/{total}\nThe result could not be saved: {error}"

ALERT_FONT_POINT_SIZE: int = 12
