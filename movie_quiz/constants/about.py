"""Static metadata describing MovieQuiz."""

APP_NAME = "MovieQuiz"
APP_VERSION = "0.1"
