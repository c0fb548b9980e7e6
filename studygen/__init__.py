"""studygen: study summaries, quizzes and flashcards generated by an LLM."""

__version__ = "0.1.0"
