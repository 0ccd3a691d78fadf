from trivia_quiz.cli import app

if __name__ == "__main__":  # pragma: no cover - CLI entry
    app()
