"""CLI entrypoint for the daily digest crossword generator."""

from daily_crossword.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
