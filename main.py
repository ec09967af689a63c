"""
QuizBoard - Desktop trivia board for two teams

Entry point for the application.
"""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtCore import Qt

from config import init_config, PATHS, APP_NAME, APP_AUTHOR, APP_VERSION


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="quizboard", description="Two-team trivia board")
    parser.add_argument("--board", type=Path, default=None,
                        help="Path to a JSON board template")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for Daily Double placement")
    parser.add_argument("--no-voice", action="store_true",
                        help="Do not read clues aloud")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug output")
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False) -> None:
    """Log to stderr and to a file in the user log directory."""
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    try:
        handlers.append(logging.FileHandler(PATHS.log_file, encoding="utf-8"))
    except OSError as e:
        print(f"Cannot open log file {PATHS.log_file}: {e}", file=sys.stderr)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        handlers=handlers,
    )


def main() -> int:
    """Main entry point for QuizBoard."""
    args = parse_args(sys.argv[1:])

    # Initialize configuration and directories
    init_config()
    setup_logging(args.verbose)

    # High DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_AUTHOR)

    # Load the board
    from engine.errors import BoardTemplateError
    from services.board_loader import load_template
    try:
        template = load_template(args.board)
    except BoardTemplateError as e:
        logging.getLogger(__name__).error("%s", e)
        QMessageBox.critical(None, APP_NAME, str(e))
        return 1

    # Create and show main window
    from app import QuizBoardApp
    quiz_app = QuizBoardApp(template, seed=args.seed, narration=not args.no_voice)
    quiz_app.show()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
