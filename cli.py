import argparse
import logging
from pathlib import Path
from typing import Callable

from api.config import LOG_LEVEL
from api.services.quiz_service import load_catalog
from api.utils import read_json_file, write_json_file
from core.logging_setup import setup_console_logging
from engine import QuizSession
from models import Answer, MultiChoice, Question, SingleChoice, TextEntry, TrueFalse
from serialization import deserialize_session_state, serialize_session_state

log = logging.getLogger(__name__)

TRUE_WORDS = {"t", "true", "y", "yes"}
FALSE_WORDS = {"f", "false", "n", "no"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Take the quiz in the terminal")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a JSON question catalog",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        help="Resume from and save progress to this file",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser.parse_args(argv)


def parse_answer(question: Question, raw: str) -> Answer | None:
    """Read typed input as an answer for the question, None if unreadable."""
    text = raw.strip()
    if isinstance(question, TrueFalse):
        if text.lower() in TRUE_WORDS:
            return True
        if text.lower() in FALSE_WORDS:
            return False
        return None
    if isinstance(question, SingleChoice):
        if not text.isdigit():
            return None
        index = int(text) - 1
        return index if 0 <= index < len(question.options) else None
    if isinstance(question, MultiChoice):
        picks = set()
        for part in text.replace(",", " ").split():
            if not part.isdigit():
                return None
            index = int(part) - 1
            if not 0 <= index < len(question.options):
                return None
            picks.add(index)
        return frozenset(picks)
    if isinstance(question, TextEntry):
        return raw
    return None


def render_question(session: QuizSession) -> list[str]:
    question = session.current_question
    lines = [
        f"Question {session.current_index + 1} of {session.question_count}",
        question.text,
    ]
    if isinstance(question, TrueFalse):
        lines.append("Answer true or false (t/f):")
    elif isinstance(question, SingleChoice):
        lines.extend(f"  {i + 1}. {option}" for i, option in enumerate(question.options))
        lines.append("Pick one option by number:")
    elif isinstance(question, MultiChoice):
        lines.extend(f"  {i + 1}. {option}" for i, option in enumerate(question.options))
        lines.append("Pick one or more options, separated by commas:")
    else:
        lines.append("Your answer:")
    return lines


def run_quiz(
    session: QuizSession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Drive the session from console input until the user declines a retry."""
    while True:
        if session.is_complete():
            write("Thank you for completing the quiz!")
            if read("Retry? [y/N] ").strip().lower() not in TRUE_WORDS:
                return
            session.reset()
            continue

        for line in render_question(session):
            write(line)
        answer = parse_answer(session.current_question, read("> "))
        if answer is None:
            write("Could not read that answer, try again.")
            continue
        session.record_answer(answer)
        if not session.can_proceed_current():
            write("An answer is required to continue.")
            continue
        session.advance()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_console_logging(args.log_level)

    session = QuizSession(load_catalog(args.catalog))
    if args.state_file is not None:
        payload = read_json_file(args.state_file, None)
        if payload is not None:
            session.restore(deserialize_session_state(payload, session.catalog))
            log.info("Resumed quiz from %s", args.state_file)
        session.subscribe(
            lambda state: write_json_file(
                args.state_file, serialize_session_state(state)
            )
        )

    try:
        run_quiz(session, read=input, write=print)
    except (EOFError, KeyboardInterrupt):
        print()
        if args.state_file is not None:
            print(f"Progress saved to {args.state_file}")


if __name__ == "__main__":
    main()
