#!/usr/bin/env python3
"""
Score quiz answers against party programs and voting records.

Usage:
    python score_quiz.py seed                          # Load questions.json into the DB
    python score_quiz.py score answers.json            # Dual ranking plus coalition chances
    python score_quiz.py score answers.json --program-only
    python score_quiz.py score answers.json --weights sigmoid

answers.json: {"answers": {"1": "agree", ...}, "theme_weights": {"Klimaat & Milieu": 80, ...}}
"""

import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import settings
from app.container import container
from app.services.scoring import STRATEGIES, ScoringError
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def load_answers(path: str) -> tuple[dict, dict]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return data.get("answers", {}), data.get("theme_weights", {})


def print_dual(data: dict) -> None:
    print("\n" + "=" * 60)
    print(f"{'PARTY':<20} {'TOTAL':>6} {'PROGRAM':>8} {'VOTES':>6}")
    print("=" * 60)
    for r in data["results"]:
        flag = " *" if r.has_limited_voting_data else ""
        print(f"{r.party.name:<20} {r.combined:>5}% {r.program.score:>7}% {r.votes.score:>5}%{flag}")
    print("=" * 60)
    if not data["has_voting_data"]:
        print("No voting-record data available.")
    print("* limited voting-record data\n")


def print_program(results: list) -> None:
    print("\n" + "=" * 60)
    print(f"{'PARTY':<20} {'MATCH':>6} {'+':>4} {'-':>4}")
    print("=" * 60)
    for r in results:
        print(f"{r.party.name:<20} {r.percentage:>5}% {r.scores.matches:>4} {r.scores.conflicts:>4}")
    print("=" * 60)
    if results and results[0].reliability and not results[0].reliability.is_reliable:
        print(f"Answer at least {settings.MIN_RELIABLE_ANSWERS} statements for a reliable result.")
    print()


def print_coalitions(chances: list) -> None:
    print("COALITION CHANCES")
    for c in chances:
        print(f"  {c.party_name:<20} {c.chance_percentage:>3}%  {c.explanation}")
        for o in c.most_likely_coalitions:
            print(f"      {' + '.join(o.partners)} ({o.seats} seats, {o.probability}%)")
    print()


def main():
    args = sys.argv[1:]

    if "--weights" in args:
        i = args.index("--weights")
        if i + 1 >= len(args) or args[i + 1] not in STRATEGIES:
            print(__doc__)
            sys.exit(1)
        settings.TOPIC_WEIGHT_STRATEGY = args[i + 1]
        del args[i : i + 2]

    program_only = "--program-only" in args
    args = [a for a in args if a != "--program-only"]

    if not args or args[0] not in ("seed", "score"):
        print(__doc__)
        sys.exit(1)

    container.init()

    if args[0] == "seed":
        count = container.seed_questions()
        logger.info("Seeded {} questions", count)
        return

    if len(args) < 2:
        print(__doc__)
        sys.exit(1)

    answers, theme_weights = load_answers(args[1])
    logger.info("Scoring {} answers (weights={})", len(answers), container.quiz.strategy.name)

    try:
        if program_only:
            results = container.quiz.score_program_only(answers, theme_weights)
            print_program(results)
        else:
            data = container.quiz.score(answers, theme_weights)
            results = data["results"]
            print_dual(data)
    except ScoringError as e:
        logger.error("Invalid answers: {}", e.message)
        sys.exit(1)

    print_coalitions(container.coalitions.chances(results))


if __name__ == "__main__":
    main()
