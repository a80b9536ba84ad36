#!/usr/bin/env python3
"""
Ask a question from the terminal.

Runs the same search-then-AI-fallback flow as POST /ask. The API key comes
from AI_API_KEY (env or .env) unless --api-key is given.

Run from project root:

    python scripts/ask.py capital of France
    python scripts/ask.py --search-only "bitcoin price"
"""

import argparse
import sys
from pathlib import Path

# Project root on path so "app" resolves
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from app.core.config import AI_API_KEY
from app.core.errors import QueryError
from app.services.query_service import QueryService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ask a question (web search, AI fallback).")
    parser.add_argument("question", nargs="+", help="Question text.")
    parser.add_argument(
        "--search-only",
        action="store_true",
        help="Only run the web search; do not fall back to the AI response.",
    )
    parser.add_argument("--api-key", default=None, help="AI API key (overrides AI_API_KEY).")
    args = parser.parse_args(argv)

    question = " ".join(args.question)
    service = QueryService(args.api_key or AI_API_KEY)
    try:
        if args.search_only:
            answer = service.search_web(question)
        else:
            answer = service.ask_question(question)
    except QueryError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
