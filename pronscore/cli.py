"""
Command line interface for pronscore.

    pronscore analyze "Hello, how are you?" "halo how r u"
    pronscore phrase --difficulty medium
    pronscore transcribe recording.ogg --phrase-id 1
    pronscore serve --port 8000
"""

import argparse
import json
import sys

from pronscore.config import get_settings
from pronscore.core import AlignmentStrategy, analyze, generate_tips
from pronscore.data import get_phrase, random_phrase
from pronscore.exceptions import PronScoreError
from pronscore.logging_utils import log_result, setup_logging
from pronscore.models import AnalysisResult, Tip

STATUS_MARKS = {
    "correct": "✅",
    "similar": "🟡",
    "wrong": "❌",
    "missing": "⚠️",
}


def _print_report(result: AnalysisResult, tips: list[Tip]) -> None:
    print(f"Expected: {result.expected_text}")
    print(f"Heard:    {result.user_text}")
    print(f"Accuracy: {result.accuracy}% ({result.status.value})\n")

    for j in result.judgments:
        mark = STATUS_MARKS.get(j.status.value, "")
        print(f"  {mark} {j.expected:<20} {j.user_said:<20} {j.status.value:<8} {j.confidence:>3}")

    if tips:
        print("\nTips:")
        for tip in tips:
            print(f"  - {tip.issue}")
            print(f"    {tip.advice}")


def cmd_analyze(args: argparse.Namespace) -> int:
    result = analyze(args.expected, args.spoken, strategy=args.strategy)
    tips = generate_tips(result.judgments)

    if args.log_csv:
        log_result(args.log_csv, result)

    if args.json:
        print(json.dumps(
            {
                "analysis": result.to_response(),
                "tips": [t.to_response() for t in tips],
            },
            ensure_ascii=False,
            indent=2,
        ))
    else:
        _print_report(result, tips)
    return 0


def cmd_phrase(args: argparse.Namespace) -> int:
    if args.id is not None:
        phrase = get_phrase(args.id)
    else:
        phrase = random_phrase(args.difficulty)
    print(json.dumps(phrase.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0


def cmd_transcribe(args: argparse.Namespace) -> int:
    from pronscore.service import PronunciationService

    with open(args.audio, "rb") as f:
        audio = f.read()

    service = PronunciationService()
    try:
        response = service.evaluate(audio, args.expected, args.phrase_id)
    finally:
        service.close()

    print(json.dumps(response, ensure_ascii=False, indent=2))
    return 0 if response["success"] else 1


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pronscore.api:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pronscore",
        description="Score pronunciation by comparing a transcript with a reference phrase",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("analyze", help="Score a transcript against a reference phrase")
    p.add_argument("expected", help="Reference text")
    p.add_argument("spoken", help="Transcript of what was said")
    p.add_argument(
        "--strategy",
        choices=[s.value for s in AlignmentStrategy],
        default=None,
        help="Word alignment strategy (default: configured strategy)",
    )
    p.add_argument("--json", action="store_true", help="Print the result as JSON")
    p.add_argument("--log-csv", default=None, help="Append the result to a CSV log")
    p.set_defaults(func=cmd_analyze)

    p = sub.add_parser("phrase", help="Show a practice phrase")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--id", type=int, default=None, help="Phrase id")
    group.add_argument("--difficulty", default=None, help="easy, medium or hard")
    p.set_defaults(func=cmd_phrase)

    p = sub.add_parser("transcribe", help="Transcribe a recording with Wit.ai and score it")
    p.add_argument("audio", help="Audio file (OGG by default)")
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--expected", default=None, help="Reference text")
    source.add_argument("--phrase-id", type=int, default=None, help="Catalogue phrase id")
    p.set_defaults(func=cmd_transcribe)

    p = sub.add_parser("serve", help="Run the HTTP API")
    p.add_argument("--host", default=None)
    p.add_argument("--port", type=int, default=None)
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)

    try:
        return args.func(args)
    except PronScoreError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
