from __future__ import annotations

import argparse
import logging

import requests
from pydantic import ValidationError

from admitpath.cli import evaluate_once
from admitpath.cli import feedback
from admitpath.models.types import FeedbackRating
from admitpath.storage.ruleset import RulesetLoadError


def _cmd_evaluate(args: argparse.Namespace) -> None:
    evaluate_once.run(input_path=args.input, rules=args.rules, as_json=args.json)


def _cmd_feedback(args: argparse.Namespace) -> None:
    feedback.run(
        rating=args.rating,
        comment=args.comment,
        rules=args.rules,
        data_dir=args.data_dir,
    )


def _cmd_show_feedback(args: argparse.Namespace) -> None:
    feedback.show(data_dir=args.data_dir)


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="admitpath")
    p.add_argument("--verbose", action="store_true", help="Log engine decisions at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_eval = sub.add_parser("evaluate", help="Evaluate one student input against the ruleset")
    p_eval.add_argument("--input", required=True, help="JSON or YAML input record")
    p_eval.add_argument("--rules", default=None, help="Ruleset file (default: $ADMITPATH_RULES_PATH or bundled)")
    p_eval.add_argument("--json", action="store_true", help="Print the presentation record as JSON")
    p_eval.set_defaults(func=_cmd_evaluate)

    p_fb = sub.add_parser("feedback", help="Submit feedback on an evaluation")
    p_fb.add_argument("--rating", required=True, choices=[r.value for r in FeedbackRating])
    p_fb.add_argument("--comment", default=None)
    p_fb.add_argument("--rules", default=None)
    p_fb.add_argument("--data-dir", default="data")
    p_fb.set_defaults(func=_cmd_feedback)

    p_show = sub.add_parser("show-feedback", help="List feedback queued locally")
    p_show.add_argument("--data-dir", default="data")
    p_show.set_defaults(func=_cmd_show_feedback)

    args = p.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        args.func(args)
    except requests.RequestException as e:
        print(f"Failed to send feedback: {type(e).__name__}: {e}")
        raise SystemExit(1)
    except (RulesetLoadError, ValidationError, ValueError, OSError) as e:
        print(f"error: {type(e).__name__}: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
