#!/usr/bin/env python3
"""
Momentum CLI - check levels, pending check-ins and goal progress from the terminal
"""
import argparse
import json
import sys
from typing import Any, Dict, Optional

import requests

from momentum.core.config import settings

# Backend API base URL
API_BASE = settings.API_BASE_URL


def _get(path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    response = requests.get(f"{API_BASE}{path}", params=params, timeout=10)
    response.raise_for_status()
    return response.json()


def _post(path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    response = requests.post(f"{API_BASE}{path}", json=payload, timeout=10)
    response.raise_for_status()
    return response.json()


def format_level(summary: Dict[str, Any]) -> str:
    """Render a level summary as one line plus a progress bar"""
    progress = summary["progress"]
    level = summary["level"]
    bar = "#" * progress["segments_filled"] + "-" * (20 - progress["segments_filled"])
    return (
        f"Level {progress['current_level']} - {level['title']} ({summary['total_points']:,} pts)\n"
        f"[{bar}] {progress['points_in_level']:,}/{progress['points_needed_for_next']:,}"
    )


def format_check_ins(summary: Dict[str, Any]) -> str:
    """Render the pending check-in list"""
    items = summary.get("items", [])
    if not items:
        return f"{summary.get('date')}: nothing to check in"

    lines = [f"{summary.get('date')}: {summary['overdue_count']} overdue, {summary['due_today_count']} due today"]
    for item in items:
        title = item["goal"].get("title") or item["goal"]["id"]
        if item["check_in_type"] == "overdue":
            lines.append(f"  ! {title}: {item['count']} overdue, oldest {item['days_since_oldest']}d")
        else:
            lines.append(f"  - {title}: check-in due today")
    return "\n".join(lines)


def cmd_level(args) -> str:
    return format_level(_get(f"/points/{args.user_id}/level"))


def cmd_check_ins(args) -> str:
    return format_check_ins(_get("/goals/check-ins", {"user_id": args.user_id}))


def cmd_check_in(args) -> str:
    payload = {"user_id": args.user_id}
    if args.date:
        payload["check_in_date"] = args.date
    if args.note:
        payload["note"] = args.note
    return _post(f"/goals/{args.goal_id}/check-ins", payload)["message"]


def cmd_progress(args) -> str:
    return json.dumps(_get(f"/goals/{args.goal_id}/progress", {"user_id": args.user_id}), indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="momentum", description="Momentum habit tracker CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    level = sub.add_parser("level", help="Show level and points")
    level.add_argument("user_id")
    level.set_defaults(func=cmd_level)

    check_ins = sub.add_parser("check-ins", help="List overdue and due-today check-ins")
    check_ins.add_argument("user_id")
    check_ins.set_defaults(func=cmd_check_ins)

    check_in = sub.add_parser("check-in", help="Check in to a goal")
    check_in.add_argument("user_id")
    check_in.add_argument("goal_id")
    check_in.add_argument("--date", help="YYYY-MM-DD, defaults to today")
    check_in.add_argument("--note")
    check_in.set_defaults(func=cmd_check_in)

    progress = sub.add_parser("progress", help="Show completion and streaks for a goal")
    progress.add_argument("user_id")
    progress.add_argument("goal_id")
    progress.set_defaults(func=cmd_progress)

    return parser


def main(argv=None) -> int:
    """CLI entry point"""
    args = build_parser().parse_args(argv)
    try:
        print(args.func(args))
        return 0
    except requests.HTTPError as e:
        try:
            detail = e.response.json().get("detail", str(e))
        except (AttributeError, ValueError):
            detail = str(e)
        print(f"Error: {detail}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Could not reach {API_BASE}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
