# app_cli/score_file.py
from __future__ import annotations
import argparse, json, logging, sys
from typing import Iterable, List, Tuple

from psych_core import config
from psych_core.engine import parse_payload, score_responses
from psych_core.export import to_csv, to_json
from psych_core.types import ScoreResult

log = logging.getLogger(__name__)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def score_batch(lines: Iterable[str]) -> List[Tuple[str, ScoreResult]]:
    out: List[Tuple[str, ScoreResult]] = []
    for n, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            body = json.loads(line)
        except ValueError as e:
            log.warning("line %d skipped: %s", n, e)
            continue
        rid = str(body.get("id") or body.get("email") or n) if isinstance(body, dict) else str(n)
        out.append((rid, score_responses(parse_payload(body))))
    return out


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Score quiz payloads without the API.")
    ap.add_argument("path", help="JSON payload file, JSONL batch with --batch, or - for stdin")
    ap.add_argument("--batch", action="store_true", help="input is JSONL; output CSV")
    ap.add_argument("--out", default=None, help="write output here instead of stdout")
    a = ap.parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="[%(levelname)s] %(message)s")

    text = _read_text(a.path)
    if a.batch:
        body = to_csv(score_batch(text.splitlines()))
    else:
        body = json.dumps(to_json(score_responses(parse_payload(json.loads(text or "{}")))), indent=2)

    if a.out:
        with open(a.out, "w", encoding="utf-8", newline="") as f:
            f.write(body)
        print(f"Wrote {a.out}")
    else:
        print(body)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
