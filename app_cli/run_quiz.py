from __future__ import annotations
import json, logging
from psych_core import config
from psych_core.catalog import load_catalog
from psych_core.engine import score_responses
from psych_core.types import ResponseSet


def ask(prompt: str) -> int | None:
    while True:
        v = input(prompt + " ").strip()
        if v == "": return None
        try:
            n = int(v)
        except ValueError:
            print("Enter a whole number from -5 to 5, or leave blank to skip.")
            continue
        if config.ANSWER_MIN <= n <= config.ANSWER_MAX: return n
        print("Enter a whole number from -5 to 5, or leave blank to skip.")


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="[%(levelname)s] %(message)s")
    print("Buyer Psychology Quiz")
    print("Answer -5 (strongly disagree) .. +5 (strongly agree). Blank = neutral.\n")
    catalog = load_catalog()
    answers: dict[str, int] = {}
    slider = None
    for it in catalog.list_all():
        if it.kind == "visual":
            slider = ask(f"{it.text}  [-5=may require fixes .. +5=brand new]")
            continue
        v = ask(f"({it.id}) {it.text}")
        if v is not None: answers[it.id] = v
    res = score_responses(ResponseSet(answers=answers, slider_value=slider))
    print("\n" + json.dumps(res.to_dict(), indent=2))
    print(f"\nType {res.type.code} ({res.type.label}), archetype: {res.archetype}")


if __name__ == "__main__": main()
