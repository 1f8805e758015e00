#!/usr/bin/env python3
"""
Smoke test of tenant search over a knowledge folder.

Run:
  python scripts/smoke_search.py --dir knowledge/autolife

Options:
  --tenant           Tenant id (default: autolife)
  --dir              Knowledge folder
  --print-answers    Print the returned passages
"""

import argparse
import sys

from docsearch.config.settings import Settings
from docsearch.container import configure_container
from docsearch.core.services.registry_service import KnowledgeRegistry


TESTS = [
    {
        "q": "brake pads price",
        "expect_any": ["Brake pads"],
        "expect_none": ["Oil change"],
    },
    {
        "q": "How much is an oil change?",
        "expect_any": ["$40"],
    },
    {
        "q": "opening hours on saturday",
        "expect_any": ["Saturday 9:00"],
    },
    {
        "q": "phone number",
        "expect_any": ["555 0142"],
    },
    {
        "q": "?!",
        "expect_empty": True,
    },
]


def normalize(text: str) -> str:
    return (text or "").lower()


def check_expectations(answer: str, test: dict) -> list[str]:
    errors = []
    ans = normalize(answer)

    expect_any = test.get("expect_any") or []
    expect_none = test.get("expect_none") or []

    if test.get("expect_empty") and ans:
        errors.append("expected no passages")

    if expect_any:
        if not any(normalize(x) in ans for x in expect_any):
            errors.append(f"missing any of: {expect_any}")

    for token in expect_none:
        if normalize(token) in ans:
            errors.append(f"should not contain: {token}")

    return errors


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--tenant", default="autolife")
    parser.add_argument("--dir", default="./knowledge/autolife")
    parser.add_argument("--print-answers", action="store_true")
    args = parser.parse_args()

    settings = Settings(tenant_id=args.tenant, knowledge_dir=args.dir)
    registry = configure_container(settings).resolve(KnowledgeRegistry)
    registry.load(args.tenant, args.dir)

    failures = 0
    for idx, test in enumerate(TESTS, start=1):
        q = test["q"]
        print(f"\nQ{idx}: {q}")
        results = registry.search(args.tenant, q, top_k=1)
        answer = "\n".join(r.text for r in results)
        if args.print_answers:
            print("A:", answer or "<nothing found>")

        errors = check_expectations(answer, test)
        if errors:
            failures += 1
            print("FAIL:", "; ".join(errors))
        else:
            print("OK")

    if failures:
        print(f"\nFAILED: {failures} test(s) failed")
        sys.exit(1)
    print("\nALL OK")
    return 0


if __name__ == "__main__":
    main()
