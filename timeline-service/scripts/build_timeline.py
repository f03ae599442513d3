"""
Build the per-year topic timeline for a local document dump.

Usage:
    python scripts/build_timeline.py docs.jsonl [--language fa] [--out timeline.json]

Input is either a JSON list of documents or JSONL (one document per line);
each document needs at least a "content" field.
"""
import argparse
import json
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from garden_timeline.services.timeline_service import analyze_timeline  # noqa: E402

logger = logging.getLogger("build_timeline")


def read_documents(path):
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    stripped = text.lstrip()
    if stripped.startswith("["):
        return json.loads(text)
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("path", help="JSON or JSONL file of documents")
    parser.add_argument("--language", default="en", choices=["en", "fa"])
    parser.add_argument("--out", help="write JSON here instead of stdout")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    docs = read_documents(args.path)
    analysis = analyze_timeline(docs, args.language)

    payload = json.dumps(analysis.to_dict(), ensure_ascii=False, indent=2)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as out:
            out.write(payload + "\n")
        logger.info("Wrote %d points to %s", len(analysis.points), args.out)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
