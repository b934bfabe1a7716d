#!/usr/bin/env python3
import argparse
import os
import sys
from pathlib import Path

import requests

SAMPLE_TEXT_1 = (
    "The quick brown fox jumps over the lazy dog. "
    "This sentence contains every letter of the English alphabet at least once."
)
SAMPLE_TEXT_2 = (
    "A quick brown fox jumps over the lazy dog. "
    "This sample sentence has all letters of the English alphabet."
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plagiarism checker API demo")
    parser.add_argument("--original", type=Path, help="Path to the original text")
    parser.add_argument("--comparison", type=Path, help="Path to the text to compare")
    parser.add_argument(
        "--algorithm",
        default="average",
        choices=["cosine", "jaccard", "tfidf", "average"],
        help="Similarity algorithm used for the verdict",
    )
    parser.add_argument(
        "--threshold", type=float, default=0.7, help="Plagiarism threshold in [0, 1]",
    )
    parser.add_argument(
        "--api-url",
        default=os.environ.get("PLAGIARISM_API_URL", "http://localhost:8000"),
        help="Base URL of the plagiarism checker API",
    )
    return parser.parse_args()


def call_api(api_url: str, path: str, payload: dict) -> dict:
    response = requests.post(f"{api_url}{path}", json=payload, timeout=30)
    response.raise_for_status()
    return response.json()


def main() -> None:
    args = parse_args()

    if bool(args.original) != bool(args.comparison):
        print("Provide both --original and --comparison, or neither to use the samples.")
        sys.exit(1)
    if args.original:
        text1 = args.original.read_text(encoding="utf-8")
        text2 = args.comparison.read_text(encoding="utf-8")
    else:
        text1, text2 = SAMPLE_TEXT_1, SAMPLE_TEXT_2

    if not text1.strip() or not text2.strip():
        print("Please provide both texts to compare.")
        sys.exit(1)

    verdict = call_api(
        args.api_url,
        "/plagiarism/check",
        {
            "text1": text1,
            "text2": text2,
            "algorithm": args.algorithm,
            "threshold": args.threshold,
        },
    )
    details = call_api(args.api_url, "/plagiarism/details", {"text1": text1, "text2": text2})

    print("-" * 80)
    print(f"Algorithm: {verdict['algorithm']}")
    print(f"  Similarity score: {verdict['similarity_score']:.2f}")
    print(f"  Plagiarized: {'yes' if verdict['is_plagiarized'] else 'no'}")
    print("-" * 80)
    for name, score in details["scores"].items():
        print(f"  {name}: {score:.2f}")
    print("-" * 80)


if __name__ == "__main__":
    main()
