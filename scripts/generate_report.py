import argparse
import logging
import sys
from pathlib import Path
from typing import List

import pandas as pd

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from plagiarism_checker.checker import PlagiarismChecker
from plagiarism_checker.loader import load_pairs_csv, load_pairs_jsonl
from plagiarism_checker.models import Algorithm, CheckerConfig, TextPair


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Score text pairs and write a plagiarism report CSV"
    )
    parser.add_argument(
        "pairs", type=Path, help="CSV or JSONL file with text1/text2 columns"
    )
    parser.add_argument("output", type=Path, help="Where to write the report CSV")
    parser.add_argument("--id-column", help="CSV column holding the pair identifier")
    parser.add_argument(
        "--algorithm",
        default=Algorithm.AVERAGE.value,
        choices=[a.value for a in Algorithm],
        help="Algorithm used for the plagiarism verdict",
    )
    parser.add_argument(
        "--threshold", type=float, default=0.7, help="Plagiarism threshold in [0, 1]"
    )
    parser.add_argument(
        "--case-sensitive", action="store_true", help="Keep token case when comparing"
    )
    parser.add_argument(
        "--stop-words",
        help="Comma-separated list replacing the default English stop words",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    return parser.parse_args()


def build_checker(args: argparse.Namespace) -> PlagiarismChecker:
    stop_words = None
    if args.stop_words is not None:
        stop_words = frozenset(
            word.strip() for word in args.stop_words.split(",") if word.strip()
        )
    config = CheckerConfig(
        algorithm=Algorithm(args.algorithm),
        threshold=args.threshold,
        case_sensitive=args.case_sensitive,
        stop_words=stop_words,
    )
    return PlagiarismChecker(config=config)


def load_pairs(path: Path, id_column: str = None) -> List[TextPair]:
    if path.suffix.lower() == ".jsonl":
        return load_pairs_jsonl(path)
    return load_pairs_csv(path, id_column=id_column)


def score_pairs(checker: PlagiarismChecker, pairs: List[TextPair]) -> pd.DataFrame:
    rows = []
    for index, pair in enumerate(pairs, start=1):
        scores = checker.get_detailed_results(pair.text1, pair.text2)
        verdict = checker.check_plagiarism(pair.text1, pair.text2)
        rows.append(
            {
                "pair_id": pair.pair_id,
                **scores,
                "algorithm": verdict.algorithm,
                "similarity_score": verdict.similarity_score,
                "is_plagiarized": verdict.is_plagiarized,
            }
        )
        if index % 100 == 0:
            logging.info("Scored %d/%d pairs", index, len(pairs))
    return pd.DataFrame(rows)


def main() -> None:
    args = parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(message)s",
    )

    logging.info("Loading text pairs from %s", args.pairs)
    pairs = load_pairs(args.pairs, args.id_column)
    if not pairs:
        raise SystemExit("No text pairs loaded")

    checker = build_checker(args)
    logging.info("Scoring %d pairs...", len(pairs))
    report = score_pairs(checker, pairs)

    logging.info("Writing report to %s", args.output)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    report.to_csv(args.output, index=False)
    flagged = int(report["is_plagiarized"].sum())
    logging.info("Done. %d of %d pairs flagged.", flagged, len(report))


if __name__ == "__main__":
    main()
