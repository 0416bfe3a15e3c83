import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from plagiarism_engine.core.checker import PlagiarismChecker
from plagiarism_engine.core.config import EngineConfig
from plagiarism_engine.core.logging_config import setup_logging
from plagiarism_engine.core.validation import ValidationError, sanitize_text


def load_references(reference_dir: Path):
    references = []
    for path in sorted(reference_dir.glob("*.txt")):
        content = sanitize_text(path.read_text(encoding="utf-8"), path.name)
        references.append({"id": path.name, "content": content})
    return references


def main():
    load_dotenv()
    setup_logging(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_dir=os.getenv("LOG_DIR", "logs"),
        structured_logging=False,
        enable_console=False,
    )

    # Usage: python main.py <target.txt> <reference_dir>
    if len(sys.argv) != 3:
        print("Usage: python main.py <target.txt> <reference_dir>")
        return 2

    target_path, reference_dir = Path(sys.argv[1]), Path(sys.argv[2])

    try:
        # Step 1: Load target and reference texts
        target_text = sanitize_text(target_path.read_text(encoding="utf-8"), target_path.name)
        references = load_references(reference_dir)
        if not references:
            print("No reference documents found. Add .txt files to the reference directory first.")
            return 1
        print(f"Found {len(references)} reference documents.")

        # Step 2: Run the plagiarism check
        config = EngineConfig.from_env().with_overrides(show_progress=True)
        report = PlagiarismChecker(config).check(target_text, references)
    except ValidationError as e:
        print(f"Error: {e.message}")
        return 1

    # Step 3: Display results
    print(f"\nStatus: {report.overall_status.value} (max similarity {report.max_similarity}%)")
    print("\nTop matching references (overall, cosine, n-gram, fingerprint):")
    for result in report.top_results:
        print(f"{result.reference_id}: {result.overall_similarity}% "
              f"({result.cosine_similarity}%, {result.ngram_similarity}%, {result.fingerprint_similarity}%)")
    summary = report.summary
    print(f"Averages: cosine {summary.avg_cosine:.1f}%, n-gram {summary.avg_ngram:.1f}%, "
          f"fingerprint {summary.avg_fingerprint:.1f}%")

    diagnostics = report.diagnostics
    print(f"\nSentence analysis [{diagnostics.severity.value}]: {diagnostics.analysis}")
    for match in diagnostics.exact_matches + diagnostics.near_matches:
        print(f"  #{match.position + 1} {match.type.value} {match.similarity}%: \"{match.original}\"")

    print("\nRecommendations:")
    for recommendation in report.recommendations:
        print(f"[{recommendation.priority.value}] {recommendation.title}")
        print(f"  {recommendation.description}")
        for action in recommendation.actions:
            print(f"  - {action}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
