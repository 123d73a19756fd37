"""Optima v1.0 — CLI entry point."""

import sys

from optima import analyze, generate_report
from optima.app_logging import configure_logging

if __name__ == "__main__":
    configure_logging()
    path = sys.argv[1] if len(sys.argv) > 1 else "sample_inputs.json"
    result = analyze(path)
    print(generate_report(result))
