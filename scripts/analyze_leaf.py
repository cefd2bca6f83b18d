#!/usr/bin/env python3
"""
Diagnose a paddy leaf photo, or re-classify a saved model response.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from paddydoc import PaddyDoc, render_text
from paddydoc.config import AnalyzerConfig, load_analyzer_config
from paddydoc.utils.openai_client import check_configuration


def main() -> None:
    parser = argparse.ArgumentParser(description="Diagnose paddy leaf disease from an image.")
    parser.add_argument("path", help="Path to a leaf image (or a text file with --text)")
    parser.add_argument("--text", action="store_true", help="Treat PATH as a saved model response")
    parser.add_argument("--config", help="Path to analyzer config YAML")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", help="Override the configured log level")
    args = parser.parse_args()

    load_dotenv()

    cfg = load_analyzer_config(args.config) if args.config else AnalyzerConfig.from_env()
    if args.log_level:
        cfg.log_level = args.log_level

    doc = PaddyDoc(cfg)
    if args.text:
        report = doc.diagnose(Path(args.path).read_text(encoding="utf-8"))
    else:
        if not any(check_configuration().values()):
            raise RuntimeError(
                "No OpenAI configuration found. Set OPENAI_API_KEY, or AZURE_OPENAI_API_KEY "
                "and AZURE_OPENAI_ENDPOINT, in your environment or .env file."
            )
        report = doc.run(args.path)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_text(report))

    if report.kind == "error":
        sys.exit(1)


if __name__ == "__main__":
    main()
