# scripts/analyze_resume.py
#!/usr/bin/env python3
"""
Analyze a plain-text resume for ATS compatibility

Usage:
    python scripts/analyze_resume.py --resume data/resumes/resume.txt
    python scripts/analyze_resume.py --resume resume.txt --job-description jd.txt
    python scripts/analyze_resume.py --resume resume.txt --role "data scientist" --json --output report.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_builder.ats import (
    ATSEngine, ATSAnalyzer, ATSError, get_config, load_resume_text
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Score a plain-text resume for ATS compatibility'
    )

    parser.add_argument(
        '--resume',
        required=True,
        help='Path to resume file (.txt)'
    )

    parser.add_argument(
        '--job-description',
        help='Path to job description file (.txt)'
    )

    parser.add_argument(
        '--role',
        help='Target role, e.g. "software engineer"'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON instead of a text report'
    )

    parser.add_argument(
        '--output',
        help='Also write the report to this file'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show progress logging'
    )

    return parser


def save_report(content: str, output_file: str):
    """Write report to disk, creating parent directories"""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(content)

    print(f"✓ Report saved to: {output_path}", file=sys.stderr)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(message)s'
    )

    try:
        logger.info(f"Loading resume: {args.resume}")
        resume_text = load_resume_text(args.resume)

        job_description = None
        if args.job_description:
            logger.info(f"Loading job description: {args.job_description}")
            job_description = load_resume_text(args.job_description)

        engine = ATSEngine(get_config())
        result = engine.analyze(resume_text, job_description, args.role)

    except (OSError, ATSError) as e:
        logger.error(f"ERROR: {e}")
        return 1

    if args.json:
        content = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    else:
        content = ATSAnalyzer().generate_report(result)

    print(content)

    if args.output:
        save_report(content, args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
