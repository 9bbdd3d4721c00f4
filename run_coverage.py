"""
Coverage runner for tinyemitter.
Runs the unit tests under pytest-cov and writes terminal, HTML and XML reports.
"""

import argparse
import subprocess
import sys
import webbrowser
from pathlib import Path


def run_coverage(open_report=False):
    """Run the test suite with coverage and return pytest's exit code."""
    cmd = [
        sys.executable,
        "-m",
        "pytest",
        "tests",
        "--cov=tinyemitter",
        "--cov-branch",
        "--cov-report=term-missing",
        "--cov-report=html",
        "--cov-report=xml",
    ]

    project_dir = Path(__file__).resolve().parent
    result = subprocess.run(cmd, check=False, cwd=str(project_dir))

    html_path = project_dir / "htmlcov" / "index.html"
    if result.returncode == 0 and open_report and html_path.exists():
        webbrowser.open(f"file://{html_path}")
    return result.returncode


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--open", action="store_true", help="open the HTML report when tests pass")
    sys.exit(run_coverage(open_report=parser.parse_args().open))
