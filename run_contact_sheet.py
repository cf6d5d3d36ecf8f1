"""
run_contact_sheet.py - CLI Entry Point

This script serves as the command-line interface entry point for the
contact sheet builder. It forwards execution to the CLI logic defined in
`src/contact_sheet/cli.py`.

Usage:
    python run_contact_sheet.py path/to/photos [more/dirs ...] [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_contact_sheet.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import contact_sheet.cli as cs_cli

if __name__ == "__main__":
    sys.exit(cs_cli.main())
