"""Entry point for comparing two directory trees by file content.

Loads environment variables, then hands the command line to
``dircompare.cli.main`` and exits with its status.
"""
from dotenv import load_dotenv
import sys

# Load environment variables first, before any other imports
load_dotenv()

from dircompare.cli import main

if __name__ == "__main__":
    sys.exit(main())
