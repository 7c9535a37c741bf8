import sys

from dotenv import load_dotenv

load_dotenv()

from dircompare.cli import main

sys.exit(main())
