"""
This is an interpreter for the Zen programming language.

    py -m zen program.zen

runs program.zen; with no program it starts the interactive prompt.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from zen.cmdline import main

main()
