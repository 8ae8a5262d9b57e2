"""Package entry point for ``python -m tisk``.

WHY: Lets the tracker run without the console script installed.

HOW: Delegates to the CLI's main().
"""

from tisk.cli import main

if __name__ == "__main__":
    main()
