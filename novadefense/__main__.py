import sys
from importlib.util import find_spec

if find_spec("pygame") is None:
    sys.stderr.write(
        "Pygame is required to run Nova Defense.\n"
        "Install dependencies with 'pip install -e .' and try again.\n"
    )
    sys.exit(1)

from novadefense.app import main

if __name__ == "__main__":
    main()
