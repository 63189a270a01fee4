"""Allow ``python -m showcase_api``."""

from .main import main

if __name__ == "__main__":
    main()
