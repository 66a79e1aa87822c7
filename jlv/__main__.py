"""Allow running the viewer with ``python -m jlv``."""

from jlv.tui.app import main

if __name__ == "__main__":
    main()
