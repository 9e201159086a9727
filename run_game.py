from __future__ import annotations

from divgame.cli import main


if __name__ == "__main__":
    main()
