"""Module entrypoint.

Allows:
    python -m scribe_log_parser
"""

from __future__ import annotations

from scribe_log_parser.server.log_server import main

if __name__ == "__main__":
    main()
