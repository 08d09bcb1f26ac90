#!/usr/bin/env python3
"""
PokerSettle - Server Startup Script

Same options as the ``pokersettle-server`` command:

    python run.py [--host HOST] [--port PORT] [--reload] [--log-level LEVEL]
"""

from pokersettle.server.app import main


if __name__ == "__main__":
    main()
