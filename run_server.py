#!/usr/bin/env python
"""Development server entrypoint for Habitboard."""

import os

from habitboard import create_app

if __name__ == "__main__":
    app = create_app(os.getenv("HABITBOARD_ENV", "development"))
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")))
