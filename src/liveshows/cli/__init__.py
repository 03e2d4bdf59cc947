"""Command-line tools for liveshows.

- ``python -m liveshows.cli`` / ``python -m liveshows.cli.shows`` -- list
  recorded shows, optionally bypassing or clearing the cache.
"""
