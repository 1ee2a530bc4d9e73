"""
Epicboard — a terminal issue tracker for epics and their stories.

All state lives in a single JSON file. Every change is one full
read-modify-write round trip against that file.

Package layout (src/epicboard/):
  core/       — models, storage, entity store, status rollup, config, logging
  ui/         — actions, page stack navigator, pages, prompts, interactive loop
  cli/        — Click CLI entry point
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
