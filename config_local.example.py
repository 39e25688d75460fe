# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for everything else. Only the switches below are read.
"""

# Example: start every session with the sample tasks
# SEED_ON_START = True

# Example: delete without the y/N prompt
# CONFIRM_DELETE = False
