"""
Root conftest - shared pytest configuration.
Ensures the blog_api package is importable when running pytest from the
repository root without an editable install.
"""
import os
import sys
from pathlib import Path

# Ensure repository root is in path for 'from blog_api...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# bcrypt's minimum cost keeps the suite fast; must be set before settings load
os.environ.setdefault("BCRYPT_ROUNDS", "4")
