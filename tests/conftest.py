import os
import sys

# Ensure project root is on sys.path so tests can import `weather_now` when
# the package is not installed and pytest runs from another directory.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
