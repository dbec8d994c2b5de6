"""
Pytest configuration for VDA5050 schema tests.
"""

import sys
import os

# Add src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))
