# api/index.py - Vercel entry point for the root-level Flask app
import sys
import os

# Add the parent directory to sys.path to import from root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# This exports the app for Vercel
# DO NOT include app.run() here
from app import app  # noqa: E402,F401
