"""Vercel serverless entry point for CSS Creator."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from css_creator.config import CssCreatorConfig
from css_creator.web.app import create_app

# Serverless filesystems are read-only outside /tmp
app = create_app(
    config=CssCreatorConfig(output_dir="/tmp/css_creator", validate_properties=True)
)
