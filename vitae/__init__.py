"""
vitae - Résumé rendering for a personal website

Turns a JSON Resume style document into the artifacts published on the site.

Architecture:
- Intake Context: Reading and normalizing the résumé document
- Rendering Context: Plain-text and HTML output generation
"""

__version__ = "0.1.0"
