"""
setupkit

Scaffolds Next.js + Storybook projects and validates their setup
against an ordered checklist.
"""

__version__ = "1.0.0"
