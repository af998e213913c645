"""UI components for checklist.

This package contains:
- styles: Rich styles and the ANSI render helper used by the model view
- widgets: the Textual widget hosting the checklist model
- textual_app: the root Textual application
"""
