# emilio/components/__init__.py
"""
Components of Emilio CLI: generation, preview, export, AI access, terminal output and the CLI.
"""
