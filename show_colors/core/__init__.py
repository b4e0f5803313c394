"""show_colors.core — colour tables and their text rendering.

types and catalog hold the fixed data, palette_parser reads theme files,
ansi, table and variations turn them into escape-coded rows, and report
joins the rows into the final output. Nothing here reads argv or exits the
process; the command line lives in show_colors.__main__.
"""
