"""
Support for writing scripts using the gsheets_catalog library.

Each module whose name starts with `sheets_` in this package is an
independent extension module you may want to optionally load:

    from gsheets_catalog.scripting import sheets_exception
"""
