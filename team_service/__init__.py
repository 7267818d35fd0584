# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Team service — in-memory team members and their tasks over HTTP."""
