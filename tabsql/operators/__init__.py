"""tabsql operators package.

This package contains the SQLAlchemy-based connectors that execute
generated statements against live databases.
"""
