"""
query-helpers - Column-driven SQL fragment generation.

Builds the column lists, placeholder lists and ``col=value`` assignment lists
needed by INSERT/UPDATE statement builders, and projects source rows into
bindable value mappings using per-column defaults and initializers.
"""

__version__ = "0.1.0"
