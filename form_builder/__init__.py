"""
Form Builder - Page/Module/Component form model

Typed, validated form components grouped into modules and pages, with an
async data manager over an in-memory object store.
"""

__version__ = "0.1.0"
