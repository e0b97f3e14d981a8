"""Domain layer for categorytree application."""

# Services are resolved lazily: the database layer imports domain.entities,
# and the services import the database layer.
_SERVICES = {
    "CategoryService": "categorytree.domain.category",
    "TreeRenderer": "categorytree.domain.tree",
    "SpreadsheetExporter": "categorytree.domain.spreadsheet_export",
    "SpreadsheetImporter": "categorytree.domain.spreadsheet_import",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
