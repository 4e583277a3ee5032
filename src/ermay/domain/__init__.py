"""Domain layer for ermay application."""

_SERVICES = {
    "CustomerService": "ermay.domain.party",
    "SupplierService": "ermay.domain.party",
    "RecordService": "ermay.domain.records",
    "LedgerService": "ermay.domain.statement",
    "ReportService": "ermay.domain.report",
}

__all__ = list(_SERVICES)


# Services import the database layer, which imports the entities from this
# package, so they are resolved lazily.
def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
