from __future__ import annotations


class SpdxLoadError(RuntimeError):
    pass


class ExportError(RuntimeError):
    pass
