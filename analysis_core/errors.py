"""Exceptions raised by the workspace scanner."""


class AnalysisCoreError(Exception):
    """Base class for all scanner errors."""


class ScanCancelledError(AnalysisCoreError):
    """Raised when a scan is aborted through its cancellation signal."""


class ConfigError(AnalysisCoreError):
    """Raised for unusable configuration files or parser references."""
