class ConfigurationError(Exception):
    """Raised when settings cannot produce a runnable pipeline.

    Always raised before any document is touched.
    """
