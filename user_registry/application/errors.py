class StorageError(Exception):
    """Raised by storage adapters when the backing store fails."""
