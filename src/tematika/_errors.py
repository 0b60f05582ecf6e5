"""Tematika error types."""


class TematikaError(Exception):
    """Base error for all tematika failures."""


class DictionaryError(TematikaError):
    """A topic dictionary resource could not be read."""


class DictionaryChecksumError(DictionaryError):
    """Dictionary file checksum verification failed."""


class UnsupportedFormatError(TematikaError):
    """Document format is not supported by ingestion."""


class ResultVersionError(TematikaError):
    """Serialized result version mismatch."""


class DocumentError(TematikaError):
    """A supported document could not be parsed."""
