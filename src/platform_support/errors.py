# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exception hierarchy shared by the preprocessor, catalog and CLI."""

from __future__ import annotations


class PlatformSupportError(RuntimeError):
    """Error that terminates the preprocessor run with a non-zero status."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class UnknownArgumentError(PlatformSupportError):
    """Raised when the command line carries an unrecognised positional argument."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"unknown argument: {argument}")
        self.argument = argument


class CatalogIntegrityError(PlatformSupportError):
    """Raised when target metadata violates semantic invariants."""


class CatalogValidationError(PlatformSupportError):
    """Raised when the catalog document fails structural schema validation."""


class BookFormatError(PlatformSupportError):
    """Raised when the preprocessor payload cannot be decoded or encoded."""


class ConfigError(PlatformSupportError):
    """Raised when the preprocessor configuration table is invalid."""


__all__ = [
    "BookFormatError",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "ConfigError",
    "PlatformSupportError",
    "UnknownArgumentError",
]
