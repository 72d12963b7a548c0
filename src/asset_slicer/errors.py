"""Custom exception hierarchy for asset-slicer.

This module defines the exception classes raised during asset slice generation:
- SlicerError: Base exception for all asset-slicer errors
- ConfigurationError: A module or configuration file cannot be sliced as declared
- InvariantViolationError: Slicing would lose or overwrite an entry

User-facing messages are safe to display. Technical details are logged
internally via structlog and never become part of ``str(error)``.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class SlicerError(Exception):
    """Base exception for asset-slicer.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. Logged
            internally but never exposed through the exception message.

    Example:
        >>> raise SlicerError(
        ...     "Asset slicing failed",
        ...     internal_details="directory 'assets/img#lang_' has an empty value",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "slicer_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ConfigurationError(SlicerError):
    """Raised when a module or configuration cannot be sliced as declared.

    Use this exception when:
    - A qualifying module declares no asset directories
    - A directory suffix is unknown or carries a malformed value
    - Declared directory targeting contradicts the directory suffix
    - A configuration file does not contain a mapping

    Attributes:
        module_name: Name of the module being sliced (if known).
        directory: Asset directory path at fault (if known).
        reason: The message without module or directory context.

    Example:
        >>> raise ConfigurationError(
        ...     "Module declares no asset directories",
        ...     module_name="asset_module",
        ... )
        # User sees: "Module declares no asset directories (module 'asset_module')"
    """

    def __init__(
        self,
        user_message: str,
        *,
        module_name: str | None = None,
        directory: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if module_name:
            context_parts.append(f"module '{module_name}'")
        if directory:
            context_parts.append(f"directory '{directory}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.module_name = module_name
        self.directory = directory
        self.reason = user_message


class InvariantViolationError(SlicerError):
    """Raised when slicing would silently overwrite an entry.

    Two entries of the same slice rewritten to one final path would lose
    content. This should be unreachable with well-formed input.

    Attributes:
        module_name: Name of the module being sliced (if known).
        path: The colliding final entry path (if known).

    Example:
        >>> raise InvariantViolationError(
        ...     "Entries collide after suffix stripping",
        ...     module_name="asset_module",
        ...     path="assets/img/a.png",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        module_name: str | None = None,
        path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if module_name:
            context_parts.append(f"module '{module_name}'")
        if path:
            context_parts.append(f"path '{path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.module_name = module_name
        self.path = path
