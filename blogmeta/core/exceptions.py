#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the blogmeta project.

This module defines the exceptions raised by the metadata pipeline when a
condition cannot be recovered locally. Unreadable or unwritable paths are
not errors: the probes and loaders report them through ``supports()`` and
the pipeline simply skips them. Underlying filesystem errors (``OSError``)
are never wrapped; they propagate unchanged to the caller.

Exception Hierarchy:
    Exception (built-in)
    ├── OptionsError - Invalid generator options or options file
    ├── LoadTimeoutError - Asynchronous load exceeded its time budget
    ├── ContentLoadError - Loader broke its contract for a supported file
    ├── FrontMatterError - Frontmatter / JSON payload could not be parsed
    └── SerializationError - Serializer asked to render an unknown object

Usage:
    from blogmeta.core.exceptions import LoadTimeoutError, SerializationError

    try:
        await loader.load(descriptor)
    except LoadTimeoutError as e:
        logger.log_error(e, {"file": descriptor.full_path})
        raise
"""


class OptionsError(Exception):
    """
    Exception for invalid generator options.

    Raised when the resolved options bag fails validation:
    - Non-positive timeout
    - Empty file names or extensions
    - Unknown option keys in an options file
    - Options file that is not a YAML mapping

    Examples:
        >>> raise OptionsError("timeout must be positive, got 0")
        >>> raise OptionsError("Unknown option 'pageSize' in blogmeta.yaml")
    """

    pass


class LoadTimeoutError(Exception):
    """
    Exception for asynchronous loads that exceed the configured timeout.

    The message names the configured budget in seconds, so a timeout of
    1 ms is reported as ``0.001`` seconds. Only the file being loaded
    fails; sibling loads keep running.

    Attributes:
        seconds: Time budget in seconds that elapsed

    Examples:
        >>> raise LoadTimeoutError(0.001)
    """

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(
            f"Could not load within the configured {seconds} seconds; "
            f"the load was cancelled."
        )


class ContentLoadError(Exception):
    """
    Exception for loaders that violate their contract.

    Raised by the content stage when a loader claimed support for a file
    descriptor but did not produce a file object, or when an asynchronous
    loader is used from the synchronous chain.

    Examples:
        >>> raise ContentLoadError("Loader returned str instead of FileObject")
    """

    pass


class FrontMatterError(Exception):
    """
    Exception for payload parsing failures.

    Raised when a payload claimed by a deserializer cannot be parsed:
    - Malformed YAML inside the frontmatter block
    - Malformed JSON in a metadata file

    Examples:
        >>> raise FrontMatterError("Cannot parse YAML frontmatter: invalid syntax")
    """

    pass


class SerializationError(Exception):
    """
    Exception for entities a serializer does not recognize.

    Raised instead of emitting malformed output when a serializer is asked
    to render an object of the wrong kind (or nothing at all).

    Examples:
        >>> raise SerializationError("Cannot serialize comprehensive metadata: NoneType")
    """

    pass
