#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the orgwriter library.

This module defines the exception classes raised while loading option
objects, deserializing AST trees, and rendering them back to Org text.

Exception Hierarchy
-------------------
- OrgWriterError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ParsingError (AST JSON loading failures)

  - RenderingError (output generation failures)
    - UnknownNodeError (value outside the known node variants)
    - UnknownEmphasisError (emphasis kind without a border entry)
    - OutputWriteError (file write failures)

"""

from typing import Any


class OrgWriterError(Exception):
    """Base exception class for all orgwriter-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(OrgWriterError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(OrgWriterError):
    """Exception raised when a serialized AST cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the failure
    parsing_stage : str, optional
        The stage of loading where the error occurred
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(OrgWriterError):
    """Exception raised when output rendering fails.

    Rendering errors signal a broken input contract: the tree handed to the
    renderer was not produced by a compatible parser. They are never raised
    for ordinary content such as empty tag lists or missing descriptions.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnknownNodeError(RenderingError):
    """Exception raised when a value outside the known node variants is dispatched.

    Parameters
    ----------
    node : Any
        The offending value

    """

    def __init__(self, node: Any):
        """Initialize with the offending node value."""
        super().__init__(f"bad node {node!r}", rendering_stage="dispatch")
        self.node = node


class UnknownEmphasisError(RenderingError):
    """Exception raised when an emphasis kind has no border entry.

    Parameters
    ----------
    kind : Any
        The offending emphasis kind

    """

    def __init__(self, kind: Any):
        """Initialize with the offending emphasis kind."""
        super().__init__(f"bad emphasis kind {kind!r}", rendering_stage="emphasis")
        self.kind = kind


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "OrgWriterError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnknownNodeError",
    "UnknownEmphasisError",
    "OutputWriteError",
]
