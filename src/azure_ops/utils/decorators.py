"""Decorator patterns for Azure operations."""

import importlib
from functools import wraps
from typing import Any, Callable, Type

import click

from azure_ops.jobs.base import BaseJob
from azure_ops.utils.config import ConfigManager
from azure_ops.utils.exceptions import CLIError
from azure_ops.utils.logger import set_console_level, setup_logger

# Centralized job registry
JOB_REGISTRY = {
    "report": {
        "resources": "azure_ops.jobs.resources_by_date.ResourcesByDateJob",
    },
}


def get_job_class(operation_type: str, func_name: str) -> Type[BaseJob]:
    """Dynamically resolve job class based on operation type and function name.

    Raises:
        ValueError: If operation type or function name is not recognized
    """
    registry = JOB_REGISTRY.get(operation_type, {})

    for keyword, job_path in registry.items():
        if keyword in func_name:
            module_path, class_name = job_path.rsplit(".", 1)
            module = importlib.import_module(module_path)
            return getattr(module, class_name)

    raise ValueError(f"Unknown {operation_type} operation: {func_name}")


def handle_operation_error(operation_name: str, error: Exception) -> None:
    """Centralized error handling for operations."""
    error_msg = f"Error in {operation_name}: {str(error)}"
    click.secho(error_msg, err=True, fg="red")

    logger = setup_logger("azure_ops.errors", "errors.log")
    logger.error(
        error_msg,
        extra={"operation": operation_name, "error_type": type(error).__name__},
    )


def execute_operation(job_class: Type[BaseJob], **kwargs) -> Any:
    """Create the job with fresh configuration and run it."""
    verbose = kwargs.pop("verbose", False)
    job = job_class(ConfigManager())
    if verbose:
        set_console_level(job.logger, "INFO")
    return job.execute(**kwargs)


def azure_operation(job_class: Type[BaseJob]):
    """Run job_class for a click command; fatal errors exit with status 1."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(ctx, **kwargs):
            operation_name = func.__name__
            func(ctx, **kwargs)

            try:
                return execute_operation(job_class, **kwargs)
            except CLIError as e:
                handle_operation_error(operation_name, e)
                ctx.exit(1)
            except Exception as e:
                handle_operation_error(operation_name, e)
                raise

        return wrapper

    return decorator


def operation_decorator(operation_type: str):
    """Generic decorator for all operation types."""

    def decorator(func: Callable) -> Callable:
        job_class = get_job_class(operation_type, func.__name__)
        return azure_operation(job_class=job_class)(func)

    return decorator


def report_operation():
    """Decorator for reporting operations."""
    return operation_decorator("report")
