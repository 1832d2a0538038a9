"""Command-line runner for single-sample evaluation.

This package contains core execution logic, making scripts/ optional and deletable.
"""

from hmpi.cli.runner import run_sample

__all__ = ['run_sample']
