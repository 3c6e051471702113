from ._report import format_variables, surd_report

__all__ = [
    "format_variables",
    "surd_report",
]
