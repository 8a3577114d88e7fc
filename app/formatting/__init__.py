from .narrative import format_narrative, run_stages
from .resume import format_resume, parse_resume

__all__ = [
    "format_narrative",
    "run_stages",
    "format_resume",
    "parse_resume",
]
