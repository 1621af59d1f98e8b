# devport/services/runner.py
"""
Mocked code execution. Nothing is run; the result is canned.
"""
import random

from devport.core.constants import RUN_OUTPUT, RUN_TIME_MIN_MS, RUN_TIME_SPREAD_MS
from devport.core.logging import log
from devport.models import File, RunResult


def run_file(file: File) -> RunResult:
    log("RUNNER", f"Mock run of {file.path}", project_id=file.project_id)
    return RunResult(
        success=True,
        output=RUN_OUTPUT,
        error=None,
        execution_time=random.random() * RUN_TIME_SPREAD_MS + RUN_TIME_MIN_MS,
    )
