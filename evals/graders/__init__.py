"""
Eval graders -- deterministic CodeGrader checks over scoring reports and
draft histories.
"""

from .code_grader import CodeGrader, CodeGraderResult
