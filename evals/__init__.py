"""
Evaluation infrastructure -- fixture proposals scored end to end, plus
scripted editing sessions against the draft history.

Run evals: pytest evals/ -v
"""
