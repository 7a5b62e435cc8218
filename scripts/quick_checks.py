#!/usr/bin/env python3
"""
Quick validation checks -- runs directly on the source tree (~1 second).

Checks:
  1. Banned patterns (eval, exec, pickle, print in library code, secrets)
  2. File size limits (declared "Keep this file under N lines", else 500/800)
  3. Basic Python syntax (compile check)

Exit code 0 = all passed, 1 = failures found.
"""

import os
import re
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PACKAGE_DIR = os.path.join(ROOT, "src", "docforge")
OTHER_DIRS = [os.path.join(ROOT, d) for d in ("tests", "evals")]

BANNED_PATTERNS = [
    (r'\beval\s*\(', "eval() is banned -- use json.loads() or explicit parsing"),
    (r'\bexec\s*\(', "exec() is banned -- use specific function calls"),
    (r'\bpickle\.loads?\s*\(', "pickle is banned -- history is stored as JSON"),
    (r'password\s*=\s*["\'][^"\']{8,}["\']', "Possible hardcoded password"),
    (r'api[_-]?key\s*=\s*["\'][a-zA-Z0-9]{10,}["\']', "Possible hardcoded API key"),
]

# Library modules log; only the CLI writes to the terminal (via rich).
LIBRARY_ONLY_PATTERNS = [
    (r'^\s*print\s*\(', "print() in library code -- use logger or the CLI console"),
]

DECLARED_LIMIT = re.compile(r"Keep this file under (\d+) lines")
MAX_FILE_LINES_WARN = 500
MAX_FILE_LINES_FAIL = 800

findings = []
warnings = []


def rel(filepath):
    return os.path.relpath(filepath, ROOT)


def check_banned_patterns(filepath, content, library=False):
    patterns = BANNED_PATTERNS + (LIBRARY_ONLY_PATTERNS if library else [])
    for n, line in enumerate(content.split("\n"), 1):
        stripped = line.strip()
        if stripped.startswith("#"):
            continue
        for pattern, message in patterns:
            if re.search(pattern, line, re.IGNORECASE):
                findings.append(f"  FAIL: {rel(filepath)}:{n} -- {message}")
                findings.append(f"        {stripped[:100]}")


def check_file_size(filepath, content):
    lines = content.count("\n") + 1
    match = DECLARED_LIMIT.search(content)
    if match and lines >= int(match.group(1)):
        findings.append(f"  FAIL: {rel(filepath)} -- {lines} lines (declared max {match.group(1)})")
    elif lines > MAX_FILE_LINES_FAIL:
        findings.append(f"  FAIL: {rel(filepath)} -- {lines} lines (max {MAX_FILE_LINES_FAIL})")
    elif lines > MAX_FILE_LINES_WARN:
        warnings.append(f"  WARN: {rel(filepath)} -- {lines} lines (recommended max {MAX_FILE_LINES_WARN})")


def check_python_syntax(filepath, content):
    try:
        compile(content, filepath, "exec")
    except SyntaxError as e:
        findings.append(f"  FAIL: {rel(filepath)}:{e.lineno} -- Python syntax error: {e.msg}")


def scan_directory(directory, library=False):
    count = 0
    for root, dirs, files in os.walk(directory):
        dirs[:] = [d for d in dirs if d != "__pycache__"]
        for fname in files:
            if not fname.endswith(".py"):
                continue
            filepath = os.path.join(root, fname)
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    content = f.read()
            except OSError as e:
                findings.append(f"  FAIL: {rel(filepath)} -- unreadable: {e}")
                findings.append("")
                continue
            count += 1
            is_library = library and fname != "cli.py"
            check_banned_patterns(filepath, content, library=is_library)
            check_file_size(filepath, content)
            check_python_syntax(filepath, content)
    return count


def main():
    print("Scanning docforge sources...")

    total = scan_directory(PACKAGE_DIR, library=True)
    for directory in OTHER_DIRS:
        total += scan_directory(directory)

    print(f"  Scanned {total} Python files")
    print()

    if warnings:
        print(f"Warnings ({len(warnings)}):")
        for w in warnings:
            print(w)
        print()

    if findings:
        print(f"\033[31mFAILURES ({len(findings) // 2}):\033[0m")
        for f in findings:
            print(f)
        print()
        print("\033[31m✗ Quick checks FAILED\033[0m")
        sys.exit(1)
    else:
        print(f"\033[32m✓ {total} files checked, 0 failures, {len(warnings)} warnings\033[0m")
        sys.exit(0)


if __name__ == "__main__":
    main()
