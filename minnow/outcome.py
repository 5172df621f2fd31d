"""
Evaluation either fully succeeds with one value or fully fails with one error.
Both ends of that fork are tagged, so callers check `.ok` rather than catching.
"""
from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class Success:
	value: Any
	ok = True

@dataclass(frozen=True)
class Failure:
	error: Any
	ok = False
