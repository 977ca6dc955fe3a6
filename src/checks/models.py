"""Result models shared by the preflight checks."""

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class CheckResult:
    """Outcome of a single check.

    A check failed iff it recorded at least one error. Warnings never fail
    the run.
    """
    name: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.errors)


@dataclass
class PreflightReport:
    """Accumulates check results in execution order."""
    results: List[CheckResult] = field(default_factory=list)

    def add(self, result: CheckResult) -> CheckResult:
        self.results.append(result)
        return result

    @property
    def failed(self) -> bool:
        return any(result.failed for result in self.results)

    @property
    def errors(self) -> List[str]:
        return [error for result in self.results for error in result.errors]

    @property
    def warnings(self) -> List[str]:
        return [warning for result in self.results for warning in result.warnings]

    def __iter__(self) -> Iterator[CheckResult]:
        return iter(self.results)
