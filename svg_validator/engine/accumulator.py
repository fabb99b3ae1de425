"""
Result accumulator - an immutable value merged once per rule group.
"""
from dataclasses import dataclass, replace

from svg_validator.rules import GroupResult
from svg_validator.schemas import Summary, TestRecord, ValidationReport, now_timestamp


@dataclass(frozen=True)
class ResultAccumulator:
    tests: tuple[TestRecord, ...] = ()
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def merge(self, result: GroupResult) -> "ResultAccumulator":
        return replace(
            self,
            tests=self.tests + result.tests,
            warnings=self.warnings + result.warnings,
        )

    def add_test(self, name: str, description: str, passed: bool) -> "ResultAccumulator":
        record = TestRecord(name=name, description=description, passed=passed)
        return replace(self, tests=self.tests + (record,))

    def add_error(self, message: str) -> "ResultAccumulator":
        return replace(self, errors=self.errors + (message,))

    def add_warning(self, message: str) -> "ResultAccumulator":
        return replace(self, warnings=self.warnings + (message,))

    def generate_summary(self) -> Summary:
        return Summary.from_tests(list(self.tests), warning_count=len(self.warnings))

    def finalize(
        self,
        file: str | None = None,
        version: str = "1.0.0",
        timestamp: str | None = None,
    ) -> ValidationReport:
        """Freeze the accumulated state into a ValidationReport."""
        return ValidationReport(
            file=file,
            timestamp=timestamp or now_timestamp(),
            version=version,
            tests=list(self.tests),
            errors=list(self.errors),
            warnings=list(self.warnings),
            summary=self.generate_summary(),
        )
