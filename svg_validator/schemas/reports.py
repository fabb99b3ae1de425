from pydantic import BaseModel, Field, computed_field, model_validator

from .base import RunStatus, TestStatus, now_timestamp, success_rate


class TestRecord(BaseModel):
    """单条规则的检查结果"""
    __test__ = False  # not a pytest test class

    name: str = Field(..., description="规则标识，如 svg_namespace")
    description: str = Field(..., description="人类可读的规则说明")
    passed: bool
    status: TestStatus = "FAIL"

    @model_validator(mode="before")
    @classmethod
    def _derive_status(cls, data):
        if isinstance(data, dict):
            data = dict(data)
            data["status"] = "PASS" if data.get("passed") else "FAIL"
        return data

    class Config:
        frozen = True


class Summary(BaseModel):
    """报告汇总 (total/passed/failed/warnings/success_rate/status)"""
    total: int = 0
    passed: int = 0
    failed: int = 0
    warnings: int = 0
    success_rate: float = 0
    status: RunStatus = "PASSED"

    @classmethod
    def from_tests(cls, tests: list[TestRecord], warning_count: int = 0) -> "Summary":
        total = len(tests)
        passed = sum(1 for t in tests if t.passed)
        failed = total - passed
        return cls(
            total=total,
            passed=passed,
            failed=failed,
            warnings=warning_count,
            success_rate=success_rate(passed, total),
            status="FAILED" if failed > 0 else "PASSED",
        )

    class Config:
        frozen = True


class ValidationReport(BaseModel):
    """单个文档的校验报告"""
    file: str | None = None
    timestamp: str = Field(default_factory=now_timestamp)
    version: str = "1.0.0"
    tests: list[TestRecord] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    summary: Summary = Field(default_factory=Summary)

    @property
    def all_passed(self) -> bool:
        """No failing tests and no input errors."""
        return not self.errors and self.summary.passed == self.summary.total

    def failed_tests(self) -> list[TestRecord]:
        return [t for t in self.tests if not t.passed]

    def get_test(self, name: str) -> TestRecord | None:
        for test in self.tests:
            if test.name == name:
                return test
        return None

    class Config:
        frozen = True


class FileOutcome(BaseModel):
    """目录扫描中一个文件的结果（按扫描顺序排列）"""
    path: str
    size: int | None = None
    report: ValidationReport | None = None
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.report is None

    @property
    def passed(self) -> bool:
        return self.report is not None and self.report.all_passed

    class Config:
        frozen = True


class DirectoryRunResult(BaseModel):
    """目录扫描汇总"""
    root: str
    timestamp: str = Field(default_factory=now_timestamp)
    outcomes: list[FileOutcome] = Field(default_factory=list)

    @computed_field
    @property
    def total_files(self) -> int:
        return len(self.outcomes)

    @computed_field
    @property
    def passed_files(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @computed_field
    @property
    def failed_files(self) -> int:
        return self.total_files - self.passed_files

    @computed_field
    @property
    def success_rate(self) -> float:
        return success_rate(self.passed_files, self.total_files, ndigits=1)

    @computed_field
    @property
    def per_file(self) -> dict[str, ValidationReport]:
        return {o.path: o.report for o in self.outcomes if o.report is not None}

    @computed_field
    @property
    def skipped(self) -> list[str]:
        return [o.path for o in self.outcomes if o.skipped]

    class Config:
        frozen = True
