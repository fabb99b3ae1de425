"""
Single-document evaluator.
Runs every enabled rule group over one document and returns its report.
"""
from pathlib import Path

from svg_validator.engine.accumulator import ResultAccumulator
from svg_validator.engine.syntax_checker import PhpLintChecker, SyntaxChecker
from svg_validator.rules import (
    BaseRuleGroup,
    BrowserCompatibilityGroup,
    HTMLFormElementsGroup,
    LinuxPreviewGroup,
    PHPIntegrationGroup,
    PWACompatibilityGroup,
    RuntimeChecksGroup,
    StructureGroup,
)
from svg_validator.schemas import ValidationReport
from svg_validator.utils import (
    Config,
    Document,
    DocumentNotFoundError,
    DocumentSource,
    FileSystemSource,
    get_config,
    get_logger,
    load_document,
)

logger = get_logger(__name__)


def build_default_groups(
    cfg: Config,
    syntax_checker: SyntaxChecker | None = None,
    runtime_checks: bool | None = None,
) -> list[BaseRuleGroup]:
    """
    Build the standard group battery in report order.

    Args:
        cfg: Configuration
        syntax_checker: Checker for the runtime group (defaults to php -l)
        runtime_checks: Force the runtime group on/off (defaults to config)

    Returns:
        Ordered rule groups
    """
    groups: list[BaseRuleGroup] = [
        StructureGroup(),
        PWACompatibilityGroup(),
        PHPIntegrationGroup(),
        BrowserCompatibilityGroup(max_file_size=cfg.max_file_size),
        LinuxPreviewGroup(extension=cfg.extension),
        HTMLFormElementsGroup(),
    ]

    if runtime_checks is None:
        runtime_checks = cfg.runtime_checks_enabled
    if runtime_checks:
        checker = syntax_checker or PhpLintChecker(
            php_binary=cfg.get("runtime_checks.php_binary", "php"),
            timeout_seconds=cfg.get("runtime_checks.timeout_seconds", 10),
        )
        groups.append(RuntimeChecksGroup(checker))

    return groups


class SVGValidator:
    """Evaluates hybrid PHP+SVG documents."""

    def __init__(
        self,
        config: Config | None = None,
        groups: list[BaseRuleGroup] | None = None,
        source: DocumentSource | None = None,
        syntax_checker: SyntaxChecker | None = None,
        runtime_checks: bool | None = None,
    ):
        """
        Initialize validator.

        Args:
            config: Configuration (defaults to the global config)
            groups: Explicit rule groups; overrides the default battery
            source: Document storage backend
            syntax_checker: Injected checker for the runtime group
            runtime_checks: Force the runtime group on/off
        """
        self.config = config or get_config()
        self.source = source or FileSystemSource()
        self.groups = groups if groups is not None else build_default_groups(
            self.config, syntax_checker, runtime_checks
        )

    @property
    def version(self) -> str:
        return self.config.version

    def evaluate(self, path: Path | str) -> ValidationReport:
        """
        Validate one document on disk.

        A missing path or a non-file yields a report that carries the error
        and no test records.

        Args:
            path: Document path

        Returns:
            Finalized ValidationReport
        """
        path = Path(path)
        acc = ResultAccumulator()

        if self.source.exists(path) and not self.source.is_file(path):
            logger.warning(f"Not a regular file: {path}")
            return acc.add_error(f"Not a file: {path}").finalize(str(path), self.version)

        try:
            document = load_document(path, self.source)
        except DocumentNotFoundError as e:
            logger.warning(str(e))
            return acc.add_error(str(e)).finalize(str(path), self.version)

        acc = acc.add_test("file_exists", "File exists", True)
        return self._run_groups(acc, document)

    def evaluate_document(self, document: Document) -> ValidationReport:
        """Validate an already-loaded document snapshot."""
        acc = ResultAccumulator().add_test("file_exists", "File exists", True)
        return self._run_groups(acc, document)

    def _run_groups(self, acc: ResultAccumulator, document: Document) -> ValidationReport:
        for group in self.groups:
            acc = acc.merge(group.run(document))

        report = acc.finalize(str(document.path), self.version)
        logger.info(
            f"Validated {document.path}: {report.summary.passed}/{report.summary.total} "
            f"passed ({report.summary.status})"
        )
        return report
