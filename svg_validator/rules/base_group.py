"""
Base class for rule groups.

A group is an ordered set of declarative `Rule` descriptors plus optional
`Advisory` entries, evaluated by one generic runner.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from svg_validator.schemas import TestRecord
from svg_validator.utils import Document, get_logger

logger = get_logger(__name__)

Message = str | Callable[[Document], str]


@dataclass(frozen=True)
class Rule:
    """One named check; `check` returns True when the document passes."""
    name: str
    description: Message
    check: Callable[[Document], bool]
    warn_on_fail: Message | None = None


@dataclass(frozen=True)
class Advisory:
    """Warning emitted whenever `condition` holds, independent of any test outcome."""
    condition: Callable[[Document], bool]
    message: Message


@dataclass(frozen=True)
class GroupResult:
    """Test records and warnings produced by one group, in creation order."""
    tests: tuple[TestRecord, ...] = ()
    warnings: tuple[str, ...] = ()


def _render(message: Message, document: Document) -> str:
    return message(document) if callable(message) else message


def run_rules(
    rules: tuple[Rule, ...],
    document: Document,
    advisories: tuple[Advisory, ...] = (),
) -> GroupResult:
    """
    Evaluate rule descriptors against a document.

    A rule whose check raises is logged and recorded as FAIL so one bad
    predicate cannot abort the report.

    Args:
        rules: Rule descriptors, evaluated in order
        document: Document snapshot
        advisories: Advisory warnings checked after all rules

    Returns:
        GroupResult with one TestRecord per rule
    """
    tests: list[TestRecord] = []
    warnings: list[str] = []

    for rule in rules:
        try:
            passed = bool(rule.check(document))
        except Exception as e:
            logger.error(f"Rule {rule.name} raised on {document.path}: {e}", exc_info=True)
            passed = False

        tests.append(TestRecord(
            name=rule.name,
            description=_render(rule.description, document),
            passed=passed,
        ))
        if not passed and rule.warn_on_fail is not None:
            warnings.append(_render(rule.warn_on_fail, document))

    for advisory in advisories:
        if advisory.condition(document):
            warnings.append(_render(advisory.message, document))

    return GroupResult(tests=tuple(tests), warnings=tuple(warnings))


class BaseRuleGroup(ABC):
    """Base class for all rule groups."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Group name for logging."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Display name for console output."""
        pass

    @abstractmethod
    def rules(self) -> tuple[Rule, ...]:
        """Ordered rule descriptors."""
        pass

    def advisories(self) -> tuple[Advisory, ...]:
        return ()

    def run(self, document: Document) -> GroupResult:
        """
        Run the group's rules against a document.

        Returns:
            GroupResult for this group only
        """
        result = run_rules(self.rules(), document, self.advisories())
        failed = sum(1 for t in result.tests if not t.passed)
        self.logger.debug(
            "%s on %s: %d/%d passed",
            self.display_name,
            document.path,
            len(result.tests) - failed,
            len(result.tests),
        )
        return result
