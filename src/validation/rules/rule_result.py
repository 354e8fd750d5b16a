"""RuleResult — общий результат правила грамматики Elbonian."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RuleResult:
    """Результат одного правила."""

    rule_name: str
    passed: bool
    block_reason: str

    # Где сработало правило (для диагностики)
    fragment: str
    position: Optional[int]

    # Детали
    details: str


def pass_result(rule_name: str, details: str = "PASS") -> RuleResult:
    """Helper: PASS результат без диагностики."""
    return RuleResult(
        rule_name=rule_name,
        passed=True,
        block_reason="",
        fragment="",
        position=None,
        details=details,
    )


def blocked_result(
    rule_name: str,
    block_reason: str,
    fragment: str,
    position: Optional[int],
    details: str,
) -> RuleResult:
    """Helper: BLOCK результат с указанием подстроки."""
    return RuleResult(
        rule_name=rule_name,
        passed=False,
        block_reason=block_reason,
        fragment=fragment,
        position=position,
        details=details,
    )
